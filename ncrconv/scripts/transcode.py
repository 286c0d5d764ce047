"""
Convert a text file or web page to the site charset
(c) 2024 the ncrconv authors, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging
from pathlib import Path

import ncrconv
from ncrconv.plumbing import wrap_main


def read_input(infile):
    """Read bytes from file or standard input."""
    if not infile or infile == '-':
        return sys.stdin.buffer.read()
    return Path(infile).read_bytes()


def write_output(outfile, data):
    """Write bytes to file or standard output."""
    if not outfile or outfile == '-':
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        Path(outfile).write_bytes(data)


def main():
    # parse command line
    parser = argparse.ArgumentParser(
        description='Convert text to the site charset, detecting its charset if needed.'
    )
    parser.add_argument(
        'infile', nargs='?', type=str, default='',
        help='file to convert. if not given, read from standard input'
    )
    parser.add_argument(
        '--output', '-o', default='', type=str,
        help='output file name. if not given, write to standard output'
    )
    parser.add_argument(
        '--charset', '-c', default='', type=str,
        help=f'site charset to convert to (default: {ncrconv.DEFAULT_CHARSET})'
    )
    parser.add_argument(
        '--from', '-f', dest='source', default='', type=str,
        help='charset of the input (default: detect from content and headers)'
    )
    parser.add_argument(
        '--headers', default='', type=str,
        help='http headers sent with the input, e.g. "Content-Type: text/html; charset=utf-8"'
    )
    parser.add_argument(
        '--entities', action='store_true',
        help='replace html named entities by numeric character references'
    )
    parser.add_argument(
        '--translit', action='store_true',
        help='transliterate to an ASCII approximation'
    )
    parser.add_argument(
        '--complex', action='store_true',
        help='transliterate keeping diacritics as punctuation marks'
    )
    parser.add_argument(
        '--digits', action='store_true',
        help='with --complex, write diacritic marks as digits'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='show debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'ncrconv {ncrconv.__version__}'
    )
    args = parser.parse_args()

    with wrap_main(args.debug):
        transcoder = ncrconv.Transcoder(args.charset or None)
        data = read_input(args.infile)
        if args.source:
            data = transcoder.import_charset(data, args.source)
        else:
            data = transcoder.transcode_page(data, args.headers)
        if args.entities:
            canonical = transcoder.html_to_canonical(transcoder.decode(data), secure=True)
            data = transcoder.encode(canonical)
        if args.complex or args.digits:
            text = transcoder.transliterate_diacritic_form(data, use_digits=args.digits)
            data = transcoder.encode(text)
        elif args.translit:
            text = transcoder.transliterate(data)
            data = transcoder.encode(text)
        logging.debug('Writing %d bytes in %s', len(data), transcoder.charset)
        write_output(args.output, data)


if __name__ == '__main__':
    main()
