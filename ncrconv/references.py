"""
ncrconv.references - numeric character references and named entities

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import re
from collections import namedtuple


# token types produced by scan()
Literal = namedtuple('Literal', ('text',))
Entity = namedtuple('Entity', ('name', 'source'))
Reference = namedtuple('Reference', ('codepoint', 'source'))

# &#D; or &#xH; with at most two leading zeros, or a named entity &name;
_TOKEN = re.compile(
    r'&(?:#(?:'
    r'[xX]0{0,2}(?P<hex>[1-9a-fA-F][0-9a-fA-F]{0,7})'
    r'|0{0,2}(?P<dec>[1-9][0-9]{0,9})'
    r')|(?P<name>[A-Za-z][A-Za-z0-9]{0,31}));'
)

# highest codepoint that has a utf-8 representation, plus one
CODEPOINT_LIMIT = 0x110000

# lone surrogates u+DC80..u+DCFF hold raw bytes 0x80..0xFF (PEP 383)
_ESCAPE_BASE = 0xDC00


def scan(text):
    """
    Split text into a stream of Literal, Entity and Reference tokens.
    Anything that is not a well-formed entity or reference is literal text.
    """
    pos = 0
    for match in _TOKEN.finditer(text):
        start = match.start()
        if start > pos:
            yield Literal(text[pos:start])
        if match['name']:
            yield Entity(match['name'], match.group())
        elif match['hex']:
            yield Reference(int(match['hex'], 16), match.group())
        else:
            yield Reference(int(match['dec']), match.group())
        pos = match.end()
    if pos < len(text):
        yield Literal(text[pos:])


def substitute(text, reference=None, entity=None):
    """
    Rewrite references and entities in one pass.

    reference: function taking a Reference token and returning replacement text
    entity: function taking an Entity token and returning replacement text
    Tokens without a function are kept as they are.
    """
    if '&' not in text:
        return text
    output = []
    for token in scan(text):
        if isinstance(token, Reference) and reference:
            output.append(reference(token))
        elif isinstance(token, Entity) and entity:
            output.append(entity(token))
        elif isinstance(token, Literal):
            output.append(token.text)
        else:
            output.append(token.source)
    return ''.join(output)


def reference(codepoint):
    """Decimal numeric character reference, without leading zeros."""
    return f'&#{codepoint};'


def spellings(codepoint):
    """All accepted spellings of a reference to a codepoint."""
    dec, hex = str(codepoint), f'{codepoint:x}'
    return tuple(
        f'&#{_x}{_zeros}{_digits};'
        for _x, _digits in (('', dec), ('x', hex))
        for _zeros in ('', '0', '00')
    )


def escape_byte(byte):
    """Keep a raw byte >= 128 inside canonical text."""
    return chr(_ESCAPE_BASE + byte)


def escaped_byte(char):
    """Raw byte held by an escaped character, or None."""
    value = ord(char) - _ESCAPE_BASE
    if 0x80 <= value <= 0xff:
        return value
    return None


def to_canonical(text):
    """Replace every non-ASCII character by a reference; keep escaped raw bytes."""
    return ''.join(
        _c if ord(_c) < 128 or escaped_byte(_c) is not None else reference(ord(_c))
        for _c in text
    )


def resolve(text, minimum=128):
    """
    Replace references to codepoints >= minimum by the characters.
    References beyond the unicode range are dropped; references to
    surrogates stay as they are.
    """
    def _resolve(token):
        if token.codepoint < minimum:
            return token.source
        if token.codepoint >= CODEPOINT_LIMIT:
            return ''
        if 0xD800 <= token.codepoint < 0xE000:
            return token.source
        return chr(token.codepoint)

    return substitute(text, reference=_resolve)


##############################################################################
# javascript escapes

def unicode_to_javascript(text):
    """Convert references &#264; to javascript escapes \\u0108."""
    def _escape(match):
        codepoint = int(match[1])
        if codepoint > 0xffff:
            return f'\\u{{{codepoint:x}}}'
        return f'\\u{codepoint:04x}'

    return re.sub(r'&#0*(\d{1,10});', _escape, text)


def javascript_to_unicode(text):
    """Convert %u0108 escapes (sent by javascript) to references &#264;."""
    return re.sub(
        r'%u([0-9A-Fa-f]{4})',
        lambda _m: reference(int(_m[1], 16)),
        text
    )


def javascript_to_binary(text):
    """Convert %E9 escapes (sent by the browser) to raw bytes."""
    if isinstance(text, str):
        text = text.encode('utf-8', 'surrogateescape')
    return re.sub(
        rb'%([0-9A-Fa-f]{2})',
        lambda _m: bytes((int(_m[1], 16),)),
        text
    )
