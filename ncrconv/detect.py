"""
ncrconv.detect - charset detection for pages from untrusted sources

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import re
import logging

from .base import UTF8
from .bridge import LATIN1
from .utf8 import is_ascii, is_utf8, bom_utf8, UTF8_BOM


# encoding declared in an xml prolog
_XML_ENCODING = re.compile(
    rb'<\?xml[^>]*?encoding[^>]*?=[^>]*?([-_a-z0-9]+)', re.IGNORECASE | re.DOTALL
)
# charset declared in html; # is captured to recognise template placeholders
_HTML_CHARSET = re.compile(
    rb'<(?:meta|html|body)[^>]*?charset[^>]*?=[^>]*?([-#_a-z0-9]+)',
    re.IGNORECASE | re.DOTALL
)
# charset parameter in a content-type header
_HEADER_CHARSET = re.compile(r'charset=([-_a-z0-9]+)', re.IGNORECASE)
# spellings of shift-jis
_SHIFT_JIS = re.compile(r'^(?:x|shift)[_-]s?jis$', re.IGNORECASE)


def _header_text(headers):
    """Headers as a single string."""
    if not headers:
        return ''
    if isinstance(headers, bytes):
        return headers.decode('latin-1')
    if isinstance(headers, str):
        return headers
    # mapping or sequence of pairs
    items = headers.items() if hasattr(headers, 'items') else headers
    return '\n'.join(f'{_k}: {_v}' for _k, _v in items)


def declared_charset(data, headers=''):
    """
    Find the charset declared in the data or the headers.
    Returns the charset (lowercase, or '' if none found) and the data with
    any byte order mark removed.
    """
    if bom_utf8(data):
        return UTF8, data[len(UTF8_BOM):]
    match = _XML_ENCODING.search(data)
    if match:
        return match[1].decode('ascii').strip().lower(), data
    match = _HTML_CHARSET.search(data)
    if match and b'#' not in match[1]:
        charset = match[1].decode('ascii').strip().lower()
        if charset:
            return charset, data
    match = _HEADER_CHARSET.search(_header_text(headers))
    if match:
        return match[1].strip().lower(), data
    return '', data


def detect_charset(data, headers=''):
    """
    Determine the charset of a page; fall back to the byte structure if
    nothing is declared. Returns the charset and the data without BOM.
    """
    charset, data = declared_charset(data, headers)
    if _SHIFT_JIS.match(charset):
        charset = 'shift-jis'
    if charset:
        logging.info('charset: %s', charset)
    else:
        charset = UTF8 if is_utf8(data) else LATIN1
        logging.info('charset probable: %s', charset)
    return charset, data


class EncodingDetector:
    """Transcode pages of unknown charset to the site charset."""

    def __init__(self, bridge):
        """Set up detector on a UnicodeBridge."""
        self._bridge = bridge

    def transcode_page(self, data, headers=''):
        """
        Convert a page (fetched from the web, or a template) to the site charset,
        guessing its charset from content and http headers.
        """
        if is_ascii(data):
            return data
        charset, data = detect_charset(data, headers)
        return self._bridge.import_charset(data, charset)
