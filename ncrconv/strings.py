"""
ncrconv.strings - string operations that respect multibyte utf-8

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

from .base import UTF8, is_utf8_name


def _slice(seq, start=0, length=None):
    """Substring with negative start and length counted from the end."""
    size = len(seq)
    if start < 0:
        start = max(size + start, 0)
    if start > size:
        return seq[:0]
    if not length:
        return seq[start:]
    if length < 0:
        return seq[start:max(size + length, start)]
    return seq[start:start+length]


class Utf8Strings:
    """
    Length, substring and case operations.
    Bytes are treated as single-byte text unless the site charset is utf-8;
    unicode strings are always handled per character.
    """

    def __init__(self, config):
        """Set up on a SiteConfig."""
        self._config = config

    def _is_utf8(self):
        return is_utf8_name(self._config.configured_charset())

    def _apply(self, text, func):
        """Apply func per character: decode utf-8 bytes first if needed."""
        if isinstance(text, bytes) and self._is_utf8():
            return func(text.decode(UTF8, 'surrogateescape')).encode(UTF8, 'surrogateescape')
        return func(text)

    def substring(self, text, start=0, length=None):
        """Cut text; a length of None or 0 runs to the end."""
        return self._apply(text, lambda _t: _slice(_t, start, length))

    def uppercase_first(self, text):
        """Uppercase the first character."""
        return self._apply(text, lambda _t: _t[:1].upper() + _t[1:])

    def lowercase(self, text):
        """Lowercase the text."""
        return self._apply(text, lambda _t: _t.lower())

    def length(self, text):
        """Length in characters; a CRLF line break counts as one."""
        if isinstance(text, bytes):
            text = text.replace(b'\r\n', b'\n')
            if self._is_utf8():
                return len(text.decode(UTF8, 'surrogateescape'))
            return len(text)
        return len(text.replace('\r\n', '\n'))
