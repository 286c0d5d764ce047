"""
ncrconv test suite
algorithmic utf-8 tests
"""

import unittest

from ncrconv.utf8 import (
    decode_utf8, decode_utf32, char_utf8, is_ascii, is_utf8, bom_utf8,
    utf8_noplanes, UTF8_BOM,
)


class TestUtf8(unittest.TestCase):
    """Test utf-8 conversion and classification."""

    def test_decode(self):
        assert decode_utf8(b'plain') == 'plain'
        assert decode_utf8('caf\xe9'.encode('utf-8')) == 'caf&#233;'
        assert decode_utf8(b'\xe2\x82\xac') == '&#8364;'
        assert decode_utf8('\U0001f600'.encode('utf-8')) == '&#128512;'

    def test_decode_stray_continuation(self):
        assert decode_utf8(b'a\x80b') == 'a\udc80b'
        assert decode_utf8(b'\xbf') == '\udcbf'

    def test_decode_truncated(self):
        # missing continuation bytes count as zero bits
        assert decode_utf8(b'\xc3') == '&#192;', decode_utf8(b'\xc3')
        assert decode_utf8(b'\xe2\x82') == '&#8320;', decode_utf8(b'\xe2\x82')

    def test_char_utf8(self):
        for char in ('A', '\xe9', '€', '\U0001f600', '\U0010ffff'):
            assert char_utf8(ord(char)) == char.encode('utf-8'), char
        assert char_utf8(0x110000) == b''

    def test_decode_utf32(self):
        data = b'\xff\xfe\x00\x00' + 'a\xe9\U0001f600'.encode('utf-32-le')
        assert decode_utf32(data) == 'a&#233;&#128512;', decode_utf32(data)
        # trailing partial word
        assert decode_utf32('a'.encode('utf-32-le') + b'\x00\x00') == 'a'

    def test_is_ascii(self):
        assert is_ascii(b'plain text\x00\x7f')
        assert not is_ascii(b'caf\xe9')
        assert is_ascii(b'')

    def test_is_utf8(self):
        assert is_utf8('caf\xe9 € \U0001f600'.encode('utf-8'))
        assert is_utf8(b'')
        # latin-1
        assert not is_utf8(b'caf\xe9')
        # lone continuation byte
        assert not is_utf8(b'\x80')
        # overlong forms
        assert not is_utf8(b'\xc0\xaf')
        assert not is_utf8(b'\xe0\x80\xaf')
        # surrogate
        assert not is_utf8(b'\xed\xa0\x80')
        # beyond u+10FFFF
        assert not is_utf8(b'\xf4\x90\x80\x80')

    def test_bom(self):
        assert bom_utf8(UTF8_BOM + b'text')
        assert not bom_utf8(b'text' + UTF8_BOM)
        assert not bom_utf8(b'')

    def test_noplanes(self):
        data = 'a\U0001f600\xe9'.encode('utf-8')
        assert utf8_noplanes(data) == b'a&#128512;\xc3\xa9', utf8_noplanes(data)
        assert utf8_noplanes(b'plain') == b'plain'


if __name__ == '__main__':
    unittest.main()
