"""
ncrconv test suite
string operation tests
"""

import unittest

import ncrconv
from .base import BaseTester


class TestUtf8Site(BaseTester):
    """Test string operations on a utf-8 site."""

    def test_length(self):
        assert self.transcoder.length('caf\xe9'.encode('utf-8')) == 4
        assert self.transcoder.length(b'a\r\nb') == 3
        assert self.transcoder.length('caf\xe9\r\n') == 5
        assert self.transcoder.length(b'') == 0

    def test_substring(self):
        data = 'caf\xe9 au lait'.encode('utf-8')
        assert self.transcoder.substring(data, 0, 4) == 'caf\xe9'.encode('utf-8')
        assert self.transcoder.substring(data, 3, 1) == '\xe9'.encode('utf-8')
        assert self.transcoder.substring(data, -4) == b'lait'

    def test_substring_semantics(self):
        substring = self.transcoder.substring
        assert substring('abcdef', 2) == 'cdef'
        assert substring('abcdef', 2, 0) == 'cdef'
        assert substring('abcdef', -2) == 'ef'
        assert substring('abcdef', 1, -2) == 'bcd'
        assert substring('abcdef', -10, 2) == 'ab'
        assert substring('abc', 5) == ''
        assert substring('abc', 1, -5) == ''

    def test_case(self):
        assert self.transcoder.uppercase_first('\xe9lan'.encode('utf-8')) == '\xc9lan'.encode('utf-8')
        assert self.transcoder.lowercase('\xc9LAN'.encode('utf-8')) == '\xe9lan'.encode('utf-8')
        assert self.transcoder.uppercase_first('') == ''
        assert self.transcoder.uppercase_first(b'') == b''

    def test_site_charset_spelling(self):
        transcoder = ncrconv.Transcoder(' UTF8 ')
        assert transcoder.length('caf\xe9'.encode('utf-8')) == 4

    def test_raw_bytes_survive(self):
        data = b'AB\xff'
        assert self.transcoder.lowercase(data) == b'ab\xff'


class TestSingleByteSite(BaseTester):
    """Test string operations on a single-byte site."""

    def setUp(self):
        super().setUp()
        self.transcoder = ncrconv.Transcoder('iso-8859-1')

    def test_length(self):
        assert self.transcoder.length('caf\xe9'.encode('utf-8')) == 5
        assert self.transcoder.length(b'caf\xe9') == 4
        # unicode text is counted per character regardless of site charset
        assert self.transcoder.length('caf\xe9') == 4

    def test_substring(self):
        assert self.transcoder.substring(b'caf\xe9', 3, 1) == b'\xe9'
        assert self.transcoder.substring(b'caf\xe9', -1) == b'\xe9'

    def test_case(self):
        assert self.transcoder.uppercase_first(b'abc') == b'Abc'
        assert self.transcoder.lowercase(b'ABC\xc9') == b'abc\xc9'
        assert self.transcoder.lowercase('ABC\xc9') == 'abc\xe9'


if __name__ == '__main__':
    unittest.main()
