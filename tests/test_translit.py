"""
ncrconv test suite
transliteration tests
"""

import unittest

import ncrconv
from .base import BaseTester


class TestTransliterate(BaseTester):
    """Test transliteration to ASCII approximations."""

    def test_fast(self):
        assert self.transcoder.fast_transliterate('\xc6r\xf8') == 'AEro'
        assert self.transcoder.fast_transliterate('\xc6r\xf8'.encode('utf-8')) == 'AEro'
        assert self.transcoder.fast_transliterate('Stra\xdfe') == 'Strasse'
        assert self.transcoder.fast_transliterate('') == ''

    def test_fast_keeps_references(self):
        # no decoding or entity replacement in the fast path
        assert self.transcoder.fast_transliterate('&eacute;') == '&eacute;'

    def test_utf8(self):
        assert self.transcoder.transliterate(b'caf\xc3\xa9', 'utf-8') == 'cafe'
        assert self.transcoder.transliterate(b'caf\xc3\xa9') == 'cafe'

    def test_legacy_charset(self):
        for transcoder in (self.transcoder, self.tables_only):
            assert transcoder.transliterate(b'caf\xe9', 'iso-8859-1') == 'cafe'
            assert transcoder.transliterate(b'\xcf\xf0\xe8', 'cp1251') == 'Pri'

    def test_entities(self):
        assert self.transcoder.transliterate('caf&eacute; &#xE6;') == 'cafe ae'

    def test_control_characters(self):
        assert self.transcoder.transliterate('a\x01b\x1f\tc') == 'ab\tc'

    def test_unmapped_kept(self):
        assert self.transcoder.transliterate('日本') == '日本'

    def test_custom_sanitizer(self):
        transcoder = ncrconv.Transcoder(sanitizer=lambda _t: _t.replace(b'x', b''))
        assert transcoder.transliterate('xcaf\xe9x') == 'cafe'


class TestDiacriticForm(BaseTester):
    """Test transliteration keeping diacritics."""

    def test_marks(self):
        assert self.transcoder.transliterate_diacritic_form('caf\xe9') == "cafe'"
        assert self.transcoder.transliterate_diacritic_form('Việt') == 'Vie^.t'
        assert self.transcoder.transliterate_diacritic_form('đ') == 'd-'

    def test_fallback_to_plain(self):
        assert self.transcoder.transliterate_diacritic_form('\xc6') == 'AE'

    def test_digits(self):
        form = self.transcoder.transliterate_diacritic_form
        assert form('caf\xe9', use_digits=True) == 'cafe1'
        assert form('Việt', use_digits=True) == 'Vie65t'
        assert form('đ', use_digits=True) == 'd9'
        assert form('\xc9t\xe9', use_digits=True) == 'E1te1'

    def test_digits_leave_other_punctuation(self):
        form = self.transcoder.transliterate_diacritic_form
        assert form("It's", use_digits=True) == "It's"


if __name__ == '__main__':
    unittest.main()
