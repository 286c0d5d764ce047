"""
ncrconv test suite
named entity tests
"""

import unittest

import ncrconv
from .base import BaseTester, CountingTables


class TestEntities(BaseTester):
    """Test replacement of named entities."""

    def test_html(self):
        assert self.transcoder.html_to_canonical('caf&eacute;') == 'caf&#233;'
        assert self.transcoder.html_to_canonical('&nbsp;&euro;') == '&#160;&#8364;'

    def test_html_structural(self):
        text = 'caf&eacute; &amp; &lt;b&gt; &quot;'
        result = self.transcoder.html_to_canonical(text)
        assert result == 'caf&#233; & <b> "', result
        result = self.transcoder.html_to_canonical(text, secure=True)
        assert result == 'caf&#233; &amp; &lt;b&gt; &quot;', result

    def test_html_unknown(self):
        assert self.transcoder.html_to_canonical('&bogus; &angle;') == '&bogus; &angle;'
        assert self.transcoder.html_to_canonical('&eacute') == '&eacute'

    def test_html_keeps_references(self):
        text = '&#233; &#xE9; &#38;'
        assert self.transcoder.html_to_canonical(text) == text

    def test_no_entities(self):
        text = 'plain text'
        assert self.transcoder.html_to_canonical(text) is text
        assert self.transcoder.mathml_to_canonical(text) is text

    def test_mathml(self):
        assert self.transcoder.mathml_to_canonical('&angle;') == '&#8736;'
        assert self.transcoder.mathml_to_canonical('&eacute;&amp;') == '&#233;&amp;'
        # multi-codepoint entity
        result = self.transcoder.mathml_to_canonical('&NotEqualTilde;')
        assert result == '&#8770;&#824;', result

    def test_tables_loaded_once(self):
        tables = CountingTables()
        transcoder = ncrconv.Transcoder(tables=tables)
        for _ in range(3):
            transcoder.html_to_canonical('&eacute;')
            transcoder.mathml_to_canonical('&angle;')
        assert tables.fetches == ['html', 'mathml'], tables.fetches


if __name__ == '__main__':
    unittest.main()
