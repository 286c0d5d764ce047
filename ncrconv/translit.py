"""
ncrconv.translit - transliteration to ASCII approximations

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import re

from .base import AUTO, UTF8
from .sanitize import strip_illegal


# diacritic marks used by the complex transliteration, in cipher order
DIACRITIC_MARKS = "'`?~.^+(-"
_CIPHER = str.maketrans(DIACRITIC_MARKS, '123456789')
_MARKED_LETTER = re.compile(
    '[aeiouyd][' + re.escape(DIACRITIC_MARKS) + ']{1,2}', re.IGNORECASE
)


class Transliterator:
    """Replace non-ASCII characters by ASCII look-alikes, e.g. for indexing."""

    def __init__(self, registry, bridge, entities, sanitizer=strip_illegal):
        """
        Set up transliterator.

        registry: CharsetRegistry holding the translit tables
        bridge: UnicodeBridge to decode the input
        entities: EntityTranscoder to resolve named entities
        sanitizer: function removing illegal control characters
        """
        self._registry = registry
        self._bridge = bridge
        self._entities = entities
        self._sanitizer = sanitizer
        # str.translate tables per variant
        self._maps = {}

    def reset(self):
        """Forget the translation tables."""
        self._maps.clear()

    def _translation(self, variant):
        """Codepoint -> replacement table for a variant."""
        try:
            return self._maps[variant]
        except KeyError:
            pass
        table = self._registry.table('translit' + variant)
        translation = {int(_cp): _repl for _cp, _repl in table.items()}
        self._maps[variant] = translation
        return translation

    def fast_transliterate(self, text, charset=AUTO, variant=''):
        """
        Replace each character found in the transliteration table.

        text: unicode text; bytes are taken to be utf-8
        charset: accepted for symmetry with transliterate(); the text must
                 already be utf-8
        variant: table variant, '' or 'complexe'
        """
        if isinstance(text, bytes):
            text = text.decode(UTF8, 'surrogateescape')
        if not text:
            return text
        return text.translate(self._translation(variant))

    def transliterate(self, text, charset=AUTO, variant=''):
        """
        Convert text to an ASCII approximation. Characters without a
        transliteration are kept as they are.

        text: bytes in the given charset, or unicode text
        charset: charset of the input bytes
        variant: table variant, '' or 'complexe'
        """
        if isinstance(text, str):
            text, charset = text.encode(UTF8, 'surrogateescape'), UTF8
        text = self._sanitizer(text)
        canonical = self._entities.html_to_canonical(self._bridge.decode(text, charset))
        utf8 = self._bridge.encode(canonical, UTF8)
        return self.fast_transliterate(utf8, charset, variant)

    def transliterate_diacritic_form(self, text, use_digits=False):
        """
        Transliterate keeping diacritics as marks: a grave accent gives a`.

        use_digits: replace the marks following a vowel, y or d by digits
                    ' ` ? ~ . ^ + ( - => 1 to 9, so a` gives a2
        """
        text = self.transliterate(text, AUTO, 'complexe')
        if use_digits:
            text = _MARKED_LETTER.sub(lambda _m: _m.group().translate(_CIPHER), text)
        return text
