"""
ncrconv.transcoder - charset conversion service

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

from .base import AUTO
from .config import SiteConfig
from .registry import CharsetRegistry
from .providers import default_tables
from .native import CodecFacility
from .bridge import UnicodeBridge
from .entities import EntityTranscoder
from .translit import Transliterator
from .detect import EncodingDetector
from .strings import Utf8Strings
from .sanitize import strip_illegal


# sentinel for "use the codec registry"
_DEFAULT = object()


class Transcoder:
    """
    Owns the conversion tables and caches for one process or request,
    and exposes all conversions.
    """

    def __init__(self, charset=None, *, tables=None, native=_DEFAULT, sanitizer=strip_illegal):
        """
        Set up transcoder.

        charset: site charset; None for the default (utf-8)
        tables: table provider with a fetch(name) method; None for the shipped tables
        native: CodecFacility for opportunistic transcoding, or None to use tables only
        sanitizer: function removing illegal control characters before transliteration
        """
        if isinstance(charset, SiteConfig):
            self.config = charset
        else:
            self.config = SiteConfig(charset)
        if native is _DEFAULT:
            native = CodecFacility()
        self.native = native
        self.registry = CharsetRegistry(tables or default_tables(), self.config)
        self.bridge = UnicodeBridge(self.registry, self.config, native)
        self.entities = EntityTranscoder(self.registry)
        self.transliterator = Transliterator(
            self.registry, self.bridge, self.entities, sanitizer
        )
        self.detector = EncodingDetector(self.bridge)
        self.strings = Utf8Strings(self.config)

    def reset(self):
        """Drop all cached tables; they are reloaded on next use."""
        self.registry.reset()
        self.bridge.reset()
        self.entities.reset()
        self.transliterator.reset()

    @property
    def charset(self):
        """Site charset."""
        return self.config.configured_charset()

    @charset.setter
    def charset(self, charset):
        self.config.charset = charset

    def __repr__(self):
        return f"{type(self).__name__}(charset='{self.charset}')"

    # registry

    def load_charset(self, charset=AUTO):
        """Load a charset table; return its canonical name or None."""
        return self.registry.load(charset)

    # bridge

    def decode(self, data, charset=AUTO):
        """Convert bytes in a charset to canonical text."""
        return self.bridge.decode(data, charset)

    def encode(self, canonical, charset=AUTO):
        """Convert canonical text to bytes in a charset."""
        return self.bridge.encode(canonical, charset)

    def import_charset(self, data, charset=AUTO):
        """Convert bytes in a charset to the site charset."""
        return self.bridge.import_charset(data, charset)

    def correct_windows_characters(self, data, charset=AUTO, target='unicode'):
        """Replace windows-1252 characters mislabelled as iso-8859-1."""
        return self.bridge.correct_windows_characters(data, charset, target)

    # entities

    def html_to_canonical(self, text, secure=False):
        """Replace HTML named entities by references."""
        return self.entities.html_to_canonical(text, secure)

    def mathml_to_canonical(self, text):
        """Replace MathML named entities by references."""
        return self.entities.mathml_to_canonical(text)

    # transliteration

    def fast_transliterate(self, text, charset=AUTO, variant=''):
        """Replace characters found in the transliteration table."""
        return self.transliterator.fast_transliterate(text, charset, variant)

    def transliterate(self, text, charset=AUTO, variant=''):
        """Convert text to an ASCII approximation."""
        return self.transliterator.transliterate(text, charset, variant)

    def transliterate_diacritic_form(self, text, use_digits=False):
        """Transliterate keeping diacritics as marks or digits."""
        return self.transliterator.transliterate_diacritic_form(text, use_digits)

    # detection

    def transcode_page(self, data, headers=''):
        """Convert a page of unknown charset to the site charset."""
        return self.detector.transcode_page(data, headers)

    # string operations

    def substring(self, text, start=0, length=None):
        return self.strings.substring(text, start, length)

    def uppercase_first(self, text):
        return self.strings.uppercase_first(text)

    def lowercase(self, text):
        return self.strings.lowercase(text)

    def length(self, text):
        return self.strings.length(text)
