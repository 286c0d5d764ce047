"""
ncrconv - charset conversion through numeric character references

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .base import AUTO, DEFAULT_CHARSET, NotFoundError, normalise_name
from .config import SiteConfig
from .registry import CharsetRegistry, CharsetTable
from .providers import (
    PackageTables, EntityTables, CodecTables, ChainedTables, default_tables,
)
from .native import CodecFacility
from .bridge import UnicodeBridge
from .entities import EntityTranscoder
from .translit import Transliterator
from .detect import EncodingDetector, detect_charset, declared_charset
from .strings import Utf8Strings
from .transcoder import Transcoder
from .sanitize import strip_illegal
from .references import (
    scan, reference, spellings, to_canonical, resolve,
    unicode_to_javascript, javascript_to_unicode, javascript_to_binary,
)
from .utf8 import (
    decode_utf8, decode_utf32, char_utf8, is_ascii, is_utf8, bom_utf8, utf8_noplanes,
)
