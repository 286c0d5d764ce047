"""
ncrconv.native - system transcoding through Python's codec registry

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import codecs
import logging
from functools import cached_property

from .base import normalise_name


class CodecFacility:
    """
    Opportunistic transcoder backed by the codec registry.
    Capabilities are probed once and remembered for the life of the object.
    """

    def __init__(self, errors='surrogateescape'):
        """
        Set up facility.

        errors: error handler for bytes the codec cannot decode
        """
        self._errors = errors
        self._support = {}

    def _codec(self, charset):
        """Python codec name for a charset, or None if unknown."""
        charset = normalise_name(charset)
        try:
            return self._support[charset]
        except KeyError:
            pass
        try:
            codec = codecs.lookup(charset).name
        except LookupError:
            logging.debug('Charset `%s` not known to codec registry.', charset)
            codec = None
        self._support[charset] = codec
        return codec

    def supports(self, charset):
        """Charset is known to the codec registry."""
        return self._codec(charset) is not None

    def decode(self, data, charset):
        """Decode bytes to text; undecodable bytes are kept as escapes. None on failure."""
        codec = self._codec(charset)
        if not codec:
            return None
        try:
            return data.decode(codec, self._errors)
        except (UnicodeError, LookupError, TypeError) as e:
            logging.debug('Could not decode from `%s`: %s', charset, e)
            return None

    def convert(self, data, source, target, errors=None):
        """Convert bytes between charsets; None on failure."""
        errors = errors or self._errors
        source_codec, target_codec = self._codec(source), self._codec(target)
        if not source_codec or not target_codec:
            return None
        try:
            text = data.decode(source_codec, errors)
            if errors != 'surrogateescape':
                errors = 'replace'
            return text.encode(target_codec, errors)
        except (UnicodeError, LookupError, TypeError) as e:
            logging.debug('Could not convert from `%s` to `%s`: %s', source, target, e)
            return None

    def encode(self, text, charset):
        """Encode text; unmappable characters become references. None on failure."""
        codec = self._codec(charset)
        if not codec:
            return None
        try:
            return text.encode(codec, 'xmlcharrefreplace')
        except (UnicodeError, LookupError, TypeError) as e:
            logging.debug('Could not encode to `%s`: %s', charset, e)
            return None

    @cached_property
    def utf32_ok(self):
        """Conversion to utf-32 keeps a test string intact."""
        converted = self.convert(b'chaine de test', 'utf-8', 'utf-32-le')
        return converted == 'chaine de test'.encode('utf-32-le')

    def __repr__(self):
        return f'{type(self).__name__}()'
