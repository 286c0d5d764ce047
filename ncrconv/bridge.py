"""
ncrconv.bridge - conversion between encoded bytes and canonical text

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import re
import logging

from .base import AUTO, UTF8, normalise_name
from .references import (
    scan, Reference, Literal, reference, escape_byte, escaped_byte,
    to_canonical, CODEPOINT_LIMIT,
)
from .utf8 import decode_utf8, decode_utf32, char_utf8


LATIN1 = 'iso-8859-1'

# windows-1252 characters found at 128--159 in text labelled iso-8859-1
# None marks the positions that are unassigned in windows-1252
_WINDOWS_1252 = (
    8364, None, 8218, 402, 8222, 8230, 8224, 8225,
    710, 8240, 352, 8249, 338, None, 381, None,
    None, 8216, 8217, 8220, 8221, 8226, 8211, 8212,
    732, 8482, 353, 8250, 339, None, 382, 376,
)


class UnicodeBridge:
    """Decode bytes to canonical text and encode canonical text to bytes."""

    def __init__(self, registry, config, native=None):
        """
        Set up bridge.

        registry: CharsetRegistry to take conversion tables from
        config: SiteConfig holding the site charset
        native: optional CodecFacility, used when it knows the charset
        """
        self._registry = registry
        self._config = config
        self._native = native
        # byte -> canonical text, per charset
        self._decoders = {}
        # regex and replacements for windows characters, per charset and target
        self._windows = {}
        # charsets for which no decoding path works
        self._unsupported = set()

    def reset(self):
        """Clear cached conversion tables."""
        self._decoders.clear()
        self._windows.clear()
        self._unsupported.clear()

    def _charset(self, charset):
        """Resolve AUTO and synonyms."""
        return normalise_name(self._config.resolve(charset))

    ##########################################################################
    # bytes -> canonical

    def decode(self, data, charset=AUTO):
        """
        Convert text in a given charset to canonical text: ASCII plus
        numeric character references. Bytes that cannot be mapped are kept.
        """
        if isinstance(data, str):
            # already decoded
            return to_canonical(data)
        charset = self._charset(charset)
        if charset == UTF8:
            return decode_utf8(data)
        if charset == LATIN1:
            data = self.correct_windows_characters(data, LATIN1)
        if self._native and self._native.supports(charset):
            text = self._native.decode(data, charset)
            if text is not None:
                return to_canonical(text)
        table = self._registry.table(charset)
        if table:
            return self._decode_table(data, charset, table)
        if self._native and self._native.utf32_ok:
            converted = self._native.convert(data, charset, 'utf-32-le', errors='replace')
            if converted:
                return decode_utf32(converted)
        if charset not in self._unsupported:
            logging.error("Charset '%s' not supported.", charset)
            self._unsupported.add(charset)
        return data.decode('ascii', 'surrogateescape')

    def _decode_table(self, data, charset, table):
        """Convert bytes through a byte -> codepoint table."""
        try:
            decoder = self._decoders[charset]
        except KeyError:
            decoder = tuple(
                chr(_byte) if _byte < 0x80
                else reference(table[_byte]) if _byte in table
                else escape_byte(_byte)
                for _byte in range(256)
            )
            self._decoders[charset] = decoder
        return ''.join(map(decoder.__getitem__, data))

    def correct_windows_characters(self, data, charset=AUTO, target='unicode'):
        """
        Replace windows-1252 characters at bytes 128--159 (in iso-8859-1) or
        u+0080--u+009F (in utf-8) by references, or by characters in the target
        charset. Unassigned positions become spaces. Other charsets are left alone.
        """
        charset = self._charset(charset)
        if charset == UTF8:
            prefix = b'\xc2'
            if prefix not in data:
                return data
        elif charset == LATIN1:
            prefix = b''
        else:
            return data
        key = (charset, target)
        try:
            pattern, replacements = self._windows[key]
        except KeyError:
            pattern = re.compile(re.escape(prefix) + rb'[\x80-\x9f]')
            replacements = {}
            for byte, codepoint in enumerate(_WINDOWS_1252, 0x80):
                if codepoint is None:
                    replacement = b' '
                elif target == 'unicode':
                    replacement = reference(codepoint).encode('ascii')
                else:
                    replacement = self.encode(reference(codepoint), target)
                replacements[prefix + bytes((byte,))] = replacement
            self._windows[key] = pattern, replacements
        return pattern.sub(lambda _m: replacements[_m.group()], data)

    ##########################################################################
    # canonical -> bytes

    def encode(self, canonical, charset=AUTO):
        """
        Convert canonical text to bytes in a given charset.
        References below 128 are left as they are; so are references to
        codepoints that the charset cannot represent.
        """
        if isinstance(canonical, bytes):
            canonical = canonical.decode('ascii', 'surrogateescape')
        charset = self._charset(charset)
        if charset == UTF8:
            return self._encode_utf8(canonical)
        table = self._registry.table(charset)
        if not table and self._native and self._native.supports(charset):
            return self._encode_native(canonical, charset)
        return self._encode_table(canonical, table.reverse)

    @staticmethod
    def _encode_utf8(canonical):
        """
        Convert references >= 128 and literal characters to utf-8.
        References to surrogates have no utf-8 form and are kept as text.
        """
        if canonical.isascii() and '&' not in canonical:
            return canonical.encode('ascii')
        output = bytearray()
        for token in scan(canonical):
            if (
                    isinstance(token, Reference) and token.codepoint >= 0x80
                    and not 0xd800 <= token.codepoint < 0xe000
                ):
                output += char_utf8(token.codepoint)
            elif isinstance(token, Literal):
                text = token.text
                try:
                    output += text.encode('utf-8', 'surrogateescape')
                except UnicodeEncodeError:
                    # lone surrogates other than escaped bytes stay as references
                    for char in text:
                        byte = escaped_byte(char)
                        if byte is not None:
                            output.append(byte)
                        elif 0xd800 <= ord(char) < 0xe000:
                            output += reference(ord(char)).encode('ascii')
                        else:
                            output += char_utf8(ord(char))
            else:
                output += token.source.encode('ascii')
        return bytes(output)

    @staticmethod
    def _encode_table(canonical, reverse):
        """Convert references and literal characters through a reverse index."""
        output = bytearray()
        for token in scan(canonical):
            if isinstance(token, Reference):
                if token.codepoint >= 0x80 and token.codepoint in reverse:
                    output.append(reverse[token.codepoint])
                else:
                    output += token.source.encode('ascii')
            elif isinstance(token, Literal) and not token.text.isascii():
                for char in token.text:
                    codepoint = ord(char)
                    byte = escaped_byte(char)
                    if codepoint < 0x80:
                        output.append(codepoint)
                    elif byte is not None:
                        output.append(byte)
                    elif codepoint in reverse:
                        output.append(reverse[codepoint])
                    else:
                        output += reference(codepoint).encode('ascii')
            else:
                output += (
                    token.text if isinstance(token, Literal) else token.source
                ).encode('ascii')
        return bytes(output)

    def _encode_native(self, canonical, charset):
        """Convert through the codec registry, for charsets without table."""
        output = bytearray()
        pending = []

        def _flush():
            if pending:
                text = ''.join(pending)
                encoded = self._native.encode(text, charset)
                if encoded is None:
                    encoded = to_canonical(text).encode('ascii')
                output.extend(encoded)
                pending.clear()

        for token in scan(canonical):
            if (
                    isinstance(token, Reference)
                    and 0x80 <= token.codepoint < CODEPOINT_LIMIT
                    and not 0xd800 <= token.codepoint < 0xe000
                ):
                pending.append(chr(token.codepoint))
            elif isinstance(token, Literal):
                for char in token.text:
                    byte = escaped_byte(char)
                    if byte is None:
                        pending.append(char)
                    else:
                        _flush()
                        output.append(byte)
            else:
                pending.append(token.source)
        _flush()
        return bytes(output)

    ##########################################################################

    def import_charset(self, data, charset=AUTO):
        """Convert text from a given charset to the site charset."""
        return self.encode(self.decode(data, charset), AUTO)
