"""
ncrconv.utf8 - algorithmic utf-8 and utf-32 conversion

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import re

from .references import reference, escape_byte, CODEPOINT_LIMIT


UTF8_BOM = b'\xef\xbb\xbf'

# value to subtract from the leading byte, by sequence length
_LEAD_OFFSET = {1: 0, 2: 0xc0, 3: 0xe0, 4: 0xf0}


def _sequence_length(lead):
    """Number of bytes in the utf-8 sequence introduced by a leading byte."""
    if lead >= 0xf0:
        return 4
    if lead >= 0xe0:
        return 3
    if lead >= 0xc0:
        return 2
    return 1


def decode_utf8(data):
    """
    Convert utf-8 bytes to canonical text.
    ASCII is kept literally; other characters become decimal references.
    A stray byte 0x80..0xbf in leading position is kept as a raw byte.
    """
    output = []
    pos, size = 0, len(data)
    while pos < size:
        lead = data[pos]
        length = _sequence_length(lead)
        if length == 1:
            if lead < 0x80:
                output.append(chr(lead))
            else:
                output.append(escape_byte(lead))
            pos += 1
            continue
        # slicing caps the sequence at the end of the input
        sequence = data[pos:pos+length]
        pos += length
        codepoint = lead - _LEAD_OFFSET[length]
        for byte in sequence[1:]:
            codepoint = (codepoint << 6) | (byte & 0x3f)
        # truncated sequence: shift as if the missing bytes were zero
        codepoint <<= 6 * (length - len(sequence))
        output.append(reference(codepoint))
    return ''.join(output)


def char_utf8(codepoint):
    """Utf-8 bytes for a codepoint; empty if beyond the unicode range."""
    codepoint = int(codepoint)
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((
            (codepoint >> 6) + 0xc0,
            (codepoint & 0x3f) + 0x80,
        ))
    if codepoint < 0x10000:
        return bytes((
            (codepoint >> 12) + 0xe0,
            ((codepoint >> 6) & 0x3f) + 0x80,
            (codepoint & 0x3f) + 0x80,
        ))
    if codepoint < CODEPOINT_LIMIT:
        return bytes((
            (codepoint >> 18) + 0xf0,
            ((codepoint >> 12) & 0x3f) + 0x80,
            ((codepoint >> 6) & 0x3f) + 0x80,
            (codepoint & 0x3f) + 0x80,
        ))
    return b''


def decode_utf32(data):
    """
    Convert little-endian utf-32 to canonical text.
    The byte order mark is dropped; a trailing partial word is ignored.
    """
    output = []
    for start in range(0, len(data) - 3, 4):
        word = int.from_bytes(data[start:start+4], 'little')
        if word < 0x80:
            output.append(chr(word))
        elif word != 0xfeff:
            output.append(reference(word))
    return ''.join(output)


##############################################################################
# classification

def is_ascii(data):
    """Data is pure 7-bit."""
    return data.isascii()


def is_utf8(data):
    """
    Data is well-formed utf-8: no overlong forms, no surrogates, nothing
    beyond u+10FFFF, no stray continuation bytes.
    """
    try:
        data.decode('utf-8')
    except UnicodeDecodeError:
        return False
    return True


def bom_utf8(data):
    """Data starts with the utf-8 byte order mark."""
    return data[:3] == UTF8_BOM


_UTF8_4BYTES = re.compile(
    rb'\xf0[\x90-\xbf][\x80-\xbf]{2}'     # planes 1-3
    rb'|[\xf1-\xf3][\x80-\xbf]{3}'        # planes 4-15
    rb'|\xf4[\x80-\x8f][\x80-\xbf]{2}'    # plane 16
)

def utf8_noplanes(data):
    """
    Replace 4-byte utf-8 sequences (planes 1-16) by references, for storage
    that only accepts characters from the basic multilingual plane.
    """
    return _UTF8_4BYTES.sub(
        lambda _m: decode_utf8(_m.group()).encode('ascii'),
        data
    )
