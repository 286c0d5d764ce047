"""
ncrconv.sanitize - removal of illegal control characters

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import re


# C0 controls other than tab, line feed and carriage return
_ILLEGAL = '[\x00-\x08\x0b\x0c\x0e-\x1f]'
_ILLEGAL_STR = re.compile(_ILLEGAL)
_ILLEGAL_BYTES = re.compile(_ILLEGAL.encode('ascii'))


def strip_illegal(text):
    """Remove control characters that are not allowed in html or xml text."""
    if isinstance(text, bytes):
        return _ILLEGAL_BYTES.sub(b'', text)
    return _ILLEGAL_STR.sub('', text)
