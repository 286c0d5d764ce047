"""
ncrconv.base - base classes and functions for charset names

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

# charset name meaning "use the site's configured charset"
AUTO = 'AUTO'

# charset used when the site has not configured one
DEFAULT_CHARSET = 'utf-8'

# the anchor charset, decoded algorithmically
UTF8 = 'utf-8'


class NotFoundError(KeyError):
    """Charset table not found."""


# synonyms resolved before looking for a table
_synonyms = {
    '': 'iso-8859-1',
    'latin1': 'iso-8859-1',
    'latin-1': 'iso-8859-1',
    'iso8859-1': 'iso-8859-1',
    'iso_8859-1': 'iso-8859-1',
    'utf8': 'utf-8',
    **{f'windows-{_n}': f'cp{_n}' for _n in range(1250, 1259)},
}


def normalise_name(name=''):
    """Lowercase and trim a charset name and resolve synonyms."""
    name = str(name or '').strip().lower()
    return _synonyms.get(name, name)


def is_utf8_name(name):
    """Charset name designates utf-8."""
    return normalise_name(name) == UTF8
