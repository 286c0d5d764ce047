"""
ncrconv.providers - conversion table providers

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import json
import codecs
import logging
from html.entities import name2codepoint, html5
from importlib.resources import files

from .base import NotFoundError
from .loaders import table_readers
from . import tables


# entities that change the meaning of markup; never part of an entity table
STRUCTURAL_ENTITIES = {
    'amp': '&',
    'quot': '"',
    'lt': '<',
    'gt': '>',
}


class PackageTables:
    """Conversion tables shipped as data files, indexed by charsets.json."""

    def __init__(self, package=tables, index='charsets.json'):
        """Read the table index."""
        self._package = package
        self._index = {}
        self._aliases = {}
        for _name, _dict in json.loads((files(package) / index).read_text()).items():
            self._index[_name] = _dict
            for _alias in _dict.get('aliases', ()):
                self._aliases[_alias] = _name

    def __iter__(self):
        """Iterate over names of indexed tables."""
        return iter(self._index)

    def fetch(self, name):
        """Get the mapping for a table name or alias; None if not available."""
        name = self._aliases.get(name, name)
        try:
            entry = self._index[name]
        except KeyError:
            return None
        try:
            mapping = self._read(entry)
        except NotFoundError as e:
            logging.warning('Could not load table `%s`: %s', name, e)
            return None
        # overlays are applied on top of their base table
        base = entry.get('base', None)
        if base:
            base_mapping = self.fetch(base)
            if base_mapping is None:
                return None
            mapping = {**base_mapping, **mapping}
        return mapping

    def _read(self, entry):
        """Read table file through the reader registered for its format."""
        filename = entry['filename']
        path = files(self._package) / filename
        format = entry.get('format', None) or filename.rpartition('.')[2].lower()
        try:
            reader, format_kwargs = table_readers[format]
        except KeyError as exc:
            raise NotFoundError(f'Undefined table file format {format}.') from exc
        try:
            data = path.read_bytes()
        except EnvironmentError as exc:
            raise NotFoundError(f'Could not load table file `{filename}`: {exc}') from exc
        if not data:
            raise NotFoundError(f'No data in table file `{filename}`.')
        return reader(data, **{**format_kwargs, **entry.get('kwargs', {})})


class EntityTables:
    """Named entity pseudo-tables, from the html.entities data."""

    def fetch(self, name):
        """Get entity name -> codepoint table for `html` or `mathml`."""
        if name == 'html':
            return {
                _name: _cp
                for _name, _cp in name2codepoint.items()
                if _name not in STRUCTURAL_ENTITIES
            }
        if name == 'mathml':
            mapping = {}
            for _name, _chars in html5.items():
                # html5 lists legacy forms without the semicolon too
                if not _name.endswith(';'):
                    continue
                _name = _name[:-1]
                # html5 also has uppercase spellings such as AMP and LT
                if _name.lower() in STRUCTURAL_ENTITIES:
                    continue
                if len(_chars) == 1:
                    mapping[_name] = ord(_chars)
                else:
                    # multi-codepoint entities map to a replacement string
                    mapping[_name] = _chars
            return mapping
        return None


class CodecTables:
    """Byte -> codepoint tables derived from Python's single-byte codecs."""

    def fetch(self, name):
        """Get table for a single-byte codec; None for unknown or multibyte codecs."""
        try:
            info = codecs.lookup(name)
        except LookupError:
            return None
        if info.name.startswith('utf') or not getattr(info, '_is_text_encoding', True):
            return None
        upper = bytes(range(128, 256))
        try:
            chars = upper.decode(info.name, errors='replace')
        except (UnicodeError, TypeError) as e:
            logging.debug('Codec `%s` does not decode bytes: %s', info.name, e)
            return None
        # each byte must decode to exactly one character
        if len(chars) != len(upper):
            logging.debug('Codec `%s` is not a single-byte codec.', info.name)
            return None
        mapping = {
            _byte: ord(_char)
            for _byte, _char in zip(upper, chars)
            if _char != '\ufffd'
        }
        if not mapping:
            return None
        return mapping


class ChainedTables:
    """Ask a sequence of providers in turn; the first to have a table wins."""

    def __init__(self, *providers):
        self._providers = providers

    def fetch(self, name):
        """Get the mapping from the first provider that has one."""
        for provider in self._providers:
            mapping = provider.fetch(name)
            if mapping is not None:
                return mapping
        return None


def default_tables():
    """Providers for shipped data files, named entities and Python codecs."""
    return ChainedTables(PackageTables(), EntityTables(), CodecTables())
