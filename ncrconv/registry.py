"""
ncrconv.registry - charset table registry

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import logging
from functools import cached_property

from .base import AUTO, UTF8, normalise_name


class CharsetTable:
    """
    Immutable mapping from byte values (or pseudo-table names) to codepoints.
    Values 0--127 are assumed identity and need not be given.
    """

    def __init__(self, mapping=None, *, name=''):
        """Create table from a dictionary byte -> codepoint."""
        self.name = name
        # copy dict
        self._mapping = {**(mapping or {})}

    @property
    def mapping(self):
        return {**self._mapping}

    @cached_property
    def reverse(self):
        """Reverse index codepoint -> byte; first writer wins on duplicates."""
        reverse = {}
        for key, value in self._mapping.items():
            reverse.setdefault(value, key)
        return reverse

    def __getitem__(self, key):
        return self._mapping[key]

    def __contains__(self, key):
        return key in self._mapping

    def __iter__(self):
        return iter(self._mapping)

    def items(self):
        return self._mapping.items()

    def __len__(self):
        """Number of defined entries."""
        return len(self._mapping)

    def __bool__(self):
        return bool(self._mapping)

    def __eq__(self, other):
        """Compare to other CharsetTable."""
        return isinstance(other, CharsetTable) and self._mapping == other._mapping

    def __or__(self, other):
        """Return table overlaid with all entries defined in right-hand side."""
        mapping = {**self._mapping}
        mapping.update(other.mapping if isinstance(other, CharsetTable) else other)
        return CharsetTable(mapping, name=self.name)

    def __repr__(self):
        """Representation."""
        if self._mapping:
            return f"{type(self).__name__}(name='{self.name}', mapping=<{len(self)} entries>)"
        return f"{type(self).__name__}()"


class CharsetRegistry:
    """Load and memoise charset tables by name."""

    def __init__(self, provider, config=None):
        """
        Set up an empty registry.

        provider: object with a fetch(name) method returning a dict or None
        config: SiteConfig used to resolve AUTO (optional)
        """
        self._provider = provider
        self._config = config
        self._tables = {}

    def load(self, name=AUTO):
        """
        Load the table for a charset if not yet cached.
        Return the canonical charset name, or None if no table could be found.
        """
        if name == AUTO and self._config is not None:
            name = self._config.configured_charset()
        requested = str(name or '').strip().lower()
        if requested in self._tables:
            return self._canonical(requested)
        name = normalise_name(requested)
        if name in self._tables:
            self._tables.setdefault(requested, self._tables[name])
            return self._canonical(name)
        if name == UTF8:
            # utf-8 is decoded algorithmically, no table needed
            table = CharsetTable(name=UTF8)
        else:
            mapping = self._provider.fetch(name)
            if mapping is None:
                logging.warning("No conversion table for charset '%s'.", name)
                table = None
            else:
                logging.debug("Loaded conversion table for charset '%s'.", name)
                table = CharsetTable(mapping, name=name)
        # failed loads are memoised as an empty table without a name
        self._tables[name] = table if table is not None else CharsetTable()
        self._tables.setdefault(requested, self._tables[name])
        return self._canonical(name)

    def _canonical(self, name):
        """Canonical name for a cached entry, or None for a failed load."""
        table = self._tables[name]
        if table.name:
            return table.name
        return None

    def table(self, name=AUTO):
        """Get the (possibly empty) table for a charset, loading it if needed."""
        self.load(name)
        if name == AUTO and self._config is not None:
            name = self._config.configured_charset()
        return self._tables[str(name or '').strip().lower()]

    def __contains__(self, name):
        """Charset has been looked up before (successfully or not)."""
        return normalise_name(name) in self._tables

    def __iter__(self):
        """Iterate over names of successfully loaded tables."""
        return iter(sorted(set(
            _name for _name, _table in self._tables.items() if _table.name
        )))

    def reset(self):
        """Forget all cached tables. Use at process or request boundaries."""
        self._tables.clear()
