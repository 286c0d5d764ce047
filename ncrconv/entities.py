"""
ncrconv.entities - named entities to numeric character references

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

from .references import substitute, reference, to_canonical
from .providers import STRUCTURAL_ENTITIES


class EntityTranscoder:
    """Replace HTML and MathML named entities by numeric references."""

    def __init__(self, registry):
        """Set up transcoder; entity maps are built on first use."""
        self._registry = registry
        self._maps = {}

    def reset(self):
        """Forget the entity maps."""
        self._maps.clear()

    def _entity_map(self, table_name):
        """Entity name -> canonical replacement, from an entity pseudo-table."""
        try:
            return self._maps[table_name]
        except KeyError:
            pass
        entity_map = {}
        for name, value in self._registry.table(table_name).items():
            if isinstance(value, str):
                entity_map[name] = to_canonical(value)
            else:
                entity_map[name] = reference(value)
        self._maps[table_name] = entity_map
        return entity_map

    def html_to_canonical(self, text, secure=False):
        """
        Replace HTML entities such as &eacute; by references such as &#233;.

        secure: keep &amp; &quot; &lt; &gt; as they are; if False, replace
                them with the literal characters
        """
        if '&' not in text:
            return text
        entity_map = self._entity_map('html')

        def _replace(token):
            try:
                return entity_map[token.name]
            except KeyError:
                pass
            if not secure:
                return STRUCTURAL_ENTITIES.get(token.name, token.source)
            return token.source

        return substitute(text, entity=_replace)

    def mathml_to_canonical(self, text):
        """Replace MathML entities such as &angle; by references such as &#8736;."""
        if '&' not in text:
            return text
        entity_map = self._entity_map('mathml')
        return substitute(
            text, entity=lambda _token: entity_map.get(_token.name, _token.source)
        )
