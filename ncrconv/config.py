"""
ncrconv.config - site configuration

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

from .base import AUTO, DEFAULT_CHARSET, normalise_name


class SiteConfig:
    """Holds the charset the site stores its text in."""

    def __init__(self, charset=None):
        """Set the site charset; None or empty means the default charset."""
        self.charset = charset

    def configured_charset(self):
        """Site charset, normalised; DEFAULT_CHARSET if unset."""
        if not self.charset:
            return DEFAULT_CHARSET
        return normalise_name(self.charset)

    def resolve(self, charset):
        """Replace AUTO with the site charset."""
        if charset == AUTO:
            return self.configured_charset()
        return charset

    def __repr__(self):
        return f"{type(self).__name__}(charset='{self.configured_charset()}')"
