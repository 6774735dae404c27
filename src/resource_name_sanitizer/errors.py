from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a sanitizer cannot be built from the supplied configuration."""
