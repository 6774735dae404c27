from __future__ import annotations

import os
from dataclasses import dataclass

from pydantic import ValidationError

from .errors import ConfigError
from .models import SUBDOMAIN_LABEL_SAFE, SanitizerConfig


@dataclass(frozen=True)
class SanitizerSettings:
    """Sanitizer grammar loaded from environment with fail-fast validation."""

    acceptance_pattern: str = SUBDOMAIN_LABEL_SAFE.acceptance_pattern
    extraction_pattern: str = SUBDOMAIN_LABEL_SAFE.extraction_pattern
    separator: str = SUBDOMAIN_LABEL_SAFE.separator
    max_length: int = SUBDOMAIN_LABEL_SAFE.max_length

    @classmethod
    def from_env(cls) -> "SanitizerSettings":
        return cls(
            acceptance_pattern=os.getenv("SANITIZER_ACCEPTANCE_PATTERN", SUBDOMAIN_LABEL_SAFE.acceptance_pattern),
            extraction_pattern=os.getenv("SANITIZER_EXTRACTION_PATTERN", SUBDOMAIN_LABEL_SAFE.extraction_pattern),
            separator=os.getenv("SANITIZER_SEPARATOR", SUBDOMAIN_LABEL_SAFE.separator),
            max_length=_get_env_int("SANITIZER_MAX_LENGTH", default=SUBDOMAIN_LABEL_SAFE.max_length, minimum=1),
        ).normalized()

    def normalized(self) -> "SanitizerSettings":
        """Validate all fields. Raises ConfigError on invalid configuration."""
        if not self.acceptance_pattern.strip():
            raise ConfigError("SANITIZER_ACCEPTANCE_PATTERN must be non-empty")
        if not self.extraction_pattern.strip():
            raise ConfigError("SANITIZER_EXTRACTION_PATTERN must be non-empty")
        # Surfaces bad patterns here rather than on first use.
        self.to_config()
        return self

    def to_config(self) -> SanitizerConfig:
        try:
            return SanitizerConfig(
                acceptance_pattern=self.acceptance_pattern,
                extraction_pattern=self.extraction_pattern,
                separator=self.separator,
                max_length=self.max_length,
            )
        except ValidationError as exc:
            raise ConfigError(f"invalid sanitizer settings: {exc}") from exc


def _get_env_int(name: str, default: int, minimum: int, maximum: int = 10_000_000) -> int:
    """Parse an integer from an environment variable with bounds checking.

    Args:
        name: Environment variable name.
        default: Value to return if the variable is unset.
        minimum: Inclusive lower bound.
        maximum: Inclusive upper bound.

    Returns:
        The parsed integer, guaranteed to be within [minimum, maximum].

    Raises:
        ConfigError: If the value is not an integer or is outside bounds.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        parsed = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got: {raw!r}") from exc
    if parsed < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got: {parsed}")
    if parsed > maximum:
        raise ConfigError(f"{name} must be <= {maximum}, got: {parsed}")
    return parsed
