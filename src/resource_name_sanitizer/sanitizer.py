from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from .errors import ConfigError
from .hashing import content_hash
from .models import SUBDOMAIN_LABEL_SAFE, SanitizerConfig
from .settings import SanitizerSettings
from .utils import load_sanitizer_config

logger = logging.getLogger(__name__)


class Sanitizer:
    """Coerces arbitrary strings into names accepted by a configured grammar.

    Instances hold only the frozen config and its compiled patterns, so one
    sanitizer can be shared freely between threads.
    """

    def __init__(self, config: SanitizerConfig) -> None:
        self._config = config
        self._acceptance = re.compile(config.acceptance_pattern)
        self._extraction = re.compile(config.extraction_pattern)

    @classmethod
    def with_defaults(cls) -> "Sanitizer":
        """Sanitizer producing RFC-1123 DNS labels of at most 63 characters."""
        return cls(SUBDOMAIN_LABEL_SAFE)

    @classmethod
    def with_config(
        cls,
        acceptance_pattern: str,
        extraction_pattern: str,
        separator: str,
        max_length: int,
    ) -> "Sanitizer":
        """Build a sanitizer for a caller-supplied grammar.

        Raises:
            ConfigError: If a pattern does not compile, ``max_length`` is below 1,
                or the separator is longer than ``max_length``.
        """
        try:
            config = SanitizerConfig(
                acceptance_pattern=acceptance_pattern,
                extraction_pattern=extraction_pattern,
                separator=separator,
                max_length=max_length,
            )
        except ValidationError as exc:
            raise ConfigError(f"invalid sanitizer config: {exc}") from exc
        return cls(config)

    @classmethod
    def from_env(cls) -> "Sanitizer":
        return cls(SanitizerSettings.from_env().to_config())

    @classmethod
    def from_file(cls, path: Path) -> "Sanitizer":
        return cls(load_sanitizer_config(path))

    @property
    def config(self) -> SanitizerConfig:
        return self._config

    def is_valid(self, value: str) -> bool:
        if len(value) > self._config.max_length:
            return False
        return self._acceptance.fullmatch(value) is not None

    def sanitize(self, value: str) -> str:
        """Return ``value`` if already valid, otherwise a rewritten name.

        The safe substrings of ``value`` are joined with the separator. When the
        result is too long, or still rejected by the acceptance pattern, it is
        truncated as needed and suffixed with a hash of the original ``value``,
        so inputs sharing a long prefix still differ.
        """
        if self.is_valid(value):
            return value

        separator = self._config.separator
        max_length = self._config.max_length
        tokens = [match.group(0) for match in self._extraction.finditer(value) if match.group(0)]
        joined = separator.join(tokens)
        if tokens and self.is_valid(joined):
            return joined

        hash_length = min(self._config.hash_length, max_length - len(separator))
        budget = max_length - hash_length - len(separator)
        result = f"{joined[:budget]}{separator}{content_hash(value)[:hash_length]}"
        if not tokens:
            logger.debug("no extractable tokens in %r; name is the hash suffix only", value)
        elif len(joined) > budget:
            logger.debug("truncated %d-character name to %r", len(joined), result)
        else:
            logger.debug("suffixed rejected name %r to %r", joined, result)
        if not self.is_valid(result):
            logger.debug("sanitized %r to %r which the acceptance pattern rejects", value, result)
        return result

    def sanitize_many(self, parts: Iterable[str]) -> str:
        """Join ``parts`` with the separator, then sanitize the combined string."""
        return self.sanitize(self._config.separator.join(parts))

    def join(self, *parts: str) -> str:
        return self.sanitize_many(parts)

    def __repr__(self) -> str:
        return f"Sanitizer({self._config!r})"
