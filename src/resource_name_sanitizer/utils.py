from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigError
from .models import SanitizerConfig

logger = logging.getLogger(__name__)


def load_sanitizer_config(path: Path) -> SanitizerConfig:
    """Load a sanitizer grammar from a JSON file using the SanitizerConfig field names.

    Raises:
        ConfigError: If the file is missing, unreadable, or fails validation.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Unable to read sanitizer config %s: %s", path, exc)
        raise ConfigError(f"unable to read sanitizer config: {path}") from exc
    try:
        return SanitizerConfig.model_validate_json(raw)
    except ValidationError as exc:
        logger.error("Invalid sanitizer config %s: %s", path, exc)
        raise ConfigError(f"invalid sanitizer config {path}: {exc}") from exc
