from importlib.metadata import version

from .errors import ConfigError
from .hashing import content_hash, fnv1a_32
from .models import SUBDOMAIN_LABEL_SAFE, SanitizerConfig
from .sanitizer import Sanitizer
from .settings import SanitizerSettings
from .utils import load_sanitizer_config


def get_version() -> str:
    try:
        return version("resource-name-sanitizer")
    except Exception:
        return "0.0.0"


__all__ = [
    "ConfigError",
    "Sanitizer",
    "SanitizerConfig",
    "SanitizerSettings",
    "SUBDOMAIN_LABEL_SAFE",
    "content_hash",
    "fnv1a_32",
    "get_version",
    "load_sanitizer_config",
]
