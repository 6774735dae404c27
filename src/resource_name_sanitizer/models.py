from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .hashing import hash_length_for


class SanitizerConfig(BaseModel):
    """Naming grammar a sanitizer enforces.

    ``acceptance_pattern`` must match a whole string for it to be kept as-is;
    ``extraction_pattern`` picks the substrings worth keeping from anything else.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    acceptance_pattern: str
    extraction_pattern: str
    separator: str
    max_length: int = Field(ge=1)

    @field_validator("acceptance_pattern", "extraction_pattern")
    @classmethod
    def _must_compile(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {value!r}: {exc}") from exc
        return value

    @model_validator(mode="after")
    def _separator_fits(self) -> "SanitizerConfig":
        if len(self.separator) > self.max_length:
            raise ValueError(
                f"separator {self.separator!r} is longer than max_length={self.max_length}"
            )
        return self

    @property
    def hash_length(self) -> int:
        return hash_length_for(self.max_length)


# RFC-1123 DNS label: Kubernetes object names, most cloud resource names.
SUBDOMAIN_LABEL_SAFE = SanitizerConfig(
    acceptance_pattern=r"^[a-z0-9][a-z0-9-]+[a-z0-9]$",
    extraction_pattern=r"[a-z0-9]+",
    separator="-",
    max_length=63,
)
