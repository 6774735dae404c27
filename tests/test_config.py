import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from resource_name_sanitizer import (
    SUBDOMAIN_LABEL_SAFE,
    ConfigError,
    Sanitizer,
    SanitizerConfig,
    SanitizerSettings,
    load_sanitizer_config,
)


def _write_config(path: Path, **overrides: object) -> Path:
    payload = SUBDOMAIN_LABEL_SAFE.model_dump() | overrides
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_config_is_frozen() -> None:
    with pytest.raises(ValidationError):
        SUBDOMAIN_LABEL_SAFE.max_length = 10  # type: ignore[misc]


def test_config_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        SanitizerConfig(
            acceptance_pattern="[a-z]+",
            extraction_pattern="[a-z]+",
            separator="-",
            max_length=10,
            lowercase=True,  # type: ignore[call-arg]
        )


def test_config_rejects_invalid_pattern() -> None:
    with pytest.raises(ValidationError, match="invalid regular expression"):
        SanitizerConfig(acceptance_pattern="(", extraction_pattern="[a-z]+", separator="-", max_length=10)


@pytest.mark.parametrize(("max_length", "expected"), [(63, 8), (8, 8), (7, 3), (6, 3), (2, 1), (1, 0)])
def test_config_hash_length(max_length: int, expected: int) -> None:
    config = SUBDOMAIN_LABEL_SAFE.model_copy(update={"max_length": max_length})
    assert config.hash_length == expected


def test_config_round_trips_through_model_dump() -> None:
    same = SanitizerConfig(**SUBDOMAIN_LABEL_SAFE.model_dump())
    other = SanitizerConfig(**(SUBDOMAIN_LABEL_SAFE.model_dump() | {"max_length": 40}))
    assert same == SUBDOMAIN_LABEL_SAFE
    assert other != SUBDOMAIN_LABEL_SAFE


def test_settings_default_to_subdomain_label_preset(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SANITIZER_ACCEPTANCE_PATTERN",
        "SANITIZER_EXTRACTION_PATTERN",
        "SANITIZER_SEPARATOR",
        "SANITIZER_MAX_LENGTH",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = SanitizerSettings.from_env()
    assert settings.to_config() == SUBDOMAIN_LABEL_SAFE


def test_settings_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SANITIZER_ACCEPTANCE_PATTERN", r"[a-z0-9_]+")
    monkeypatch.setenv("SANITIZER_EXTRACTION_PATTERN", r"[a-z0-9]+")
    monkeypatch.setenv("SANITIZER_SEPARATOR", "_")
    monkeypatch.setenv("SANITIZER_MAX_LENGTH", "20")
    settings = SanitizerSettings.from_env()
    assert settings.max_length == 20
    assert settings.separator == "_"

    sanitizer = Sanitizer.from_env()
    assert sanitizer.sanitize("Orders/EU West") == "rders_est"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SANITIZER_MAX_LENGTH", "abc"),
        ("SANITIZER_MAX_LENGTH", "0"),
        ("SANITIZER_MAX_LENGTH", "99999999999"),
        ("SANITIZER_ACCEPTANCE_PATTERN", "["),
        ("SANITIZER_EXTRACTION_PATTERN", "   "),
    ],
)
def test_settings_invalid_env_raises(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match="SANITIZER_|invalid sanitizer settings"):
        SanitizerSettings.from_env()


def test_load_sanitizer_config_from_file(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "sanitizer.json", max_length=20)
    config = load_sanitizer_config(path)
    assert config.max_length == 20
    assert config.acceptance_pattern == SUBDOMAIN_LABEL_SAFE.acceptance_pattern

    sanitizer = Sanitizer.from_file(path)
    assert sanitizer.sanitize("payments/ledger") == "payments-ledger"
    assert len(sanitizer.sanitize("payments/ledger/reconciliation")) == 20


def test_load_sanitizer_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="unable to read"):
        load_sanitizer_config(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "overrides",
    [{"max_length": 0}, {"extraction_pattern": "[a-"}, {"unexpected": "field"}],
)
def test_load_sanitizer_config_invalid_file(tmp_path: Path, overrides: dict[str, object]) -> None:
    path = _write_config(tmp_path / "sanitizer.json", **overrides)
    with pytest.raises(ConfigError, match="invalid sanitizer config"):
        Sanitizer.from_file(path)


def test_load_sanitizer_config_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "sanitizer.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_sanitizer_config(path)
