from __future__ import annotations

import pytest

from pyredux.config import ReduxConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "PYREDUX_ENV",
        "PYREDUX_PRODUCTION",
        "PYREDUX_LOG_PAYLOADS",
        "PYREDUX_MAX_LOG_STRING",
        "PYREDUX_REDACT_KEYS",
    ):
        monkeypatch.delenv(key, raising=False)

    config = ReduxConfig.from_env()
    assert config == ReduxConfig()
    assert config.diagnostics_enabled


def test_env_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PYREDUX_PRODUCTION", raising=False)
    monkeypatch.setenv("PYREDUX_ENV", "Production")

    config = ReduxConfig.from_env()
    assert config.production
    assert not config.diagnostics_enabled


def test_explicit_flag_beats_env_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYREDUX_ENV", "production")
    monkeypatch.setenv("PYREDUX_PRODUCTION", "off")

    assert not ReduxConfig.from_env().production


def test_logging_options(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYREDUX_LOG_PAYLOADS", "yes")
    monkeypatch.setenv("PYREDUX_MAX_LOG_STRING", "32")

    config = ReduxConfig.from_env()
    assert config.log_payloads
    assert config.max_log_string == 32


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYREDUX_ENV", "production")
    monkeypatch.setenv("PYREDUX_MAX_LOG_STRING", "32")

    config = ReduxConfig.from_env(production=False, max_log_string=8)
    assert not config.production
    assert config.max_log_string == 8


def test_unknown_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PYREDUX_ENV", raising=False)
    monkeypatch.setenv("PYREDUX_PRODUCTION", "maybe")

    assert not ReduxConfig.from_env().production


def test_redact_keys_extend_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYREDUX_REDACT_KEYS", "ssn, card_number,")

    config = ReduxConfig.from_env()
    assert {"ssn", "card_number"} <= config.redact_keys
    assert "password" in config.redact_keys
