"""Configuration resolution and scoping."""

from __future__ import annotations

import contextvars
import dataclasses
import logging
import sys
import threading
from unittest.mock import Mock

import pytest

from eitherkit.config import (
    FrozenConfig,
    config_scope,
    current_config,
    load_env,
    resolve_config,
)
from eitherkit.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_defaults_without_env() -> None:
    cfg = resolve_config()

    assert cfg == FrozenConfig(trace_captures=False, capture_log_level="DEBUG")
    assert cfg.log_level == logging.DEBUG


def test_env_values_are_coerced(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EITHERKIT_TRACE_CAPTURES", "1")
    monkeypatch.setenv("EITHERKIT_CAPTURE_LOG_LEVEL", "info")

    cfg = resolve_config()

    assert cfg.trace_captures is True
    assert cfg.capture_log_level == "INFO"
    assert cfg.log_level == logging.INFO


def test_explicit_override_beats_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EITHERKIT_CAPTURE_LOG_LEVEL", "info")

    cfg = resolve_config(capture_log_level=" error ")

    assert cfg.capture_log_level == "ERROR"


def test_load_env_reads_only_known_fields(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EITHERKIT_TRACE_CAPTURES", "yes")
    monkeypatch.setenv("EITHERKIT_SOMETHING_ELSE", "ignored")

    assert load_env() == {"trace_captures": "yes"}


def test_invalid_level_raises_with_hint() -> None:
    with pytest.raises(ConfigurationError, match="capture_log_level") as exc:
        resolve_config(capture_log_level="LOUD")

    assert exc.value.hint is not None
    assert "EITHERKIT_CAPTURE_LOG_LEVEL" in exc.value.hint


def test_invalid_env_bool_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EITHERKIT_TRACE_CAPTURES", "sometimes")

    with pytest.raises(ConfigurationError, match="trace_captures"):
        resolve_config()


def test_unknown_override_raises() -> None:
    with pytest.raises(ConfigurationError) as exc:
        resolve_config(trace_capture=True)

    assert exc.value.hint is not None
    assert "Known fields" in exc.value.hint


def test_frozen_config_is_immutable() -> None:
    cfg = resolve_config()

    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.trace_captures = True  # type: ignore[misc]


def test_config_scope_installs_and_restores() -> None:
    assert current_config().trace_captures is False

    with config_scope(trace_captures=True) as cfg:
        assert current_config() is cfg
        with config_scope({"capture_log_level": "WARNING"}) as inner:
            assert current_config() is inner
            assert inner.trace_captures is False
        assert current_config() is cfg

    assert current_config().trace_captures is False


def test_config_scope_accepts_frozen_config() -> None:
    ready = FrozenConfig(trace_captures=True, capture_log_level="ERROR")

    with config_scope(ready) as cfg:
        assert cfg is ready
        assert current_config() is ready


def test_config_scope_restores_after_exception() -> None:
    with pytest.raises(RuntimeError):
        with config_scope(trace_captures=True):
            raise RuntimeError("inside scope")

    assert current_config().trace_captures is False


def test_dotenv_is_loaded_once(monkeypatch: pytest.MonkeyPatch) -> None:
    loader = Mock(return_value=False)
    monkeypatch.setattr("eitherkit.config.load_dotenv", loader)
    monkeypatch.setattr("eitherkit.config._DOTENV_LOADED", False)

    resolve_config()
    resolve_config()

    assert loader.call_count == 1


@pytest.mark.skipif(
    getattr(sys.flags, "thread_inherit_context", False),
    reason="threads copy the caller context on this interpreter",
)
def test_config_scope_does_not_leak_into_other_threads() -> None:
    seen: list[FrozenConfig] = []

    with config_scope(trace_captures=True):
        worker = threading.Thread(target=lambda: seen.append(current_config()))
        worker.start()
        worker.join()

    assert len(seen) == 1
    assert seen[0].trace_captures is False


def test_config_scope_does_not_leak_into_fresh_context() -> None:
    with config_scope(trace_captures=True):
        inside = current_config()
        fresh = contextvars.Context().run(current_config)

    assert inside.trace_captures is True
    assert fresh.trace_captures is False
