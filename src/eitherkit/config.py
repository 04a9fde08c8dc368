"""Configuration for how eitherkit reports captured exceptions.

Resolution follows defaults < environment (``EITHERKIT_*``) < overrides, is
validated by the ``Settings`` schema and produces an immutable
``FrozenConfig``. A ``.env`` file is read once, on first resolution; variables
already present in the environment win.

Example:
    with config_scope(trace_captures=True, capture_log_level="warning"):
        catch_result(load_profile)  # logs the traceback at WARNING
"""

from __future__ import annotations

from collections.abc import Generator, Mapping
from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
import logging
import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from eitherkit.errors import ConfigurationError

ENV_PREFIX = "EITHERKIT_"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Schema for configuration fields, defaults and validation rules."""

    # Attach the traceback to capture log records
    trace_captures: bool = Field(default=False)
    capture_log_level: str = Field(default="DEBUG")

    model_config = {"extra": "forbid"}

    @field_validator("capture_log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case and surrounding whitespace."""
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in _LEVEL_NAMES:
                raise ValueError(
                    f"capture_log_level must be one of {', '.join(_LEVEL_NAMES)}"
                )
        return v


@dataclass(frozen=True)
class FrozenConfig:
    """Validated, immutable configuration."""

    trace_captures: bool
    capture_log_level: str

    @property
    def log_level(self) -> int:
        """Numeric logging level for capture records."""
        return logging.getLevelNamesMapping()[self.capture_log_level]


_SCOPED: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "eitherkit_config", default=None
)

_DOTENV_LOADED: bool = False


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    load_dotenv()
    _DOTENV_LOADED = True


def load_env() -> dict[str, Any]:
    """Read known ``EITHERKIT_*`` variables; type coercion is left to ``Settings``."""
    config: dict[str, Any] = {}
    for field_name in Settings.model_fields:
        value = os.environ.get(ENV_PREFIX + field_name.upper())
        if value is not None:
            config[field_name] = value
    return config


def resolve_config(**overrides: Any) -> FrozenConfig:
    """Resolve configuration from the environment and explicit overrides.

    Raises:
        ConfigurationError: If a value fails validation or an override names
            an unknown field.
    """
    _load_dotenv_once()

    merged = {**load_env(), **overrides}
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err.get("loc", ())) or "config"
        msg = err.get("msg", "invalid value")
        # Pydantic prefixes errors raised from validators
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, ") :]
        if field in Settings.model_fields:
            hint = f"Set {ENV_PREFIX}{field.upper()} or pass {field}=... explicitly."
        else:
            hint = f"Known fields: {', '.join(Settings.model_fields)}"
        raise ConfigurationError(
            f"Configuration validation failed for {field}: {msg}", hint=hint
        ) from e

    return FrozenConfig(
        trace_captures=settings.trace_captures,
        capture_log_level=settings.capture_log_level,
    )


def current_config() -> FrozenConfig:
    """Return the scoped configuration, or resolve one from the environment."""
    cfg = _SCOPED.get()
    if cfg is not None:
        return cfg
    return resolve_config()


@contextmanager
def config_scope(
    cfg: FrozenConfig | Mapping[str, Any] | None = None, **overrides: Any
) -> Generator[FrozenConfig]:
    """Install a configuration for the current context.

    Scopes nest and are restored on exit. Being backed by a ``ContextVar``,
    a scope does not leak into other tasks, or into threads started
    without a copy of the current context.

    Args:
        cfg: A ready ``FrozenConfig`` to use as-is, or a mapping of overrides.
        **overrides: Additional overrides, merged over ``cfg`` when it is a
            mapping.

    Yields:
        The configuration active inside the scope.
    """
    if isinstance(cfg, FrozenConfig):
        resolved = cfg
    else:
        resolved = resolve_config(**{**(cfg or {}), **overrides})

    token = _SCOPED.set(resolved)
    try:
        yield resolved
    finally:
        _SCOPED.reset(token)


__all__ = [
    "ENV_PREFIX",
    "FrozenConfig",
    "Settings",
    "config_scope",
    "current_config",
    "load_env",
    "resolve_config",
]
