"""Exception hierarchy for eitherkit."""

from __future__ import annotations

from typing import Any


class EitherError(Exception):
    """Base exception for all eitherkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(EitherError):
    """A payload was extracted from the wrong side of a result.

    The offending result is attached as ``result`` so callers can still
    inspect it after catching the error.
    """

    def __init__(
        self,
        message: str,
        *,
        result: Any,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.result = result


class ConfigurationError(EitherError):
    """Configuration validation or resolution failed."""
