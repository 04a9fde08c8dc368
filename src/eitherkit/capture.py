"""Bridges from exception-raising code into results.

``catch_result`` and ``catching`` are the only places eitherkit catches
exceptions. Each capture is logged once on the ``eitherkit.capture`` logger
at the configured level (see :mod:`eitherkit.config`).
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, overload

from eitherkit.config import FrozenConfig, current_config
from eitherkit.errors import ConfigurationError
from eitherkit.result import Left, Right

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from eitherkit.result import Result

log = logging.getLogger(__name__)

_FALLBACK_CONFIG = FrozenConfig(trace_captures=False, capture_log_level="DEBUG")


def _capture_config() -> FrozenConfig:
    # Bad logging settings must not turn a capture into a raise
    try:
        return current_config()
    except ConfigurationError as e:
        log.warning("Ignoring invalid capture logging config: %s", e)
        return _FALLBACK_CONFIG


def _log_capture(fn: Callable[..., Any], exc: BaseException) -> None:
    cfg = _capture_config()
    if not log.isEnabledFor(cfg.log_level):
        return
    name = getattr(fn, "__qualname__", None) or repr(fn)
    log.log(
        cfg.log_level,
        "Captured %s from %s: %s",
        type(exc).__name__,
        name,
        exc,
        exc_info=exc if cfg.trace_captures else None,
    )


def catch_result[R](fn: Callable[[], R]) -> Result[Exception, R]:
    """Call ``fn`` once and wrap the outcome.

    Returns ``Right`` with the return value, or ``Left`` holding the exception
    ``fn`` raised. ``KeyboardInterrupt`` and other non-``Exception`` signals
    propagate.

    Example:
        catch_result(lambda: int("42"))   # Right(42)
        catch_result(lambda: int("x"))    # Left(ValueError(...))
    """
    try:
        value = fn()
    except Exception as e:
        _log_capture(fn, e)
        return Left(e)
    return Right(value)


@overload
def catching[**P, R](fn: Callable[P, R], /) -> Callable[P, Result[Exception, R]]: ...


@overload
def catching(
    *exceptions: type[BaseException],
) -> Callable[[Callable[..., Any]], Callable[..., Result[Exception, Any]]]: ...


def catching(*args: Any) -> Any:
    """Decorate a function so it returns a result instead of raising.

    Usable bare (``@catching``) to capture any ``Exception``, or with the
    exception types to capture (``@catching(KeyError, ValueError)``). Other
    exceptions propagate unchanged.
    """
    if len(args) == 1 and callable(args[0]) and not isinstance(args[0], type):
        return _capture_with((Exception,))(args[0])

    exceptions = args or (Exception,)
    for exc_type in exceptions:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            raise TypeError(
                f"catching() expects exception types, got {exc_type!r}"
            )
    return _capture_with(tuple(exceptions))


def _capture_with(
    exceptions: tuple[type[BaseException], ...],
) -> Callable[[Callable[..., Any]], Callable[..., Result[Any, Any]]]:
    def decorator(fn: Callable[..., Any]) -> Callable[..., Result[Any, Any]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any, Any]:
            try:
                value = fn(*args, **kwargs)
            except exceptions as e:
                _log_capture(fn, e)
                return Left(e)
            return Right(value)

        return wrapper

    return decorator


def sequence[L, R](results: Iterable[Result[L, R]]) -> Result[L, list[R]]:
    """Collect results into one: the first ``Left``, or ``Right`` of all payloads.

    Iteration stops at the first ``Left``, so later items of a lazy iterable
    are never produced.
    """
    values: list[R] = []
    for result in results:
        if result.is_left():
            return result
        values.append(result.value)
    return Right(values)


__all__ = ["catch_result", "catching", "sequence"]
