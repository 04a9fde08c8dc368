"""Two-variant result container for explicit error handling.

A ``Result`` is exactly one of ``Left`` (the error channel) or ``Right``
(the success channel). Variant identity comes from the class, never from the
payload, so ``Right(0)`` and ``Right("")`` are still successes.

Example:
    def parse(text: str) -> Result[str, int]:
        return right(int(text)) if text.isdigit() else left(f"not a number: {text!r}")

    parse("41").map(lambda n: n + 1)  # Right(42)
    parse("x").map(lambda n: n + 1)   # Left("not a number: 'x'")
"""

from __future__ import annotations

import dataclasses
import enum
import typing

from eitherkit.errors import UnwrapError

if typing.TYPE_CHECKING:
    from collections.abc import Callable


class Side(enum.Enum):
    """Tag naming which channel a result occupies."""

    LEFT = "left"
    RIGHT = "right"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Left[L]:
    """The error channel of a result."""

    side: typing.ClassVar[Side] = Side.LEFT

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def map(self, fn: Callable[[typing.Any], typing.Any]) -> Left[L]:
        """Leave the error untouched; ``fn`` is not called."""
        return self

    def map_left[L2](self, fn: Callable[[L], L2]) -> Left[L2]:
        """Transform the error payload."""
        return Left(fn(self.value))

    def chain(self, fn: Callable[[typing.Any], typing.Any]) -> Left[L]:
        """Short-circuit: the error propagates and ``fn`` is not called."""
        return self

    flat_map = chain

    def or_else[T](self, fn: Callable[[L], T]) -> T:
        """Run a recovery step that itself returns a result."""
        return fn(self.value)

    def fold[T](self, on_left: Callable[[L], T], on_right: Callable[[typing.Any], T]) -> T:
        return on_left(self.value)

    def get_or_else[T](self, default: T) -> T:
        return default

    def swap(self) -> Right[L]:
        return Right(self.value)

    def unwrap(self) -> typing.NoReturn:
        cause = self.value if isinstance(self.value, BaseException) else None
        raise UnwrapError(f"Called unwrap on {self!r}", result=self) from cause

    def unwrap_left(self) -> L:
        return self.value

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Right[R]:
    """The success channel of a result."""

    side: typing.ClassVar[Side] = Side.RIGHT

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def map[R2](self, fn: Callable[[R], R2]) -> Right[R2]:
        """Apply ``fn`` to the payload and wrap the output as a new success.

        ``fn`` should return a plain value; use :meth:`chain` for steps that
        return a result themselves, otherwise results nest.
        """
        return Right(fn(self.value))

    def map_left(self, fn: Callable[[typing.Any], typing.Any]) -> Right[R]:
        return self

    def chain[T](self, fn: Callable[[R], T]) -> T:
        """Hand the payload to a result-returning step and return its result as-is."""
        return fn(self.value)

    flat_map = chain

    def or_else(self, fn: Callable[[typing.Any], typing.Any]) -> Right[R]:
        return self

    def fold[T](self, on_left: Callable[[typing.Any], T], on_right: Callable[[R], T]) -> T:
        return on_right(self.value)

    def get_or_else(self, default: object) -> R:
        return self.value

    def swap(self) -> Left[R]:
        return Left(self.value)

    def unwrap(self) -> R:
        return self.value

    def unwrap_left(self) -> typing.NoReturn:
        raise UnwrapError(f"Called unwrap_left on {self!r}", result=self)

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


type Result[L, R] = Left[L] | Right[R]


def right[R](value: R) -> Right[R]:
    """Create a successful result wrapping ``value``."""
    return Right(value)


def left[L](value: L) -> Left[L]:
    """Create a failed result wrapping ``value``."""
    return Left(value)


__all__ = ["Left", "Result", "Right", "Side", "left", "right"]
