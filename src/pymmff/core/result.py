"""
Tagged success/failure result used at the parameter-resolution boundary.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a value or a human-readable error message.

    Callers must check :attr:`ok` (or use :meth:`unwrap`) before using
    :attr:`value`; a failed result always carries ``value=None``.

    Example:
        >>> result = Result.success(42)
        >>> result.ok, result.value
        (True, 42)
        >>> Result.failure("cannot open source").error
        'cannot open source'
    """
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: str) -> "Result[T]":
        if not error:
            raise ValueError("A failed Result needs a non-empty message")
        return cls(value=None, error=error)

    def unwrap(self) -> T:
        """Return the value, raising ``RuntimeError`` on a failed result."""
        if self.error is not None:
            raise RuntimeError(self.error)
        return self.value  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        if self.error is not None:
            return Result.failure(self.error)
        return Result.success(func(self.value))  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self.ok
