"""
Load Result - Outcome of a single asynchronous load.

A LoadResult is either a success carrying a value or a failure carrying
an exception. Failures are values here: they are delivered through
completion callbacks and never raised at the caller of a load.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Success-with-value or failure-with-error."""

    value: Optional[T] = None
    error: Optional[Exception] = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            raise ValueError("LoadResult cannot carry both a value and an error")

    @classmethod
    def success(cls, value: T) -> "LoadResult[T]":
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "LoadResult[T]":
        """Create a failed result. A failure must carry its error."""
        if error is None:
            raise ValueError("LoadResult.failure requires an error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def map(self, transform: Callable[[T], U]) -> "LoadResult[U]":
        """
        Transform the value of a success.

        Failures pass through untouched and `transform` is not called,
        so side effects inside it only run for genuine successes.
        """
        if self.error is not None:
            return LoadResult(error=self.error)
        return LoadResult(value=transform(self.value))

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
