"""Discriminated result type for comparisons that must not raise."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import EmbeddingError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome wrapping a value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome wrapping the embedding error that caused it."""

    error: EmbeddingError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> str:
        """Name of the error class, e.g. "DimensionMismatch"."""
        return type(self.error).__name__
