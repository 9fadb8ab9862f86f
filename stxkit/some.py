"""The value-holding variant of an optional value."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Some"]

T = TypeVar("T")


@dataclass(eq=True)
class Some(Generic[T]):
    """Wraps a present value; compares equal to another ``Some`` holding an equal value."""

    value: T

    def copy(self) -> T:
        """A shallow copy of the held value."""
        return _copy.copy(self.value)

    def move(self) -> T:
        """The held value itself, handed over to the caller."""
        return self.value

    def ref(self) -> T:
        """The held value itself, for inspection or mutation in place."""
        return self.value