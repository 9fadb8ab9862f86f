"""A non-owning view over a contiguous run of a mutable sequence."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Generic, Iterator, MutableSequence, Optional, Tuple, TypeVar

from stxkit.panic import panic
from stxkit.some import Some

__all__ = ["Span"]

T = TypeVar("T")
U = TypeVar("U")


def _ensure(condition: bool, description: str, explanation: str) -> None:
    if not condition:
        panic(f"condition: '{description}' failed. explanation: {explanation}")


class Span(Generic[T]):
    """A window ``[start, start + size)`` into a list-like sequence.

    Writes through the span change the underlying sequence.
    """

    __slots__ = ("_data", "_start", "_size")

    def __init__(
        self,
        data: Optional[MutableSequence[T]] = None,
        start: int = 0,
        size: Optional[int] = None,
    ) -> None:
        if data is None:
            data = []
        if size is None:
            size = len(data) - start
        if start < 0 or size < 0 or start + size > len(data):
            raise ValueError("span range lies outside the underlying sequence")
        self._data = data
        self._start = start
        self._size = size

    @property
    def data(self) -> MutableSequence[T]:
        """The underlying sequence."""
        return self._data

    @property
    def start(self) -> int:
        """Offset of the span within the underlying sequence."""
        return self._start

    @property
    def _stop(self) -> int:
        return self._start + self._size

    def _values(self) -> list:
        return list(self)

    def _assign(self, values: list) -> None:
        self._data[self._start:self._stop] = values

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return islice(self._data, self._start, self._stop)

    def __getitem__(self, index: int) -> T:
        _ensure(0 <= index < self._size, "index < size_", "index out of bounds")
        return self._data[self._start + index]

    def __setitem__(self, index: int, value: T) -> None:
        _ensure(0 <= index < self._size, "index < size_", "index out of bounds")
        self._data[self._start + index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Span({self._values()!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def at(self, index: int) -> Optional[Some[T]]:
        """``Some`` element at ``index``, or ``None`` when out of bounds."""
        if 0 <= index < self._size:
            return Some(self._data[self._start + index])
        return None

    def slice(self, offset: int, length: Optional[int] = None) -> "Span[T]":
        _ensure(0 <= offset <= self._size, "offset <= size_", "index out of bounds")
        if length is None:
            return Span(self._data, self._start + offset, self._size - offset)
        _ensure(length >= 0, "length >= 0", "index out of bounds")
        if length > 0:
            _ensure(
                offset + (length - 1) < self._size,
                "offset + (length_to_slice - 1) < size_",
                "index out of bounds",
            )
        return Span(self._data, self._start + offset, length)

    def last(self) -> Optional[Some[T]]:
        if self._size == 0:
            return None
        return Some(self._data[self._stop - 1])

    def equals(self, other: "Span[Any]") -> bool:
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def is_any(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(element) for element in self)

    def is_all(self, predicate: Callable[[T], bool]) -> bool:
        """True if every element matches; false for an empty span."""
        return all(predicate(element) for element in self) and not self.is_empty()

    def is_none(self, predicate: Callable[[T], bool]) -> bool:
        return not any(predicate(element) for element in self)

    def all_equals(self, value: T) -> bool:
        return self.is_all(lambda element: element == value)

    def any_equals(self, value: T) -> bool:
        return self.is_any(lambda element: element == value)

    def none_equals(self, value: T) -> bool:
        return self.is_none(lambda element: element == value)

    def copy(self, source: "Span[T]") -> "Span[T]":
        """Copy as many leading elements of ``source`` as fit into this span."""
        count = min(len(self), len(source))
        self._data[self._start:self._start + count] = list(islice(source, count))
        return self

    def for_each(self, func: Callable[[T], Any]) -> "Span[T]":
        for element in self:
            func(element)
        return self

    def generate(self, generator: Callable[[T], T]) -> "Span[T]":
        """Replace every element with ``generator(element)``."""
        self._assign([generator(element) for element in self])
        return self

    def fill(self, value: T) -> "Span[T]":
        self._assign([value] * self._size)
        return self

    def find(self, value: T) -> "Span[T]":
        """A span over the first match, or an empty span at the end."""
        return self.which(lambda element: element == value)

    def contains(self, value: T) -> bool:
        return not self.find(value).is_empty()

    def which(self, predicate: Callable[[T], bool]) -> "Span[T]":
        """A span over the first element matching ``predicate``, or an empty one at the end."""
        for position, element in enumerate(self):
            if predicate(element):
                return Span(self._data, self._start + position, 1)
        return Span(self._data, self._stop, 0)

    def map(self, transformer: Callable[[T], U], output: "Span[U]") -> "Span[U]":
        """Write ``transformer`` of each element into ``output`` of equal size."""
        _ensure(
            len(self) == len(output),
            "size() == output.size()",
            "source and destination span size mismatch",
        )
        output._assign([transformer(element) for element in self])
        return output

    def sort(self, key: Optional[Callable[[T], Any]] = None) -> "Span[T]":
        self._assign(sorted(self, key=key))
        return self

    def is_sorted(self, key: Optional[Callable[[T], Any]] = None) -> bool:
        keys = [key(element) for element in self] if key is not None else self._values()
        return not any(b < a for a, b in zip(keys, keys[1:]))

    def partition(self, predicate: Callable[[T], bool]) -> Tuple["Span[T]", "Span[T]"]:
        """Stably move matching elements to the front; return both parts."""
        matching, rest = [], []
        for element in self:
            (matching if predicate(element) else rest).append(element)
        self._assign(matching + rest)
        split = self._start + len(matching)
        return Span(self._data, self._start, len(matching)), Span(self._data, split, len(rest))

    def unstable_partition(self, predicate: Callable[[T], bool]) -> Tuple["Span[T]", "Span[T]"]:
        """Move matching elements to the front by swapping; order is not kept."""
        values = self._values()
        low, high = 0, len(values)
        while True:
            while low < high and predicate(values[low]):
                low += 1
            while low < high and not predicate(values[high - 1]):
                high -= 1
            if low >= high:
                break
            values[low], values[high - 1] = values[high - 1], values[low]
            low += 1
            high -= 1
        self._assign(values)
        split = self._start + low
        return Span(self._data, self._start, low), Span(self._data, split, self._size - low)

    def reverse(self) -> "Span[T]":
        self._assign(self._values()[::-1])
        return self