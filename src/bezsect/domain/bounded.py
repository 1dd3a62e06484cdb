"""Fixed-capacity result container.

Every solving and intersection operation reports into a ``BoundedList``
whose capacity is picked by the caller. Once full, further values are
dropped silently.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar, overload

from bezsect.exceptions import InvalidCapacityError

T = TypeVar("T")


class BoundedList(Sequence[T]):
    """An ordered sequence that never grows past ``capacity``.

    Pushing into a full list is a no-op rather than an error, which bounds
    memory for degenerate inputs such as coincident curves.

    Example:
        >>> values = BoundedList(2, [1.0, 2.0, 3.0])
        >>> values.to_list()
        [1.0, 2.0]
        >>> values.push(4.0)
        False
    """

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        if capacity < 0:
            raise InvalidCapacityError(capacity)
        self._capacity = capacity
        self._items: list[T] = []
        self.extend(items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def remaining(self) -> int:
        """Number of values that can still be pushed."""
        return self._capacity - len(self._items)

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def push(self, item: T) -> bool:
        """Append ``item`` unless the list is full.

        Returns:
            True if the item was stored, False if it was dropped
        """
        if self.is_full():
            return False
        self._items.append(item)
        return True

    def extend(self, items: Iterable[T]) -> None:
        """Append items in order, stopping at the first one that is dropped."""
        for item in items:
            if not self.push(item):
                break

    def to_list(self) -> list[T]:
        return list(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, BoundedList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundedList(capacity={self._capacity}, items={self._items!r})"
