"""DirectionalSpan - Bidirectional cursor over a section of a sequence.

The section is [start_index, last_index] where start_index may be greater than
last_index, in which case the cursor walks downward. The direction is fixed at
construction. Besides walking, the span hands out inclusive slices relative to
the cursor, which is how ways get trimmed:

    items:   0 1 2 3 4 5 6 7
    span:        2 ....... 6     start_index=6, last_index=2 (walks 6, 5, 4, 3, 2)
    cursor:          4
    near_slice()     -> [4, 5, 6]   start .. cursor
    far_slice(True)  -> [2, 3]      cursor (excluded) .. last

Slices are always returned in sequence order, never reversed.
"""

from enum import Enum
from typing import Generic, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")


class SpanSide(Enum):
    """Which part of a span survives a trim, relative to the cursor."""

    NEAR = "near"  # start_index .. cursor
    FAR = "far"  # cursor .. last_index


class DirectionalSpan(Generic[T]):
    """Cursor walking a fixed section of a sequence in one direction.

    Attributes:
        items: The underlying sequence (not copied, never modified)
        start_index: First index of the walk
        last_index: Last index of the walk
        step: +1 when walking up, -1 when walking down
        current_index: Cursor position, None before first() is called

    Example:
        span = DirectionalSpan(items=[0, 1, 2, 3, 4, 5, 6, 7], start_index=6, last_index=2)
        [item for _, item in span.walk()]  # [6, 5, 4, 3, 2]
    """

    def __init__(self, items: Sequence[T], start_index: int, last_index: int) -> None:
        self.items = items
        self.start_index = start_index
        self.last_index = last_index
        self.step = 1 if start_index <= last_index else -1
        self.current_index: Optional[int] = None

    @property
    def low_index(self) -> int:
        return min(self.start_index, self.last_index)

    @property
    def high_index(self) -> int:
        return max(self.start_index, self.last_index)

    def is_valid(self) -> bool:
        """True if the cursor sits inside the section."""
        return self.current_index is not None and self.low_index <= self.current_index <= self.high_index

    def current(self) -> Optional[T]:
        """Item under the cursor, or None when the cursor is outside the section."""
        if not self.is_valid():
            return None
        return self.items[self.current_index]

    def first(self) -> Optional[T]:
        """Move the cursor to start_index and return that item."""
        self.current_index = self.start_index
        return self.current()

    def next(self) -> Optional[T]:
        """Advance one step and return the new item.

        Once the cursor steps outside the section it stays invalid: further
        calls return None without moving it.
        """
        if not self.is_valid():
            return None
        self.current_index += self.step
        return self.current()

    def seek(self, index: int) -> Optional[T]:
        """Place the cursor at index and return the item there (None if outside)."""
        self.current_index = index
        return self.current()

    def walk(self) -> Iterator[tuple[int, T]]:
        """Yield (index, item) from start_index to last_index.

        Restarts the cursor; on exhaustion the cursor is left invalid.
        """
        item = self.first()
        while self.is_valid():
            yield self.current_index, item
            item = self.next()

    def slice(self, begin_index: int, end_index: int) -> list[T]:
        """Inclusive sub-range between two indices, whichever is larger."""
        low, high = min(begin_index, end_index), max(begin_index, end_index)
        return list(self.items[low : high + 1])

    def _directed_slice(self, from_index: int, to_index: int) -> list[T]:
        # Empty when to_index lies behind from_index in walk direction
        if (to_index - from_index) * self.step < 0:
            return []
        return self.slice(from_index, to_index)

    def near_slice(self, exclude_current: bool = False) -> list[T]:
        """Items from start_index up to the cursor.

        Args:
            exclude_current: If True, stop one step short of the cursor.

        Returns:
            Slice in sequence order. The whole sequence when the cursor is invalid.
        """
        if not self.is_valid():
            return list(self.items)
        end = self.current_index - self.step if exclude_current else self.current_index
        return self._directed_slice(self.start_index, end)

    def far_slice(self, exclude_current: bool = False) -> list[T]:
        """Items from the cursor up to last_index.

        Args:
            exclude_current: If True, start one step past the cursor.

        Returns:
            Slice in sequence order. The whole sequence when the cursor is invalid.
        """
        if not self.is_valid():
            return list(self.items)
        begin = self.current_index + self.step if exclude_current else self.current_index
        return self._directed_slice(begin, self.last_index)

    def __repr__(self) -> str:
        return (
            f"DirectionalSpan(start={self.start_index}, last={self.last_index}, "
            f"step={self.step:+d}, current={self.current_index})"
        )
