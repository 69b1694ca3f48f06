"""Borrowed and owned text.

Values produced by the parser usually refer to a slice of the expression
they were parsed from. `Borrowed` keeps that relationship explicit: it is a
view of `source[start:end]`. `Owned` holds its own copy. Both implement the
small `Text` capability so callers never have to care which one they hold,
while `into_owned()` makes the cost of detaching visible at the call site.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple


class Text(ABC):
    """Capability shared by borrowed and owned text."""

    @abstractmethod
    def as_str(self) -> str:
        """Return the text as a plain string."""
        pass

    @abstractmethod
    def is_borrowed(self) -> bool:
        """Return True if this text is a view into another string."""
        pass

    @abstractmethod
    def into_owned(self) -> "Owned":
        """Return an owned copy; owned text returns itself."""
        pass

    @abstractmethod
    def slice(self, start: int, end: Optional[int] = None) -> "Text":
        """Return the sub-span start:end, borrowing if this text borrows."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0

    def __str__(self) -> str:
        return self.as_str()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Text):
            return self.as_str() == other.as_str()
        if isinstance(other, str):
            return self.as_str() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_str())


class Borrowed(Text):
    """A view of `source[start:end]`."""

    def __init__(self, source: str, start: int = 0, end: Optional[int] = None):
        if end is None:
            end = len(source)
        if not 0 <= start <= end <= len(source):
            raise ValueError(
                f"span {start}:{end} out of range for source of length {len(source)}"
            )
        self._source = source
        self._start = start
        self._end = end

    @property
    def source(self) -> str:
        return self._source

    @property
    def span(self) -> Tuple[int, int]:
        return (self._start, self._end)

    def as_str(self) -> str:
        return self._source[self._start:self._end]

    def is_borrowed(self) -> bool:
        return True

    def into_owned(self) -> "Owned":
        return Owned(self.as_str())

    def slice(self, start: int, end: Optional[int] = None) -> "Borrowed":
        """Borrow a sub-span, with offsets relative to this view."""
        length = len(self)
        if end is None:
            end = length
        if not 0 <= start <= end <= length:
            raise ValueError(f"span {start}:{end} out of range for text of length {length}")
        return Borrowed(self._source, self._start + start, self._start + end)

    def __len__(self) -> int:
        return self._end - self._start

    def __repr__(self) -> str:
        return f"Borrowed({self.as_str()!r})"


class Owned(Text):
    """Text that owns its data."""

    def __init__(self, value: str):
        self._value = str(value)

    def as_str(self) -> str:
        return self._value

    def is_borrowed(self) -> bool:
        return False

    def into_owned(self) -> "Owned":
        return self

    def slice(self, start: int, end: Optional[int] = None) -> "Owned":
        length = len(self)
        if end is None:
            end = length
        if not 0 <= start <= end <= length:
            raise ValueError(f"span {start}:{end} out of range for text of length {length}")
        return Owned(self._value[start:end])

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return f"Owned({self._value!r})"
