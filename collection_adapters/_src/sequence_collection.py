from collections.abc import Iterator, Sequence
from typing import Any, Final, Generic, TypeVar

from .random_access_collection import RandomAccessCollection

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="SequenceCollection")


class SequenceCollection(RandomAccessCollection[int, T_co], Generic[T_co]):
    """Random access over a builtin sequence, using integer positions."""
    _sequence: Final[Sequence[T_co]]

    __slots__ = {
        "_sequence":
            "The wrapped sequence.",
    }

    def __init__(self: Self, sequence: Sequence[T_co], /) -> None:
        if not isinstance(sequence, Sequence):
            raise TypeError(f"expected a sequence, got {sequence!r}")
        self._sequence = sequence

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, SequenceCollection):
            return self._sequence == other._sequence
        return NotImplemented

    def __hash__(self: Self, /) -> int:
        return hash(self._sequence)

    def __iter__(self: Self, /) -> Iterator[T_co]:
        return iter(self._sequence)

    def __len__(self: Self, /) -> int:
        return len(self._sequence)

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({self._sequence!r})"

    def __reversed__(self: Self, /) -> Iterator[T_co]:
        return reversed(self._sequence)

    def distance(self: Self, start: int, end: int, /) -> int:
        len_ = len(self._sequence)
        if not (0 <= start <= len_ and 0 <= end <= len_):
            raise IndexError(f"positions {start!r} and {end!r} are out of range for a sequence of length {len_}")
        return end - start

    def element_at(self: Self, index: int, /) -> T_co:
        if not 0 <= index < len(self._sequence):
            raise IndexError(f"position {index!r} is out of range")
        return self._sequence[index]

    @property
    def end_index(self: Self, /) -> int:
        return len(self._sequence)

    def index_offset(self: Self, index: int, distance: int, /) -> int:
        result = index + distance
        if not 0 <= result <= len(self._sequence):
            raise IndexError(f"offsetting position {index!r} by {distance!r} is out of range")
        return result

    @property
    def sequence(self: Self, /) -> Sequence[T_co]:
        return self._sequence

    @property
    def start_index(self: Self, /) -> int:
        return 0
