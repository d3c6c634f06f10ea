import operator
from collections import deque
from collections.abc import Collection, Iterable, Iterator
from itertools import islice
from typing import Any, Final, Generic, Optional, TypeVar, Union

from .as_collection import as_collection
from .bidirectional_collection import BidirectionalCollection
from .capability import capability
from .collection_slice import CollectionSlice
from .comparable import SupportsRichHashableComparison
from .forward_collection import ForwardCollection
from .key_comparable import KeyComparable
from .random_access_collection import RandomAccessCollection

__all__ = [
    "BidirectionalSlidingWindows",
    "RandomAccessSlidingWindows",
    "SlidingWindows",
    "WindowIndex",
    "sliding_windows",
]

IT = TypeVar("IT", bound=SupportsRichHashableComparison)
T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="SlidingWindows")


class WindowIndex(KeyComparable[IT], Generic[IT]):
    """
    The bounds of a window in the base collection. Windows are ordered
    and identified by their lower bound alone. The end position has both
    bounds at the end of the base.
    """
    _lower: Final[IT]
    _upper: Final[IT]

    __slots__ = {
        "_lower":
            "The position of the first element of the window.",
        "_upper":
            "The position after the last element of the window.",
    }

    def __init__(self, lower: IT, upper: IT, /) -> None:
        self._lower = lower
        self._upper = upper

    def __key__(self, /) -> IT:
        return self._lower

    def __repr__(self, /) -> str:
        return f"{type(self).__name__}({self._lower!r}, {self._upper!r})"

    @property
    def lower(self, /) -> IT:
        return self._lower

    @property
    def upper(self, /) -> IT:
        return self._upper


class SlidingWindows(ForwardCollection[WindowIndex[IT], CollectionSlice[IT, T_co]], Generic[IT, T_co]):
    """
    All overlapping windows of `size` consecutive elements of a base
    collection. Each window is a view of the base, so accessing a window
    is O(1) and moving to the next window only moves both bounds by one.

    If the base is shorter than `size`, there are no windows.
    """
    _base: Final[ForwardCollection[IT, T_co]]
    _first_lower: Final[IT]
    _first_upper: Final[Optional[IT]]
    _size: Final[int]

    __slots__ = {
        "_base":
            "The collection being windowed.",
        "_first_lower":
            "The start position of the base, shared by every traversal.",
        "_first_upper":
            "The upper bound of the first window, or None if there are no windows.",
        "_size":
            "The number of elements in each window.",
    }

    def __init__(self: Self, base: ForwardCollection[IT, T_co], size: int, /) -> None:
        assert isinstance(base, ForwardCollection)
        size = operator.index(size)
        if size <= 0:
            raise ValueError(f"sliding windows size must be greater than zero, got {size!r}")
        self._base = base
        self._size = size
        self._first_lower = base.start_index
        self._first_upper = base.index_offset_limited(self._first_lower, size, base.end_index)

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, SlidingWindows):
            return self._size == other._size and self._base == other._base
        return NotImplemented

    def __hash__(self: Self, /) -> int:
        return hash((self._base, self._size))

    def __len__(self: Self, /) -> int:
        if self._first_upper is None:
            return 0
        return len(self._base) - self._size + 1

    def __repr__(self: Self, /) -> str:
        return f"sliding_windows({self._base!r}, {self._size!r})"

    @property
    def base(self: Self, /) -> ForwardCollection[IT, T_co]:
        return self._base

    def element_at(self: Self, index: WindowIndex[IT], /) -> CollectionSlice[IT, T_co]:
        if index._lower == index._upper:
            raise IndexError("sliding windows index is out of range")
        return self._base.slice_between(index._lower, index._upper)

    @property
    def end_index(self: Self, /) -> WindowIndex[IT]:
        end = self._base.end_index
        return WindowIndex(end, end)

    def index_after(self: Self, index: WindowIndex[IT], /) -> WindowIndex[IT]:
        if index._lower == index._upper:
            raise IndexError("advancing past the end position")
        elif index._upper == self._base.end_index:
            return self.end_index
        return WindowIndex(self._base.index_after(index._lower), self._base.index_after(index._upper))

    @property
    def size(self: Self, /) -> int:
        return self._size

    @property
    def start_index(self: Self, /) -> WindowIndex[IT]:
        if self._first_upper is None:
            return self.end_index
        return WindowIndex(self._first_lower, self._first_upper)


class BidirectionalSlidingWindows(BidirectionalCollection[WindowIndex[IT], CollectionSlice[IT, T_co]], SlidingWindows[IT, T_co], Generic[IT, T_co]):

    __slots__ = ()

    def index_before(self: Self, index: WindowIndex[IT], /) -> WindowIndex[IT]:
        if index == self.start_index:
            raise IndexError("retreating past the start position")
        elif index._lower == index._upper:
            # The lower bound of the last window is `size` before the end.
            return WindowIndex(self._base.index_offset(index._upper, -self._size), index._upper)
        return WindowIndex(self._base.index_before(index._lower), self._base.index_before(index._upper))


class RandomAccessSlidingWindows(RandomAccessCollection[WindowIndex[IT], CollectionSlice[IT, T_co]], BidirectionalSlidingWindows[IT, T_co], Generic[IT, T_co]):

    __slots__ = ()

    __len__ = SlidingWindows.__len__

    def _ordinal(self: Self, index: WindowIndex[IT], /) -> int:
        if index._lower == index._upper:
            return len(self)
        return self._base.distance(self._first_lower, index._lower)

    def distance(self: Self, start: WindowIndex[IT], end: WindowIndex[IT], /) -> int:
        return self._ordinal(end) - self._ordinal(start)

    index_after = SlidingWindows.index_after
    index_before = BidirectionalSlidingWindows.index_before

    def index_offset(self: Self, index: WindowIndex[IT], distance: int, /) -> WindowIndex[IT]:
        len_ = len(self)
        ordinal = self._ordinal(index) + distance
        if not 0 <= ordinal <= len_:
            raise IndexError(f"offsetting {index!r} by {distance!r} is out of range for {len_} windows")
        elif ordinal == len_:
            return self.end_index
        elif index._lower == index._upper:
            lower = self._base.index_offset(index._upper, distance - self._size + 1)
            return WindowIndex(lower, self._base.index_offset(lower, self._size))
        # Both bounds move together.
        return WindowIndex(
            self._base.index_offset(index._lower, distance),
            self._base.index_offset(index._upper, distance),
        )


_WINDOWS_TYPES = {
    ForwardCollection: SlidingWindows,
    BidirectionalCollection: BidirectionalSlidingWindows,
    RandomAccessCollection: RandomAccessSlidingWindows,
}


def _iter_windows(iterable: Iterable[T], size: int, /) -> Iterator[tuple[T, ...]]:
    iterator = iter(iterable)
    window = deque(islice(iterator, size - 1), maxlen=size)
    for element in iterator:
        window.append(element)
        yield (*window,)


def sliding_windows(base: Union[Collection[T], Iterable[T]], size: int, /) -> Union[SlidingWindows[Any, T], Iterator[tuple[T, ...]]]:
    """
    Returns the overlapping windows of `size` elements of `base`.

    Collections produce a lazy collection of window views with the same
    capability as the base:

        >>> ["".join(window) for window in sliding_windows("ABCDE", 2)]
        ['AB', 'BC', 'CD', 'DE']

    Any other iterable, including unbounded iterators, produces an
    iterator of tuples pulled from the iterable one element at a time.
    """
    size = operator.index(size)
    if size <= 0:
        raise ValueError(f"sliding windows size must be greater than zero, got {size!r}")
    if isinstance(base, Collection):
        base = as_collection(base)
        return _WINDOWS_TYPES[capability(base)](base, size)
    elif isinstance(base, Iterable):
        return _iter_windows(base, size)
    else:
        raise TypeError(f"expected an iterable, got {base!r}")
