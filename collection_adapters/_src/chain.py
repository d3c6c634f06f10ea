from collections.abc import Collection, Iterable, Iterator
from itertools import chain
from typing import Any, Final, Generic, TypeVar, Union

from .as_collection import as_collection
from .bidirectional_collection import BidirectionalCollection
from .capability import capability
from .comparable import SupportsRichHashableComparison
from .forward_collection import ForwardCollection
from .key_comparable import KeyComparable
from .random_access_collection import RandomAccessCollection

__all__ = [
    "BidirectionalChain",
    "Chain",
    "ChainIndex",
    "RandomAccessChain",
    "chained",
]

IT1 = TypeVar("IT1", bound=SupportsRichHashableComparison)
IT2 = TypeVar("IT2", bound=SupportsRichHashableComparison)
T = TypeVar("T")

Self = TypeVar("Self", bound="Chain")


class ChainIndex(KeyComparable[tuple], Generic[IT1, IT2]):
    """
    A position in either the first or the second base of a chain.
    Positions in the first base come before positions in the second.

    The end of the first base is never stored as a position in the first
    base. It is always the start of the second base instead, so the seam
    has exactly one representation.
    """
    _index: Final[Union[IT1, IT2]]
    _in_second: Final[bool]

    __slots__ = {
        "_index":
            "The position within the base.",
        "_in_second":
            "True if the position is in the second base.",
    }

    def __init__(self, index: Union[IT1, IT2], in_second: bool, /) -> None:
        self._index = index
        self._in_second = in_second

    def __key__(self, /) -> tuple:
        return (self._in_second, self._index)

    def __repr__(self, /) -> str:
        return f"{type(self).__name__}.{'second' if self._in_second else 'first'}({self._index!r})"

    @classmethod
    def first(cls, index: IT1, /) -> "ChainIndex[IT1, IT2]":
        return cls(index, False)

    @property
    def index(self, /) -> Union[IT1, IT2]:
        return self._index

    @property
    def in_second(self, /) -> bool:
        return self._in_second

    @classmethod
    def second(cls, index: IT2, /) -> "ChainIndex[IT1, IT2]":
        return cls(index, True)


class Chain(ForwardCollection[ChainIndex[IT1, IT2], T], Generic[IT1, IT2, T]):
    """
    The elements of one collection followed by the elements of another,
    without copying either. The chain supports whatever traversal both
    collections support.
    """
    _base1: Final[ForwardCollection[IT1, T]]
    _base2: Final[ForwardCollection[IT2, T]]

    __slots__ = {
        "_base1":
            "The collection whose elements come first.",
        "_base2":
            "The collection whose elements come second.",
    }

    def __init__(self: Self, base1: ForwardCollection[IT1, T], base2: ForwardCollection[IT2, T], /) -> None:
        assert isinstance(base1, ForwardCollection)
        assert isinstance(base2, ForwardCollection)
        self._base1 = base1
        self._base2 = base2

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, Chain):
            return self._base1 == other._base1 and self._base2 == other._base2
        return NotImplemented

    def __hash__(self: Self, /) -> int:
        return hash((self._base1, self._base2))

    def __iter__(self: Self, /) -> Iterator[T]:
        return chain(self._base1, self._base2)

    def __len__(self: Self, /) -> int:
        return len(self._base1) + len(self._base2)

    def __repr__(self: Self, /) -> str:
        return f"chained({self._base1!r}, {self._base2!r})"

    def _first(self: Self, index: IT1, /) -> ChainIndex[IT1, IT2]:
        if index == self._base1.end_index:
            return ChainIndex.second(self._base2.start_index)
        return ChainIndex.first(index)

    @property
    def base1(self: Self, /) -> ForwardCollection[IT1, T]:
        return self._base1

    @property
    def base2(self: Self, /) -> ForwardCollection[IT2, T]:
        return self._base2

    def element_at(self: Self, index: ChainIndex[IT1, IT2], /) -> T:
        if index._in_second:
            return self._base2.element_at(index._index)
        return self._base1.element_at(index._index)

    @property
    def end_index(self: Self, /) -> ChainIndex[IT1, IT2]:
        return ChainIndex.second(self._base2.end_index)

    def index_after(self: Self, index: ChainIndex[IT1, IT2], /) -> ChainIndex[IT1, IT2]:
        if index._in_second:
            if index._index == self._base2.end_index:
                raise IndexError("advancing past the end position")
            return ChainIndex.second(self._base2.index_after(index._index))
        return self._first(self._base1.index_after(index._index))

    @property
    def start_index(self: Self, /) -> ChainIndex[IT1, IT2]:
        return self._first(self._base1.start_index)


class BidirectionalChain(BidirectionalCollection[ChainIndex[IT1, IT2], T], Chain[IT1, IT2, T], Generic[IT1, IT2, T]):

    __slots__ = ()

    def __reversed__(self: Self, /) -> Iterator[T]:
        return chain(reversed(self._base2), reversed(self._base1))

    def index_before(self: Self, index: ChainIndex[IT1, IT2], /) -> ChainIndex[IT1, IT2]:
        if not index._in_second:
            return ChainIndex.first(self._base1.index_before(index._index))
        elif index._index != self._base2.start_index:
            return ChainIndex.second(self._base2.index_before(index._index))
        elif self._base1.is_empty():
            raise IndexError("retreating past the start position")
        # Crossing the seam backwards.
        return ChainIndex.first(self._base1.index_before(self._base1.end_index))


class RandomAccessChain(RandomAccessCollection[ChainIndex[IT1, IT2], T], BidirectionalChain[IT1, IT2, T], Generic[IT1, IT2, T]):
    """
    Offsets and distances are measured within a single base, or as the
    distance to the seam plus the distance from the seam, so both are
    O(1) regardless of the lengths of the bases.
    """

    __slots__ = ()

    __iter__ = Chain.__iter__
    __len__ = Chain.__len__
    index_after = Chain.index_after
    index_before = BidirectionalChain.index_before

    def _offset_from_seam(self: Self, distance: int, /) -> ChainIndex[IT1, IT2]:
        if distance >= 0:
            return ChainIndex.second(self._base2.index_offset(self._base2.start_index, distance))
        return ChainIndex.first(self._base1.index_offset(self._base1.end_index, distance))

    def _ordinal(self: Self, index: ChainIndex[IT1, IT2], /) -> int:
        """The signed distance from the seam to the index."""
        if index._in_second:
            return self._base2.distance(self._base2.start_index, index._index)
        return -self._base1.distance(index._index, self._base1.end_index)

    def distance(self: Self, start: ChainIndex[IT1, IT2], end: ChainIndex[IT1, IT2], /) -> int:
        if start._in_second == end._in_second:
            base = self._base2 if start._in_second else self._base1
            return base.distance(start._index, end._index)
        return self._ordinal(end) - self._ordinal(start)

    def index_offset(self: Self, index: ChainIndex[IT1, IT2], distance: int, /) -> ChainIndex[IT1, IT2]:
        if distance == 0:
            return index
        ordinal = self._ordinal(index) + distance
        if ordinal < -len(self._base1) or ordinal > len(self._base2):
            raise IndexError(f"offsetting {index!r} by {distance!r} is out of range for a chain of length {len(self)}")
        elif index._in_second and ordinal >= 0:
            return ChainIndex.second(self._base2.index_offset(index._index, distance))
        elif not index._in_second and ordinal < 0:
            return ChainIndex.first(self._base1.index_offset(index._index, distance))
        # Crossing the seam.
        return self._offset_from_seam(ordinal)


_CHAIN_TYPES = {
    ForwardCollection: Chain,
    BidirectionalCollection: BidirectionalChain,
    RandomAccessCollection: RandomAccessChain,
}


def chained(base1: Union[Collection[T], Iterable[T]], base2: Union[Collection[T], Iterable[T]], /) -> Union[Chain[Any, Any, T], Iterator[T]]:
    """
    Returns the elements of `base1` followed by the elements of `base2`.

    Two collections produce a lazy collection whose capability is the
    weakest of the two:

        >>> c = chained("abc", [1, 2])
        >>> c[3], len(c)
        (1, 5)

    If either is only an iterable, such as an unbounded iterator, a lazy
    iterator is returned instead.
    """
    if isinstance(base1, Collection) and isinstance(base2, Collection):
        base1 = as_collection(base1)
        base2 = as_collection(base2)
        return _CHAIN_TYPES[capability(base1, base2)](base1, base2)
    elif isinstance(base1, Iterable) and isinstance(base2, Iterable):
        return chain(base1, base2)
    else:
        raise TypeError(f"expected iterables, got {base1!r} and {base2!r}")
