from typing import Any, Final, Generic, TypeVar

from .bidirectional_collection import BidirectionalCollection
from .capability import capability
from .comparable import SupportsRichHashableComparison
from .forward_collection import ForwardCollection
from .random_access_collection import RandomAccessCollection

__all__ = [
    "BidirectionalCollectionSlice",
    "CollectionSlice",
    "RandomAccessCollectionSlice",
    "collection_slice",
]

IT = TypeVar("IT", bound=SupportsRichHashableComparison)
T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="CollectionSlice")


class CollectionSlice(ForwardCollection[IT, T_co], Generic[IT, T_co]):
    """
    A view of the positions `[lower, upper)` of a base collection.

    The view borrows the base, so it reflects the base's elements and
    shares its positions. No elements are copied.
    """
    _base: Final[ForwardCollection[IT, T_co]]
    _lower: Final[IT]
    _upper: Final[IT]

    __slots__ = {
        "_base":
            "The collection being viewed.",
        "_lower":
            "The first position in the view.",
        "_upper":
            "The position after the last element in the view.",
    }

    def __init__(self: Self, base: ForwardCollection[IT, T_co], lower: IT, upper: IT, /) -> None:
        assert isinstance(base, ForwardCollection)
        self._base = base
        self._lower = lower
        self._upper = upper

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, CollectionSlice):
            return NotImplemented
        elif len(self) != len(other):
            return False
        return all(x is y or x == y for x, y in zip(self, other))

    def __hash__(self: Self, /) -> int:
        return hash((*self,))

    def __len__(self: Self, /) -> int:
        return self._base.distance(self._lower, self._upper)

    def __repr__(self: Self, /) -> str:
        return f"{self._base!r}[{self._lower!r}:{self._upper!r}]"

    @property
    def base(self: Self, /) -> ForwardCollection[IT, T_co]:
        return self._base

    def distance(self: Self, start: IT, end: IT, /) -> int:
        return self._base.distance(start, end)

    def element_at(self: Self, index: IT, /) -> T_co:
        if not self._lower <= index < self._upper:
            raise IndexError(f"position {index!r} is out of range for the slice")
        return self._base.element_at(index)

    @property
    def end_index(self: Self, /) -> IT:
        return self._upper

    def index_after(self: Self, index: IT, /) -> IT:
        if not self._lower <= index < self._upper:
            raise IndexError("advancing past the end position")
        return self._base.index_after(index)

    @property
    def start_index(self: Self, /) -> IT:
        return self._lower


class BidirectionalCollectionSlice(BidirectionalCollection[IT, T_co], CollectionSlice[IT, T_co], Generic[IT, T_co]):

    __slots__ = ()

    distance = CollectionSlice.distance

    def index_before(self: Self, index: IT, /) -> IT:
        if not self._lower < index <= self._upper:
            raise IndexError("retreating past the start position")
        return self._base.index_before(index)


class RandomAccessCollectionSlice(RandomAccessCollection[IT, T_co], BidirectionalCollectionSlice[IT, T_co], Generic[IT, T_co]):

    __slots__ = ()

    distance = CollectionSlice.distance

    def index_offset(self: Self, index: IT, distance: int, /) -> IT:
        result = self._base.index_offset(index, distance)
        if not self._lower <= result <= self._upper:
            raise IndexError(f"offsetting position {index!r} by {distance!r} is out of range for the slice")
        return result


_SLICE_TYPES = {
    ForwardCollection: CollectionSlice,
    BidirectionalCollection: BidirectionalCollectionSlice,
    RandomAccessCollection: RandomAccessCollectionSlice,
}


def collection_slice(base: ForwardCollection[IT, T_co], lower: IT, upper: IT, /) -> CollectionSlice[IT, T_co]:
    return _SLICE_TYPES[capability(base)](base, lower, upper)
