from abc import abstractmethod
from collections.abc import Iterator, Reversible
from typing import Generic, Optional, TypeVar

from .comparable import SupportsRichHashableComparison
from .forward_collection import ForwardCollection

IT = TypeVar("IT", bound=SupportsRichHashableComparison)
T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="BidirectionalCollection")


class BidirectionalCollection(Reversible[T_co], ForwardCollection[IT, T_co], Generic[IT, T_co]):
    """
    A forward collection whose positions may also be retreated.
    Subclasses additionally provide `index_before`.
    """

    __slots__ = ()

    def __reversed__(self: Self, /) -> Iterator[T_co]:
        index = self.end_index
        start = self.start_index
        while index != start:
            index = self.index_before(index)
            yield self.element_at(index)

    def distance(self: Self, start: IT, end: IT, /) -> int:
        if start <= end:
            return super().distance(start, end)
        count = 0
        while start != end:
            start = self.index_before(start)
            count -= 1
        return count

    @abstractmethod
    def index_before(self: Self, index: IT, /) -> IT:
        raise NotImplementedError("index_before is a required method for bidirectional collections")

    def index_offset(self: Self, index: IT, distance: int, /) -> IT:
        if distance >= 0:
            return super().index_offset(index, distance)
        for _ in range(-distance):
            index = self.index_before(index)
        return index

    def index_offset_limited(self: Self, index: IT, distance: int, limit: IT, /) -> Optional[IT]:
        if distance >= 0:
            return super().index_offset_limited(index, distance, limit)
        for _ in range(-distance):
            if index == limit:
                return None
            index = self.index_before(index)
        return index

    @property
    def last_index(self: Self, /) -> IT:
        if self.is_empty():
            raise IndexError(f"{type(self).__name__} is empty")
        return self.index_before(self.end_index)
