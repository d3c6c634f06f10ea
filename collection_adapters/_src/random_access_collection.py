from abc import abstractmethod
from collections.abc import Sequence
from typing import Generic, Optional, TypeVar, overload

from .bidirectional_collection import BidirectionalCollection
from .comparable import SupportsRichHashableComparison
from .forward_collection import ForwardCollection

IT = TypeVar("IT", bound=SupportsRichHashableComparison)
T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="RandomAccessCollection")


class RandomAccessCollection(BidirectionalCollection[IT, T_co], Sequence[T_co], Generic[IT, T_co]):
    """
    A bidirectional collection whose positions may be offset and
    measured in O(1). Subclasses provide `index_offset` and `distance`,
    which must raise an `IndexError` for positions outside of
    `[start_index, end_index]`.

    Random access collections are also sequences, so they may be indexed
    and sliced by integer offsets from the start.
    """

    __slots__ = ()

    __contains__ = ForwardCollection.__contains__
    __iter__ = ForwardCollection.__iter__

    @overload
    def __getitem__(self: Self, index: int, /) -> T_co: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> Sequence[T_co]: ...

    def __getitem__(self, index, /):
        if isinstance(index, slice):
            range_ = range(len(self))[index]
            if range_.step != 1:
                return [self.element_at(self.index_at(i)) for i in range_]
            # Empty slices collapse onto their start.
            lower = self.index_at(range_.start)
            upper = self.index_at(max(range_.start, range_.stop))
            return self.slice_between(lower, upper)
        index = range(len(self))[index]
        return self.element_at(self.index_offset(self.start_index, index))

    def __len__(self: Self, /) -> int:
        return self.distance(self.start_index, self.end_index)

    @abstractmethod
    def distance(self: Self, start: IT, end: IT, /) -> int:
        raise NotImplementedError("distance is a required method for random access collections")

    def index_after(self: Self, index: IT, /) -> IT:
        return self.index_offset(index, 1)

    def index_at(self: Self, offset: int, /) -> IT:
        """Converts an offset from the start into a position, allowing the end."""
        if not 0 <= offset <= len(self):
            raise IndexError(f"offset {offset!r} is out of range for {type(self).__name__} of length {len(self)}")
        return self.index_offset(self.start_index, offset)

    def index_before(self: Self, index: IT, /) -> IT:
        return self.index_offset(index, -1)

    @abstractmethod
    def index_offset(self: Self, index: IT, distance: int, /) -> IT:
        raise NotImplementedError("index_offset is a required method for random access collections")

    def index_offset_limited(self: Self, index: IT, distance: int, limit: IT, /) -> Optional[IT]:
        to_limit = self.distance(index, limit)
        if 0 <= to_limit < distance or distance < to_limit <= 0:
            return None
        return self.index_offset(index, distance)
