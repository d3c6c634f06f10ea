from abc import ABC, abstractmethod
from collections.abc import Collection, Iterator
from typing import Any, Generic, Optional, TypeVar

import collection_adapters._src as src
from .comparable import SupportsRichHashableComparison

IT = TypeVar("IT", bound=SupportsRichHashableComparison)
T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="ForwardCollection")


class ForwardCollection(Collection[T_co], ABC, Generic[IT, T_co]):
    """
    A collection addressed by positions which may only be advanced.

    Subclasses provide `start_index`, `end_index`, `index_after`, and
    `element_at`. Every other operation is derived by walking from one
    position to the next, which is O(n) unless a subclass overrides it.
    """

    __slots__ = ()

    def __contains__(self: Self, element: Any, /) -> bool:
        return any(x is element or x == element for x in self)

    def __iter__(self: Self, /) -> Iterator[T_co]:
        index = self.start_index
        end = self.end_index
        while index != end:
            yield self.element_at(index)
            index = self.index_after(index)

    def __len__(self: Self, /) -> int:
        return self.distance(self.start_index, self.end_index)

    def chained(self: Self, other: Collection[T_co], /) -> "src.chain.Chain[Any, Any, T_co]":
        return src.chain.chained(self, other)

    def distance(self: Self, start: IT, end: IT, /) -> int:
        count = 0
        while start != end:
            start = self.index_after(start)
            count += 1
        return count

    @abstractmethod
    def element_at(self: Self, index: IT, /) -> T_co:
        raise NotImplementedError("element_at is a required method for forward collections")

    @property
    @abstractmethod
    def end_index(self: Self, /) -> IT:
        raise NotImplementedError("end_index is a required property for forward collections")

    @abstractmethod
    def index_after(self: Self, index: IT, /) -> IT:
        raise NotImplementedError("index_after is a required method for forward collections")

    def index_offset(self: Self, index: IT, distance: int, /) -> IT:
        if distance < 0:
            raise ValueError(f"only bidirectional collections can be offset by a negative amount, got {distance!r}")
        for _ in range(distance):
            index = self.index_after(index)
        return index

    def index_offset_limited(self: Self, index: IT, distance: int, limit: IT, /) -> Optional[IT]:
        """
        Offsets the index by the distance, unless the limit would be
        passed first, in which case `None` is returned. Landing exactly
        on the limit returns the limit.
        """
        if distance < 0:
            raise ValueError(f"only bidirectional collections can be offset by a negative amount, got {distance!r}")
        for _ in range(distance):
            if index == limit:
                return None
            index = self.index_after(index)
        return index

    def indices(self: Self, /) -> Iterator[IT]:
        index = self.start_index
        end = self.end_index
        while index != end:
            yield index
            index = self.index_after(index)

    def is_empty(self: Self, /) -> bool:
        return self.start_index == self.end_index

    def slice_between(self: Self, lower: IT, upper: IT, /) -> "src.collection_slice.CollectionSlice[IT, T_co]":
        return src.collection_slice.collection_slice(self, lower, upper)

    def sliding_windows(self: Self, size: int, /) -> "src.sliding_windows.SlidingWindows[Any, T_co]":
        return src.sliding_windows.sliding_windows(self, size)

    @property
    @abstractmethod
    def start_index(self: Self, /) -> IT:
        raise NotImplementedError("start_index is a required property for forward collections")
