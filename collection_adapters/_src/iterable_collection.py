import threading
from collections.abc import Collection, Iterator, Reversible
from typing import Any, Final, Generic, Optional, TypeVar

from .bidirectional_collection import BidirectionalCollection
from .forward_collection import ForwardCollection
from .key_comparable import KeyComparable

__all__ = ["Cursor", "IterableCollection", "ReversibleCollection"]

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="IterableCollection")

_MISSING: Final = object()


class Cursor(KeyComparable[int], Generic[T_co]):
    """
    A position in a collection which can only be iterated.

    Cursors are linked lazily: the neighbour of a cursor is pulled from
    the iterator it was created with only when first requested, and
    is then remembered. Cursors created walking forward always know
    their previous cursor, and cursors created walking backward always
    know their next cursor, so only one link is ever missing.
    """
    _element: Any
    _iterator: Optional[Iterator[T_co]]
    _next: Optional["Cursor[T_co]"]
    _ordinal: Final[int]
    _previous: Optional["Cursor[T_co]"]

    __slots__ = {
        "_element":
            "The element at this position, or a sentinel at the end.",
        "_iterator":
            "The iterator used to pull the missing neighbour.",
        "_next":
            "The following cursor, once known.",
        "_ordinal":
            "The number of elements before this position.",
        "_previous":
            "The preceding cursor, once known.",
    }

    def __init__(
        self,
        ordinal: int,
        element: Any,
        iterator: Optional[Iterator[T_co]],
        /,
        *,
        next: "Optional[Cursor[T_co]]" = None,
        previous: "Optional[Cursor[T_co]]" = None,
    ) -> None:
        self._ordinal = ordinal
        self._element = element
        self._iterator = iterator
        self._next = next
        self._previous = previous

    def __key__(self, /) -> int:
        return self._ordinal

    def __repr__(self, /) -> str:
        return f"{type(self).__name__}({self._ordinal!r})"

    @property
    def ordinal(self, /) -> int:
        return self._ordinal


class IterableCollection(ForwardCollection[Cursor[T_co], T_co], Generic[T_co]):
    """Forward-only positions over a sized iterable, such as a set."""
    _collection: Final[Collection[T_co]]
    _lock: Final[threading.Lock]

    __slots__ = {
        "_collection":
            "The wrapped collection.",
        "_lock":
            "Serializes linking cursors, which may be shared between traversals.",
    }

    def __init__(self: Self, collection: Collection[T_co], /) -> None:
        if not isinstance(collection, Collection):
            raise TypeError(f"expected a collection, got {collection!r}")
        self._collection = collection
        self._lock = threading.Lock()

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, IterableCollection):
            return self._collection == other._collection
        return NotImplemented

    def __hash__(self: Self, /) -> int:
        return hash(self._collection)

    def __iter__(self: Self, /) -> Iterator[T_co]:
        return iter(self._collection)

    def __len__(self: Self, /) -> int:
        return len(self._collection)

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({self._collection!r})"

    @property
    def collection(self: Self, /) -> Collection[T_co]:
        return self._collection

    def distance(self: Self, start: Cursor[T_co], end: Cursor[T_co], /) -> int:
        return end._ordinal - start._ordinal

    def element_at(self: Self, index: Cursor[T_co], /) -> T_co:
        if index._element is _MISSING:
            raise IndexError(f"cannot access the element at the end position")
        return index._element

    @property
    def end_index(self: Self, /) -> Cursor[T_co]:
        return Cursor(len(self._collection), _MISSING, None)

    def index_after(self: Self, index: Cursor[T_co], /) -> Cursor[T_co]:
        if index._ordinal >= len(self._collection):
            raise IndexError("advancing past the end position")
        if index._next is None:
            with self._lock:
                if index._next is None:
                    index._next = self._pull_after(index._iterator, index._ordinal + 1, index)
                    index._iterator = None
        return index._next

    @staticmethod
    def _pull_after(iterator: Iterator[T_co], ordinal: int, previous: Optional[Cursor[T_co]], /) -> Cursor[T_co]:
        try:
            element = next(iterator)
        except StopIteration:
            return Cursor(ordinal, _MISSING, None, previous=previous)
        return Cursor(ordinal, element, iterator, previous=previous)

    @property
    def start_index(self: Self, /) -> Cursor[T_co]:
        return self._pull_after(iter(self._collection), 0, None)


class ReversibleCollection(BidirectionalCollection[Cursor[T_co], T_co], IterableCollection[T_co], Generic[T_co]):
    """Bidirectional positions over a reversible collection, such as a dict."""

    __slots__ = ()

    def __init__(self: Self, collection: Collection[T_co], /) -> None:
        if not isinstance(collection, Reversible):
            raise TypeError(f"expected a reversible collection, got {collection!r}")
        super().__init__(collection)

    def __reversed__(self: Self, /) -> Iterator[T_co]:
        return reversed(self._collection)

    distance = IterableCollection.distance

    def index_before(self: Self, index: Cursor[T_co], /) -> Cursor[T_co]:
        if index._ordinal <= 0:
            raise IndexError("retreating past the start position")
        if index._previous is None:
            with self._lock:
                if index._previous is None:
                    iterator = index._iterator
                    if iterator is None:
                        iterator = reversed(self._collection)
                    index._previous = Cursor(index._ordinal - 1, next(iterator), iterator, next=index)
                    index._iterator = None
        return index._previous
