from collections.abc import Collection, Reversible, Sequence
from typing import Any, TypeVar

from .forward_collection import ForwardCollection
from .iterable_collection import IterableCollection, ReversibleCollection
from .sequence_collection import SequenceCollection

__all__ = ["as_collection"]

T = TypeVar("T")


def as_collection(collection: Collection[T], /) -> ForwardCollection[Any, T]:
    """
    Wraps a builtin collection with the strongest capability it supports:

        >>> as_collection("abc")           # random access
        SequenceCollection('abc')
        >>> as_collection({"a": 1})        # bidirectional
        ReversibleCollection({'a': 1})
        >>> as_collection(frozenset("a"))  # forward only
        IterableCollection(frozenset({'a'}))

    Forward collections are returned unchanged.
    """
    if isinstance(collection, ForwardCollection):
        return collection
    elif isinstance(collection, Sequence):
        return SequenceCollection(collection)
    elif isinstance(collection, Collection) and isinstance(collection, Reversible):
        return ReversibleCollection(collection)
    elif isinstance(collection, Collection):
        return IterableCollection(collection)
    else:
        raise TypeError(f"expected a collection, got {collection!r}")
