"""
Lazy adapters over ordered collections, including overlapping sliding
windows and chains of two collections. Adapters never copy or modify
their bases, and support random access, reverse traversal, or only
forward traversal depending on what their bases support. Written in
Python 3, this library also includes annotations/type-hints and abstract
base classes for creating custom collections the adapters can wrap.
"""
from . import abc
from ._src.as_collection import as_collection
from ._src.chain import BidirectionalChain, Chain, ChainIndex, RandomAccessChain, chained
from ._src.collection_slice import BidirectionalCollectionSlice, CollectionSlice, RandomAccessCollectionSlice
from ._src.iterable_collection import Cursor, IterableCollection, ReversibleCollection
from ._src.sequence_collection import SequenceCollection
from ._src.sliding_windows import BidirectionalSlidingWindows, RandomAccessSlidingWindows, SlidingWindows, WindowIndex, sliding_windows

__all__ = [
    "BidirectionalChain",
    "BidirectionalCollectionSlice",
    "BidirectionalSlidingWindows",
    "Chain",
    "ChainIndex",
    "CollectionSlice",
    "Cursor",
    "IterableCollection",
    "RandomAccessChain",
    "RandomAccessCollectionSlice",
    "RandomAccessSlidingWindows",
    "ReversibleCollection",
    "SequenceCollection",
    "SlidingWindows",
    "WindowIndex",
    "abc",
    "as_collection",
    "chained",
    "sliding_windows",
]

__version__ = "0.1.0"
