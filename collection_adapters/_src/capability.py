from typing import Type

from .bidirectional_collection import BidirectionalCollection
from .forward_collection import ForwardCollection
from .random_access_collection import RandomAccessCollection

__all__ = ["capability"]


def capability(*collections: ForwardCollection) -> Type[ForwardCollection]:
    """
    Returns the strongest collection class satisfied by every collection,
    which is the capability shared by an adapter built on top of them.
    """
    if all(isinstance(collection, RandomAccessCollection) for collection in collections):
        return RandomAccessCollection
    elif all(isinstance(collection, BidirectionalCollection) for collection in collections):
        return BidirectionalCollection
    elif all(isinstance(collection, ForwardCollection) for collection in collections):
        return ForwardCollection
    else:
        raise TypeError(f"expected forward collections, got {collections!r}")
