from ._src.bidirectional_collection import BidirectionalCollection
from ._src.capability import capability
from ._src.comparable import SupportsRichHashableComparison
from ._src.forward_collection import ForwardCollection
from ._src.key_comparable import KeyComparable
from ._src.random_access_collection import RandomAccessCollection

__all__ = [
    "BidirectionalCollection",
    "ForwardCollection",
    "KeyComparable",
    "RandomAccessCollection",
    "SupportsRichHashableComparison",
    "capability",
]
