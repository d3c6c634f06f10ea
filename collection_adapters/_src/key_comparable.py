from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .comparable import SupportsRichHashableComparison

__all__ = ["KeyComparable"]

Self = TypeVar("Self", bound="KeyComparable")
T_co = TypeVar("T_co", bound=SupportsRichHashableComparison, covariant=True)


class KeyComparable(ABC, Generic[T_co]):
    """
    Positions are compared through their `__key__`. Only positions of
    the same type are comparable with each other.
    """

    __slots__ = ()

    def __hash__(self: Self, /) -> int:
        return hash(type(self).__key__(self))

    @abstractmethod
    def __key__(self: Self, /) -> T_co:
        raise NotImplementedError("__key__ is a required method for key comparable classes")

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self).__key__(self) == type(other).__key__(other)

    def __ge__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self).__key__(self) >= type(other).__key__(other)

    def __gt__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self).__key__(self) > type(other).__key__(other)

    def __le__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self).__key__(self) <= type(other).__key__(other)

    def __lt__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self).__key__(self) < type(other).__key__(other)

    def __ne__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self).__key__(self) != type(other).__key__(other)
