from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Generic, TypeVar

from typing_extensions import Self

from assocarray.obj import Printable as _Printable

K = TypeVar("K")
V = TypeVar("V")


class ICounted(Sized, ABC):
    """``ICounted`` is a marker interface for types can produce their length in
    constant time."""

    __slots__ = ()

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError()


class ILookup(Generic[K, V], ABC):
    """``ILookup`` types allow accessing contained values by a key."""

    __slots__ = ()

    @abstractmethod
    def get(self, key: K) -> V:
        raise NotImplementedError()

    @abstractmethod
    def has_key(self, key: K) -> bool:
        raise NotImplementedError()


class IPrintable(_Printable):
    """``IPrintable`` types customize their display representation via
    :py:func:`assocarray.obj.arepr`."""

    __slots__ = ()


class IAssociativeArray(ICounted, ILookup[K, V], IPrintable):
    """``IAssociativeArray`` types are mutable collections of key/value pairs
    with unique keys.

    Mutation happens in place; use :py:meth:`clone` to obtain an independent
    copy."""

    __slots__ = ()

    @abstractmethod
    def set(self, key: K, value: V) -> None:
        raise NotImplementedError()

    @abstractmethod
    def remove(self, key: K) -> None:
        raise NotImplementedError()

    @abstractmethod
    def clone(self) -> Self:
        raise NotImplementedError()
