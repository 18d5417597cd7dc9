from typing import Generic, TypeVar

import attr
from typing_extensions import Unpack

from assocarray.interfaces import IPrintable
from assocarray.obj import PrintSettings, arepr

K = TypeVar("K")
V = TypeVar("V")


@attr.define(repr=False, str=False)
class KVPair(IPrintable, Generic[K, V]):
    """A single key/value association stored in an associative array.

    Pairs are mutable so that updating an existing key replaces the value in
    place."""

    key: K
    value: V

    def _arepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        return f"{arepr(self.key, **kwargs)}: {arepr(self.value, **kwargs)}"

    def copy(self) -> "KVPair[K, V]":
        return KVPair(self.key, self.value)
