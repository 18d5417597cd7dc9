import logging
from collections.abc import Iterable, Iterator, Mapping
from itertools import islice
from typing import Optional, TypeVar, Union

from pyrsistent import PVector, pvector
from typing_extensions import Unpack

from assocarray.exception import InvalidKeyError, KeyNotFoundError
from assocarray.interfaces import IAssociativeArray
from assocarray.logconfig import TRACE
from assocarray.obj import PrintSettings, pairs_repr
from assocarray.pair import KVPair
from assocarray.util import partition

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 4


class AssociativeArray(IAssociativeArray[K, V]):
    """An associative array backed by a linear, unsorted array of key/value pairs.

    Keys are compared by equality (``==``), never by hash, so any value other than
    ``None`` may be used as a key. Every operation scans the live pairs in order,
    so lookups, updates and removals all run in linear time.

    Pairs are stored in insertion order, except that removing a key moves the last
    pair into the removed slot rather than shifting the remaining pairs left. That
    order is observable through :py:meth:`entries` and the string representation.

    Storage starts at ``capacity`` slots and doubles whenever an insertion would
    overflow it. Storage never shrinks."""

    __slots__ = ("_pairs", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(
                f"Associative array capacity must be positive; got {capacity}"
            )
        self._pairs: list[Optional[KVPair[K, V]]] = [None] * capacity
        self._size = 0

    def __contains__(self, key):
        return self.has_key(key)

    def __copy__(self):
        return self.clone()

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, AssociativeArray):
            return NotImplemented
        if self._size != other._size:
            return False
        for pair in self._live_pairs():
            i = other.find_index(pair.key)
            if i is None or other._pairs[i].value != pair.value:  # type: ignore[union-attr]
                return False
        return True

    def __len__(self):
        return self._size

    def _arepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        return pairs_repr(self._live_pairs, **kwargs)

    def _live_pairs(self) -> "Iterator[KVPair[K, V]]":
        return islice(self._pairs, self._size)  # type: ignore[arg-type]

    @property
    def capacity(self) -> int:
        return len(self._pairs)

    def size(self) -> int:
        return self._size

    def find_index(self, key: K) -> Optional[int]:
        """Return the index of the live pair whose key is equal to ``key``, or
        ``None`` if no live pair has an equal key.

        The scan never reaches beyond the live pairs, so the ``None`` key (which is
        never stored) is simply not found."""
        logger.log(TRACE, "Scanning %d pairs for key %r", self._size, key)
        if key is None:
            return None
        for i, pair in enumerate(self._live_pairs()):
            if pair.key == key:
                return i
        return None

    def expand(self) -> None:
        """Double the length of the underlying storage, preserving every slot."""
        capacity = len(self._pairs)
        logger.debug(
            "Expanding associative array storage from %d to %d slots",
            capacity,
            capacity * 2,
        )
        self._pairs = self._pairs + [None] * capacity

    def _append(self, pair: "KVPair[K, V]") -> None:
        if self._size == len(self._pairs):
            self.expand()
        self._pairs[self._size] = pair
        self._size += 1

    def set(self, key: K, value: V) -> None:
        """Associate ``value`` with ``key``, replacing the value of any existing pair
        with an equal key in place.

        Raise :py:class:`assocarray.exception.InvalidKeyError` if ``key`` is
        ``None``."""
        if key is None:
            raise InvalidKeyError()

        i = self.find_index(key)
        if i is not None:
            self._pairs[i].value = value  # type: ignore[union-attr]
            return

        self._append(KVPair(key, value))

    def get(self, key: K) -> V:
        """Return the value associated with ``key``.

        Raise :py:class:`assocarray.exception.KeyNotFoundError` if ``key`` is
        ``None`` or no pair has an equal key."""
        i = self.find_index(key)
        if i is None:
            raise KeyNotFoundError(key)
        return self._pairs[i].value  # type: ignore[union-attr]

    def has_key(self, key: K) -> bool:
        return self.find_index(key) is not None

    def remove(self, key: K) -> None:
        """Remove the pair associated with ``key``, if there is one.

        The last live pair is moved into the vacated slot, so removal changes the
        relative order of the remaining pairs. Removing a key which does not appear
        in the array does nothing."""
        i = self.find_index(key)
        if i is None:
            return

        last = self._size - 1
        self._pairs[i] = self._pairs[last]
        self._pairs[last] = None
        self._size = last

    def clone(self) -> "AssociativeArray[K, V]":
        """Return an independent copy of this array.

        Each live pair is copied, so later updates to either array never affect the
        other. The copy starts at the default capacity and grows as pairs are
        added."""
        new: AssociativeArray[K, V] = AssociativeArray()
        for pair in self._live_pairs():
            new._append(pair.copy())
        return new

    def entries(self) -> "PVector[tuple[K, V]]":
        """Return an immutable snapshot of the live ``(key, value)`` pairs in
        storage order."""
        return pvector((pair.key, pair.value) for pair in self._live_pairs())


def associative_array(*kvs) -> AssociativeArray:
    """Creates a new associative array from alternating keys and values."""
    if len(kvs) % 2 != 0:
        raise ValueError("associative_array requires an even number of arguments")
    arr: AssociativeArray = AssociativeArray()
    for k, v in partition(kvs, 2):
        arr.set(k, v)
    return arr


def from_pairs(
    members: Union[Mapping[K, V], Iterable[tuple[K, V]]]
) -> AssociativeArray[K, V]:
    """Creates a new associative array from a mapping or an iterable of
    ``(key, value)`` pairs.

    Later pairs with a key equal to an earlier one replace its value."""
    if isinstance(members, Mapping):
        members = members.items()
    arr: AssociativeArray[K, V] = AssociativeArray()
    for k, v in members:
        arr.set(k, v)
    return arr
