from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def partition(coll: Sequence[T], n: int) -> Iterable[tuple[T, ...]]:
    """Partition `coll` into groups of size `n`.

    A trailing group shorter than `n` is yielded as-is; callers which require
    complete groups must check for it."""
    assert n > 0
    start = 0
    stop = n
    while stop <= len(coll):
        yield tuple(coll[start:stop])
        start += n
        stop += n
    if start < len(coll) < stop:
        yield tuple(coll[start:])
