from abc import ABC, abstractmethod
from collections.abc import Iterable
from functools import singledispatch
from itertools import islice
from typing import Any, Callable, Union

from typing_extensions import TypedDict, Unpack

PrintCountSetting = Union[bool, int, None]

SURPASSED_PRINT_LENGTH = "..."

PRINT_LENGTH: PrintCountSetting = None
PRINT_SEPARATOR = ", "

EMPTY_REPR = "{}"


class PrintSettings(TypedDict, total=False):
    print_length: PrintCountSetting


class Printable(ABC):
    """Abstract base class for objects which would like to customize their
    ``__str__`` and Python ``__repr__`` representation.

    .. note::

       Callers should use :py:class:`assocarray.interfaces.IPrintable` as their
       main interface. This interface is defined here so it may be used in
       ``isinstance`` checks below without a circular dependency."""

    __slots__ = ()

    def __repr__(self):
        return self.arepr()

    def __str__(self):
        return self.arepr()

    @abstractmethod
    def _arepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        """Private representation method. Callers (including object internal
        callers) should not call this method directly, but instead should use
        the module function :py:meth:`arepr` ."""
        raise NotImplementedError()

    def arepr(self, **kwargs: Unpack[PrintSettings]) -> str:
        """Return the display representation of this object."""
        return arepr(self, **kwargs)


def pairs_repr(
    entries: Callable[[], Iterable[Any]],
    start: str = "{ ",
    end: str = " }",
    **kwargs: Unpack[PrintSettings],
) -> str:
    """Produce a representation of an associative collection, bookended with the
    start and end string supplied. The entries argument must be a callable which
    will produce the pairs of the collection in display order.

    An empty collection is always rendered as ``{}``. If ``print_length`` is an
    integer, at most that many pairs will be rendered, followed by ``...`` if any
    pairs were omitted."""
    print_length = kwargs.get("print_length", PRINT_LENGTH)

    trailer = []
    if isinstance(print_length, int) and not isinstance(print_length, bool):
        items = list(islice(entries(), print_length + 1))
        if len(items) > print_length:
            items.pop()
            trailer.append(SURPASSED_PRINT_LENGTH)
    else:
        items = list(entries())

    if not items and not trailer:
        return EMPTY_REPR

    reprs = [arepr(item, **kwargs) for item in items]
    return f"{start}{PRINT_SEPARATOR.join(reprs + trailer)}{end}"


# pylint: disable=unused-argument
@singledispatch
def arepr(o: Any, print_length: PrintCountSetting = PRINT_LENGTH) -> str:
    """Return the display representation of an object.

    Permissible keyword arguments are:
    - print_length: the number of entries in a collection which will be printed,
                    or no limit if bound to a logical falsey value (default: nil)

    Objects which are not :py:class:`Printable` are rendered with ``str``, so
    string keys and values appear without quotation marks."""
    return str(o)


@arepr.register(Printable)
def _arepr_printable(o: Printable, print_length: PrintCountSetting = PRINT_LENGTH) -> str:
    return o._arepr(print_length=print_length)
