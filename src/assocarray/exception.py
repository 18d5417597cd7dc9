from typing import Any

import attr


class AssociativeArrayException(Exception):
    pass


@attr.define(repr=False)
class InvalidKeyError(AssociativeArrayException, ValueError):
    """Raised when attempting to associate a value with the ``None`` key."""

    message: str = "Associative array keys may not be None"

    def __repr__(self):
        return f"assocarray.exception.InvalidKeyError({self.message!r})"


@attr.define(repr=False, str=False)
class KeyNotFoundError(AssociativeArrayException, KeyError):
    """Raised when looking up a key which has no live entry."""

    key: Any

    def __repr__(self):
        return f"assocarray.exception.KeyNotFoundError({self.key!r})"

    def __str__(self):
        return f"Key not found: {self.key!r}"
