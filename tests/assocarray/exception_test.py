import pytest

from assocarray.exception import (
    AssociativeArrayException,
    InvalidKeyError,
    KeyNotFoundError,
)


class TestInvalidKeyError:
    def test_hierarchy(self):
        assert issubclass(InvalidKeyError, AssociativeArrayException)
        assert issubclass(InvalidKeyError, ValueError)

    def test_message(self):
        assert "Associative array keys may not be None" == str(InvalidKeyError())
        assert "bad key" == str(InvalidKeyError("bad key"))

    def test_message_field(self):
        e = InvalidKeyError()
        assert "Associative array keys may not be None" == e.message
        assert (e.message,) == e.args
        assert "bad key" == InvalidKeyError(message="bad key").message

    def test_repr(self):
        assert "assocarray.exception.InvalidKeyError('bad key')" == repr(
            InvalidKeyError("bad key")
        )


class TestKeyNotFoundError:
    def test_hierarchy(self):
        assert issubclass(KeyNotFoundError, AssociativeArrayException)
        assert issubclass(KeyNotFoundError, KeyError)

    def test_key(self):
        e = KeyNotFoundError("a")
        assert "a" == e.key
        assert ("a",) == e.args

    def test_str(self):
        assert "Key not found: 'a'" == str(KeyNotFoundError("a"))
        assert "Key not found: None" == str(KeyNotFoundError(None))

    def test_repr(self):
        assert "assocarray.exception.KeyNotFoundError(3)" == repr(KeyNotFoundError(3))

    def test_caught_as_key_error(self):
        with pytest.raises(KeyError):
            raise KeyNotFoundError("a")
