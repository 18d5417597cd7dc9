import pytest

from assocarray.array import AssociativeArray


@pytest.fixture
def empty() -> AssociativeArray:
    return AssociativeArray()


@pytest.fixture
def abc() -> AssociativeArray[str, int]:
    arr: AssociativeArray[str, int] = AssociativeArray()
    arr.set("a", 1)
    arr.set("b", 2)
    arr.set("c", 3)
    return arr
