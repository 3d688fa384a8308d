from collections.abc import Callable
from typing import Any, Literal, NewType, Optional, Protocol, TypeVar, Union, runtime_checkable

import pytest

from tagwire.type_checks import is_assignable, is_runtime_class


class Animal:
    pass


class Dog(Animal):
    pass


class Greeter(Protocol):
    def greet(self) -> str: ...


@runtime_checkable
class Closeable(Protocol):
    def close(self) -> None: ...


class File:
    def close(self) -> None:
        pass


UserId = NewType("UserId", int)
BoundT = TypeVar("BoundT", bound=Animal)
FreeT = TypeVar("FreeT")


@pytest.mark.parametrize(
    ("value", "annotation", "expected"),
    [
        (Dog(), Animal, True),
        (Animal(), Dog, False),
        (Dog(), Any, True),
        ("text", object, True),
        (Dog(), Optional[Animal], True),
        (Dog(), Animal | None, True),
        ("text", Union[int, str], True),
        (1.5, int | str, False),
        ([1, 2], list[int], True),
        ((1, 2), list[int], False),
        ({"a": 1}, dict[str, int], True),
        (len, Callable[[Any], int], True),
        ("prod", Literal["prod", "dev"], True),
        ("qa", Literal["prod", "dev"], False),
        (7, UserId, True),
        ("7", UserId, False),
        (Dog(), BoundT, True),
        ("text", BoundT, False),
        ("text", FreeT, True),
        (File(), Closeable, True),
        (Dog(), Closeable, False),
        (Dog(), Greeter, True),
        (Dog(), "Unresolved", True),
        (None, None, True),
        (Dog(), type(None), False),
        (Dog, type[Animal], True),
    ],
)
def test_is_assignable(value: object, annotation: Any, expected: bool) -> None:
    assert is_assignable(value, annotation) is expected


def test_is_runtime_class() -> None:
    assert is_runtime_class(Dog)
    assert not is_runtime_class(list[int])
    assert not is_runtime_class(Dog())
