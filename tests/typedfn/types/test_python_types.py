import datetime
import pickle
import re
from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest

from typedfn.types import TypeRegistry
from typedfn.types.python import builtin_types, is_object, undefined


class Callable_:
    def __call__(self) -> None:
        pass  # pragma: no cover


class Plain:
    pass


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "number"),
        (1.5, "number"),
        (Decimal("1.5"), "number"),
        (Fraction(1, 3), "number"),
        (True, "boolean"),
        (False, "boolean"),
        ("", "string"),
        ("abc", "string"),
        (len, "Function"),
        (lambda: None, "Function"),
        (Plain, "Function"),
        (Callable_(), "Function"),
        ([], "Array"),
        ((1, 2), "Array"),
        (datetime.date(2024, 1, 1), "Date"),
        (datetime.datetime(2024, 1, 1, 12), "Date"),
        (re.compile("a+"), "RegExp"),
        ({}, "Object"),
        ({"a": 1}, "Object"),
        (set(), "Object"),
        (Plain(), "Object"),
        (None, "null"),
        (undefined, "undefined"),
        (1j, "any"),
    ],
)
def test_builtin_type_names(value: Any, expected: str) -> None:
    assert TypeRegistry(builtin_types()).find_name(value) == expected


def test_builtin_types_order() -> None:
    names = [entry.name for entry in builtin_types()]
    assert names[-1] == "any"
    assert names.index("number") < names.index("boolean")


def test_builtin_types_fresh() -> None:
    assert builtin_types() is not builtin_types()


def test_is_object() -> None:
    # Like compound values in general, containers and dates are objects too (though they are named
    # by their more specific types first).
    assert is_object([])
    assert is_object(datetime.date(2024, 1, 1))
    for value in (None, undefined, 1, 1.5, 1j, "a", True, len):
        assert not is_object(value)


def test_undefined() -> None:
    assert repr(undefined) == "undefined"
    assert not undefined
    assert undefined is not None
    assert type(undefined)() is undefined
    assert pickle.loads(pickle.dumps(undefined)) is undefined
