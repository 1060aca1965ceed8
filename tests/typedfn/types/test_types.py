import copy
import logging
from dataclasses import dataclass
from decimal import Decimal
from types import SimpleNamespace
from typing import Any

import pytest

from typedfn.errors import InvalidArgument, UnknownType
from typedfn.types import TypeEntry, TypeRegistry


def is_even(value: Any) -> bool:
    return isinstance(value, int) and value % 2 == 0


def test_TypeEntry() -> None:
    entry = TypeEntry(name="even", test=is_even)
    assert entry.name == "even"
    assert entry.test(2)
    assert not entry.test(3)


@dataclass
class AtLeast:
    limit: int

    def __call__(self, value: Any) -> bool:
        return isinstance(value, int) and value >= self.limit


def test_TypeEntry_unhashable_test(types: TypeRegistry) -> None:
    # Dataclasses with eq=True set __hash__ to None.
    entry = TypeEntry(name="big", test=AtLeast(10))
    assert entry.test(10)
    assert not entry.test(9)
    assert hash(entry) == hash(TypeEntry(name="big", test=AtLeast(10)))

    assert types.register({"name": "big", "test": AtLeast(10)}).test(12)
    assert types.find_name(12) == "number"
    assert types.find_test("big")(12)


def test_TypeEntry_from_class() -> None:
    entry = TypeEntry.from_class("Decimal", Decimal)
    assert entry.name == "Decimal"
    assert entry.test(Decimal("1.5"))
    assert not entry.test(1.5)

    numeric = TypeEntry.from_class("numeric", (int, Decimal))
    assert numeric.test(1)
    assert numeric.test(Decimal(1))


@pytest.mark.parametrize(
    "entry",
    [
        {"name": "even", "test": is_even},
        {"name": "even", "test": is_even, "description": "Even integers"},
        SimpleNamespace(name="even", test=is_even),
        SimpleNamespace(name="even", test=is_even, description="Even integers"),
        TypeEntry(name="even", test=is_even),
    ],
)
def test_TypeEntry_validate_entry(entry: Any) -> None:
    validated = TypeEntry.validate_entry(entry)
    assert isinstance(validated, TypeEntry)
    assert validated.name == "even"
    assert validated.test is is_even


@pytest.mark.parametrize(
    "entry",
    [
        None,
        5,
        {},
        {"name": "even"},
        {"test": is_even},
        {"name": 5, "test": is_even},
        {"name": "even", "test": "is_even"},
    ],
)
def test_TypeEntry_validate_entry_invalid(entry: Any) -> None:
    with pytest.raises(
        InvalidArgument, match=r"Object with properties \{name: string, test: function\} expected"
    ):
        TypeEntry.validate_entry(entry)


def test_TypeRegistry(types: TypeRegistry) -> None:
    assert types.names == [
        "number",
        "string",
        "boolean",
        "Function",
        "Array",
        "Date",
        "RegExp",
        "Object",
        "null",
        "undefined",
        "any",
    ]
    assert len(types) == 11
    assert types[0].name == "number"
    assert [entry.name for entry in types[-2:]] == ["undefined", "any"]
    assert types.ignore == []
    assert repr(types).startswith("TypeRegistry(['number', 'string'")


def test_TypeRegistry_register(types: TypeRegistry, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG):
        entry = types.register({"name": "even", "test": is_even})
    assert "Registered type 'even'" in caplog.text
    assert types[-1] is entry
    assert types.find_test("even") is is_even

    with pytest.raises(InvalidArgument):
        types.register({"name": "odd"})
    assert types[-1] is entry


def test_TypeRegistry_find_test(types: TypeRegistry) -> None:
    assert types.find_test("number")(1)
    assert not types.find_test("number")(True)
    assert types.find_test("any")(object())


def test_TypeRegistry_find_test_shadowing() -> None:
    types = TypeRegistry([TypeEntry(name="even", test=is_even)])
    types.register(TypeEntry(name="even", test=lambda value: False))
    # The first registration wins lookups.
    assert types.find_test("even") is is_even
    assert types.names == ["even", "even"]


def test_TypeRegistry_find_test_unknown(types: TypeRegistry) -> None:
    with pytest.raises(UnknownType, match='^Unknown type "Strnig"$') as exc:
        types.find_test("Strnig")
    assert exc.value.name == "Strnig"
    assert exc.value.hint is None

    with pytest.raises(UnknownType, match='Unknown type "String". Did you mean "string"?') as exc:
        types.find_test("String")
    assert exc.value.hint == "string"

    with pytest.raises(UnknownType, match='Did you mean "Function"?'):
        types.find_test("function")


def test_TypeRegistry_find_name(types: TypeRegistry) -> None:
    assert types.find_name(1) == "number"
    assert types.find_name(True) == "boolean"
    assert types.find_name("a") == "string"
    assert types.find_name([1]) == "Array"
    assert types.find_name({}) == "Object"
    assert types.find_name(None) == "null"

    assert TypeRegistry().find_name(1) == "unknown"
    assert TypeRegistry([TypeEntry(name="even", test=is_even)]).find_name(3) == "unknown"


def test_TypeRegistry_ignore() -> None:
    types = TypeRegistry.with_builtins(ignore=["Date"])
    assert types.is_ignored("Date")
    assert not types.is_ignored("number")
    types.ignore.append("number")
    assert types.is_ignored("number")


def test_TypeRegistry_no_copy(types: TypeRegistry) -> None:
    assert copy.deepcopy(types) is types
