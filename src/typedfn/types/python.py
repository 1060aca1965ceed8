from __future__ import annotations

import datetime
import numbers
import re
from decimal import Decimal
from typing import Any, Final

from typedfn.internal.utils import always
from typedfn.types import TypeEntry


class _Undefined:
    """Marks a value that was never provided (distinct from `None`)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __reduce__(self) -> str:
        return "undefined"


undefined: Final = _Undefined()


# NOTE: issubclass(bool, int) is True, so booleans are excluded from numbers explicitly.
def is_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_function(value: Any) -> bool:
    return callable(value)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


# datetime.datetime subclasses datetime.date, so both are Dates.
def is_date(value: Any) -> bool:
    return isinstance(value, datetime.date)


def is_regexp(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_object(value: Any) -> bool:
    """Match compound values: anything but None, undefined, scalars and callables."""
    return not (
        value is None
        or value is undefined
        or isinstance(value, (numbers.Number, str, bool))
        or callable(value)
    )


def is_null(value: Any) -> bool:
    return value is None


def is_undefined(value: Any) -> bool:
    return value is undefined


def builtin_types() -> list[TypeEntry]:
    """Return the standard type entries, in registration order.

    The order matters: the first type accepting a value names it in error messages.
    """
    return [
        TypeEntry(name="number", test=is_number),
        TypeEntry(name="string", test=is_string),
        TypeEntry(name="boolean", test=is_boolean),
        TypeEntry(name="Function", test=is_function),
        TypeEntry(name="Array", test=is_array),
        TypeEntry(name="Date", test=is_date),
        TypeEntry(name="RegExp", test=is_regexp),
        TypeEntry(name="Object", test=is_object),
        TypeEntry(name="null", test=is_null),
        TypeEntry(name="undefined", test=is_undefined),
        TypeEntry(name="any", test=always),
    ]
