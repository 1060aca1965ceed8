from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from functools import partial
from typing import Any, overload

from pydantic import ConfigDict, ValidationError

from typedfn.errors import InvalidArgument, UnknownType
from typedfn.internal import wrap_exc
from typedfn.internal.models import Model
from typedfn.internal.utils import NoCopyMixin

TypePredicate = Callable[[Any], bool]

UNKNOWN_TYPE_NAME = "unknown"


def _isinstance(value: Any, *, classinfo: type | tuple[type, ...]) -> bool:
    return isinstance(value, classinfo)


class TypeEntry(Model):
    """TypeEntry names a predicate that decides whether a value is of that type."""

    model_config = ConfigDict(extra="ignore")

    name: str
    test: TypePredicate

    # Predicates may be unhashable callable objects, so only the name is hashed.
    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def from_class(cls, name: str, classinfo: type | tuple[type, ...]) -> TypeEntry:
        """Generate a TypeEntry accepting instances of the given class(es)."""
        return cls(name=name, test=partial(_isinstance, classinfo=classinfo))

    @classmethod
    def validate_entry(cls, entry: Any) -> TypeEntry:
        if isinstance(entry, cls):
            return entry
        with wrap_exc(
            ValidationError,
            prefix="Object with properties {name: string, test: function} expected",
            into=InvalidArgument,
        ):
            return cls.model_validate(entry, from_attributes=not isinstance(entry, Mapping))


class TypeRegistry(Sequence[TypeEntry], NoCopyMixin):
    """TypeRegistry holds the named type predicates used to compile signatures.

    Entries are kept in registration order and are never removed. Registering a name again adds a
    second entry; lookups return the first one. Names in `ignore` are dropped from parameter
    unions when signatures are compiled.
    """

    def __init__(
        self, entries: Iterable[TypeEntry | Mapping[str, Any]] = (), *, ignore: Iterable[str] = ()
    ) -> None:
        self._entries = [TypeEntry.validate_entry(entry) for entry in entries]
        self.ignore: list[str] = list(ignore)

    @classmethod
    def with_builtins(cls, *, ignore: Iterable[str] = ()) -> TypeRegistry:
        from typedfn.types.python import builtin_types

        return cls(builtin_types(), ignore=ignore)

    @overload
    def __getitem__(self, index: int) -> TypeEntry: ...

    @overload
    def __getitem__(self, index: slice) -> list[TypeEntry]: ...

    def __getitem__(self, index: int | slice) -> TypeEntry | list[TypeEntry]:
        return self._entries[index]

    def __iter__(self) -> Iterator[TypeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names!r}, ignore={self.ignore!r})"

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def register(self, entry: TypeEntry | Mapping[str, Any]) -> TypeEntry:
        entry = TypeEntry.validate_entry(entry)
        self._entries.append(entry)
        logging.debug(f"Registered type {entry.name!r}")
        return entry

    def is_ignored(self, name: str) -> bool:
        return name in self.ignore

    def find_test(self, name: str) -> TypePredicate:
        """Return the predicate of the first type registered as `name`.

        Raises `UnknownType` (with a hint when a type matches `name` ignoring case) if no type is
        registered under that name.
        """
        for entry in self._entries:
            if entry.name == name:
                return entry.test
        hint = next(
            (entry.name for entry in self._entries if entry.name.lower() == name.lower()), None
        )
        raise UnknownType(name, hint)

    def find_name(self, value: Any) -> str:
        """Return the name of the first registered type accepting `value`."""
        return next(
            (entry.name for entry in self._entries if entry.test(value)), UNKNOWN_TYPE_NAME
        )
