from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from pydantic import ConfigDict, Field, ValidationError

from typedfn.errors import InvalidArgument
from typedfn.internal import wrap_exc
from typedfn.internal.models import Model
from typedfn.internal.utils import NoCopyMixin


class Conversion(Model):
    """Conversion declares how to convert a value of one named type into another.

    Type names are not checked against any type registry. Dispatchers never apply conversions
    while matching; they are metadata for callers to look up.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    convert: Callable[[Any], Any]

    def __hash__(self) -> int:
        return hash((self.from_, self.to))

    @classmethod
    def validate_entry(cls, entry: Any) -> Conversion:
        if isinstance(entry, cls):
            return entry
        with wrap_exc(
            ValidationError,
            prefix="Object with properties {from: string, to: string, convert: function} expected",
            into=InvalidArgument,
        ):
            return cls.model_validate(entry, from_attributes=not isinstance(entry, Mapping))


class ConversionRegistry(Sequence[Conversion], NoCopyMixin):
    """ConversionRegistry holds the declared conversions in registration order."""

    def __init__(self, entries: Iterable[Conversion | Mapping[str, Any]] = ()) -> None:
        self._entries = [Conversion.validate_entry(entry) for entry in entries]

    @overload
    def __getitem__(self, index: int) -> Conversion: ...

    @overload
    def __getitem__(self, index: slice) -> list[Conversion]: ...

    def __getitem__(self, index: int | slice) -> Conversion | list[Conversion]:
        return self._entries[index]

    def __iter__(self) -> Iterator[Conversion]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        pairs = [f"{entry.from_} -> {entry.to}" for entry in self._entries]
        return f"{type(self).__name__}({pairs!r})"

    def register(self, entry: Conversion | Mapping[str, Any]) -> Conversion:
        entry = Conversion.validate_entry(entry)
        self._entries.append(entry)
        logging.debug(f"Registered conversion {entry.from_!r} -> {entry.to!r}")
        return entry

    def find(self, from_: str, to: str) -> Conversion | None:
        """Return the first conversion registered from `from_` to `to`, if any."""
        return next(
            (entry for entry in self._entries if entry.from_ == from_ and entry.to == to), None
        )
