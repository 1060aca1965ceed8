from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Union

from pydantic import PrivateAttr

from typedfn.conversions import Conversion, ConversionRegistry
from typedfn.dispatchers import Dispatcher, build, find_dispatcher_name
from typedfn.internal.dispatch import _multipledispatch, multipledispatch
from typedfn.internal.models import Model
from typedfn.types import TypeEntry, TypeRegistry

# The accepted containers of signatures: a mapping from signature text to implementation, or a
# sequence of (text, implementation) pairs.
SignatureInput = Union[Mapping, list, tuple]


def _ordered(signatures: SignatureInput) -> Mapping[str, Any] | list[tuple[str, Any]]:
    return signatures if isinstance(signatures, Mapping) else list(signatures)


class Typed(Model):
    """Typed creates dispatchers and holds the registries they are compiled against.

    Call it with the signatures (and optionally a name first) to build a Dispatcher:

        fn = typed("fn", {"number": lambda x: x + 1, "string": str.upper})

    Without a name, the name of the first Dispatcher among the implementations is used. Each
    instance owns its type registry, ignore list and conversion registry; changes to them only
    affect dispatchers built afterwards.
    """

    name: str = "typed"

    _types: TypeRegistry = PrivateAttr(default_factory=TypeRegistry.with_builtins)
    _conversions: ConversionRegistry = PrivateAttr(default_factory=ConversionRegistry)
    _factory: _multipledispatch = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)

        @multipledispatch(self.name, describe=lambda value: self._types.find_name(value))
        def factory(name: str, signatures: SignatureInput) -> Dispatcher:
            return build(name, _ordered(signatures), types=self._types)

        @factory.register
        def _(signatures: SignatureInput) -> Dispatcher:
            signatures = _ordered(signatures)
            return build(find_dispatcher_name(signatures) or "", signatures, types=self._types)

        self._factory = factory

    def __call__(self, *args: Any) -> Dispatcher:
        return self._factory(*args)

    @property
    def types(self) -> TypeRegistry:
        return self._types

    @property
    def ignore(self) -> list[str]:
        return self._types.ignore

    @property
    def conversions(self) -> ConversionRegistry:
        return self._conversions

    def add_type(self, entry: TypeEntry | Mapping[str, Any]) -> TypeEntry:
        return self._types.register(entry)

    def add_conversion(self, entry: Conversion | Mapping[str, Any]) -> Conversion:
        return self._conversions.register(entry)

    def create(
        self,
        *,
        types: Iterable[TypeEntry | Mapping[str, Any]] | None = None,
        ignore: Iterable[str] = (),
    ) -> Typed:
        """Create a new, independent instance (see `typedfn.create`)."""
        return create(types=types, ignore=ignore)


def create(
    *,
    types: Iterable[TypeEntry | Mapping[str, Any]] | None = None,
    ignore: Iterable[str] = (),
) -> Typed:
    """Create an independent Typed instance.

    `types` replaces the built-in types the instance is seeded with, and `ignore` lists type
    names to drop from signatures.
    """
    typed = Typed()
    if types is not None:
        typed._types = TypeRegistry(types)
    typed.ignore.extend(ignore)
    return typed
