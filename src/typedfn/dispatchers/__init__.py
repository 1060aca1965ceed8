from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import cached_property
from typing import Any

from pydantic import Field, InstanceOf

from typedfn.errors import NoMatchingSignature
from typedfn.internal.mappings import frozendict
from typedfn.internal.models import Model
from typedfn.signatures import Signature
from typedfn.types import TypeRegistry

Signatures = Mapping[str, Callable[..., Any]] | Iterable[tuple[str, Callable[..., Any]]]


def _signature_items(signatures: Signatures) -> Iterable[tuple[str, Callable[..., Any]]]:
    if isinstance(signatures, Mapping):
        return signatures.items()
    return signatures


class Dispatcher(Model):
    """Dispatcher calls the implementation of the first signature matching the arguments.

    Signatures are tried in the order they were given; the first match wins even if a later
    signature would be more specific. Implementations of variadic signatures receive the trailing
    arguments collected in a single list.
    """

    name: str = ""
    definitions: tuple[Signature, ...]
    # The registry the signatures were compiled against, used to describe arguments on a miss.
    types: InstanceOf[TypeRegistry] = Field(repr=False)

    @cached_property
    def signatures(self) -> frozendict[str, Callable[..., Any]]:
        return frozendict((signature.text, signature.fn) for signature in self.definitions)

    def __call__(self, *args: Any) -> Any:
        for signature in self.definitions:
            if signature.test(args):
                if signature.varargs:
                    assert signature.preprocess is not None
                    return signature.fn(*signature.preprocess(args))
                return signature.fn(*args)
        raise NoMatchingSignature(self.name, [self.types.find_name(arg) for arg in args])

    def __repr_args__(self) -> list[tuple[str | None, Any]]:
        return [("name", self.name), ("signatures", [sig.text for sig in self.definitions])]


def is_dispatcher(value: Any) -> bool:
    return isinstance(value, Dispatcher)


def find_dispatcher_name(signatures: Signatures) -> str | None:
    """Return the name of the first Dispatcher among the implementations, if any."""
    for _, fn in _signature_items(signatures):
        if is_dispatcher(fn):
            return fn.name
    return None


def build(name: str, signatures: Signatures, *, types: TypeRegistry) -> Dispatcher:
    """Compile the signatures, in order, into a Dispatcher.

    `signatures` is a mapping from signature text to implementation, or an iterable of
    `(text, implementation)` pairs. Errors compiling any signature propagate as is.
    """
    definitions = tuple(
        Signature.parse(text, fn, types=types) for text, fn in _signature_items(signatures)
    )
    dispatcher = Dispatcher(name=name, definitions=definitions, types=types)
    logging.debug(f"Built {dispatcher!r}")
    return dispatcher
