from __future__ import annotations

from collections.abc import Sequence


class TypedError(Exception):
    """Base class for all errors raised by typedfn."""


class UnknownType(TypedError, TypeError):
    """A signature references a type name that is not registered."""

    def __init__(self, name: str, hint: str | None = None) -> None:
        self.name = name
        self.hint = hint
        msg = f'Unknown type "{name}"'
        if hint is not None:
            msg += f'. Did you mean "{hint}"?'
        super().__init__(msg)


class SignatureSyntaxError(TypedError, SyntaxError):
    """A signature text does not follow the signature grammar."""


class InvalidArgument(TypedError, TypeError):
    """A registry entry does not have the required shape."""


class NoMatchingSignature(TypedError, TypeError):
    """None of the signatures of a dispatcher accepts the actual arguments.

    `types` holds, for each actual argument, the name of the first registered type accepting it
    (or "unknown").
    """

    def __init__(self, name: str, types: Sequence[str]) -> None:
        self.name = name
        self.types = list(types)
        super().__init__(
            f'Signature "{", ".join(self.types)}" doesn\'t match any of the defined signatures of'
            f" function {name or 'unnamed'}."
        )
