from __future__ import annotations

from collections.abc import Callable
from typing import Any, cast

import multimethod as _multimethod  # Minimize name confusion with our own dispatchers

from typedfn.errors import NoMatchingSignature


class _multipledispatch(_multimethod.multidispatch):
    """Multiple dispatch over the Python classes of the arguments.

    Used for Python level overloads of our own entry points, where the parameters are annotated
    with regular classes. Failures to find an implementation are reported as
    `NoMatchingSignature`, naming each argument with `describe`.
    """

    # NOTE: multimethod re-runs `__init__` internals when registering more handlers, so our
    # settings live on the instance dict (set in `multipledispatch` below) with class defaults.
    canonical_name: str = ""

    def describe(self, value: Any) -> str:
        return type(value).__name__

    def lookup(self, *args: Any) -> Callable[..., Any]:
        """Return the implementation registered for the classes of `args`."""
        try:
            return cast(Callable[..., Any], self[tuple(type(arg) for arg in args)])
        # multimethod raises a DispatchError (a TypeError) instead of a KeyError.
        except _multimethod.DispatchError as e:
            raise NoMatchingSignature(
                self.canonical_name, [self.describe(arg) for arg in args]
            ) from e

    # Resolve before calling so errors raised by the implementation itself are never mistaken
    # for (or converted into) dispatch errors.
    def __call__(self, *args: Any) -> Any:
        return self.lookup(*args)(*args)


def multipledispatch(
    canonical_name: str, *, describe: Callable[[Any], str] | None = None
) -> Callable[[Callable[..., Any]], _multipledispatch]:
    def wrap(handler: Callable[..., Any]) -> _multipledispatch:
        dispatch = _multipledispatch(handler)
        dispatch.canonical_name = canonical_name
        if describe is not None:
            dispatch.describe = describe  # type: ignore[method-assign]
        return dispatch

    return wrap
