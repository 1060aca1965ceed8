from __future__ import annotations

from typing import Any


def always(value: Any) -> bool:
    """Accept any value."""
    return True


def normalize_text(text: str) -> str:
    """Remove all whitespace from a signature or parameter text."""
    return "".join(text.split())


class NoCopyMixin:
    """Mixin to bypass (deep)copying.

    This is useful for objects that are *intended* to be stateful and shared, such as the
    registries referenced by (otherwise immutable) Pydantic models.
    """

    def __copy__(self) -> Any:
        return self  # pragma: no cover

    def __deepcopy__(self, memo: Any) -> Any:
        return self
