from __future__ import annotations

import importlib.metadata

__version__ = importlib.metadata.version("typedfn")

from typedfn.conversions import Conversion, ConversionRegistry
from typedfn.dispatchers import Dispatcher, build, is_dispatcher
from typedfn.errors import (
    InvalidArgument,
    NoMatchingSignature,
    SignatureSyntaxError,
    TypedError,
    UnknownType,
)
from typedfn.factory import Typed, create
from typedfn.signatures import Signature
from typedfn.types import TypeEntry, TypeRegistry
from typedfn.types.python import undefined

# Export all interfaces.
__all__ = [
    "Conversion",
    "ConversionRegistry",
    "Dispatcher",
    "InvalidArgument",
    "NoMatchingSignature",
    "Signature",
    "SignatureSyntaxError",
    "TypeEntry",
    "TypeRegistry",
    "Typed",
    "TypedError",
    "UnknownType",
    "build",
    "create",
    "is_dispatcher",
    "typed",
    "undefined",
]

# The default instance.
typed = create()
