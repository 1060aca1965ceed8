from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar, dataclass_transform

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


# Create a `Model` base class that can be used for (most of) our internal classes. Notably, our
# models:
# - are frozen by default, so compiled signatures and dispatchers cannot change after they are
#   built.
# - perform strict runtime type checking, which provides early call-site feedback for malformed
#   registry entries.
#
# Type checkers do not understand `model_config` and instead infer hints from the
# `dataclass_transform` set on Pydantic's metaclass, so we "replace" the metaclass with one that
# has the frozen defaults.
@dataclass_transform(
    field_specifiers=(Field, PrivateAttr), frozen_default=True, kw_only_default=True
)
class ModelMeta(type(BaseModel)):
    pass


class Model(BaseModel, metaclass=ModelMeta):
    _abstract_: ClassVar[bool] = True  # Prevent instantiation; defaults to False in subclasses

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        # Default _abstract_ to False if not set explicitly on the class.
        cls._abstract_ = cls.__dict__.get("_abstract_", False)

    if not TYPE_CHECKING:

        def __new__(cls, *args, **kwargs):
            if cls._abstract_:
                raise TypeError(f"{cls.__name__} cannot be instantiated directly.")
            return super().__new__(cls)

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        # Verify the model is hashable, ie: approximately immutable.
        hash(self)

    def __repr_args__(self) -> Iterable[tuple[str | None, Any]]:
        return [(k, v) for k, v in super().__repr_args__() if k in self.model_fields_set]

    def __str__(self) -> str:
        return repr(self)
