"""Compile signature texts into argument tests.

A signature is a comma separated list of parameters, each a `|` separated union of type names,
for example `"string, number | boolean"`. The last parameter may carry the variable argument
marker `...` (as in `"string, number..."`) to accept one or more trailing arguments of that type.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from typedfn.errors import SignatureSyntaxError
from typedfn.internal.models import Model
from typedfn.internal.utils import always, normalize_text
from typedfn.types import TypePredicate, TypeRegistry

ArgsTest = Callable[[Sequence[Any]], bool]
ArgsPreprocess = Callable[[Sequence[Any]], tuple[Any, ...]]

VARARGS_MARKER = "..."


def compile_param(param: str, types: TypeRegistry) -> TypePredicate:
    """Create a test for a single parameter, like 'number' or 'string | Function'."""
    names = [name.strip() for name in param.split("|")]
    names = [name for name in names if name and not types.is_ignored(name)]

    if len(names) == 0:
        return always
    if len(names) == 1:
        return types.find_test(names[0])
    if len(names) == 2:
        test0, test1 = types.find_test(names[0]), types.find_test(names[1])

        def test_either(value: Any) -> bool:
            return test0(value) or test1(value)

        return test_either

    tests = [types.find_test(name) for name in names]

    def test_any(value: Any) -> bool:
        return any(test(value) for test in tests)

    return test_any


def split_params(signature: str) -> list[str]:
    if not signature.strip():
        return []
    return [param.strip() for param in signature.split(",")]


def compile_params(signature: str, types: TypeRegistry) -> ArgsTest:
    """Create a test for the whole argument list of a signature.

    Non-variadic signatures require exactly one argument per parameter. Variadic signatures
    require the fixed arguments plus at least one trailing argument.
    """
    params = split_params(signature)

    varargs_index = signature.find(VARARGS_MARKER)
    if varargs_index != -1:
        if signature.rfind(",") > varargs_index:
            raise SignatureSyntaxError(
                f'Variable argument operator "{VARARGS_MARKER}" only allowed for the last parameter'
            )
        fixed_tests = [compile_param(param, types) for param in params[:-1]]
        fixed_count = len(fixed_tests)
        varargs_test = compile_param(params[-1].replace(VARARGS_MARKER, ""), types)

        def test_varargs(args: Sequence[Any]) -> bool:
            return (
                len(args) > fixed_count
                and all(test(arg) for test, arg in zip(fixed_tests, args))
                and all(varargs_test(arg) for arg in args[fixed_count:])
            )

        return test_varargs

    if len(params) == 0:

        def test_none(args: Sequence[Any]) -> bool:
            return len(args) == 0

        return test_none

    if len(params) == 1:
        test0 = compile_param(params[0], types)

        def test_one(args: Sequence[Any]) -> bool:
            return len(args) == 1 and test0(args[0])

        return test_one

    if len(params) == 2:
        test0, test1 = compile_param(params[0], types), compile_param(params[1], types)

        def test_two(args: Sequence[Any]) -> bool:
            return len(args) == 2 and test0(args[0]) and test1(args[1])

        return test_two

    tests = [compile_param(param, types) for param in params]

    def test_all(args: Sequence[Any]) -> bool:
        return len(args) == len(tests) and all(test(arg) for test, arg in zip(tests, args))

    return test_all


def create_varargs_preprocess(signature: str) -> ArgsPreprocess:
    """Create a function collecting the trailing arguments of a variadic call into one list."""
    offset = signature.count(",")

    def preprocess(args: Sequence[Any]) -> tuple[Any, ...]:
        return (*args[:offset], list(args[offset:]))

    return preprocess


class Signature(Model):
    """Signature is one compiled call signature of a dispatcher and its implementation."""

    text: str
    varargs: bool
    test: ArgsTest
    preprocess: ArgsPreprocess | None = None
    fn: Callable[..., Any]

    # Implementations may be unhashable callable objects, so only the text is hashed.
    def __hash__(self) -> int:
        return hash(self.text)

    @classmethod
    def parse(cls, signature: str, fn: Callable[..., Any], *, types: TypeRegistry) -> Signature:
        varargs = VARARGS_MARKER in signature
        return cls(
            text=normalize_text(signature),
            varargs=varargs,
            test=compile_params(signature, types),
            preprocess=create_varargs_preprocess(signature) if varargs else None,
            fn=fn,
        )

    def __repr_args__(self) -> list[tuple[str | None, Any]]:
        return [("text", self.text), ("fn", self.fn)]
