import pytest

from typedfn.types import TypeRegistry


# A fresh registry per test, so registrations and ignores never leak between tests.
@pytest.fixture()
def types() -> TypeRegistry:
    return TypeRegistry.with_builtins()
