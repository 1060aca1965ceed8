from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def wrap_exc(
    error_type: type[Exception], *, prefix: str, into: type[Exception] | None = None
) -> Iterator[None]:
    """Wrap exceptions of `error_type` and add a message prefix.

    The wrapped exception is re-raised as `into` (defaulting to `error_type`), which must be
    initializable with a single string message argument. The original exception is kept as the
    `__cause__`.

    NOTE: When used inside a generator, any exceptions raised by the *caller of the generator* will **not** be wrapped.
    """
    target = error_type if into is None else into
    try:
        yield
    except error_type as e:
        msg = str(e)
        if getattr(e, "wrapped", False) and e.__cause__ is not None:
            src = e.__cause__  # Shorten exception chains to the root and last wrapped only
        else:
            msg = f" - {msg}"
            src = e
        error = target(f"{prefix}{msg}")
        error.wrapped = True  # type: ignore[attr-defined]
        raise error from src
