"""Drive non-suspending coroutines to completion without an event loop."""

from __future__ import annotations

import typing

_T = typing.TypeVar("_T")


def iter_coroutine(coro: typing.Coroutine[None, None, _T]) -> _T:
    """
    Run ``coro`` synchronously and return its result.

    The blocking clients share their business logic with the async clients
    by writing it as ``async def`` on top of a transport that never awaits
    anything real. Such a coroutine finishes on its first ``send(None)``.

    Raises:
        RuntimeError: If the coroutine suspends instead of finishing.
    """
    try:
        coro.send(None)
    except StopIteration as ex:
        return ex.value  # type: ignore [no-any-return]
    else:
        raise RuntimeError(f"coroutine {coro!r} suspended; it needs an event loop")
    finally:
        coro.close()


__all__ = ["iter_coroutine"]
