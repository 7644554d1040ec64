"""Drive non-suspending coroutines from synchronous code."""

from __future__ import annotations

import typing

_T = typing.TypeVar("_T")


def iter_coroutine(coro: typing.Coroutine[None, None, _T]) -> _T:
    """
    Run ``coro`` to completion without an event loop.

    The sync client shares its request logic with the async client by
    writing it as ``async def`` functions that never await real I/O. Sending
    ``None`` once is then enough to finish them.

    Raises:
        RuntimeError: If the coroutine suspends, e.g. because an awaitable
            ``fetch_impl`` was handed to the synchronous client.
    """
    try:
        coro.send(None)
    except StopIteration as stop:
        return stop.value  # type: ignore [no-any-return]
    else:
        raise RuntimeError(
            f"coroutine {coro!r} suspended; the sync client cannot await real I/O"
        )
    finally:
        coro.close()


__all__ = ["iter_coroutine"]
