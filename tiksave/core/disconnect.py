import asyncio
from contextlib import suppress
from typing import Awaitable, TypeVar

from fastapi import Request

T = TypeVar("T")

DISCONNECT_POLL_INTERVAL = 0.5


class ClientDisconnected(Exception):
    """The caller went away before the outbound call finished"""


async def cancel_on_disconnect(
    request: Request,
    awaitable: Awaitable[T],
    poll_interval: float = DISCONNECT_POLL_INTERVAL,
) -> T:
    """
    Await an outbound call, cancelling it once the client disconnects.
    The connection is only polled while the call is still pending.
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
