"""
Ties an upstream call to the lifetime of the HTTP request that triggered it.
"""
import asyncio
from typing import Awaitable, TypeVar

from starlette.requests import Request

from utils.errors import ClientDisconnected
from utils.logger import app_logger

T = TypeVar("T")

DISCONNECT_POLL_INTERVAL = 0.5


async def run_until_disconnected(request: Request, awaitable: Awaitable[T],
                                 poll_interval: float = DISCONNECT_POLL_INTERVAL) -> T:
    """
    Await `awaitable`, cancelling it if the client disconnects first.

    Raises:
        ClientDisconnected: the caller went away before the call finished
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()

            if await request.is_disconnected():
                app_logger.warning(f"Client disconnected from {request.url.path}, cancelling upstream call")
                task.cancel()
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()
