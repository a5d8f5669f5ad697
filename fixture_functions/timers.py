"""
Timers - Await-style delay built on the running event loop.

delay() arms a loop timer that completes a future, and the awaiting task
suspends on that future. The timer handle is cancelled in a finally block,
so it is released whether the delay completes, fails, or the awaiting task
is cancelled first.

Usage:
    payload = await delay(100, "done")
"""

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)


def _settle(future: asyncio.Future, payload: Any) -> None:
    # The awaiting task may already be cancelled, which cancels the future too.
    if not future.done():
        future.set_result(payload)


async def delay(duration_ms: float, payload: Any = "") -> Any:
    """
    Suspend the current task for at least duration_ms milliseconds.

    Args:
        duration_ms: Delay in milliseconds. Zero or negative fires on the
            next loop iteration.
        payload: Value returned once the timer fires.

    Returns:
        payload, unchanged.
    """
    # Explicit timer rather than asyncio.sleep so the handle is owned and cancelled here.
    loop = asyncio.get_running_loop()
    future = loop.create_future()
    handle = loop.call_later(duration_ms / 1000.0, _settle, future, payload)
    logger.debug(f"Timer armed for {duration_ms}ms")
    try:
        return await future
    finally:
        handle.cancel()
        logger.debug(f"Timer released after {duration_ms}ms delay")
