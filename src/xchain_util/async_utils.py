from __future__ import annotations

import asyncio


async def delay(ms: float) -> None:
    """Sleep for ``ms`` milliseconds inside a coroutine."""
    await asyncio.sleep(ms / 1000)
