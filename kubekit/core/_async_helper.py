import asyncio
import inspect
from typing import Any, Callable


def run_async(func: Callable[..., Any], *args, **kwargs):
    return asyncio.to_thread(func, *args, **kwargs)


async def resolve(value: Any) -> Any:
    # Callbacks may be plain functions or coroutine functions.
    if inspect.isawaitable(value):
        return await value
    return value
