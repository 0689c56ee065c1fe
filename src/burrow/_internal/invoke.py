"""Call user code that may be a plain function or a coroutine function."""

import inspect
from typing import Any

from burrow._internal.types import Handler


async def invoke(func: Handler, /, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result when it is awaitable.

    Used for route handlers and for route predicates alike.
    """
    result = func(*args, **kwargs)
    return await result if inspect.isawaitable(result) else result
