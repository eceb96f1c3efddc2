"""
Sequential hook pipeline.

Runs an ordered chain of hooks as a left fold: the first hook receives
the initial value, every later hook receives the previous hook's result.
Hooks may be plain functions or coroutine functions.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Sequence, Union

logger = logging.getLogger(__name__)

Hook = Callable[[Any], Union[Any, Awaitable[Any]]]


def _hook_name(hook: Hook) -> str:
    return getattr(hook, "__qualname__", None) or repr(hook)


async def run_pipeline(hooks: Sequence[Hook], initial: Any = None) -> Any:
    """
    Run hooks one after another, threading each result into the next hook.

    Args:
        hooks: Ordered, non-empty sequence of hooks
        initial: Value passed to the first hook

    Returns:
        The value returned (or awaited) from the last hook

    Raises:
        ValueError: If ``hooks`` is empty
        Exception: Whatever the first failing hook raises; later hooks do not run
    """
    if not hooks:
        raise ValueError("run_pipeline requires at least one hook")

    value = initial
    for index, hook in enumerate(hooks):
        logger.debug(f"Running hook {index} ({_hook_name(hook)})")
        value = hook(value)
        if inspect.isawaitable(value):
            value = await value
    return value
