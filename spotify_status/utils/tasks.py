"""
Fire-and-forget background tasks

The event loop only keeps weak references to tasks, so scheduled fetches are
held in a module-level set until they finish. The caller gets no handle back;
results travel through the message callback and failures through the log.
"""

import asyncio
from typing import Any, Coroutine, Optional, Set

from .logger import get_logger

logger = get_logger(__name__)

_background_tasks: Set["asyncio.Task[Any]"] = set()


def _on_task_done(task: "asyncio.Task[Any]") -> None:
    _background_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Background task {task.get_name()} failed: {exc}", exc_info=exc)


def spawn(coro: Coroutine[Any, Any, Any], name: Optional[str] = None) -> None:
    """
    Schedule a coroutine on the running loop without awaiting it

    Args:
        coro: Coroutine to run
        name: Optional task name used in log messages

    Raises:
        RuntimeError: If no event loop is running
    """
    task = asyncio.get_running_loop().create_task(coro, name=name)
    _background_tasks.add(task)
    task.add_done_callback(_on_task_done)


def pending_task_count() -> int:
    """Number of spawned tasks that have not finished yet"""
    return len(_background_tasks)


async def drain_background_tasks() -> None:
    """Wait for every spawned task to finish (used at shutdown and in tests)"""
    while _background_tasks:
        await asyncio.gather(*list(_background_tasks), return_exceptions=True)
