"""Task runner utilities."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Sequence

from .base import Task

logger = logging.getLogger(__name__)


class TaskRunner:
    """Runs a list of tasks either one after another or all at once."""

    async def run_sequential(self, tasks: Optional[Sequence[Task]] = None) -> List[Any]:
        """Await each task in order, starting the next only after the previous settles.

        The first failure propagates unchanged and no further task is started.
        """

        results: List[Any] = []
        for index, task in enumerate(list(tasks or ())):
            logger.debug("Starting sequential task %d", index)
            results.append(await task())
        return results

    async def run_parallel(self, tasks: Optional[Sequence[Task]] = None) -> List[Any]:
        """Start every task before awaiting any of them.

        Results keep input order. The first failure to settle propagates; the
        remaining tasks keep running and their outcomes are discarded.
        """

        pending: List[asyncio.Future] = []
        for task in list(tasks or ()):
            future = asyncio.ensure_future(task())
            future.add_done_callback(_discard_outcome)
            pending.append(future)
        logger.debug("Started %d parallel tasks", len(pending))
        return list(await asyncio.gather(*pending))

    sync = run_sequential
    async_ = run_parallel


def _discard_outcome(future: asyncio.Future) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.debug("Parallel task finished with %r", exc)


def create_workflow() -> TaskRunner:
    """Return a runner exposing sequential and parallel execution."""

    return TaskRunner()
