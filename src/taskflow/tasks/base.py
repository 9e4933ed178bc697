"""Task primitives shared by the runner and the orchestrator."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

Task = Callable[[], Awaitable[Any]]
"""A zero-argument callable returning an awaitable."""


def resolved(value: Any = None) -> Task:
    """Return a task whose awaitable resolves to ``value``."""

    async def _task() -> Any:
        return value

    return _task


def failed(exc: BaseException) -> Task:
    """Return a task whose awaitable raises ``exc``."""

    async def _task() -> Any:
        raise exc

    return _task
