"""Built-in async steps that workflow files can reference."""

from __future__ import annotations

import asyncio
from typing import Any


class StepFailed(RuntimeError):
    """Raised by the ``fail`` step."""


async def echo(value: Any = None) -> Any:
    return value


async def delayed(value: Any = None, delay: float = 0.0) -> Any:
    """Resolve to ``value`` after ``delay`` seconds."""

    await asyncio.sleep(float(delay))
    return value


async def fail(message: str = "step failed", delay: float = 0.0) -> Any:
    """Raise :class:`StepFailed` after ``delay`` seconds."""

    await asyncio.sleep(float(delay))
    raise StepFailed(message)
