"""High-level orchestration for running config-defined workflows."""

from __future__ import annotations

import functools
import logging
from typing import Any, Dict, List, Optional

from .config import ConfigError, ExecutionMode, StepSpec, WorkflowConfig, import_string
from .tasks.base import Task
from .tasks.runner import TaskRunner, create_workflow

logger = logging.getLogger(__name__)


class Orchestrator:
    """Builds tasks from a workflow config and runs them in the configured mode."""

    def __init__(self, config: WorkflowConfig, runner: Optional[TaskRunner] = None) -> None:
        self.config = config
        self.runner = runner or create_workflow()
        self.tasks: List[Task] = [self._build_task(step) for step in config.steps]

    def _build_task(self, step: StepSpec) -> Task:
        target = import_string(step.call)
        if not callable(target):
            raise ConfigError(f"Step '{step.id}' target '{step.call}' is not callable")
        return functools.partial(target, **step.args)

    async def run(self, mode: ExecutionMode | str | None = None) -> Dict[str, Any]:
        """Run every step and return results keyed by step id, in step order."""

        selected = ExecutionMode.parse(mode) if mode is not None else self.config.mode
        logger.info(
            "Running workflow %s with %d steps (%s)",
            self.config.name,
            len(self.tasks),
            selected.value,
        )
        if selected is ExecutionMode.PARALLEL:
            results = await self.runner.run_parallel(self.tasks)
        else:
            results = await self.runner.run_sequential(self.tasks)
        return {step.id: result for step, result in zip(self.config.steps, results)}
