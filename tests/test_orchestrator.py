import asyncio

import pytest

from taskflow.config import ConfigError, WorkflowConfig
from taskflow.orchestrator import Orchestrator
from taskflow.steps import StepFailed

STAGGERED = """
name: staggered
mode: {mode}
steps:
  - id: a
    call: taskflow.steps:delayed
    args: {{value: x, delay: 0.03}}
  - id: b
    call: taskflow.steps:delayed
    args: {{value: y, delay: 0.01}}
  - id: c
    call: taskflow.steps:delayed
    args: {{value: z, delay: 0.02}}
"""


def test_orchestrator_initialization():
    config = WorkflowConfig.from_yaml(STAGGERED.format(mode="sequential"))
    orchestrator = Orchestrator(config)

    assert orchestrator.config.name == "staggered"
    assert len(orchestrator.tasks) == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("mode", ["sequential", "parallel"])
async def test_orchestrator_results_follow_step_order(mode):
    orchestrator = Orchestrator(WorkflowConfig.from_yaml(STAGGERED.format(mode=mode)))

    results = await orchestrator.run()

    assert list(results.items()) == [("a", "x"), ("b", "y"), ("c", "z")]


@pytest.mark.asyncio
async def test_orchestrator_mode_override_runs_in_parallel():
    orchestrator = Orchestrator(WorkflowConfig.from_yaml(STAGGERED.format(mode="sequential")))
    loop = asyncio.get_running_loop()

    started = loop.time()
    await orchestrator.run("parallel")

    assert loop.time() - started < 0.06


@pytest.mark.asyncio
async def test_orchestrator_propagates_step_failure():
    config = WorkflowConfig.from_yaml(
        """
steps:
  - id: ok
    call: taskflow.steps:echo
    args: {value: x}
  - id: broken
    call: taskflow.steps:fail
    args: {message: E}
"""
    )

    with pytest.raises(StepFailed, match="E"):
        await Orchestrator(config).run()


def test_orchestrator_rejects_non_callable_targets():
    config = WorkflowConfig.from_yaml("steps:\n  - id: a\n    call: taskflow.steps:__doc__\n")

    with pytest.raises(ConfigError, match="not callable"):
        Orchestrator(config)
