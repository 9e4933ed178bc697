"""Command line interface for running workflow files."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ConfigError, ExecutionMode, WorkflowConfig
from .orchestrator import Orchestrator

app = typer.Typer(help="Run workflows of async tasks sequentially or in parallel")
console = Console()


def _load(config_path: Path) -> WorkflowConfig:
    try:
        return WorkflowConfig.from_file(config_path)
    except (ConfigError, OSError) as exc:
        console.print(f"[bold red]Invalid workflow:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _render_plan(config: WorkflowConfig, mode: ExecutionMode) -> None:
    plan = Table(title=f"Execution Plan ({mode.value})", show_lines=True)
    plan.add_column("#")
    plan.add_column("Step ID")
    plan.add_column("Call")
    plan.add_column("Description")
    for index, step in enumerate(config.steps, start=1):
        plan.add_row(
            str(index), escape(step.id), escape(step.call), escape(step.description or "")
        )
    console.print(plan)


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to YAML workflow file"),
    mode: Optional[str] = typer.Option(None, help="Override mode: sequential or parallel"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Execute the steps described in the given workflow file."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = _load(config_path)
    try:
        selected = ExecutionMode.parse(mode) if mode is not None else config.mode
        orchestrator = Orchestrator(config)
    except ConfigError as exc:
        console.print(f"[bold red]Invalid workflow:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold green]Running workflow[/] {escape(config.name)}")
    _render_plan(config, selected)

    started = time.perf_counter()
    try:
        results = asyncio.run(orchestrator.run(selected))
    except Exception as exc:
        console.print(f"[bold red]Workflow failed:[/] {type(exc).__name__}: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    elapsed = time.perf_counter() - started

    table = Table(title="Step results", show_lines=True)
    table.add_column("Step ID")
    table.add_column("Result")
    for step_id, result in results.items():
        table.add_row(escape(step_id), escape(repr(result)))
    console.print(table)
    console.print(f"Completed {len(results)} steps in {elapsed:.3f}s")


@app.command()
def inspect(config_path: Path = typer.Argument(..., help="Workflow file to inspect")) -> None:
    """Print the mode and steps defined by a workflow file."""

    config = _load(config_path)
    console.print(f"[bold]Workflow:[/] {escape(config.name)}\n{escape(config.description or '')}")
    console.print(f"[bold]Mode:[/] {config.mode.value}")
    console.print("[bold]Steps[/]")
    for step in config.steps:
        console.print(f"- {escape(step.id)} -> {escape(step.call)} {escape(repr(step.args))}")


if __name__ == "__main__":  # pragma: no cover
    app()
