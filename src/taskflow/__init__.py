"""Sequential and parallel execution of async task lists."""

from importlib import metadata

from .tasks import Task, TaskRunner, create_workflow, failed, resolved

try:
    __version__ = metadata.version("taskflow")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for dev
    __version__ = "0.0.0"

__all__ = ["Task", "TaskRunner", "create_workflow", "failed", "resolved", "__version__"]
