"""Task primitives."""

from .base import Task, failed, resolved
from .runner import TaskRunner, create_workflow

__all__ = ["Task", "TaskRunner", "create_workflow", "failed", "resolved"]
