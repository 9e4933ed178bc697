"""Configuration helpers for workflow files."""

from __future__ import annotations

import enum
import importlib
import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

import yaml


class ConfigError(RuntimeError):
    """Raised when configuration files are invalid."""


class ExecutionMode(str, enum.Enum):
    """How the steps of a workflow are run."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"

    @classmethod
    def parse(cls, value: Any) -> "ExecutionMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            choices = ", ".join(mode.value for mode in cls)
            raise ConfigError(f"Unknown mode '{value}', expected one of: {choices}") from exc


@dataclass
class StepSpec:
    """A single step of a workflow: an async callable and its keyword arguments."""

    id: str
    call: str
    args: Dict[str, Any] = field(default_factory=dict)
    description: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StepSpec":
        if not isinstance(data, Mapping):
            raise ConfigError("Each step must be a mapping")
        missing = [key for key in ("id", "call") if key not in data]
        if missing:
            raise ConfigError(f"Step is missing required keys: {', '.join(missing)}")
        args = data.get("args") or {}
        if not isinstance(args, Mapping):
            raise ConfigError(f"Step '{data['id']}' args must be a mapping")
        bad_keys = [key for key in args if not isinstance(key, str)]
        if bad_keys:
            raise ConfigError(f"Step '{data['id']}' args keys must be strings, got {bad_keys!r}")
        return cls(
            id=str(data["id"]),
            call=str(data["call"]),
            args=dict(args),
            description=_optional_str(data.get("description")),
        )


@dataclass
class WorkflowConfig:
    """Representation of the YAML workflow file."""

    name: str
    description: Optional[str]
    mode: ExecutionMode
    steps: List[StepSpec]

    @classmethod
    def from_mapping(cls, data: Any, *, default_name: str = "workflow") -> "WorkflowConfig":
        if not isinstance(data, MutableMapping):
            raise ConfigError("Configuration root must be a mapping")
        raw_steps = data.get("steps")
        if raw_steps is not None and not isinstance(raw_steps, list):
            raise ConfigError("Workflow steps must be a list")
        steps = [StepSpec.from_mapping(item) for item in raw_steps or []]
        if not steps:
            raise ConfigError("At least one step must be defined")
        seen: set[str] = set()
        for step in steps:
            if step.id in seen:
                raise ConfigError(f"Duplicate step id '{step.id}'")
            seen.add(step.id)
        return cls(
            name=str(data.get("name", default_name)),
            description=_optional_str(data.get("description")),
            mode=ExecutionMode.parse(data.get("mode", ExecutionMode.SEQUENTIAL)),
            steps=steps,
        )

    @classmethod
    def from_yaml(cls, text: str, *, default_name: str = "workflow") -> "WorkflowConfig":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML: {exc}") from exc
        return cls.from_mapping(data, default_name=default_name)

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "WorkflowConfig":
        path = pathlib.Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Workflow file '{path}' is not valid UTF-8") from exc
        return cls.from_yaml(text, default_name=path.stem)

    def get_step(self, step_id: str) -> StepSpec:
        for step in self.steps:
            if step.id == step_id:
                return step
        raise ConfigError(f"Unknown step '{step_id}'")


def import_string(path: str) -> Any:
    """Return attribute from module specified by path "module:qualname"."""

    if ":" not in path:
        raise ConfigError(f"Import path '{path}' must use module:qualname format")
    module_path, qualname = path.split(":", 1)
    try:
        target: Any = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigError(f"Cannot import module '{module_path}'") from exc
    for attr in qualname.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as exc:
            raise ConfigError(f"Module '{module_path}' has no attribute '{qualname}'") from exc
    return target


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
