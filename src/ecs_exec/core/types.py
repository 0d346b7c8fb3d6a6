"""Type definitions for ecs-exec."""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypedDict


class Choice(TypedDict):
    name: str
    value: Any


class ContainerInfo(TypedDict):
    name: str


class TaskInfo(TypedDict):
    task_arn: str
    task_definition_arn: str
    started_at: datetime | None
    enable_execute_command: bool
    containers: list[ContainerInfo]
