"""Container lookups within a described task."""

from __future__ import annotations

from ...core.types import TaskInfo


def get_container_names(task: TaskInfo) -> list[str]:
    return [container["name"] for container in task["containers"]]
