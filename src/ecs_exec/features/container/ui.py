"""UI components for container selection."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesFoundError
from ...core.search import searchable_select
from ...core.types import Choice, TaskInfo
from .container import get_container_names

PROMPT = "Container:"


class ContainerUI(BaseUIComponent):
    """UI component for container selection."""

    def resolve_container(self, task: TaskInfo, override: str | None = None) -> str:
        if override:
            return override

        container_names = get_container_names(task)
        if not container_names:
            raise NoResourcesFoundError("No containers found")

        if len(container_names) == 1:
            return container_names[0]

        choices: list[Choice] = [{"name": name, "value": name} for name in container_names]
        return self.require_selection(PROMPT, searchable_select(PROMPT, choices))
