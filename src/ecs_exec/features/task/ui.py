"""UI components for task selection."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import IneligibleTaskError, NoResourcesFoundError
from ...core.search import searchable_select
from ...core.types import Choice, TaskInfo
from ...core.utils import short_task_id, show_spinner
from .task import TaskService, format_task_label, has_execute_command_enabled

PROMPT = "Task:"


class TaskUI(BaseUIComponent):
    """UI component for task selection and exec eligibility checks."""

    def __init__(self, task_service: TaskService) -> None:
        super().__init__()
        self.task_service = task_service

    def resolve_task(self, cluster: str, service: str) -> TaskInfo:
        """Pick a running task of service, auto-selecting when there is only one.

        Raises IneligibleTaskError when the chosen task has execute command
        disabled, whichever way it was chosen.
        """
        with show_spinner():
            task_arns = self.task_service.get_task_arns(cluster, service)
            if not task_arns:
                raise NoResourcesFoundError("No tasks found")
            tasks = self.task_service.describe_tasks(cluster, task_arns)

        if not tasks:
            raise NoResourcesFoundError("No tasks found")

        if len(tasks) == 1:
            return validate_task(tasks[0])

        choices: list[Choice] = [{"name": format_task_label(task, i), "value": task} for i, task in enumerate(tasks)]
        selected = self.require_selection(PROMPT, searchable_select(PROMPT, choices))
        return validate_task(selected)


def validate_task(task: TaskInfo) -> TaskInfo:
    if not has_execute_command_enabled(task):
        raise IneligibleTaskError(short_task_id(task["task_arn"]))
    return task
