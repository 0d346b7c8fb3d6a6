"""Task operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.types import ContainerInfo, TaskInfo
from ...core.utils import (
    batch_items,
    format_started_at,
    paginate_aws_list,
    short_task_id,
    task_definition_revision,
)

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import TaskTypeDef

# DescribeTasks accepts at most 100 task ARNs per call
DESCRIBE_TASKS_BATCH_SIZE = 100

EXEC_ENABLED_MARKER = "✓ exec enabled"
EXEC_DISABLED_MARKER = "✗ exec disabled"


class TaskService(BaseAWSService):
    """Service for ECS task operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_task_arns(self, cluster: str, service: str) -> list[str]:
        return paginate_aws_list(self.ecs_client, "list_tasks", "taskArns", cluster=cluster, serviceName=service)

    def describe_tasks(self, cluster: str, task_arns: list[str]) -> list[TaskInfo]:
        """Full descriptions for task_arns, in the order AWS returns them."""
        tasks: list[TaskInfo] = []
        for batch in batch_items(task_arns, DESCRIBE_TASKS_BATCH_SIZE):
            response = self.ecs_client.describe_tasks(cluster=cluster, tasks=batch)
            tasks.extend(_create_task_info(task) for task in response.get("tasks", []))
        return tasks


def has_execute_command_enabled(task: TaskInfo) -> bool:
    return task["enable_execute_command"] is True


def format_task_label(task: TaskInfo, index: int) -> str:
    """Picker label for a task, numbered by its 1-based position in the listing."""
    marker = EXEC_ENABLED_MARKER if has_execute_command_enabled(task) else EXEC_DISABLED_MARKER
    task_id = short_task_id(task["task_arn"])
    revision = task_definition_revision(task["task_definition_arn"])
    started = format_started_at(task["started_at"])
    return f"#{index + 1} {task_id} (v{revision}) {marker} - started {started}"


def _create_task_info(task: TaskTypeDef) -> TaskInfo:
    """Create task info from AWS task description."""
    containers: list[ContainerInfo] = [
        {"name": container["name"]}
        for container in task.get("containers", [])
    ]

    return {
        "task_arn": task["taskArn"],
        "task_definition_arn": task.get("taskDefinitionArn", ""),
        "started_at": task.get("startedAt"),
        "enable_execute_command": task.get("enableExecuteCommand") is True,
        "containers": containers,
    }
