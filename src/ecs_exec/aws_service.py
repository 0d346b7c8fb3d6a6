"""AWS ECS service layer - handles all AWS API interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.types import TaskInfo
from .features.cluster.cluster import ClusterService
from .features.service.service import ServiceService
from .features.task.task import TaskService

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class ECSService:
    """Service for interacting with AWS ECS."""

    def __init__(self, ecs_client: ECSClient) -> None:
        # Initialize feature services
        self._cluster = ClusterService(ecs_client)
        self._service = ServiceService(ecs_client)
        self._task = TaskService(ecs_client)

    def get_cluster_arns(self) -> list[str]:
        return self._cluster.get_cluster_arns()

    def get_service_arns(self, cluster: str) -> list[str]:
        return self._service.get_service_arns(cluster)

    def get_task_arns(self, cluster: str, service: str) -> list[str]:
        return self._task.get_task_arns(cluster, service)

    def describe_tasks(self, cluster: str, task_arns: list[str]) -> list[TaskInfo]:
        return self._task.describe_tasks(cluster, task_arns)
