"""UI layer - the cluster, service, task, container resolution pipeline."""

from __future__ import annotations

from .aws_service import ECSService
from .core.types import TaskInfo
from .features.cluster.ui import ClusterUI
from .features.container.ui import ContainerUI
from .features.service.ui import ServiceUI
from .features.task.ui import TaskUI


class ExecNavigator:
    """Resolves an exec target one stage at a time.

    Every stage either takes a value supplied on the command line or asks the
    operator, and each stage's result feeds the next.
    """

    def __init__(self, ecs_service: ECSService) -> None:
        self.ecs_service = ecs_service
        # Initialize feature UI components using existing service instances from ECSService
        self._cluster_ui = ClusterUI(ecs_service._cluster)
        self._service_ui = ServiceUI(ecs_service._service)
        self._task_ui = TaskUI(ecs_service._task)
        self._container_ui = ContainerUI()

    def resolve_cluster(self, override: str | None = None) -> str:
        return self._cluster_ui.resolve_cluster(override)

    def resolve_service(self, cluster: str, override: str | None = None) -> str:
        return self._service_ui.resolve_service(cluster, override)

    def resolve_task(self, cluster: str, service: str) -> TaskInfo:
        return self._task_ui.resolve_task(cluster, service)

    def resolve_container(self, task: TaskInfo, override: str | None = None) -> str:
        return self._container_ui.resolve_container(task, override)
