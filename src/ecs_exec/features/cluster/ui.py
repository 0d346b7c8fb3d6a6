"""UI components for cluster selection."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesFoundError
from ...core.search import searchable_select
from ...core.types import Choice
from ...core.utils import format_resource_name, show_spinner
from .cluster import ClusterService

PROMPT = "Cluster:"


class ClusterUI(BaseUIComponent):
    """UI component for cluster selection."""

    def __init__(self, cluster_service: ClusterService) -> None:
        super().__init__()
        self.cluster_service = cluster_service

    def resolve_cluster(self, override: str | None = None) -> str:
        """Return the override untouched, otherwise let the operator pick a cluster ARN."""
        if override:
            return override

        with show_spinner():
            cluster_arns = self.cluster_service.get_cluster_arns()

        if not cluster_arns:
            raise NoResourcesFoundError("No clusters found")

        choices: list[Choice] = [{"name": format_resource_name(arn, "cluster"), "value": arn} for arn in cluster_arns]
        return self.require_selection(PROMPT, searchable_select(PROMPT, choices))
