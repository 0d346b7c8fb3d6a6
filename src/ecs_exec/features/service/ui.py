"""UI components for service selection."""

from __future__ import annotations

from ...core.base import BaseUIComponent
from ...core.errors import NoResourcesFoundError
from ...core.search import searchable_select
from ...core.types import Choice
from ...core.utils import format_resource_name, show_spinner
from .service import ServiceService

PROMPT = "Service:"


class ServiceUI(BaseUIComponent):
    """UI component for service selection."""

    def __init__(self, service_service: ServiceService) -> None:
        super().__init__()
        self.service_service = service_service

    def resolve_service(self, cluster: str, override: str | None = None) -> str:
        if override:
            return override

        with show_spinner():
            service_arns = self.service_service.get_service_arns(cluster)

        if not service_arns:
            raise NoResourcesFoundError("No services found")

        choices: list[Choice] = [{"name": format_resource_name(arn, "service"), "value": arn} for arn in service_arns]
        return self.require_selection(PROMPT, searchable_select(PROMPT, choices))
