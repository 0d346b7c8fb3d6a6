"""Base classes for AWS services and UI components."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .errors import SelectionCancelledError

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class BaseAWSService:
    """Base class for AWS service interactions with common patterns."""

    def __init__(self, ecs_client: ECSClient) -> None:
        self.ecs_client = ecs_client


class BaseUIComponent:
    """Base class for UI components with common patterns."""

    @staticmethod
    def require_selection(prompt: str, selected: Any) -> Any:  # noqa: ANN401
        """Raise if the operator aborted the prompt, otherwise pass the value through."""
        if selected is None:
            raise SelectionCancelledError(prompt)
        return selected
