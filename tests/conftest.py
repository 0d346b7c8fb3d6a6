"""Shared pytest fixtures for tests."""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_paginated_client():
    def _create_client(pages: list[dict]) -> Mock:
        client = Mock()
        paginator = Mock()
        paginator.paginate.return_value = pages
        client.get_paginator.return_value = paginator
        return client

    return _create_client


@pytest.fixture
def mock_ecs_client():
    return Mock()


@pytest.fixture
def make_task():
    def _make_task(
        task_id: str = "abc123",
        enabled: bool = True,
        containers: list[str] | None = None,
        revision: int = 1,
    ) -> dict:
        return {
            "task_arn": f"arn:aws:ecs:us-east-1:123456789012:task/production/{task_id}",
            "task_definition_arn": f"arn:aws:ecs:us-east-1:123456789012:task-definition/web-api:{revision}",
            "started_at": datetime(2023, 1, 1, 12, 0, tzinfo=timezone.utc),
            "enable_execute_command": enabled,
            "containers": [{"name": name} for name in (containers or ["web"])],
        }

    return _make_task
