"""Tests for task service."""

from datetime import datetime, timezone

from ecs_exec.features.task.task import (
    EXEC_DISABLED_MARKER,
    EXEC_ENABLED_MARKER,
    TaskService,
    format_task_label,
    has_execute_command_enabled,
)

TASK_ARN = "arn:aws:ecs:us-east-1:123456789012:task/production/abc123"


def _aws_task(task_arn: str = TASK_ARN, **overrides) -> dict:
    task = {
        "taskArn": task_arn,
        "taskDefinitionArn": "arn:aws:ecs:us-east-1:123456789012:task-definition/web-api:7",
        "lastStatus": "RUNNING",
        "startedAt": datetime(2023, 1, 1, 12, 0, tzinfo=timezone.utc),
        "enableExecuteCommand": True,
        "containers": [{"name": "web", "lastStatus": "RUNNING"}, {"name": "sidecar"}],
    }
    task.update(overrides)
    return task


def test_get_task_arns_scopes_to_service(mock_paginated_client):
    client = mock_paginated_client([{"taskArns": [TASK_ARN]}])

    result = TaskService(client).get_task_arns("production", "web-api")

    assert result == [TASK_ARN]
    client.get_paginator.assert_called_once_with("list_tasks")
    client.get_paginator.return_value.paginate.assert_called_once_with(cluster="production", serviceName="web-api")


def test_describe_tasks_builds_task_info(mock_ecs_client):
    mock_ecs_client.describe_tasks.return_value = {"tasks": [_aws_task()]}

    tasks = TaskService(mock_ecs_client).describe_tasks("production", [TASK_ARN])

    mock_ecs_client.describe_tasks.assert_called_once_with(cluster="production", tasks=[TASK_ARN])
    assert tasks == [
        {
            "task_arn": TASK_ARN,
            "task_definition_arn": "arn:aws:ecs:us-east-1:123456789012:task-definition/web-api:7",
            "started_at": datetime(2023, 1, 1, 12, 0, tzinfo=timezone.utc),
            "enable_execute_command": True,
            "containers": [
                {"name": "web"},
                {"name": "sidecar"},
            ],
        }
    ]


def test_describe_tasks_treats_missing_flag_as_disabled(mock_ecs_client):
    task = _aws_task()
    del task["enableExecuteCommand"]
    mock_ecs_client.describe_tasks.return_value = {"tasks": [task]}

    tasks = TaskService(mock_ecs_client).describe_tasks("production", [TASK_ARN])

    assert tasks[0]["enable_execute_command"] is False
    assert not has_execute_command_enabled(tasks[0])


def test_describe_tasks_batches_large_listings(mock_ecs_client):
    arns = [f"{TASK_ARN}-{i}" for i in range(150)]
    mock_ecs_client.describe_tasks.side_effect = lambda cluster, tasks: {"tasks": [_aws_task(arn) for arn in tasks]}

    tasks = TaskService(mock_ecs_client).describe_tasks("production", arns)

    assert mock_ecs_client.describe_tasks.call_count == 2
    assert [t["task_arn"] for t in tasks] == arns


def test_format_task_label_enabled():
    task = {
        "task_arn": TASK_ARN,
        "task_definition_arn": "arn:aws:ecs:us-east-1:123456789012:task-definition/web-api:7",
        "started_at": datetime(2023, 1, 1, 12, 0),
        "enable_execute_command": True,
        "containers": [],
    }

    assert format_task_label(task, 0) == f"#1 production/abc123 (v7) {EXEC_ENABLED_MARKER} - started Jan 1, 12:00 PM"


def test_format_task_label_disabled_without_start_time(make_task):
    task = make_task(task_id="def456", enabled=False, revision=3)
    task["started_at"] = None

    assert format_task_label(task, 4) == f"#5 production/def456 (v3) {EXEC_DISABLED_MARKER} - started unknown"
