"""Utility functions for ecs-exec."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import datetime
from typing import TYPE_CHECKING, Literal, TypeVar

from rich.console import Console
from rich.spinner import Spinner

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)


def format_resource_name(arn: str, resource_type: str) -> str:
    """Short display name for an ECS ARN.

    Takes the last ``:`` segment and drops the ``<resource_type>/`` token, so
    ``arn:aws:ecs:us-east-1:123:cluster/prod`` becomes ``prod`` and a task ARN
    keeps its ``<cluster>/<id>`` suffix. Anything without that structure is
    returned as whatever substring results.
    """
    return arn.split(":")[-1].replace(f"{resource_type}/", "", 1)


def short_task_id(task_arn: str) -> str:
    return format_resource_name(task_arn, "task")


def task_definition_revision(task_definition_arn: str) -> str:
    return format_resource_name(task_definition_arn, "task-definition")


def format_started_at(started_at: datetime | None) -> str:
    """Render a start time in local time, e.g. ``Jan 1, 12:00 PM``."""
    if not started_at:
        return "unknown"
    local = started_at.astimezone() if started_at.tzinfo else started_at
    return f"{local:%b} {local.day}, {local:%I:%M %p}"


def print_error(message: str) -> None:
    err_console.print(message, style="red")


def print_success(message: str) -> None:
    console.print(message, style="green")


def print_info(message: str) -> None:
    console.print(message, style="dim")


@contextmanager
def show_spinner() -> Iterator[None]:
    """Context manager that shows a spinner while running operations."""
    spinner = Spinner("dots", style="cyan")
    with console.status(spinner):
        yield

def paginate_aws_list(
    client: ECSClient,
    operation_name: Literal["list_clusters", "list_services", "list_tasks"],
    result_key: str,
    **kwargs: str,
) -> list[str]:
    paginator = client.get_paginator(operation_name)  # type: ignore[no-matching-overload]
    page_iterator = paginator.paginate(**kwargs)

    results: list[str] = []
    for page in page_iterator:
        results.extend(page.get(result_key, []))

    return results

def batch_items(items: Sequence[T], batch_size: int) -> Iterator[list[T]]:
    """Yield consecutive slices of at most batch_size items."""
    for start in range(0, len(items), batch_size):
        yield list(items[start : start + batch_size])
