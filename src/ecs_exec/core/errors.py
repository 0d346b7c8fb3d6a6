"""Exceptions raised while resolving an exec target."""

from __future__ import annotations

EXECUTE_COMMAND_HINT = """To connect to this task, the ECS service or task definition needs to have
the 'enable-execute-command' flag set to true.

You can enable this by:
• Updating your ECS service with --enable-execute-command flag
• Or updating your task definition and redeploying

AWS CLI example:"""

EXECUTE_COMMAND_EXAMPLE = "aws ecs update-service --cluster CLUSTER --service SERVICE --enable-execute-command"


class EcsExecError(Exception):
    """Base class for failures that end a session with exit status 1."""


class NoResourcesFoundError(EcsExecError):
    """A listing came back empty at the requested scope."""


class IneligibleTaskError(EcsExecError):
    """The selected task does not have execute command enabled."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"✗ Task {task_id} does not have execute command enabled")
        self.task_id = task_id


class SelectionCancelledError(EcsExecError):
    """The operator aborted an interactive prompt."""

    def __init__(self, prompt: str) -> None:
        super().__init__(f"Selection cancelled at '{prompt}'")
        self.prompt = prompt
