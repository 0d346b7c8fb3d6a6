"""Builds and runs the `aws ecs execute-command` invocation."""

from __future__ import annotations

import shlex
import subprocess

from ...core.utils import console, print_error

# Shell conventions for a missing binary and for a child killed by a signal
EXIT_COMMAND_NOT_FOUND = 127
SIGNAL_EXIT_OFFSET = 128


def build_command(
    cluster: str,
    task_arn: str,
    container: str,
    shell_command: str,
    region: str | None = None,
    profile: str | None = None,
) -> str:
    exec_args = ["aws", "ecs", "execute-command"]
    if region:
        exec_args += ["--region", region]
    if profile:
        exec_args += ["--profile", profile]

    # fmt: off
    exec_args += [
        "--cluster", cluster,
        "--task", task_arn,
        "--container", container,
        "--interactive",
        "--command", shell_command,
    ]
    # fmt: on
    return shlex.join(exec_args)


def _exit_status(returncode: int) -> int:
    if returncode < 0:
        return SIGNAL_EXIT_OFFSET - returncode
    return returncode


def launch(command: str, print_only: bool = False) -> int:
    """Print the command, or run it attached to this terminal and return its exit status."""
    if print_only:
        print(command)
        return 0

    try:
        result = subprocess.run(shlex.split(command), check=False)
    except OSError as e:
        print_error(f"✗ Could not run aws CLI: {e}")
        return EXIT_COMMAND_NOT_FOUND

    exit_status = _exit_status(result.returncode)
    console.print(f"[shell] terminated : {exit_status}", style="dim", markup=False)
    return exit_status
