"""Main application logic for the ecs-exec CLI."""

from __future__ import annotations

from botocore.exceptions import BotoCoreError, ClientError

from ..features.session.command import build_command, launch
from ..features.session.prerequisites import check_prerequisites
from ..ui import ExecNavigator
from .context import SessionOptions
from .errors import EXECUTE_COMMAND_EXAMPLE, EXECUTE_COMMAND_HINT, EcsExecError, IneligibleTaskError
from .utils import err_console, print_error

EXIT_FAILURE = 1


def resolve_command(navigator: ExecNavigator, options: SessionOptions) -> str:
    """Walk cluster, service, task and container, then compose the exec command."""
    cluster = navigator.resolve_cluster(options.cluster)
    service = navigator.resolve_service(cluster, options.service)
    task = navigator.resolve_task(cluster, service)
    container = navigator.resolve_container(task, options.container)
    return build_command(cluster, task["task_arn"], container, options.command, options.region, options.profile)


def run_session(navigator: ExecNavigator, options: SessionOptions) -> int:
    """Run the whole flow and return the process exit status."""
    if not options.print_only and not check_prerequisites():
        return EXIT_FAILURE

    try:
        command = resolve_command(navigator, options)
    except IneligibleTaskError as e:
        print_error(str(e))
        err_console.print(f"\n{EXECUTE_COMMAND_HINT}")
        err_console.print(EXECUTE_COMMAND_EXAMPLE, style="dim")
        return EXIT_FAILURE
    except EcsExecError as e:
        print_error(str(e))
        return EXIT_FAILURE
    except (BotoCoreError, ClientError) as e:
        print_error(f"❌ Error: {e}")
        err_console.print("Make sure your AWS credentials are configured.", style="dim")
        return EXIT_FAILURE

    return launch(command, print_only=options.print_only)
