import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError
from rich.console import Console

if TYPE_CHECKING:
    from mypy_boto3_ecs import ECSClient

from .aws_service import ECSService
from .core.app import EXIT_FAILURE, run_session
from .core.context import DEFAULT_COMMAND, DEFAULT_REGION, SessionOptions
from .ui import ExecNavigator

try:
    __version__ = version("ecs-exec")
except PackageNotFoundError:
    __version__ = "dev"

console = Console(stderr=True)


def parse_args(argv: list[str] | None = None) -> SessionOptions:
    parser = argparse.ArgumentParser(description="Open an interactive shell in an ECS container")
    parser.add_argument("--version", action="version", version=f"ecs-exec {__version__}")
    parser.add_argument("-r", "--region", help="AWS region to search", default=DEFAULT_REGION)
    parser.add_argument("-p", "--profile", help="AWS profile to use for authentication", default=None)
    parser.add_argument("-c", "--cluster", help="ECS cluster name or ARN, skips cluster lookup", default=None)
    parser.add_argument("-s", "--service", help="ECS service name or ARN, skips service lookup", default=None)
    parser.add_argument(
        "--container",
        help="Container name to exec into; only needed when the task runs several containers",
        default=None,
    )
    parser.add_argument("--command", help="Command to execute in the container", default=DEFAULT_COMMAND)
    parser.add_argument(
        "--print", dest="print_only", action="store_true", help="Print the command instead of executing it"
    )
    args = parser.parse_args(argv)

    return SessionOptions(
        region=args.region,
        profile=args.profile,
        cluster=args.cluster,
        service=args.service,
        container=args.container,
        command=args.command,
        print_only=args.print_only,
    )


def main() -> None:
    """Interactive exec into an ECS container."""
    options = parse_args()

    try:
        ecs_client = _create_aws_client(options.profile, options.region)
    except BotoCoreError as e:
        console.print(f"❌ Error: {e}", style="red")
        console.print("Make sure your AWS credentials are configured.", style="dim")
        sys.exit(EXIT_FAILURE)

    navigator = ExecNavigator(ECSService(ecs_client))
    sys.exit(run_session(navigator, options))


def _create_aws_client(profile_name: str | None, region_name: str | None) -> "ECSClient":
    """Create optimized AWS ECS client with connection pooling."""
    config = Config(
        max_pool_connections=5,
        retries={"max_attempts": 2, "mode": "adaptive"},
    )

    session = boto3.Session(profile_name=profile_name, region_name=region_name)
    return session.client("ecs", config=config)


if __name__ == "__main__":
    main()
