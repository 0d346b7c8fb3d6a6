"""Checks that the aws CLI and the Session Manager plugin are installed."""

from __future__ import annotations

import json
import subprocess
import time
from pathlib import Path

from ...core.utils import console, err_console, print_info, print_success

CACHE_PATH = Path.home() / ".ecs-exec" / "prerequisites.json"
CACHE_TTL_MS = 7 * 24 * 60 * 60 * 1000

AWS_CLI_URL = "https://aws.amazon.com/cli/"
SESSION_MANAGER_URL = (
    "https://docs.aws.amazon.com/systems-manager/latest/userguide/session-manager-working-with-install-plugin.html"
)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _command_succeeds(args: list[str]) -> bool:
    try:
        result = subprocess.run(args, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False)
    except OSError:
        return False
    return result.returncode == 0


def check_aws_cli() -> bool:
    return _command_succeeds(["aws", "--version"])


def check_session_manager_plugin() -> bool:
    return _command_succeeds(["aws", "ssm", "start-session", "help"])


def display_aws_cli_error() -> None:
    err_console.print("✗ AWS CLI is not installed or not accessible", style="red")
    err_console.print("\nTo use this tool, you need to install the AWS CLI:")
    err_console.print(AWS_CLI_URL, style="blue")
    err_console.print(
        "\nInstallation options:\n"
        "• macOS: brew install awscli\n"
        "• Windows: Download installer from AWS\n"
        "• Linux: pip install awscli"
    )


def display_session_manager_plugin_error() -> None:
    err_console.print("✗ Session Manager plugin is not installed", style="red")
    err_console.print("\nTo use this tool, you need to install the Session Manager plugin:")
    err_console.print(SESSION_MANAGER_URL, style="blue")
    err_console.print(
        "\nInstallation options:\n"
        "• macOS: Download and install the .pkg file\n"
        "• Windows: Download and run the .msi installer\n"
        "• Linux: Download and install the .deb or .rpm package"
    )


def read_cached_result(cache_path: Path = CACHE_PATH) -> bool:
    """True when a passing check was recorded within the last week."""
    try:
        data = json.loads(cache_path.read_text(encoding="utf-8"))
        timestamp = int(data["timestamp"])
        passed = data["prerequisitesPassed"] is True
    except (OSError, ValueError, TypeError, KeyError):
        return False
    return passed and 0 <= _now_ms() - timestamp < CACHE_TTL_MS


def write_cached_result(cache_path: Path = CACHE_PATH) -> None:
    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        cache_path.write_text(
            json.dumps({"timestamp": _now_ms(), "prerequisitesPassed": True}),
            encoding="utf-8",
        )
    except OSError as e:
        console.print(f"Could not write prerequisites cache: {e}", style="dim")


def check_prerequisites(cache_path: Path = CACHE_PATH) -> bool:
    """Run the installation checks in order, stopping at the first failure."""
    if read_cached_result(cache_path):
        return True

    print_info("Checking prerequisites...")

    if not check_aws_cli():
        display_aws_cli_error()
        return False

    if not check_session_manager_plugin():
        display_session_manager_plugin_error()
        return False

    write_cached_result(cache_path)
    print_success("✓ Prerequisites check passed")
    return True
