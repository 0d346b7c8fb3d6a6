"""Context objects for passing options between components."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_REGION = "us-east-1"
DEFAULT_COMMAND = "/bin/sh"


@dataclass(frozen=True)
class SessionOptions:
    """Everything the operator supplied on the command line."""

    region: str | None = DEFAULT_REGION
    profile: str | None = None
    cluster: str | None = None
    service: str | None = None
    container: str | None = None
    command: str = DEFAULT_COMMAND
    print_only: bool = False
