"""Per-invocation launch records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchRequest:
    """What to open and where: 1-based position plus the working directory."""

    file_path: str
    line: int
    column: int
    workspace_path: str


@dataclass(frozen=True)
class OpenArgs:
    """Arguments handed to an open method.

    Handlers derive adjusted copies with ``dataclasses.replace`` instead of
    mutating the shared instance.
    """

    vim: str
    file_name: str
    args: str
    workspace_path: str
