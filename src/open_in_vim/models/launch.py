"""Outcome of an open method."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompletedLaunch:
    """A blocking invocation that ran to completion."""

    command: str
    output: str = ""


@dataclass(frozen=True)
class DetachedLaunch:
    """A process or terminal that was handed off and is not tracked further."""

    description: str
    pid: int | None = None


LaunchResult = CompletedLaunch | DetachedLaunch
