"""Model package for open-in-vim."""

from open_in_vim.models.document import ActiveDocument, Cursor, WorkspaceFolder
from open_in_vim.models.launch import CompletedLaunch, DetachedLaunch, LaunchResult
from open_in_vim.models.launch_request import LaunchRequest, OpenArgs
from open_in_vim.models.open_in_vim_config import (
    DEFAULT_GOTO_COMMAND,
    DEFAULT_ITERM_PROFILE,
    DEFAULT_VIM_EXECUTABLE,
    OpenInVimConfig,
)
from open_in_vim.models.open_method import OpenMethod

__all__ = [
    "ActiveDocument",
    "CompletedLaunch",
    "Cursor",
    "DEFAULT_GOTO_COMMAND",
    "DEFAULT_ITERM_PROFILE",
    "DEFAULT_VIM_EXECUTABLE",
    "DetachedLaunch",
    "LaunchRequest",
    "LaunchResult",
    "OpenArgs",
    "OpenInVimConfig",
    "OpenMethod",
    "WorkspaceFolder",
]
