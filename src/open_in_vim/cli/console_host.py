"""Editor host backed by the command line and the current terminal."""

import logging
import subprocess
import sys
from pathlib import Path
from typing import TextIO

from open_in_vim.models import ActiveDocument, WorkspaceFolder

log = logging.getLogger(__name__)


class ConsoleTerminal:
    """Runs the launch shell in the foreground of the current terminal."""

    def __init__(self, name: str, shell_path: str, shell_args: list[str]) -> None:
        self.name = name
        self.shell_path = shell_path
        self.shell_args = shell_args

    def show(self, preserve_focus: bool = False) -> None:
        log.debug("%s: running %s %s", self.name, self.shell_path, self.shell_args)
        subprocess.run([self.shell_path, *self.shell_args], check=False)


class ConsoleHost:
    """Host whose active document and workspaces come from CLI arguments."""

    def __init__(
        self,
        document: ActiveDocument | None,
        folders: list[WorkspaceFolder] | None = None,
        stream: TextIO | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        self._document = document
        self._folders = list(folders or [])
        self._stream = stream if stream is not None else sys.stderr
        self._input_stream = input_stream if input_stream is not None else sys.stdin

    def active_document(self) -> ActiveDocument | None:
        return self._document

    def save_document(self, document: ActiveDocument) -> None:
        # Files named on the command line are already on disk.
        log.debug("nothing to save for %s", document.path)

    def workspace_folders(self) -> list[WorkspaceFolder]:
        return list(self._folders)

    def workspace_folder_for(self, path: Path) -> WorkspaceFolder | None:
        """Return the innermost workspace folder containing ``path``."""
        matches = [folder for folder in self._folders if folder.contains(path)]
        if not matches:
            return None
        return max(matches, key=lambda folder: len(folder.path.parts))

    def set_status_message(self, message: str, timeout_ms: int) -> None:
        print(message, file=self._stream)

    def _is_interactive(self) -> bool:
        return self._stream.isatty() and self._input_stream.isatty()

    def show_error_message(self, message: str, *actions: str) -> str | None:
        print(f"Error: {message}", file=self._stream)
        if not actions or not self._is_interactive():
            return None
        for action in actions:
            print(f"{action}? [y/N]: ", end="", file=self._stream, flush=True)
            choice = self._input_stream.readline().strip().lower()
            if choice in {"y", "yes"}:
                return action
        return None

    def create_terminal(self, name: str, shell_path: str, shell_args: list[str]) -> ConsoleTerminal:
        return ConsoleTerminal(name, shell_path, shell_args)

    def focus_terminal(self) -> None:
        pass
