"""Interface to the editor that hosts the open-in-vim command."""

from pathlib import Path
from typing import Protocol

from open_in_vim.models import ActiveDocument, WorkspaceFolder


class Terminal(Protocol):
    def show(self, preserve_focus: bool = False) -> None: ...


class EditorHost(Protocol):
    """What open-in-vim needs from the host editor.

    Implementations wrap a real editor API. The console host in
    :mod:`open_in_vim.cli` is the bundled one.
    """

    def active_document(self) -> ActiveDocument | None: ...

    def save_document(self, document: ActiveDocument) -> None:
        """Start saving ``document``. Callers do not wait for completion."""
        ...

    def workspace_folders(self) -> list[WorkspaceFolder]: ...

    def workspace_folder_for(self, path: Path) -> WorkspaceFolder | None: ...

    def set_status_message(self, message: str, timeout_ms: int) -> None: ...

    def show_error_message(self, message: str, *actions: str) -> str | None:
        """Show ``message`` and return the chosen action title, if any."""
        ...

    def create_terminal(self, name: str, shell_path: str, shell_args: list[str]) -> Terminal: ...

    def focus_terminal(self) -> None: ...
