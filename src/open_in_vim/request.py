"""Build a launch request from the host editor's current state."""

import logging
from pathlib import Path

from open_in_vim.exceptions import NoActiveDocumentError, UnsavedDocumentError
from open_in_vim.host import EditorHost
from open_in_vim.models import LaunchRequest

log = logging.getLogger(__name__)

DEFAULTED_WORKSPACE_MESSAGE_MS = 5000


def resolve_workspace_path(host: EditorHost, document_path: Path) -> str:
    """Return the working directory for vim.

    Preference order: the folder containing the document, the first open
    folder, then the user's home directory.
    """
    workspace = host.workspace_folder_for(document_path)
    if workspace is not None:
        return str(workspace.path)

    folders = host.workspace_folders()
    if folders:
        first = folders[0]
        host.set_status_message(
            f"OpenInVim defaulted vim working dir to {first.name}",
            DEFAULTED_WORKSPACE_MESSAGE_MS,
        )
        return str(first.path)

    return str(Path.home())


def build_launch_request(host: EditorHost) -> LaunchRequest:
    document = host.active_document()
    if document is None:
        raise NoActiveDocumentError("No active editor.")
    if document.path is None:
        raise UnsavedDocumentError("Please save the file first.")
    if document.is_dirty:
        host.save_document(document)

    request = LaunchRequest(
        file_path=str(document.path),
        line=document.cursor.line + 1,
        column=document.cursor.character + 1,
        workspace_path=resolve_workspace_path(host, document.path),
    )
    log.debug("launch request: %s", request)
    return request
