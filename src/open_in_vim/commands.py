"""Vim command-line synthesis and temporary launch scripts."""

import logging
import tempfile

from open_in_vim.models import DEFAULT_GOTO_COMMAND, OpenArgs

log = logging.getLogger(__name__)


def autocmd_to_sync_cursor(goto_command: str) -> str:
    """Return a vim argument that reports the cursor back to the host on exit.

    Expands to::

        autocmd VimLeavePre * execute "!<goto_command> '" . expand("%") . ":" . line(".") . ":" . col(".") . "'"

    wrapped in single quotes for the shell.
    """
    return (
        "'+autocmd VimLeavePre * execute \"!" + goto_command + " '\"'\"'\" . expand(\"%\")"
        " . \":\" . line(\".\") . \":\" . col(\".\") . \"'\"'\"'\"'"
    )


def build_vim_args(
    line: int, column: int, restore_cursor: bool, goto_command: str = DEFAULT_GOTO_COMMAND
) -> str:
    """Return the arguments placed after the file name on the vim command line."""
    sync = autocmd_to_sync_cursor(goto_command) if restore_cursor else ""
    return f"'+call cursor({line}, {column})' {sync}; exit"


def open_args_to_command(open_args: OpenArgs) -> str:
    return f"{open_args.vim} '{open_args.file_name}' {open_args.args}"


def write_launch_script(open_args: OpenArgs) -> str:
    """Write a script that enters the workspace and starts vim; return its path.

    Each call creates a new file. Files are left for the OS to clean up.
    """
    script = tempfile.NamedTemporaryFile(
        mode="w", prefix="open_in_vim_", suffix=".sh", delete=False, encoding="utf-8"
    )
    script.write(f"cd '{open_args.workspace_path}'\n{open_args_to_command(open_args)}\n")
    script.close()
    log.debug("wrote launch script %s", script.name)
    return script.name
