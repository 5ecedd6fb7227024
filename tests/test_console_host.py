"""Unit tests for open_in_vim.cli.console_host."""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

from open_in_vim.cli.console_host import ConsoleHost, ConsoleTerminal
from open_in_vim.models import ActiveDocument, WorkspaceFolder


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


class TestWorkspaceFolders:
    def test_innermost_containing_folder_wins(self):
        outer = WorkspaceFolder("w", Path("/w"))
        inner = WorkspaceFolder("app", Path("/w/app"))
        host = ConsoleHost(None, [outer, inner])
        assert host.workspace_folder_for(Path("/w/app/src/a.py")) == inner
        assert host.workspace_folder_for(Path("/w/readme.md")) == outer

    def test_unrelated_path_has_no_folder(self):
        host = ConsoleHost(None, [WorkspaceFolder("w", Path("/w"))])
        assert host.workspace_folder_for(Path("/other/a.py")) is None

    def test_folder_contains_itself(self):
        assert WorkspaceFolder("w", Path("/w")).contains(Path("/w"))
        assert not WorkspaceFolder("w", Path("/w")).contains(Path("/wx/a.py"))


class TestMessages:
    def test_error_message_without_tty_returns_none(self):
        stream = io.StringIO()
        host = ConsoleHost(ActiveDocument(None), stream=stream, input_stream=io.StringIO("y\n"))
        assert host.show_error_message("bad", "Install Git") is None
        assert "Error: bad" in stream.getvalue()

    def test_action_accepted_on_tty(self):
        stream = FakeTTY()
        host = ConsoleHost(None, stream=stream, input_stream=FakeTTY("y\n"))
        assert host.show_error_message("bad", "Install Git") == "Install Git"
        assert "Install Git? [y/N]" in stream.getvalue()

    def test_action_declined_on_tty(self):
        host = ConsoleHost(None, stream=FakeTTY(), input_stream=FakeTTY("\n"))
        assert host.show_error_message("bad", "Install Git") is None

    def test_status_message_is_printed(self):
        stream = io.StringIO()
        ConsoleHost(None, stream=stream).set_status_message("defaulted", 5000)
        assert stream.getvalue() == "defaulted\n"


class TestTerminal:
    def test_create_terminal_returns_console_terminal(self):
        terminal = ConsoleHost(None).create_terminal("Open in Vim", "/bin/bash", ["/tmp/s.sh"])
        assert isinstance(terminal, ConsoleTerminal)
        assert terminal.shell_args == ["/tmp/s.sh"]

    @patch("open_in_vim.cli.console_host.subprocess.run")
    def test_show_runs_shell_in_foreground(self, mock_run):
        ConsoleTerminal("Open in Vim", "/bin/bash", ["/tmp/s.sh"]).show(preserve_focus=True)
        mock_run.assert_called_once_with(["/bin/bash", "/tmp/s.sh"], check=False)

    def test_save_document_is_a_no_op(self):
        host = ConsoleHost(None)
        host.save_document(MagicMock(path=Path("/w/a.py")))
