"""Top-level open-in-vim command: resolve, build, dispatch, report."""

import logging
import webbrowser

from open_in_vim.commands import build_vim_args
from open_in_vim.config import load_config
from open_in_vim.exceptions import OpenInVimError, Remediation, UnsupportedStrategyError
from open_in_vim.host import EditorHost
from open_in_vim.methods import OPEN_METHODS, OpenMethodHandler
from open_in_vim.models import LaunchResult, OpenArgs, OpenInVimConfig, OpenMethod
from open_in_vim.request import build_launch_request

log = logging.getLogger(__name__)

ERROR_PREFIX = "Open in Vim failed: "


def lookup_open_method(name: str) -> OpenMethodHandler:
    """Return the handler for ``name`` or raise ``UnsupportedStrategyError``."""
    try:
        method = OpenMethod(name)
    except ValueError:
        raise UnsupportedStrategyError(name, [m.value for m in OpenMethod]) from None
    return OPEN_METHODS[method]


def run_open_in_vim(host: EditorHost, config: OpenInVimConfig) -> LaunchResult:
    """Run the pipeline and let errors propagate."""
    request = build_launch_request(host)
    handler = lookup_open_method(config.open_method)
    log.debug("open method %s -> %s", config.open_method, handler.__name__)

    open_args = OpenArgs(
        vim=config.vim_executable,
        file_name=request.file_path,
        args=build_vim_args(
            request.line,
            request.column,
            config.restore_cursor_after_vim,
            config.goto_command,
        ),
        workspace_path=request.workspace_path,
    )
    return handler(open_args, config, host)


def _offer_remediation(host: EditorHost, message: str, remediation: Remediation | None) -> None:
    if remediation is None:
        host.show_error_message(message)
        return
    choice = host.show_error_message(message, remediation.title)
    if choice == remediation.title:
        webbrowser.open(remediation.url)


def _report_failure(host: EditorHost, message: str, remediation: Remediation | None) -> None:
    """Show ``message`` to the user. A failing host or browser is only logged."""
    try:
        _offer_remediation(host, message, remediation)
    except Exception:
        log.exception("failed to report error to host: %s", message)


def open_in_vim(host: EditorHost, config: OpenInVimConfig | None = None) -> LaunchResult | None:
    """Open the host's active document in vim.

    Settings are loaded fresh unless ``config`` is given. Every failure is
    logged and shown through ``host.show_error_message``: known errors with
    their own message, anything else prefixed with ``ERROR_PREFIX``. ``None``
    is returned in that case and nothing is raised, not even when reporting
    the failure fails.
    """
    try:
        resolved = config if config is not None else load_config()
        return run_open_in_vim(host, resolved)
    except OpenInVimError as e:
        log.error("%s", e)
        _report_failure(host, str(e), e.remediation)
    except Exception as e:
        log.exception("unexpected error while opening vim")
        _report_failure(host, f"{ERROR_PREFIX}{e}", None)
    return None
