"""`open-in-vim FILE` command implementation."""

import argparse
import logging
import sys
from pathlib import Path

from open_in_vim import __version__
from open_in_vim.cli.console_host import ConsoleHost
from open_in_vim.config import read_settings, resolve_config
from open_in_vim.dispatcher import open_in_vim
from open_in_vim.exceptions import ConfigurationError
from open_in_vim.models import ActiveDocument, Cursor, DetachedLaunch, WorkspaceFolder

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be 1 or greater, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build parser for open mode."""
    parser = argparse.ArgumentParser(
        prog="open-in-vim",
        description="Open a file in vim at a given position, using the configured open method",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-l", "--line", type=_positive_int, default=1, help="1-based cursor line (default: 1)"
    )
    parser.add_argument(
        "-c",
        "--column",
        type=_positive_int,
        default=1,
        help="1-based cursor column (default: 1)",
    )
    parser.add_argument(
        "-w",
        "--workspace",
        action="append",
        default=[],
        metavar="DIR",
        help="Open workspace folder; repeat for several (first one is the fallback)",
    )
    parser.add_argument(
        "-m",
        "--open-method",
        help="Override the configured openMethod for this run",
    )
    parser.add_argument("file", help="File to open")
    return parser


def build_host(args: argparse.Namespace) -> ConsoleHost:
    """Build a console host whose active document is the requested file."""
    document = ActiveDocument(
        path=Path(args.file).expanduser().resolve(),
        cursor=Cursor(line=args.line - 1, character=args.column - 1),
    )
    folders = []
    for raw in args.workspace:
        folder_path = Path(raw).expanduser().resolve()
        folders.append(WorkspaceFolder(name=folder_path.name or str(folder_path), path=folder_path))
    return ConsoleHost(document, folders)


def run(argv: list[str]) -> int:
    """Execute open mode."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    config = None
    if args.open_method is not None:
        try:
            settings = read_settings()
            settings["openMethod"] = args.open_method
            config = resolve_config(settings)
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    result = open_in_vim(build_host(args), config)
    if result is None:
        return 1
    if isinstance(result, DetachedLaunch):
        log.debug("handed off: %s (pid=%s)", result.description, result.pid)
    return 0
