"""`open-in-vim configure` command implementation."""

import argparse
import logging
import sys

from open_in_vim.config import (
    OPEN_METHOD_LEGACY_ALIASES,
    config_path,
    read_settings,
    resolve_config,
    save_config,
)
from open_in_vim.exceptions import ConfigurationError
from open_in_vim.models import OpenInVimConfig, OpenMethod


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the configure command."""
    parser = argparse.ArgumentParser(
        prog="open-in-vim configure",
        description="Show or update open-in-vim settings",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--open-method",
        choices=[m.value for m in OpenMethod] + sorted(OPEN_METHOD_LEGACY_ALIASES),
        help="How vim is opened",
    )
    parser.add_argument("--vim-executable", help="vim executable name or path (default: vim)")
    restore_group = parser.add_mutually_exclusive_group()
    restore_group.add_argument(
        "--restore-cursor",
        action="store_true",
        help="Move the editor cursor to vim's last position when vim exits",
    )
    restore_group.add_argument(
        "--no-restore-cursor",
        action="store_true",
        help="Leave the editor cursor alone when vim exits (default)",
    )
    parser.add_argument(
        "--goto-command",
        help="Command the exit hook uses to reopen the file (default: code --goto)",
    )
    parser.add_argument("--shell", help="Shell used by the integrated-terminal method")
    parser.add_argument(
        "--gnome-terminal-args",
        help="Extra arguments for gnome-terminal (example: --window)",
    )
    parser.add_argument("--tilix-args", help="Extra arguments for tilix")
    parser.add_argument(
        "--iterm-profile",
        help='iTerm profile name (default: "default profile")',
    )
    return parser


def _updated_settings(settings: dict, args: argparse.Namespace) -> dict:
    """Return a copy of ``settings`` with the explicit CLI options applied."""
    updated = dict(settings)
    if args.open_method is not None:
        updated["openMethod"] = args.open_method
    if args.vim_executable is not None:
        updated["vimExecutable"] = args.vim_executable
    if args.restore_cursor:
        updated["restoreCursorAfterVim"] = True
    if args.no_restore_cursor:
        updated["restoreCursorAfterVim"] = False
    if args.goto_command is not None:
        updated["gotoCommand"] = args.goto_command
    if args.shell is not None:
        updated["integrated-terminal.pathToShell"] = args.shell
    if args.gnome_terminal_args is not None:
        updated["linux.gnome-terminal.args"] = args.gnome_terminal_args
    if args.tilix_args is not None:
        updated["linux.tilix.args"] = args.tilix_args
    if args.iterm_profile is not None:
        updated["macos.iterm.profile"] = args.iterm_profile
    return updated


def _print_summary(config: OpenInVimConfig) -> None:
    print(f"  openMethod: {config.open_method}")
    print(f"  vimExecutable: {config.vim_executable}")
    print("  restoreCursorAfterVim: " + ("true" if config.restore_cursor_after_vim else "false"))
    print(f"  gotoCommand: {config.goto_command}")
    print(f"  integrated-terminal.pathToShell: {config.integrated_terminal.path_to_shell}")
    print(f"  linux.gnome-terminal.args: {config.linux.gnome_terminal.args or '(none)'}")
    print(f"  linux.tilix.args: {config.linux.tilix.args or '(none)'}")
    print(f"  macos.iterm.profile: {config.macos.iterm.profile}")
    print("")


def run(argv: list[str]) -> int:
    """Execute the configure command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        settings = read_settings()
        updated_settings = _updated_settings(settings, args)
        config = resolve_config(updated_settings)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if updated_settings == settings:
        print(f"\nCurrent settings ({config_path()}):")
        _print_summary(config)
        return 0

    target = save_config(updated_settings)
    print(f"\nConfiguration saved to {target}")
    _print_summary(config)
    return 0
