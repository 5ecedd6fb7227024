"""Command-line front-end for open-in-vim."""

from open_in_vim.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
