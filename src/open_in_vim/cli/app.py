"""``open-in-vim`` console command.

``open-in-vim FILE [-l LINE] ...`` opens a file in vim.
``open-in-vim configure [...]`` shows or edits the settings file.
"""

import sys
from collections.abc import Callable

from open_in_vim.cli import configure, open_file

SUBCOMMANDS: dict[str, Callable[[list[str]], int]] = {
    "configure": configure.run,
}


def main(argv: list[str] | None = None) -> int:
    """Run a subcommand, or open mode when the first word is not one.

    A file literally named ``configure`` can be opened as ``./configure``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in SUBCOMMANDS:
        return SUBCOMMANDS[args[0]](args[1:])
    return open_file.run(args)


def entrypoint() -> None:
    raise SystemExit(main())
