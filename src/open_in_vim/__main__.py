"""Run open-in-vim as a module: python -m open_in_vim."""

from open_in_vim.cli import main

raise SystemExit(main())
