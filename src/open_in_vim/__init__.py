"""Open the active file in vim, gvim, or a terminal emulator running vim."""

__version__ = "0.1.0"
