"""Supported ways of opening vim."""

from enum import Enum


class OpenMethod(str, Enum):
    """Pairing of an external vim flavour with the mechanism that hosts it."""

    GVIM = "gvim"
    INTEGRATED_TERMINAL = "integrated-terminal"
    KITTY = "kitty"
    LINUX_GNOME_TERMINAL = "linux.gnome-terminal"
    LINUX_TILIX = "linux.tilix"
    MACOS_ITERM = "macos.iterm"
    MACOS_MACVIM = "macos.macvim"
