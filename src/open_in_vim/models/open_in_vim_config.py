"""Configuration model for open-in-vim.

Field aliases match the documented setting keys, so a settings file written by
hand (``{"openMethod": "kitty", "linux": {"tilix": {"args": "-a"}}}``) loads
as-is.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_OPEN_METHOD = "gvim"
DEFAULT_VIM_EXECUTABLE = "vim"
DEFAULT_GOTO_COMMAND = "code --goto"
DEFAULT_ITERM_PROFILE = "default profile"


class _SettingsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class IntegratedTerminalConfig(_SettingsModel):
    path_to_shell: str | None = Field(default=None, alias="pathToShell")


class TerminalArgsConfig(_SettingsModel):
    """Extra command-line flags passed to a terminal emulator."""

    args: str = ""


class LinuxConfig(_SettingsModel):
    gnome_terminal: TerminalArgsConfig = Field(
        default_factory=TerminalArgsConfig, alias="gnome-terminal"
    )
    tilix: TerminalArgsConfig = Field(default_factory=TerminalArgsConfig)


class ItermConfig(_SettingsModel):
    profile: str = DEFAULT_ITERM_PROFILE


class MacosConfig(_SettingsModel):
    iterm: ItermConfig = Field(default_factory=ItermConfig)


class OpenInVimConfig(_SettingsModel):
    """Resolved runtime configuration for one launch request."""

    # Kept as a plain string: unknown methods are reported by the dispatcher.
    open_method: str = Field(default=DEFAULT_OPEN_METHOD, alias="openMethod")
    vim_executable: str = Field(default=DEFAULT_VIM_EXECUTABLE, alias="vimExecutable")
    restore_cursor_after_vim: bool = Field(default=False, alias="restoreCursorAfterVim")
    goto_command: str = Field(default=DEFAULT_GOTO_COMMAND, alias="gotoCommand")
    integrated_terminal: IntegratedTerminalConfig = Field(
        default_factory=IntegratedTerminalConfig, alias="integrated-terminal"
    )
    linux: LinuxConfig = Field(default_factory=LinuxConfig)
    macos: MacosConfig = Field(default_factory=MacosConfig)
