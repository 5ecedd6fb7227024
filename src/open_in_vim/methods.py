"""Open methods: one handler per supported vim/terminal pairing."""

import dataclasses
import logging
import os
import shlex
import subprocess
from collections.abc import Callable

from open_in_vim.commands import open_args_to_command, write_launch_script
from open_in_vim.config import PATH_TO_WINDOWS_GIT_SHELL
from open_in_vim.exceptions import (
    ConfigurationError,
    ExternalProcessError,
    MissingShellError,
    Remediation,
    UnsupportedPlatformError,
)
from open_in_vim.host import EditorHost
from open_in_vim.models import (
    DEFAULT_ITERM_PROFILE,
    CompletedLaunch,
    DetachedLaunch,
    LaunchResult,
    OpenArgs,
    OpenInVimConfig,
    OpenMethod,
)
from open_in_vim.paths import ensure_unix_path_format
from open_in_vim.system import is_windows

log = logging.getLogger(__name__)

TERMINAL_NAME = "Open in Vim"
KITTY_TITLE = "open-in-vim"
OSASCRIPT = "/usr/bin/osascript"
WSL_PROBE = "test -d /mnt/c"

ALTERNATE_PLUGIN = Remediation(
    "View alternative plugin",
    "https://marketplace.visualstudio.com/items?itemName=mattn.OpenVim",
)
INSTALL_GIT = Remediation("Install Git", "https://git-scm.com/download/win")

OpenMethodHandler = Callable[[OpenArgs, OpenInVimConfig, EditorHost], LaunchResult]


def _run_blocking(command: str, cwd: str | None = None) -> CompletedLaunch:
    """Run ``command`` through the shell and wait for it to exit."""
    log.debug("running %s (cwd=%s)", command, cwd)
    result = subprocess.run(
        command,
        shell=True,
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise ExternalProcessError(
            f"Command failed with exit code {result.returncode}: {command}"
            + (f"\n{stderr}" if stderr else ""),
            returncode=result.returncode,
            stderr=stderr,
        )
    return CompletedLaunch(command=command, output=result.stdout or "")


def _spawn_detached(argv: list[str]) -> DetachedLaunch:
    """Start ``argv`` in its own session without waiting for it.

    A missing executable raises ``ExternalProcessError``.
    """
    description = shlex.join(argv)
    log.debug("spawning %s", description)
    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise ExternalProcessError(f"Failed to start {argv[0]}: {e}") from e
    return DetachedLaunch(description=description, pid=process.pid)


def _terminal_args(args: str) -> list[str]:
    """Split the configured emulator arguments the way a POSIX shell would."""
    try:
        return shlex.split(args)
    except ValueError as e:
        raise ConfigurationError(f"Cannot parse terminal arguments {args!r}: {e}") from e



def open_gvim(open_args: OpenArgs, config: OpenInVimConfig, host: EditorHost) -> LaunchResult:
    if is_windows():
        raise UnsupportedPlatformError(
            "Gvim is not supported on Windows. ლ(ಠ_ಠლ)", remediation=ALTERNATE_PLUGIN
        )
    gvim_args = dataclasses.replace(open_args, vim="gvim")
    return _run_blocking(open_args_to_command(gvim_args), cwd=gvim_args.workspace_path)


def _is_wsl_shell(shell_path: str) -> bool:
    """Return whether ``shell_path`` sees Windows drives under ``/mnt``.

    WSL bash and Git Bash both run on Windows but mount drives differently.
    """
    if not is_windows():
        return False
    try:
        probe = subprocess.run([shell_path, "-c", WSL_PROBE], capture_output=True)
    except OSError as e:
        log.debug("WSL probe with %s failed: %s", shell_path, e)
        return False
    return probe.returncode == 0


def open_integrated_terminal(
    open_args: OpenArgs, config: OpenInVimConfig, host: EditorHost
) -> LaunchResult:
    shell_path = config.integrated_terminal.path_to_shell or ""
    if not os.path.exists(shell_path):
        if is_windows() and shell_path == PATH_TO_WINDOWS_GIT_SHELL:
            raise MissingShellError(
                "Failed to find unix shell. If you install Git, open-in-vim can use "
                f'"{PATH_TO_WINDOWS_GIT_SHELL}".',
                remediation=INSTALL_GIT,
            )
        raise MissingShellError(f'Failed to find unix shell "{shell_path}". Check your settings.')

    wsl_style = _is_wsl_shell(shell_path)
    unix_args = dataclasses.replace(
        open_args,
        file_name=ensure_unix_path_format(open_args.file_name, wsl_style),
        workspace_path=ensure_unix_path_format(open_args.workspace_path, wsl_style),
    )
    script = ensure_unix_path_format(write_launch_script(unix_args), wsl_style)

    terminal = host.create_terminal(TERMINAL_NAME, shell_path, [script])
    terminal.show(preserve_focus=True)
    host.focus_terminal()
    return DetachedLaunch(description=f"{TERMINAL_NAME}: {shell_path} {script}")


def open_kitty(open_args: OpenArgs, config: OpenInVimConfig, host: EditorHost) -> LaunchResult:
    script = write_launch_script(open_args)
    return _spawn_detached(["kitty", "--title", KITTY_TITLE, "bash", script])


def open_gnome_terminal(
    open_args: OpenArgs, config: OpenInVimConfig, host: EditorHost
) -> LaunchResult:
    script = write_launch_script(open_args)
    args = _terminal_args(config.linux.gnome_terminal.args)
    return _spawn_detached(["gnome-terminal", *args, f"--command=bash {script}"])


def open_tilix(open_args: OpenArgs, config: OpenInVimConfig, host: EditorHost) -> LaunchResult:
    script = write_launch_script(open_args)
    args = _terminal_args(config.linux.tilix.args)
    return _spawn_detached(["tilix", *args, f"--command=bash {script}"])


def iterm_profile_clause(profile: str) -> str:
    """Return the ``create window with`` clause for a configured profile name."""
    if '"' in profile:
        raise ConfigurationError(f"iTerm profile name cannot contain double quotes: {profile}")
    if profile == DEFAULT_ITERM_PROFILE:
        return profile
    return f'profile "{profile}"'


def build_iterm_script(profile_clause: str, launch_script: str) -> str:
    """Return the AppleScript that opens an iTerm window running ``launch_script``."""
    return (
        'tell application "iTerm"\n'
        f'  set myNewWin to create window with {profile_clause} command "bash {launch_script}"\n'
        "end tell\n"
    )


def open_iterm(open_args: OpenArgs, config: OpenInVimConfig, host: EditorHost) -> LaunchResult:
    profile_clause = iterm_profile_clause(config.macos.iterm.profile)
    osascript_code = build_iterm_script(profile_clause, write_launch_script(open_args))
    log.debug("osascript input:\n%s", osascript_code)
    try:
        result = subprocess.run(
            [OSASCRIPT],
            input=osascript_code,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
    except OSError as e:
        raise ExternalProcessError(f"Failed to run {OSASCRIPT}: {e}") from e
    if result.stderr:
        raise ExternalProcessError(
            f"osascript reported an error: {result.stderr.strip()}",
            returncode=result.returncode,
            stderr=result.stderr,
        )
    return CompletedLaunch(command=OSASCRIPT, output=result.stdout or "")


def open_macvim(open_args: OpenArgs, config: OpenInVimConfig, host: EditorHost) -> LaunchResult:
    mvim_args = dataclasses.replace(open_args, vim="mvim")
    return _run_blocking(open_args_to_command(mvim_args), cwd=mvim_args.workspace_path)


OPEN_METHODS: dict[OpenMethod, OpenMethodHandler] = {
    OpenMethod.GVIM: open_gvim,
    OpenMethod.INTEGRATED_TERMINAL: open_integrated_terminal,
    OpenMethod.KITTY: open_kitty,
    OpenMethod.LINUX_GNOME_TERMINAL: open_gnome_terminal,
    OpenMethod.LINUX_TILIX: open_tilix,
    OpenMethod.MACOS_ITERM: open_iterm,
    OpenMethod.MACOS_MACVIM: open_macvim,
}

_missing = set(OpenMethod) - set(OPEN_METHODS)
if _missing:
    raise RuntimeError(f"open methods without a handler: {sorted(m.value for m in _missing)}")
