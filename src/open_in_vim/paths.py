"""Path conversion between Windows and POSIX-style shells."""

import re

from open_in_vim.system import is_windows

_DRIVE_PREFIX_RE = re.compile(r"^/?([A-Za-z]):")


def ensure_unix_path_format(path: str, wsl_style: bool) -> str:
    """Rewrite a Windows path for a POSIX shell running on Windows.

    ``C:\\test\\file.txt`` becomes ``/c/test/file.txt`` for Git Bash, or
    ``/mnt/c/test/file.txt`` when ``wsl_style`` is set. Other hosts get the
    path back unchanged.
    """
    if not is_windows():
        return path
    prefix = "/mnt/" if wsl_style else "/"
    path = _DRIVE_PREFIX_RE.sub(lambda m: prefix + m.group(1).lower(), path, count=1)
    return path.replace("\\", "/")
