"""Configuration loading and resolution for open-in-vim."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from open_in_vim.exceptions import ConfigurationError
from open_in_vim.models import DEFAULT_VIM_EXECUTABLE, OpenInVimConfig
from open_in_vim.system import is_windows

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".open-in-vim"
CONFIG_FILE = CONFIG_DIR / "config.json"
CONFIG_FILE_ENV = "OPEN_IN_VIM_CONFIG"

PATH_TO_WINDOWS_GIT_SHELL = "C:\\Program Files\\Git\\bin\\bash.exe"
PATH_TO_POSIX_SHELL = "/bin/bash"

OPEN_METHOD_LEGACY_ALIASES = {
    "osx.iterm": "macos.iterm",
    "osx.macvim": "macos.macvim",
}


def default_shell_path() -> str:
    """Return the shell used by the integrated terminal when none is set."""
    return PATH_TO_WINDOWS_GIT_SHELL if is_windows() else PATH_TO_POSIX_SHELL


def config_path() -> Path:
    override = os.environ.get(CONFIG_FILE_ENV, "").strip()
    return Path(override).expanduser() if override else CONFIG_FILE


def _expand_dotted_keys(raw: dict[str, Any]) -> dict[str, Any]:
    """Turn ``{"linux.tilix.args": "-a"}`` into ``{"linux": {"tilix": {"args": "-a"}}}``.

    Only keys are split. Values such as ``"linux.tilix"`` are left alone.
    """
    expanded: dict[str, Any] = {}
    for key, value in raw.items():
        if isinstance(value, dict):
            value = _expand_dotted_keys(value)
        parts = key.split(".")
        target = expanded
        for part in parts[:-1]:
            child = target.get(part)
            if not isinstance(child, dict):
                child = {}
                target[part] = child
            target = child
        leaf = parts[-1]
        if isinstance(value, dict) and isinstance(target.get(leaf), dict):
            target[leaf] = {**target[leaf], **value}
        else:
            target[leaf] = value
    return expanded


def _use_documented_keys(model: type[BaseModel], settings: dict[str, Any]) -> dict[str, Any]:
    """Rename field names such as ``path_to_shell`` to their documented key ``pathToShell``.

    When both spellings are present the documented key wins.
    """
    renamed = dict(settings)
    for name, field in model.model_fields.items():
        key = field.alias or name
        if name != key and name in renamed:
            renamed.setdefault(key, renamed.pop(name))
        nested = renamed.get(key)
        group = field.annotation
        if isinstance(nested, dict) and isinstance(group, type) and issubclass(group, BaseModel):
            renamed[key] = _use_documented_keys(group, nested)
    return renamed


def normalize_settings(raw: dict[str, Any] | None) -> dict[str, Any]:
    """Return user settings in canonical form, without filling in defaults.

    Dotted keys are expanded, field-name spellings become documented keys and
    legacy ``openMethod`` values are rewritten.
    """
    settings = _use_documented_keys(OpenInVimConfig, _expand_dotted_keys(dict(raw or {})))
    open_method = settings.get("openMethod")
    if isinstance(open_method, str) and open_method in OPEN_METHOD_LEGACY_ALIASES:
        settings["openMethod"] = OPEN_METHOD_LEGACY_ALIASES[open_method]
        log.debug("rewrote legacy openMethod %r to %r", open_method, settings["openMethod"])
    return settings


def resolve_config(raw: dict[str, Any] | None = None) -> OpenInVimConfig:
    """Merge defaults into sparse user settings and rewrite legacy values.

    An unknown ``openMethod`` is passed through untouched; the dispatcher
    reports it.
    """
    settings = normalize_settings(raw)

    terminal = settings.get("integrated-terminal")
    if not isinstance(terminal, dict):
        terminal = {}
    if not terminal.get("pathToShell"):
        terminal = {**terminal, "pathToShell": default_shell_path()}
    settings["integrated-terminal"] = terminal

    if not settings.get("vimExecutable"):
        settings["vimExecutable"] = DEFAULT_VIM_EXECUTABLE

    try:
        return OpenInVimConfig.model_validate(settings)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def read_settings(path: Path | None = None) -> dict[str, Any]:
    """Read the raw settings file. A missing file yields empty settings."""
    target = path if path is not None else config_path()
    try:
        with open(target, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError:
        log.debug("no settings file at %s, using defaults", target)
        return {}
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Settings file {target} is not valid JSON: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {target}: {e}") from e
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Settings file {target} must contain a JSON object")
    return payload


def load_config(path: Path | None = None) -> OpenInVimConfig:
    """Read and resolve settings. Called fresh for every launch request."""
    return resolve_config(read_settings(path))


def save_config(settings: dict[str, Any], path: Path | None = None) -> Path:
    """Persist user settings under their documented key names.

    Only what the user supplied is written. Resolved defaults such as the
    per-OS shell path stay out of the file.
    """
    target = path if path is not None else config_path()
    os.makedirs(target.parent, mode=0o700, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(normalize_settings(settings), f, indent=2)
        f.write("\n")
    log.debug("saved settings to %s", target)
    return target
