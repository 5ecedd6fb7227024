"""Unit tests for open_in_vim.config."""

import json
from unittest.mock import patch

import pytest

from open_in_vim.config import (
    PATH_TO_POSIX_SHELL,
    PATH_TO_WINDOWS_GIT_SHELL,
    load_config,
    normalize_settings,
    read_settings,
    resolve_config,
    save_config,
)
from open_in_vim.exceptions import ConfigurationError


class TestLegacyAliases:
    def test_osx_iterm_becomes_macos_iterm(self):
        assert resolve_config({"openMethod": "osx.iterm"}).open_method == "macos.iterm"

    def test_osx_macvim_becomes_macos_macvim(self):
        assert resolve_config({"openMethod": "osx.macvim"}).open_method == "macos.macvim"

    @pytest.mark.parametrize("value", ["kitty", "OSX.iterm", "osx.iterm2", "bogus"])
    def test_other_values_pass_through(self, value):
        assert resolve_config({"openMethod": value}).open_method == value


class TestDefaults:
    @patch("open_in_vim.config.is_windows", return_value=True)
    def test_windows_shell_defaults_to_git_bash(self, _is_windows):
        config = resolve_config({})
        assert config.integrated_terminal.path_to_shell == PATH_TO_WINDOWS_GIT_SHELL

    @patch("open_in_vim.config.is_windows", return_value=False)
    def test_posix_shell_defaults_to_bin_bash(self, _is_windows):
        config = resolve_config({"integrated-terminal": {}})
        assert config.integrated_terminal.path_to_shell == PATH_TO_POSIX_SHELL

    def test_configured_shell_is_kept(self):
        config = resolve_config({"integrated-terminal": {"pathToShell": "/bin/zsh"}})
        assert config.integrated_terminal.path_to_shell == "/bin/zsh"

    def test_empty_settings_fill_every_group(self):
        config = resolve_config(None)
        assert config.open_method == "gvim"
        assert config.vim_executable == "vim"
        assert config.restore_cursor_after_vim is False
        assert config.linux.gnome_terminal.args == ""
        assert config.linux.tilix.args == ""
        assert config.macos.iterm.profile == "default profile"

    def test_empty_vim_executable_falls_back_to_vim(self):
        assert resolve_config({"vimExecutable": ""}).vim_executable == "vim"

    def test_raw_settings_are_not_mutated(self):
        raw = {"openMethod": "osx.iterm"}
        resolve_config(raw)
        assert raw == {"openMethod": "osx.iterm"}


class TestDottedKeys:
    def test_dotted_keys_become_nested_groups(self):
        config = resolve_config(
            {
                "linux.gnome-terminal.args": "--window",
                "linux.tilix.args": "--maximize",
                "macos.iterm.profile": "Vim",
                "integrated-terminal.pathToShell": "/usr/bin/fish",
            }
        )
        assert config.linux.gnome_terminal.args == "--window"
        assert config.linux.tilix.args == "--maximize"
        assert config.macos.iterm.profile == "Vim"
        assert config.integrated_terminal.path_to_shell == "/usr/bin/fish"

    def test_dotted_and_nested_keys_merge(self):
        config = resolve_config(
            {"linux": {"tilix": {"args": "-a"}}, "linux.gnome-terminal.args": "-b"}
        )
        assert config.linux.tilix.args == "-a"
        assert config.linux.gnome_terminal.args == "-b"


class TestValidation:
    def test_wrong_type_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            resolve_config({"restoreCursorAfterVim": {"nested": True}})

    def test_invalid_open_method_does_not_raise(self):
        assert resolve_config({"openMethod": "bogus"}).open_method == "bogus"


class TestSettingsFile:
    def test_missing_file_yields_empty_settings(self, tmp_path):
        assert read_settings(tmp_path / "missing.json") == {}

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            read_settings(path)

    def test_non_object_json_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            read_settings(path)

    def test_env_override_selects_file(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"openMethod": "kitty"}), encoding="utf-8")
        monkeypatch.setenv("OPEN_IN_VIM_CONFIG", str(path))
        assert load_config().open_method == "kitty"

    def test_load_reads_fresh_each_time(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"openMethod": "kitty"}), encoding="utf-8")
        assert load_config(path).open_method == "kitty"
        path.write_text(json.dumps({"openMethod": "linux.tilix"}), encoding="utf-8")
        assert load_config(path).open_method == "linux.tilix"

    def test_save_uses_documented_key_names(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        save_config({"openMethod": "kitty", "linux.tilix.args": "-a"}, path)
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved == {"openMethod": "kitty", "linux": {"tilix": {"args": "-a"}}}
        assert load_config(path).linux.tilix.args == "-a"

    def test_save_leaves_defaults_out(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"vim_executable": "nvim"}, path)
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved == {"vimExecutable": "nvim"}
        assert load_config(path).open_method == "gvim"


class TestFieldNameSpelling:
    def test_field_name_shell_is_not_replaced_by_default(self):
        config = resolve_config({"integrated-terminal": {"path_to_shell": "/bin/zsh"}})
        assert config.integrated_terminal.path_to_shell == "/bin/zsh"

    def test_field_name_group_and_shell(self):
        config = resolve_config({"integrated_terminal": {"path_to_shell": "/bin/zsh"}})
        assert config.integrated_terminal.path_to_shell == "/bin/zsh"

    def test_field_name_vim_executable_and_open_method(self):
        config = resolve_config({"vim_executable": "nvim", "open_method": "osx.iterm"})
        assert config.vim_executable == "nvim"
        assert config.open_method == "macos.iterm"

    def test_nested_field_names_become_documented_keys(self):
        settings = normalize_settings({"linux": {"gnome_terminal": {"args": "--window"}}})
        assert settings == {"linux": {"gnome-terminal": {"args": "--window"}}}

    def test_documented_key_wins_over_field_name(self):
        settings = normalize_settings({"vimExecutable": "vim", "vim_executable": "nvim"})
        assert settings == {"vimExecutable": "vim"}

    def test_normalize_adds_no_defaults(self):
        assert normalize_settings({}) == {}
