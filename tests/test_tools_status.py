"""Tests for tools.status module."""

from unittest.mock import patch

from what_the_path.shell import ShellKind
from what_the_path.tools.status import check_status


class TestCheckStatus:
    """Tests for check_status() function."""

    def test_check_status_detected(self, monkeypatch, isolated_config):
        monkeypatch.setenv("SHELL", "/bin/zsh")

        with patch(
            "what_the_path.tools.status.detect_installed_shells",
            return_value=[ShellKind.ZSH, ShellKind.POSIX],
        ):
            result = check_status()

        assert result["shell"] == "zsh"
        assert result["shell_error"] is None
        assert result["installed_shells"] == ["zsh", "posix"]
        assert result["configured_shell"] is None
        assert result["config_file"] is None
        assert result["base_dir"] is None

    def test_check_status_no_shell_var(self, monkeypatch, isolated_config):
        monkeypatch.delenv("SHELL", raising=False)

        with patch(
            "what_the_path.tools.status.detect_installed_shells",
            return_value=[ShellKind.POSIX],
        ):
            result = check_status()

        assert result["shell"] is None
        assert result["shell_error"] == "Shell environment variable not found"

    def test_check_status_with_config(self, monkeypatch, isolated_config):
        monkeypatch.setenv("SHELL", "/bin/bash")
        isolated_config.write_text("shell: fish\nbase_dir: /sandbox\n", encoding="utf-8")

        with patch(
            "what_the_path.tools.status.detect_installed_shells",
            return_value=[ShellKind.POSIX],
        ):
            result = check_status()

        assert result["shell"] == "bash"
        assert result["configured_shell"] == "fish"
        assert result["config_file"] == str(isolated_config)
        assert result["base_dir"] == "/sandbox"

    def test_check_status_undecodable_config(self, monkeypatch, isolated_config):
        monkeypatch.setenv("SHELL", "/bin/bash")
        isolated_config.write_bytes(b"shell: \xff\xfe\n")

        with patch(
            "what_the_path.tools.status.detect_installed_shells",
            return_value=[ShellKind.POSIX],
        ):
            result = check_status()

        assert result["shell"] == "bash"
        assert result["configured_shell"] is None
        assert result["config_file"] == str(isolated_config)
