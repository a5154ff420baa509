"""Tests for the environment snapshot and command runner."""

import os
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from what_the_path.shell.env import Environment, SubprocessRunner, current_environment
from what_the_path.shell.errors import (
    CommandFailed,
    EmptyHomeEnvVar,
    InvalidUtf8Output,
    NoHomeDir,
)


class TestSnapshot:
    """Tests for reading variables from a snapshot."""

    def test_read_var_distinguishes_unset_and_empty(self, make_env):
        env = make_env(HOME="", SHELL="/bin/zsh")

        assert env.read_var("HOME") == ""
        assert env.read_var("SHELL") == "/bin/zsh"
        assert env.read_var("ZDOTDIR") is None

    def test_snapshot_is_copied(self, make_env):
        variables = {"HOME": "/home/test"}
        env = Environment(variables)

        variables["HOME"] = "/elsewhere"

        assert env.read_var("HOME") == "/home/test"

    def test_from_process_reads_os_environ(self):
        with patch.dict(os.environ, {"HOME": "/home/proc"}):
            env = Environment.from_process()

        assert env.read_var("HOME") == "/home/proc"
        assert isinstance(env.runner, SubprocessRunner)

    def test_current_environment_passes_through(self, make_env):
        env = make_env(HOME="/home/test")

        assert current_environment(env) is env

    def test_current_environment_takes_fresh_snapshot(self):
        with patch.dict(os.environ, {"HOME": "/home/first"}):
            first = current_environment()
        with patch.dict(os.environ, {"HOME": "/home/second"}):
            second = current_environment()

        assert first.read_var("HOME") == "/home/first"
        assert second.read_var("HOME") == "/home/second"


class TestHomeAndConfigDir:
    """Tests for home_dir() and config_dir()."""

    def test_home_dir(self, make_env):
        assert make_env(HOME="/home/test").home_dir() == Path("/home/test")

    def test_home_dir_unset(self, make_env):
        with pytest.raises(NoHomeDir):
            make_env().home_dir()

    def test_home_dir_empty(self, make_env):
        with pytest.raises(EmptyHomeEnvVar):
            make_env(HOME="").home_dir()

    def test_home_dir_relative(self, make_env):
        with pytest.raises(NoHomeDir):
            make_env(HOME="relative/home").home_dir()

    def test_config_dir_prefers_xdg(self, make_env):
        env = make_env(HOME="/home/test", XDG_CONFIG_HOME="/custom/xdg")

        assert env.config_dir() == Path("/custom/xdg")

    def test_config_dir_falls_back_to_home(self, make_env):
        env = make_env(HOME="/home/test")

        assert env.config_dir() == Path("/home/test/.config")

    def test_config_dir_ignores_relative_xdg(self, make_env):
        env = make_env(HOME="/home/test", XDG_CONFIG_HOME="xdg")

        assert env.config_dir() == Path("/home/test/.config")

    def test_config_dir_none(self, make_env):
        assert make_env().config_dir() is None


class TestRunShellEcho:
    """Tests for run_shell_echo()."""

    def test_runs_shell_with_snapshot_env(self, make_env, make_runner):
        runner = make_runner(outputs={"zsh": b"/custom/zsh/dir"})
        env = make_env(runner=runner, ZDOTDIR="/custom/zsh/dir")

        result = env.run_shell_echo("zsh", "ZDOTDIR")

        assert result == "/custom/zsh/dir"
        args, child_env = runner.calls[0]
        assert args == ["zsh", "-c", "echo -n $ZDOTDIR"]
        assert child_env == {"ZDOTDIR": "/custom/zsh/dir"}

    def test_strips_output(self, make_env, make_runner):
        env = make_env(runner=make_runner(outputs={"zsh": b"  /dir\n"}))

        assert env.run_shell_echo("zsh", "ZDOTDIR") == "/dir"

    def test_empty_output(self, make_env, make_runner):
        env = make_env(runner=make_runner(outputs={"zsh": b""}))

        assert env.run_shell_echo("zsh", "ZDOTDIR") == ""

    def test_missing_binary(self, make_env):
        with pytest.raises(CommandFailed):
            make_env().run_shell_echo("zsh", "ZDOTDIR")

    def test_invalid_utf8(self, make_env, make_runner):
        env = make_env(runner=make_runner(outputs={"zsh": b"\xff\xfe"}))

        with pytest.raises(InvalidUtf8Output):
            env.run_shell_echo("zsh", "ZDOTDIR")

    def test_can_spawn(self, make_env, make_runner):
        env = make_env(runner=make_runner(installed=["bash"]))

        assert env.can_spawn("bash") is True
        assert env.can_spawn("fish") is False


class TestSubprocessRunner:
    """Tests for SubprocessRunner against a mocked subprocess.run."""

    def test_run_returns_stdout(self):
        completed = MagicMock(returncode=0, stdout=b"value")
        with patch("what_the_path.shell.env.subprocess.run", return_value=completed) as mock_run:
            output = SubprocessRunner().run(["zsh", "-c", "echo -n $ZDOTDIR"], {"A": "1"})

        assert output == b"value"
        call_kwargs = mock_run.call_args.kwargs
        assert call_kwargs["env"] == {"A": "1"}
        assert call_kwargs["stdin"] == subprocess.DEVNULL
        assert call_kwargs["timeout"] is None

    def test_run_spawn_failure(self):
        with patch("what_the_path.shell.env.subprocess.run", side_effect=FileNotFoundError("zsh")):
            with pytest.raises(CommandFailed) as exc_info:
                SubprocessRunner().run(["zsh"], {})

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_run_nonzero_exit(self):
        completed = MagicMock(returncode=1, stdout=b"")
        with patch("what_the_path.shell.env.subprocess.run", return_value=completed):
            with pytest.raises(CommandFailed):
                SubprocessRunner().run(["zsh"], {})

    def test_run_nonzero_exit_with_output_returns_stdout(self):
        completed = MagicMock(returncode=1, stdout=b"/custom/zsh/dir")
        with patch("what_the_path.shell.env.subprocess.run", return_value=completed):
            output = SubprocessRunner().run(["zsh", "-c", "echo -n $ZDOTDIR"], {})

        assert output == b"/custom/zsh/dir"

    def test_run_timeout(self):
        with patch(
            "what_the_path.shell.env.subprocess.run",
            side_effect=subprocess.TimeoutExpired(["zsh"], 1.0),
        ):
            with pytest.raises(CommandFailed):
                SubprocessRunner(timeout=1.0).run(["zsh"], {})

    def test_spawn_ignores_exit_status(self):
        completed = MagicMock(returncode=127)
        with patch("what_the_path.shell.env.subprocess.run", return_value=completed):
            assert SubprocessRunner().spawn(["bash"], {}) is True

    def test_spawn_failure(self):
        with patch("what_the_path.shell.env.subprocess.run", side_effect=OSError("nope")):
            assert SubprocessRunner().spawn(["fish"], {}) is False
