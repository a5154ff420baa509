"""Pytest fixtures for what-the-path tests."""

from typing import Mapping, Optional, Sequence

import pytest

from what_the_path.shell import CommandFailed, Environment
from what_the_path.shell import logging


class FakeRunner:
    """Command runner that never spawns anything.

    ``outputs`` maps a binary name to the stdout it "prints"; binaries in
    ``installed`` can be spawned. A binary missing from both fails like a
    missing executable.
    """

    def __init__(self, outputs: Optional[dict] = None, installed: Sequence[str] = ()):
        self.outputs = outputs or {}
        self.installed = set(installed) | set(self.outputs)
        self.calls = []

    def run(self, args: Sequence[str], env: Mapping[str, str]) -> bytes:
        self.calls.append((list(args), dict(env)))
        if args[0] not in self.outputs:
            raise CommandFailed(f"Failed to execute shell command: {args[0]}")
        return self.outputs[args[0]]

    def spawn(self, args: Sequence[str], env: Mapping[str, str]) -> bool:
        self.calls.append((list(args), dict(env)))
        return args[0] in self.installed


@pytest.fixture
def fake_runner():
    """A runner with no shells installed."""
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Build a FakeRunner with given outputs and installed binaries."""
    return FakeRunner


@pytest.fixture
def make_env():
    """Build an Environment snapshot from keyword variables."""

    def _make_env(runner=None, **variables):
        return Environment(variables, runner if runner is not None else FakeRunner())

    return _make_env


@pytest.fixture
def reset_logger_singleton():
    """Reset the module-level _logger between tests."""
    original_value = logging._logger

    logging._logger = None

    yield

    logging._logger = original_value


@pytest.fixture
def rcfile(tmp_path):
    """An existing rc file with a little content."""
    path = tmp_path / ".bashrc"
    path.write_text("# existing config\nalias ll='ls -l'\n", encoding="utf-8")
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point WHAT_THE_PATH_CONFIG at a file that does not exist yet."""
    config_file = tmp_path / "what_the_path.yaml"
    monkeypatch.setenv("WHAT_THE_PATH_CONFIG", str(config_file))
    return config_file
