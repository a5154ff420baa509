"""Environment snapshot and shell command execution.

Everything that reads process state or spawns a shell binary goes through
:class:`Environment`, so resolvers can be handed a fixed snapshot and a fake
command runner instead of touching the real process.
"""

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence

from .errors import CommandFailed, EmptyHomeEnvVar, InvalidUtf8Output, NoHomeDir
from .logging import get_logger


class CommandRunner(Protocol):
    """Spawns external commands on behalf of an :class:`Environment`."""

    def run(self, args: Sequence[str], env: Mapping[str, str]) -> bytes:
        """Run ``args`` to completion and return its stdout.

        A non-zero exit still returns stdout when the command printed any.

        Raises:
            CommandFailed: The command could not be spawned, or exited
                non-zero without printing anything.
        """
        ...

    def spawn(self, args: Sequence[str], env: Mapping[str, str]) -> bool:
        """Return True if ``args`` could be spawned at all."""
        ...


class SubprocessRunner:
    """Default runner backed by :func:`subprocess.run`.

    There is no timeout unless one is given; a hung shell blocks the caller.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, args: Sequence[str], env: Mapping[str, str]) -> bytes:
        try:
            completed = subprocess.run(
                list(args),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=dict(env),
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise CommandFailed(f"Failed to execute shell command: {args[0]}: {e}") from e

        if completed.returncode != 0:
            # Startup files that fail late still print the value we asked for
            if completed.stdout:
                get_logger().debug(
                    f"{args[0]} exited with {completed.returncode}, using its output anyway"
                )
                return completed.stdout
            raise CommandFailed(
                f"Failed to execute shell command: {args[0]} exited with {completed.returncode}"
            )
        return completed.stdout

    def spawn(self, args: Sequence[str], env: Mapping[str, str]) -> bool:
        try:
            subprocess.run(
                list(args),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                env=dict(env),
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError):
            return False
        return True


@dataclass
class Environment:
    """Snapshot of the variables this package reads plus a command runner."""

    variables: Mapping[str, str] = field(default_factory=dict)
    runner: CommandRunner = field(default_factory=SubprocessRunner)

    def __post_init__(self):
        # Later changes to the source mapping must not leak into the snapshot
        self.variables = dict(self.variables)

    @classmethod
    def from_process(cls, runner: Optional[CommandRunner] = None) -> "Environment":
        """Snapshot the current process environment."""
        if runner is None:
            return cls(dict(os.environ))
        return cls(dict(os.environ), runner)

    def read_var(self, name: str) -> Optional[str]:
        """Return the variable's value, "" if set empty, None if unset."""
        return self.variables.get(name)

    def home_dir(self) -> Path:
        """Resolve the home directory from ``HOME``.

        Raises:
            EmptyHomeEnvVar: ``HOME`` is set to an empty string.
            NoHomeDir: ``HOME`` is unset or not an absolute path.
        """
        home = self.read_var("HOME")
        if home is None:
            raise NoHomeDir()
        if home == "":
            raise EmptyHomeEnvVar()
        path = Path(home)
        if not path.is_absolute():
            raise NoHomeDir(f"Home directory is not absolute: {home}")
        return path

    def config_dir(self) -> Optional[Path]:
        """Resolve the user config directory.

        ``XDG_CONFIG_HOME`` wins when it is an absolute path, otherwise
        ``<home>/.config``. Returns None when neither can be resolved.
        """
        xdg = self.read_var("XDG_CONFIG_HOME")
        if xdg and Path(xdg).is_absolute():
            return Path(xdg)
        try:
            return self.home_dir() / ".config"
        except NoHomeDir:
            return None

    def run_shell_echo(self, shell_binary: str, var_name: str) -> str:
        """Ask ``shell_binary`` to print its own value of ``var_name``.

        Returns:
            The printed value with surrounding whitespace removed. An empty
            string means the shell ran but the variable is empty or unset.

        Raises:
            CommandFailed: The shell could not be spawned or failed.
            InvalidUtf8Output: The shell printed bytes that are not UTF-8.
        """
        args = [shell_binary, "-c", f"echo -n ${var_name}"]
        get_logger().debug(f"Running {' '.join(args)}")
        output = self.runner.run(args, self.variables)
        try:
            return output.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise InvalidUtf8Output() from e

    def can_spawn(self, binary: str) -> bool:
        """Check whether ``binary`` can be started, ignoring its exit status."""
        return self.runner.spawn([binary], self.variables)


def current_environment(env: Optional[Environment] = None) -> Environment:
    """Return ``env`` or a fresh snapshot of the process environment."""
    if env is None:
        return Environment.from_process()
    return env
