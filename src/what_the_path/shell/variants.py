"""Per-shell rc file resolution.

Each supported shell has a small stateless resolver that knows where that
shell reads its startup configuration. Resolvers return candidate paths;
they never check whether the files exist, except where noted.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Protocol, Union

from .env import Environment, current_environment
from .errors import CommandFailed, EmptyHomeAndZdotdir, EmptyZdotdir, NoHomeDir
from .logging import get_logger

PathLike = Union[str, Path]


class ShellVariant(Protocol):
    """Capabilities every shell resolver provides."""

    name: str

    def does_exist(self, env: Optional[Environment] = None) -> bool:
        ...

    def get_rcfiles(self, env: Optional[Environment] = None) -> list[Path]:
        ...

    def get_rcfiles_from_base(self, base_dir: PathLike) -> list[Path]:
        ...


def _shell_var_mentions(env: Environment, name: str) -> bool:
    shell = env.read_var("SHELL")
    return shell is not None and name in shell


class Posix:
    """Fallback for any shell that is not otherwise recognized."""

    name = "posix"

    def does_exist(self, env: Optional[Environment] = None) -> bool:
        return True

    def get_rcfiles(self, env: Optional[Environment] = None) -> list[Path]:
        """Return ``[<home>/.profile]``.

        Raises:
            NoHomeDir: ``HOME`` cannot be resolved.
        """
        home = current_environment(env).home_dir()
        return self.get_rcfiles_from_base(home)

    def get_rcfiles_from_base(self, base_dir: PathLike) -> list[Path]:
        return [Path(base_dir) / ".profile"]


class Bash:
    name = "bash"
    rc_names = (".bash_profile", ".bash_login", ".bashrc")

    def does_exist(self, env: Optional[Environment] = None) -> bool:
        env = current_environment(env)
        return _shell_var_mentions(env, "bash") or env.can_spawn("bash")

    def get_rcfiles(self, env: Optional[Environment] = None) -> list[Path]:
        """Return the login and interactive bash rc files under ``HOME``.

        Raises:
            NoHomeDir: ``HOME`` cannot be resolved.
        """
        home = current_environment(env).home_dir()
        return self.get_rcfiles_from_base(home)

    def get_rcfiles_from_base(self, base_dir: PathLike) -> list[Path]:
        return [Path(base_dir) / rc for rc in self.rc_names]


class Zsh:
    name = "zsh"

    def does_exist(self, env: Optional[Environment] = None) -> bool:
        env = current_environment(env)
        return _shell_var_mentions(env, "zsh") or env.can_spawn("zsh")

    def zdotdir(self, env: Optional[Environment] = None) -> Path:
        """Ask the zsh binary for its effective ZDOTDIR.

        zsh applies its own defaulting to ZDOTDIR, so the inherited variable
        is not authoritative.

        Raises:
            CommandFailed: zsh could not be run or printed invalid UTF-8.
            EmptyZdotdir: zsh printed nothing, or a relative path.
        """
        value = current_environment(env).run_shell_echo("zsh", "ZDOTDIR")
        if not value or not Path(value).is_absolute():
            raise EmptyZdotdir()
        return Path(value)

    def get_rcfiles(self, env: Optional[Environment] = None) -> list[Path]:
        """Return ``.zshenv`` under the effective ZDOTDIR and under HOME.

        Both candidates are returned when both resolve, even if they name the
        same file.

        Raises:
            EmptyHomeAndZdotdir: Neither location could be resolved.
        """
        env = current_environment(env)
        logger = get_logger()
        rcfiles = []

        try:
            rcfiles.append(self.zdotdir(env) / ".zshenv")
        except (CommandFailed, EmptyZdotdir) as e:
            logger.debug(f"Skipping ZDOTDIR candidate: {e}")

        try:
            rcfiles.extend(self.get_rcfiles_from_base(env.home_dir()))
        except NoHomeDir as e:
            logger.debug(f"Skipping HOME candidate: {e}")

        if not rcfiles:
            raise EmptyHomeAndZdotdir()
        return rcfiles

    def get_rcfiles_from_base(self, base_dir: PathLike) -> list[Path]:
        return [Path(base_dir) / ".zshenv"]


class Fish:
    name = "fish"

    def does_exist(self, env: Optional[Environment] = None) -> bool:
        env = current_environment(env)
        return _shell_var_mentions(env, "fish") or env.can_spawn("fish")

    def get_rcfiles(self, env: Optional[Environment] = None) -> list[Path]:
        """Return fish's ``conf.d`` directory.

        Note that this is a directory, not a file: fish loads every file in
        it, so callers have to enumerate its contents themselves.

        When ``XDG_CONFIG_HOME`` supplies the config directory, the
        ``<XDG_CONFIG_HOME>/.config/fish/conf.d`` form is offered as a second
        candidate for profiles that point it at a home-like root.

        Returns an empty list when no config directory can be resolved.
        """
        env = current_environment(env)
        config_dir = env.config_dir()
        if config_dir is None:
            get_logger().debug("No config directory for fish")
            return []

        rcfiles = [config_dir / "fish" / "conf.d"]
        xdg = env.read_var("XDG_CONFIG_HOME")
        if xdg and Path(xdg) == config_dir:
            rcfiles.extend(self.get_rcfiles_from_base(config_dir))
        return rcfiles

    def get_rcfiles_from_base(self, base_dir: PathLike) -> list[Path]:
        return [Path(base_dir) / ".config" / "fish" / "conf.d"]


class ShellKind(Enum):
    """The closed set of shells this package understands."""

    POSIX = "posix"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"

    @property
    def variant(self) -> ShellVariant:
        return _VARIANTS[self]


_VARIANTS: dict[ShellKind, ShellVariant] = {
    ShellKind.POSIX: Posix(),
    ShellKind.BASH: Bash(),
    ShellKind.ZSH: Zsh(),
    ShellKind.FISH: Fish(),
}
