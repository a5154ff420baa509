"""Detect the user's shell and dispatch rc file resolution to it."""

import os
from pathlib import Path
from typing import Optional, Union

from .env import Environment, current_environment
from .errors import NoShellVar, UnsupportedPlatform
from .logging import get_logger
from .variants import ShellKind

# Checked in this order; the first substring found in SHELL wins.
_DETECTION_ORDER = (
    ("zsh", ShellKind.ZSH),
    ("bash", ShellKind.BASH),
    ("fish", ShellKind.FISH),
)


def detect_shell(env: Optional[Environment] = None, platform: Optional[str] = None) -> ShellKind:
    """Detect the current shell from the ``SHELL`` environment variable.

    Never spawns a process. Any ``SHELL`` value that mentions none of zsh,
    bash or fish is treated as a POSIX shell.

    Args:
        env: Environment snapshot. Defaults to the current process.
        platform: Value to use instead of ``os.name``.

    Returns:
        The detected ShellKind.

    Raises:
        UnsupportedPlatform: Not running on a POSIX-like system.
        NoShellVar: ``SHELL`` is not set.
    """
    platform = os.name if platform is None else platform
    if platform != "posix":
        raise UnsupportedPlatform(platform)

    shell = current_environment(env).read_var("SHELL")
    if shell is None:
        raise NoShellVar()

    for needle, kind in _DETECTION_ORDER:
        if needle in shell:
            get_logger().debug(f"Detected {kind.value} from SHELL={shell}")
            return kind

    get_logger().debug(f"Defaulting to posix for SHELL={shell}")
    return ShellKind.POSIX


def detect_installed_shells(env: Optional[Environment] = None) -> list[ShellKind]:
    """Return every supported shell whose existence check passes.

    Shells are listed in detection order with POSIX last, since POSIX is
    always considered present.
    """
    env = current_environment(env)
    installed = [kind for _, kind in _DETECTION_ORDER if kind.variant.does_exist(env)]
    installed.append(ShellKind.POSIX)
    return installed


def resolve_rcfiles(kind: ShellKind, env: Optional[Environment] = None) -> list[Path]:
    """Return the rc file candidates for ``kind`` from environment state.

    Resolved fresh on every call.
    """
    return kind.variant.get_rcfiles(current_environment(env))


def resolve_rcfiles_from_base(kind: ShellKind, base_dir: Union[str, Path]) -> list[Path]:
    """Return the rc file candidates for ``kind`` rooted at ``base_dir``."""
    return kind.variant.get_rcfiles_from_base(base_dir)
