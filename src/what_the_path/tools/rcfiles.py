"""Rc file lookup and editing tools."""

from pathlib import Path
from typing import Optional

from ..config import Config, get_config
from ..shell import (
    DetectionFailed,
    ShellError,
    ShellKind,
    append_line,
    detect_shell,
    path_contains,
    remove_line,
    resolve_rcfiles,
    resolve_rcfiles_from_base,
)


def select_shell(name: Optional[str], config: Config) -> ShellKind:
    """Pick the shell to work with.

    An explicit name wins, then the configured shell, then detection.

    Raises:
        DetectionFailed: ``name`` is not a supported shell.
        ShellError: Detection from the environment failed.
    """
    if name:
        try:
            return ShellKind(name.lower())
        except ValueError:
            supported = ", ".join(kind.value for kind in ShellKind)
            raise DetectionFailed(f"unknown shell '{name}' (supported: {supported})") from None
    if config.shell is not None:
        return config.shell
    return detect_shell()


def candidate_rcfiles(kind: ShellKind, config: Config, base_dir: Optional[str] = None) -> list[Path]:
    """Resolve rc files for ``kind``, preferring an explicit or configured base dir."""
    base = Path(base_dir) if base_dir else config.base_dir
    if base is not None:
        return resolve_rcfiles_from_base(kind, base)
    return resolve_rcfiles(kind)


def primary_rcfiles(kind: ShellKind, rcfiles: list[Path]) -> list[Path]:
    """Candidates that name the location the shell itself reads.

    For fish only the first conf.d location is authoritative; the XDG
    profile-root form after it is offered for lookup and cleanup, never as
    a place to write.
    """
    if kind is ShellKind.FISH:
        return rcfiles[:1]
    return rcfiles


def get_rcfiles(shell: Optional[str] = None, base_dir: Optional[str] = None) -> dict:
    """List rc file candidates for a shell.

    Returns:
        Dictionary with the shell used and its rc files, each flagged with
        whether it currently exists and whether it is a primary location
        (the one the shell itself reads, and the one configure_path writes).
    """
    try:
        config = get_config()
        kind = select_shell(shell, config)
        rcfiles = candidate_rcfiles(kind, config, base_dir)
        primary = primary_rcfiles(kind, rcfiles)
    except ShellError as e:
        return {"success": False, "error": str(e), "shell": shell, "rcfiles": []}

    return {
        "success": True,
        "error": None,
        "shell": kind.value,
        "rcfiles": [
            {"path": str(p), "exists": p.exists(), "primary": p in primary}
            for p in rcfiles
        ],
    }


def check_path(directory: str) -> dict:
    """Check whether a directory is already on PATH."""
    return {"directory": directory, "in_path": path_contains(directory)}


def append_rc_line(rc_file: str, line: str) -> dict:
    """Append a line to an existing rc file."""
    try:
        append_line(rc_file, line)
    except ShellError as e:
        return {"success": False, "error": str(e), "rc_file": rc_file}
    return {"success": True, "error": None, "rc_file": rc_file}


def remove_rc_line(rc_file: str, line: str) -> dict:
    """Remove the first occurrence of a line from an existing rc file."""
    try:
        remove_line(rc_file, line)
    except ShellError as e:
        return {"success": False, "error": str(e), "rc_file": rc_file}
    return {"success": True, "error": None, "rc_file": rc_file}
