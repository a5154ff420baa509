"""Add or remove a directory on PATH through the user's rc files."""

import shlex
from pathlib import Path
from typing import Optional

from ..config import get_config
from ..shell import (
    RcFileError,
    ShellError,
    ShellKind,
    append_line,
    find_existing_rcfile,
    path_contains,
    remove_line,
)
from ..shell.logging import rcfile_logger
from .rcfiles import candidate_rcfiles, primary_rcfiles, select_shell


def path_line(kind: ShellKind, directory: str) -> str:
    """Build the line that puts ``directory`` on PATH for ``kind``.

    The directory is shell-quoted, so spaces, quotes and ``$`` are taken
    literally by the shell reading the rc file.
    """
    quoted = shlex.quote(directory)
    if kind is ShellKind.FISH:
        return f"fish_add_path {quoted}"
    return f'export PATH={quoted}:"$PATH"'


def editable_rcfiles(kind: ShellKind, rcfiles: list[Path]) -> list[Path]:
    """Map resolved candidates to files a line can be appended to.

    fish resolves to its conf.d directory; the config.fish beside it is the
    single file that is edited instead.
    """
    if kind is ShellKind.FISH:
        return [conf_d.parent / "config.fish" for conf_d in rcfiles]
    return rcfiles


def _read(rc_file: Path) -> str:
    try:
        return rc_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RcFileError(rc_file, str(e)) from e


def configure_path(directory: str, shell: Optional[str] = None) -> dict:
    """Add ``directory`` to PATH in the first existing rc file.

    Nothing is written when the line is already present. Missing rc files
    are never created.
    """
    config = get_config()
    result = {
        "success": False,
        "error": None,
        "shell": shell,
        "rc_file": None,
        "line": None,
        "changed": False,
        "in_path": path_contains(directory),
    }

    try:
        kind = select_shell(shell, config)
        result["shell"] = kind.value
        line = path_line(kind, directory)
        result["line"] = line

        rc_file = find_existing_rcfile(
            editable_rcfiles(kind, primary_rcfiles(kind, candidate_rcfiles(kind, config)))
        )
        if rc_file is None:
            result["error"] = f"No existing rc file found for {kind.value}"
            return result
        result["rc_file"] = str(rc_file)

        content = _read(rc_file)
        if line in content:
            rcfile_logger(rc_file).info(f"PATH already configured for {directory}")
        else:
            if content and not content.endswith("\n"):
                append_line(rc_file, "")
            append_line(rc_file, config.path_comment)
            append_line(rc_file, line)
            result["changed"] = True
    except ShellError as e:
        result["error"] = str(e)
        return result

    result["success"] = True
    return result


def unconfigure_path(directory: str, shell: Optional[str] = None) -> dict:
    """Remove the PATH line for ``directory`` from every existing rc file."""
    config = get_config()
    result = {
        "success": False,
        "error": None,
        "shell": shell,
        "line": None,
        "changed": [],
    }

    try:
        kind = select_shell(shell, config)
        result["shell"] = kind.value
        line = path_line(kind, directory)
        result["line"] = line

        for rc_file in editable_rcfiles(kind, candidate_rcfiles(kind, config)):
            if not rc_file.is_file():
                continue
            before = _read(rc_file)
            # Prefer the block configure_path writes, then the bare line
            forms = (f"{config.path_comment}\n{line}\n", f"{line}\n", line)
            target = next((form for form in forms if form in before), None)
            if target is None:
                continue
            remove_line(rc_file, target)
            result["changed"].append(str(rc_file))
    except ShellError as e:
        result["error"] = str(e)
        return result

    result["success"] = True
    return result
