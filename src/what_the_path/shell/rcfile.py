"""Editing rc files and checking PATH membership."""

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from .env import Environment, current_environment
from .errors import RCFileNotFound, RcFileError
from .logging import rcfile_logger

PathLike = Union[str, Path]


def _require_existing(rcfile: Path) -> None:
    # Mutations only: an rc file that is not already there is never created
    if not rcfile.exists():
        raise RCFileNotFound(rcfile)


def append_line(rcfile: PathLike, line: str) -> None:
    """Append ``line`` and a newline to an existing rc file.

    No de-duplication is done; appending twice writes the line twice.

    Raises:
        RCFileNotFound: ``rcfile`` does not exist.
        RcFileError: The file could not be written.
    """
    rcfile = Path(rcfile)
    _require_existing(rcfile)

    try:
        with open(rcfile, "a", encoding="utf-8", newline="") as f:
            f.write(f"{line}\n")
    except OSError as e:
        raise RcFileError(rcfile, str(e)) from e

    rcfile_logger(rcfile).info("Appended line")


def remove_line(rcfile: PathLike, line: str) -> None:
    """Remove the first occurrence of ``line`` from an existing rc file.

    The match is an exact substring search over the file content, not a
    line-based one: only the matched characters are deleted, and a trailing
    newline is removed only if it is part of ``line``. If ``line`` does not
    occur the file is left untouched.

    Raises:
        RCFileNotFound: ``rcfile`` does not exist.
        RcFileError: The file could not be read or rewritten.
    """
    rcfile = Path(rcfile)
    _require_existing(rcfile)

    try:
        with open(rcfile, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RcFileError(rcfile, str(e)) from e

    idx = content.find(line) if line else -1
    if idx == -1:
        rcfile_logger(rcfile).debug("Line not present, nothing to remove")
        return

    # TODO: write to a temp file and rename so a crash cannot truncate the rc file
    try:
        with open(rcfile, "w", encoding="utf-8", newline="") as f:
            f.write(content[:idx] + content[idx + len(line):])
    except OSError as e:
        raise RcFileError(rcfile, str(e)) from e

    rcfile_logger(rcfile).info("Removed line")


def _normalize_entry(entry: str) -> str:
    stripped = entry.rstrip("/")
    return stripped or entry


def path_contains(candidate: PathLike, env: Optional[Environment] = None) -> bool:
    """Check whether ``candidate`` is one of the directories in ``PATH``.

    Entries are compared exactly, ignoring trailing slashes. Empty entries
    never match.
    """
    path_var = current_environment(env).read_var("PATH")
    if not path_var:
        return False

    wanted = _normalize_entry(str(candidate))
    if not wanted:
        return False
    return any(
        _normalize_entry(entry) == wanted
        for entry in path_var.split(os.pathsep)
        if entry
    )


def find_existing_rcfile(candidates: Iterable[PathLike]) -> Optional[Path]:
    """Return the first candidate that is an existing regular file."""
    for candidate in candidates:
        path = Path(candidate)
        if path.is_file():
            return path
    return None
