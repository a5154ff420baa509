"""Shell detection and rc file resolution."""

from .detect import (
    detect_installed_shells,
    detect_shell,
    resolve_rcfiles,
    resolve_rcfiles_from_base,
)
from .env import CommandRunner, Environment, SubprocessRunner
from .errors import (
    CommandFailed,
    DetectionFailed,
    EmptyHomeAndZdotdir,
    EmptyHomeEnvVar,
    EmptyZdotdir,
    InvalidUtf8Output,
    NoHomeDir,
    NoShellVar,
    RCFileNotFound,
    RcFileError,
    ShellError,
    UnsupportedPlatform,
)
from .rcfile import append_line, find_existing_rcfile, path_contains, remove_line
from .variants import Bash, Fish, Posix, ShellKind, Zsh

__all__ = [
    "detect_shell",
    "detect_installed_shells",
    "resolve_rcfiles",
    "resolve_rcfiles_from_base",
    "append_line",
    "remove_line",
    "path_contains",
    "find_existing_rcfile",
    "Environment",
    "CommandRunner",
    "SubprocessRunner",
    "ShellKind",
    "Posix",
    "Bash",
    "Zsh",
    "Fish",
    "ShellError",
    "DetectionFailed",
    "NoShellVar",
    "NoHomeDir",
    "EmptyHomeEnvVar",
    "UnsupportedPlatform",
    "CommandFailed",
    "InvalidUtf8Output",
    "EmptyZdotdir",
    "EmptyHomeAndZdotdir",
    "RcFileError",
    "RCFileNotFound",
]
