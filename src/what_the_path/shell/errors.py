"""Error types raised by shell detection and rc file handling."""

from pathlib import Path
from typing import Union


class ShellError(Exception):
    """Base class for every failure reported by this package."""


class DetectionFailed(ShellError):
    def __init__(self, reason: str):
        super().__init__(f"Shell detection failed: {reason}")
        self.reason = reason


class NoShellVar(ShellError):
    def __init__(self):
        super().__init__("Shell environment variable not found")


class NoHomeDir(ShellError):
    def __init__(self, message: str = "Home directory not found"):
        super().__init__(message)


class EmptyHomeEnvVar(NoHomeDir):
    def __init__(self):
        super().__init__("Home environment variable is empty")


class UnsupportedPlatform(ShellError):
    def __init__(self, platform: str = ""):
        message = "Unsupported platform"
        if platform:
            message = f"{message}: {platform}"
        super().__init__(message)
        self.platform = platform


class CommandFailed(ShellError):
    def __init__(self, message: str = "Failed to execute shell command"):
        super().__init__(message)


class InvalidUtf8Output(CommandFailed):
    def __init__(self):
        super().__init__("Invalid UTF-8 in shell output")


class EmptyZdotdir(ShellError):
    def __init__(self):
        super().__init__("ZDOTDIR environment variable is empty")


class EmptyHomeAndZdotdir(ShellError):
    def __init__(self):
        super().__init__("Home environment and ZDOTDIR variables are empty")


class RcFileError(ShellError):
    """An underlying read or write of an rc file failed.

    The original ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Failed to access RC file: {path}: {reason}")
        self.path = Path(path)


class RCFileNotFound(ShellError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"RC file not found: {self.path.name or self.path}")
