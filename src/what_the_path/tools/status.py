"""Status check tool for shell detection."""

from ..config import get_config
from ..shell import ShellError, detect_installed_shells, detect_shell


def check_status() -> dict:
    """Report the detected shell, installed shells and loaded configuration."""
    try:
        shell = detect_shell().value
        shell_error = None
    except ShellError as e:
        shell = None
        shell_error = str(e)

    config = get_config()

    return {
        "shell": shell,
        "shell_error": shell_error,
        "configured_shell": config.shell.value if config.shell else None,
        "installed_shells": [kind.value for kind in detect_installed_shells()],
        "config_file": str(config.config_file) if config.config_file else None,
        "base_dir": str(config.base_dir) if config.base_dir else None,
    }
