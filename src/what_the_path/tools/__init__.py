"""Tools package for what-the-path."""

from .rcfiles import append_rc_line, check_path, get_rcfiles, remove_rc_line
from .setup import configure_path, unconfigure_path
from .status import check_status

__all__ = [
    "check_status",
    "get_rcfiles",
    "check_path",
    "append_rc_line",
    "remove_rc_line",
    "configure_path",
    "unconfigure_path",
]
