"""MCP Server for inspecting and editing shell configuration.

This server exposes shell detection, rc file resolution and PATH editing
as tools, so an assistant can put a directory on the user's PATH without
guessing which rc file their shell reads.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP

from .tools import (
    append_rc_line as append_rc_line_impl,
    check_path as check_path_impl,
    check_status as check_status_impl,
    configure_path as configure_path_impl,
    get_rcfiles as get_rcfiles_impl,
    remove_rc_line as remove_rc_line_impl,
    unconfigure_path as unconfigure_path_impl,
)

# Initialize the MCP server
mcp = FastMCP("What The Path")


@mcp.tool()
def check_status() -> dict:
    """Check which shell is in use and which shells are installed.

    Returns information about:
    - The shell detected from SHELL (or the detection error)
    - Shells whose binaries are available
    - The loaded configuration file, if any
    """
    return check_status_impl()


@mcp.tool()
def get_rcfiles(
    shell: Annotated[
        Optional[str],
        "Shell to resolve rc files for: posix, bash, zsh or fish. Detected from SHELL if omitted.",
    ] = None,
    base_dir: Annotated[
        Optional[str],
        "Profile root to resolve rc files under instead of HOME (optional)",
    ] = None,
) -> dict:
    """List the configuration files a shell reads at startup.

    For fish the result is the conf.d directory, not individual files.

    Returns:
        A dictionary with:
        - success: Whether resolution succeeded
        - shell: The shell that was used
        - rcfiles: List of {path, exists, primary}; for fish only the
          primary entry is where fish reads its config
        - error: Error message if failed
    """
    return get_rcfiles_impl(shell=shell, base_dir=base_dir)


@mcp.tool()
def check_path(
    directory: Annotated[str, "Directory to look for in PATH"],
) -> dict:
    """Check whether a directory is already on PATH."""
    return check_path_impl(directory)


@mcp.tool()
def append_rc_line(
    rc_file: Annotated[str, "Absolute path of an existing rc file"],
    line: Annotated[str, "Line to append (a newline is added)"],
) -> dict:
    """Append a line to an existing rc file.

    The file is never created; a missing file is reported as an error.
    """
    return append_rc_line_impl(rc_file, line)


@mcp.tool()
def remove_rc_line(
    rc_file: Annotated[str, "Absolute path of an existing rc file"],
    line: Annotated[str, "Exact text to remove (first occurrence only)"],
) -> dict:
    """Remove the first occurrence of some text from an existing rc file.

    Removing text that is not present succeeds without changing the file.
    """
    return remove_rc_line_impl(rc_file, line)


@mcp.tool()
def configure_path(
    directory: Annotated[str, "Directory to put on PATH"],
    shell: Annotated[
        Optional[str],
        "Shell to configure. Detected from SHELL if omitted.",
    ] = None,
) -> dict:
    """Add a directory to PATH in the user's shell configuration.

    Appends an export line (or fish_add_path for fish) to the first
    existing rc file. After running this tool, restart your terminal or
    source the rc file to apply the change.
    """
    return configure_path_impl(directory, shell=shell)


@mcp.tool()
def unconfigure_path(
    directory: Annotated[str, "Directory to take off PATH"],
    shell: Annotated[
        Optional[str],
        "Shell to configure. Detected from SHELL if omitted.",
    ] = None,
) -> dict:
    """Remove a PATH line previously added by configure_path."""
    return unconfigure_path_impl(directory, shell=shell)


def main():
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
