"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cli2md/cli/output.py
import argparse
import sys
from typing import IO


def should_use_rich_output(args: argparse.Namespace, stream: IO[str] | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when the --rich flag is set and the target stream
    is a TTY. Output redirected to a file or pipe stays plain Markdown.

    """
    if not getattr(args, "rich", False):
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except (OSError, ValueError):
            return False

    return False


def render_rich_preview(markdown_content: str, stream: IO[str] | None = None) -> None:
    """Print Markdown to the terminal through Rich.

    Parameters
    ----------
    markdown_content : str
        Markdown document to display
    stream : optional, default None
        Destination stream; the Rich console writes to sys.stdout by default

    """
    from rich.console import Console
    from rich.markdown import Markdown

    console = Console(file=stream) if stream is not None else Console()
    console.print(Markdown(markdown_content))


def print_error(message: str) -> None:
    """Print an error message to stderr in the CLI's ``Error: ...`` format."""
    print(f"Error: {message}", file=sys.stderr)
