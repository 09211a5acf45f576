"""cli2md - Markdown reference documentation for command-line interfaces.

cli2md turns the description of a command-line program (its commands,
subcommands, flags, options and positional arguments) into a Markdown
reference document. The description is a read-only tree of
:class:`CommandSpec` and :class:`ArgumentSpec` objects, which can be built
directly, converted from an ``argparse`` parser, or loaded from a YAML, TOML
or JSON specification file.

Key Features
------------
- One section per command with its description, usage and arguments
- Subcommands rendered inline, linked to separate pages, or only listed
- Arguments grouped under their help headings in declaration order
- Value syntax such as ``[=<WHEN>]`` or ``<FILE>...`` derived from the
  accepted number of values
- Default values, possible values and environment variables as sub-bullets

Requirements
------------
- Python 3.10+

Examples
--------
Document an argparse parser:

    >>> import argparse
    >>> from cli2md import to_markdown
    >>> parser = argparse.ArgumentParser(prog="greet", description="Say hello")
    >>> _ = parser.add_argument("name", help="Who to greet")
    >>> markdown = to_markdown(parser)

Build the tree directly and tune the output:

    >>> from cli2md import ArgumentSpec, CommandSpec, MarkdownRendererOptions
    >>> command = CommandSpec(
    ...     "greet",
    ...     about="Say hello",
    ...     arguments=[ArgumentSpec("name", help="Who to greet", required=True)],
    ... )
    >>> options = MarkdownRendererOptions(prompt=None, heading_level=2)
    >>> markdown = to_markdown(command, options)

See Also
--------
cli2md.model : Command specification model and producers
cli2md.renderers : Markdown renderer and argument formatter

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "cli2md requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from cli2md.api import to_markdown, to_markdown_pages
from cli2md.exceptions import (
    Cli2MdError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    SpecificationError,
    TargetLoadError,
    ValidationError,
)
from cli2md.model import (
    ArgumentSpec,
    CommandSpec,
    PossibleValue,
    ValueRange,
    command_from_dict,
    from_argparse,
    load_command_file,
)
from cli2md.options import MarkdownRendererOptions
from cli2md.renderers import ArgumentFormatter, MarkdownRenderer, write_linked_pages

__all__ = [
    "__version__",
    # API
    "to_markdown",
    "to_markdown_pages",
    "write_linked_pages",
    # Model
    "ArgumentSpec",
    "CommandSpec",
    "PossibleValue",
    "ValueRange",
    "command_from_dict",
    "from_argparse",
    "load_command_file",
    # Rendering
    "ArgumentFormatter",
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    # Exceptions
    "Cli2MdError",
    "InvalidOptionsError",
    "OutputWriteError",
    "RenderingError",
    "SpecificationError",
    "TargetLoadError",
    "ValidationError",
]
