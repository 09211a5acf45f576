#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command specification model and its producers.

The model is a read-only tree of :class:`CommandSpec` and
:class:`ArgumentSpec` objects. Build it directly, from an ``argparse``
parser with :func:`from_argparse`, or from a YAML/TOML/JSON document with
:func:`load_command_file`.
"""

from cli2md.model.argparse_adapter import from_argparse
from cli2md.model.loader import command_from_dict, load_command_file
from cli2md.model.nodes import ArgumentSpec, CommandSpec, PossibleValue, ValueRange
from cli2md.model.usage import render_usage

__all__ = [
    "ArgumentSpec",
    "CommandSpec",
    "PossibleValue",
    "ValueRange",
    "command_from_dict",
    "from_argparse",
    "load_command_file",
    "render_usage",
]
