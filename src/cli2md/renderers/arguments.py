#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/renderers/arguments.py
"""Markdown formatting of individual arguments.

Each argument becomes one list item followed by optional metadata
sub-bullets::

    - `-c`, `--color` `[=<WHEN>]`: When to use colors
        - **default:** `auto`
        - **possible values:**
          - `always`
          - `auto`: Detect from the terminal
          - `never`

The value syntax token follows these rules:

- options that accept an optional value open with ``[`` (or ``[=`` when the
  value must be attached with ``=``) and close with ``]``; options whose
  value is mandatory and must be attached open with ``=``;
- value names come from the explicit value names, else the upper-cased
  identifier, repeated to the minimum number of values;
- names are written ``<NAME>``, or ``[NAME]`` for positionals that may be
  omitted;
- ``...`` follows when more values are accepted than names were written;
- counting flags that take no value show ``...`` alone.

"""

from __future__ import annotations

import re
from io import StringIO
from typing import Protocol

from cli2md.constants import (
    ELLIPSIS,
    LIST_ITEM_PREFIX,
    MONOSPACE_MARKER,
    NESTED_SUB_BULLET_INDENT,
    SUB_BULLET_INDENT,
)
from cli2md.model.nodes import ArgumentSpec
from cli2md.model.usage import format_value_names

_NEWLINES = re.compile(r"[ \t]*\r?\n\s*")


class SupportsWrite(Protocol):
    def write(self, text: str) -> object: ...


def collapse_newlines(text: str) -> str:
    """Join the lines of ``text`` with single spaces."""
    return _NEWLINES.sub(" ", text.strip())


def _code(text: str) -> str:
    return f"{MONOSPACE_MARKER}{text}{MONOSPACE_MARKER}"


class ArgumentFormatter:
    """Format :class:`~cli2md.model.nodes.ArgumentSpec` objects as Markdown list items.

    The formatter is stateless; one instance can be shared by any number of
    renders.
    """

    def format(self, argument: ArgumentSpec) -> str:
        """Return the Markdown lines for ``argument``, each ending in a newline."""
        buffer = StringIO()
        self.write(argument, buffer)
        return buffer.getvalue()

    def write(self, argument: ArgumentSpec, out: SupportsWrite) -> None:
        """Write the Markdown lines for ``argument`` to ``out``.

        Writes are issued piece by piece; an error raised by ``out``
        propagates unchanged.
        """
        out.write(LIST_ITEM_PREFIX)

        flags = []
        if argument.short is not None:
            flags.append(_code(f"-{argument.short}"))
        if argument.long is not None:
            flags.append(_code(f"--{argument.long}"))
        out.write(", ".join(flags))

        suffix = self.format_value_suffix(argument)
        if suffix is not None:
            out.write(f" {suffix}" if flags else suffix)

        help_text = argument.get_help_text()
        if help_text:
            out.write(f": {collapse_newlines(help_text)}\n")
        else:
            out.write("\n")

        if argument.default_values:
            values = " ".join(_code(value) for value in argument.default_values)
            out.write(f"{SUB_BULLET_INDENT}- **default:** {values}\n")

        if argument.possible_values:
            out.write(f"{SUB_BULLET_INDENT}- **possible values:**\n")
            for value in argument.possible_values:
                out.write(f"{NESTED_SUB_BULLET_INDENT}- {_code(value.name)}")
                if value.help:
                    out.write(f": {collapse_newlines(value.help)}")
                out.write("\n")

        if argument.env_supported and argument.env:
            out.write(f"{SUB_BULLET_INDENT}- **env:** {_code(argument.env)}\n")

        if argument.value_delimiter is not None:
            out.write(f"{SUB_BULLET_INDENT}- **value delimiter:** {_code(argument.value_delimiter)}\n")

    def format_value_suffix(self, argument: ArgumentSpec) -> str | None:
        """Return the backtick-quoted value syntax, or None when the argument takes no value.

        Examples
        --------
            >>> from cli2md.model.nodes import ArgumentSpec, ValueRange
            >>> formatter = ArgumentFormatter()
            >>> formatter.format_value_suffix(
            ...     ArgumentSpec("color", long="color", require_equals=True, num_args=ValueRange(0, 1))
            ... )
            '`[=<COLOR>]`'
            >>> formatter.format_value_suffix(ArgumentSpec("verbose", short="v", action="count"))
            '`...`'

        """
        value_range = argument.value_range
        takes_values = value_range.takes_values
        counts = argument.action == "count"
        if not takes_values and not counts:
            return None

        marker = ""
        if takes_values and not argument.is_positional:
            if argument.require_equals:
                marker = "[=" if value_range.is_optional else "="
            elif value_range.is_optional:
                marker = "["

        if takes_values or argument.is_positional:
            body = format_value_names(argument)
        else:
            body = ELLIPSIS

        closing = "]" if marker.startswith("[") else ""
        return _code(f"{marker}{body}{closing}")
