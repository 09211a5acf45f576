#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/model/usage.py
"""Usage string derivation for command specifications.

Commands built without a pre-rendered usage get one derived from their
arguments, in the form::

    Usage: git diff [OPTIONS] [COMMIT] [COMMIT]

When a command has ``flatten_help`` set and has subcommands, the usage lists
one line per subcommand instead, with continuation lines aligned under the
first::

    Usage: git clone <REMOTE>
           git push <REMOTE>

"""

from __future__ import annotations

from cli2md.constants import COMMAND_PLACEHOLDER, ELLIPSIS, OPTIONS_PLACEHOLDER, USAGE_PREFIX
from cli2md.model.nodes import ArgumentSpec, CommandSpec


def format_value_names(argument: ArgumentSpec) -> str:
    """Return the value names of ``argument`` as shown in value syntax.

    Names are written ``<NAME>``, or ``[NAME]`` for a positional that may be
    omitted, and ``...`` follows when more values are accepted than names
    were written (or a positional accumulates occurrences).

    Examples
    --------
        >>> from cli2md.model.nodes import ArgumentSpec, ValueRange
        >>> format_value_names(ArgumentSpec("path", required=True, num_args=ValueRange.at_least(1)))
        '<PATH>...'

    """
    value_range = argument.value_range
    names = argument.display_value_names()
    if argument.is_positional and (value_range.is_optional or not argument.required):
        rendered = " ".join(f"[{name}]" for name in names)
    else:
        rendered = " ".join(f"<{name}>" for name in names)

    if value_range.accepts_more_than(len(names)) or (argument.is_positional and argument.action == "append"):
        rendered += ELLIPSIS
    return rendered


def _usage_line(command: CommandSpec, command_path: str) -> str:
    parts = [command_path]
    if any(not argument.is_positional for argument in command.arguments):
        parts.append(OPTIONS_PLACEHOLDER)
    parts.extend(format_value_names(argument) for argument in command.arguments if argument.is_positional)
    if command.visible_subcommands():
        parts.append(COMMAND_PLACEHOLDER)
    return " ".join(parts)


def _strip_usage_prefix(usage: str) -> str:
    if usage.lower().startswith(USAGE_PREFIX.lower()):
        return usage[len(USAGE_PREFIX) :]
    return usage


def render_usage(command: CommandSpec, command_path: str | None = None) -> str:
    """Return the usage text for ``command``.

    Parameters
    ----------
    command : CommandSpec
        Command to describe
    command_path : str, optional
        Invocation path shown in the usage, defaults to the command name

    Returns
    -------
    str
        The pre-rendered usage when the command carries one, otherwise the
        derived usage. May be empty.

    """
    if command.usage is not None:
        return command.usage

    command_path = command_path or command.name
    children = command.visible_subcommands()
    if not (command.flatten_help and children):
        return USAGE_PREFIX + _usage_line(command, command_path)

    lines = []
    if command.arguments:
        lines.append(_usage_line(command.create_updated(subcommands=()), command_path))
    for child in children:
        child_path = f"{command_path} {child.name}"
        if child.usage is None:
            lines.append(_usage_line(child, child_path))
            continue
        # Children with an empty usage have none to show
        child_usage = _strip_usage_prefix(child.usage.strip())
        if child_usage:
            lines.append(child_usage)

    if not lines:
        return ""
    indent = "\n" + " " * len(USAGE_PREFIX)
    return USAGE_PREFIX + indent.join(lines)
