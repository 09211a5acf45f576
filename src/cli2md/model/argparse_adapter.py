#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/model/argparse_adapter.py
"""Build command specifications from ``argparse`` parsers.

This module walks an :class:`argparse.ArgumentParser`, including nested
sub-parsers, and produces the equivalent :class:`~cli2md.model.nodes.CommandSpec`
tree. Parsers are read, never modified.

``argparse`` keeps the information needed here in private attributes
(``_actions``, ``_action_groups``, ``_choices_actions``). Those have been
stable across Python 3 releases and are read defensively with ``getattr``.

Examples
--------
    >>> import argparse
    >>> parser = argparse.ArgumentParser(prog="git", description="A fictional versioning CLI")
    >>> sub = parser.add_subparsers()
    >>> clone = sub.add_parser("clone", help="Clones repos")
    >>> _ = clone.add_argument("remote", help="The remote to clone")
    >>> command = from_argparse(parser)
    >>> [c.name for c in command.subcommands]
    ['clone']

"""

from __future__ import annotations

import argparse
import logging
from typing import Any

from cli2md.constants import ArgAction
from cli2md.model.nodes import ArgumentSpec, CommandSpec, PossibleValue, ValueRange

logger = logging.getLogger(__name__)

# Titles argparse gives its built-in groups ("optional arguments" before 3.10)
_DEFAULT_GROUP_TITLES = frozenset({"positional arguments", "options", "optional arguments"})

_FLAG_ACTIONS: tuple[type[argparse.Action], ...] = (
    argparse._StoreConstAction,
    argparse._AppendConstAction,
    argparse._HelpAction,
    argparse._VersionAction,
    argparse.BooleanOptionalAction,
)


def _expand_help_text(action: argparse.Action) -> str | None:
    """Expand help text for an action, handling percent-formatting like argparse does.

    Parameters
    ----------
    action : argparse.Action
        The action whose help text to expand

    Returns
    -------
    str or None
        Expanded help text, or None when the action has no help

    """
    help_text = action.help
    if not help_text:
        return None

    # Build params dict like argparse does in HelpFormatter._expand_help
    params = dict(vars(action))
    for name in list(params):
        if params[name] is argparse.SUPPRESS:
            del params[name]
    for name in list(params):
        if hasattr(params[name], "__name__"):
            params[name] = params[name].__name__
    if params.get("choices") is not None:
        params["choices"] = ", ".join(map(str, params["choices"]))

    try:
        return help_text % params
    except (KeyError, ValueError, TypeError):
        return help_text


def _classify_action(action: argparse.Action) -> ArgAction:
    if isinstance(action, argparse._CountAction):
        return "count"
    if isinstance(action, _FLAG_ACTIONS) or action.nargs == 0:
        return "flag"
    if isinstance(action, argparse._AppendAction):
        # _ExtendAction subclasses _AppendAction
        return "append"
    return "set"


def _value_range(action: argparse.Action, kind: ArgAction) -> ValueRange:
    if kind in ("flag", "count"):
        return ValueRange.exactly(0)

    nargs = action.nargs
    if nargs is None:
        return ValueRange.exactly(1)
    if nargs == argparse.OPTIONAL:
        return ValueRange.between(0, 1)
    if nargs in (argparse.ZERO_OR_MORE, argparse.REMAINDER):
        return ValueRange.at_least(0)
    if nargs == argparse.ONE_OR_MORE:
        return ValueRange.at_least(1)
    if isinstance(nargs, int):
        return ValueRange.exactly(nargs)

    logger.debug("Unrecognized nargs %r for %s, assuming a single value", nargs, action.dest)
    return ValueRange.exactly(1)


def _split_option_strings(option_strings: list[str]) -> tuple[str | None, str | None]:
    short = next((opt[1] for opt in option_strings if len(opt) == 2 and opt[0] != opt[1]), None)
    long = next((opt[2:] for opt in option_strings if opt.startswith("--") and len(opt) > 2), None)
    if short is None and long is None and option_strings:
        # Single-dash long options such as "-foo" are shown as long flags
        long = option_strings[0].lstrip("-")
    return short, long


def _value_names(action: argparse.Action) -> tuple[str, ...] | None:
    metavar = action.metavar
    if metavar is None:
        return None
    if isinstance(metavar, tuple):
        return tuple(str(name) for name in metavar)
    return (str(metavar),)


def _default_values(action: argparse.Action, kind: ArgAction) -> tuple[str, ...]:
    default = action.default
    if kind in ("flag", "count") or default is None or default is argparse.SUPPRESS:
        return ()
    if isinstance(default, (list, tuple)):
        return tuple(str(value) for value in default)
    return (str(default),)


def _possible_values(action: argparse.Action) -> tuple[PossibleValue, ...]:
    choices = action.choices
    if choices is None or isinstance(choices, dict):
        return ()
    try:
        return tuple(PossibleValue(str(choice)) for choice in choices)
    except TypeError:
        # Containers that support "in" but not iteration (e.g. range-like checkers)
        return ()


def _group_headings(parser: argparse.ArgumentParser) -> dict[int, str]:
    headings: dict[int, str] = {}
    for group in getattr(parser, "_action_groups", ()):
        title = group.title
        if not title or title in _DEFAULT_GROUP_TITLES:
            continue
        for action in group._group_actions:
            headings[id(action)] = title
    return headings


def argument_from_action(action: argparse.Action, help_heading: str | None = None) -> ArgumentSpec:
    """Convert one ``argparse`` action into an :class:`ArgumentSpec`.

    Parameters
    ----------
    action : argparse.Action
        The action to convert
    help_heading : str, optional
        Custom group title the action belongs to

    Returns
    -------
    ArgumentSpec
        The equivalent argument specification

    """
    kind = _classify_action(action)
    short, long = _split_option_strings(list(action.option_strings))
    return ArgumentSpec(
        id=action.dest,
        short=short,
        long=long,
        help=_expand_help_text(action),
        num_args=_value_range(action, kind),
        required=bool(action.required),
        action=kind,
        value_names=_value_names(action),
        default_values=_default_values(action, kind),
        possible_values=_possible_values(action),
        env_supported=False,
        help_heading=help_heading,
    )


def _subparser_actions(parser: argparse.ArgumentParser) -> list[argparse._SubParsersAction]:
    return [action for action in parser._actions if isinstance(action, argparse._SubParsersAction)]


def _iter_subparsers(action: argparse._SubParsersAction) -> list[tuple[str, argparse.ArgumentParser, str | None]]:
    help_by_name = {choice.dest: choice.help for choice in getattr(action, "_choices_actions", ())}
    seen: set[int] = set()
    children = []
    # choices maps both names and aliases; the primary name is inserted first
    for name, subparser in action.choices.items():
        if id(subparser) in seen:
            continue
        seen.add(id(subparser))
        help_text = help_by_name.get(name)
        children.append((name, subparser, None if help_text is argparse.SUPPRESS else help_text))
    return children


def from_argparse(
    parser: argparse.ArgumentParser,
    name: str | None = None,
    about: str | None = None,
) -> CommandSpec:
    """Build a :class:`CommandSpec` tree from an ``argparse`` parser.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Root parser, sub-parsers are followed recursively
    name : str, optional
        Command name, defaults to ``parser.prog``
    about : str, optional
        Short description. For the root it defaults to the parser
        description; for sub-parsers it is the ``help`` given to
        ``add_parser``.

    Returns
    -------
    CommandSpec
        The command tree

    """
    command_name = name or parser.prog
    headings = _group_headings(parser)

    arguments = []
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            continue
        if action.help is argparse.SUPPRESS:
            logger.debug("Skipping suppressed argument %s of %s", action.dest, command_name)
            continue
        arguments.append(argument_from_action(action, headings.get(id(action))))

    subcommands = []
    for sub_action in _subparser_actions(parser):
        for child_name, subparser, child_help in _iter_subparsers(sub_action):
            subcommands.append(from_argparse(subparser, name=child_name, about=child_help))

    if about is None:
        short_about, long_about = parser.description, None
    else:
        short_about, long_about = about, parser.description

    logger.debug(
        "Built command %s with %d argument(s) and %d subcommand(s)", command_name, len(arguments), len(subcommands)
    )
    return CommandSpec(
        name=command_name,
        about=short_about,
        long_about=long_about,
        usage=parser.format_usage().rstrip("\n"),
        arguments=tuple(arguments),
        subcommands=tuple(subcommands),
    )


def is_argparse_parser(obj: Any) -> bool:
    """Return True if ``obj`` is an ``argparse`` parser."""
    return isinstance(obj, argparse.ArgumentParser)
