#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/model/nodes.py
"""Command specification model.

This module defines the read-only tree that describes a command-line
program: commands, their arguments, and the values those arguments accept.
The renderers consume this tree; producers such as the argparse adapter and
the declarative loader build it.

Model Hierarchy
---------------
- CommandSpec: a command with ordered arguments and ordered subcommands
- ArgumentSpec: one flag, option or positional value slot
- PossibleValue: one allowed value of an argument, with optional help
- ValueRange: minimum/maximum number of values an argument accepts

All classes are frozen dataclasses. Sequence fields are normalized to tuples
on construction so a built tree cannot be modified in place.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from cli2md.constants import (
    ARG_ACTIONS,
    HELP_SUBCOMMAND_NAME,
    OPTIONS_HEADING,
    POSITIONAL_HEADING,
    ArgAction,
)
from cli2md.options.base import CloneFrozenMixin


def _freeze(instance: object, name: str, values: Iterable | None) -> None:
    object.__setattr__(instance, name, tuple(values) if values is not None else ())


@dataclass(frozen=True)
class ValueRange:
    """Number of values an argument accepts.

    Parameters
    ----------
    min_values : int, default 1
        Minimum number of values
    max_values : int or None, default 1
        Maximum number of values, ``None`` when unbounded

    Raises
    ------
    ValueError
        If a bound is negative or the maximum is below the minimum

    """

    min_values: int = 1
    max_values: int | None = 1

    def __post_init__(self) -> None:
        if self.min_values < 0:
            raise ValueError(f"min_values must be non-negative, got {self.min_values}")
        if self.max_values is not None and self.max_values < self.min_values:
            raise ValueError(f"max_values ({self.max_values}) must not be less than min_values ({self.min_values})")

    @classmethod
    def exactly(cls, count: int) -> ValueRange:
        return cls(count, count)

    @classmethod
    def at_least(cls, count: int) -> ValueRange:
        return cls(count, None)

    @classmethod
    def between(cls, minimum: int, maximum: int | None) -> ValueRange:
        return cls(minimum, maximum)

    @property
    def takes_values(self) -> bool:
        """Return True if at least one value can be given."""
        return self.max_values is None or self.max_values > 0

    @property
    def is_optional(self) -> bool:
        """Return True if zero values are accepted."""
        return self.min_values == 0

    def accepts_more_than(self, count: int) -> bool:
        """Return True if more than ``count`` values are accepted."""
        return self.max_values is None or count < self.max_values

    def __str__(self) -> str:
        if self.max_values is None:
            return f"{self.min_values}.."
        if self.max_values == self.min_values:
            return str(self.min_values)
        return f"{self.min_values}..={self.max_values}"


@dataclass(frozen=True)
class PossibleValue:
    """An allowed value of an argument.

    Parameters
    ----------
    name : str
        The value as typed on the command line
    help : str or None, default None
        Description of the value

    """

    name: str
    help: str | None = None


@dataclass(frozen=True)
class ArgumentSpec(CloneFrozenMixin):
    """A single declared flag, option or positional argument.

    Parameters
    ----------
    id : str
        Identifier, used as the display name when no value names are given
    short : str or None, default None
        Single-character short flag, without the leading ``-``
    long : str or None, default None
        Long flag, without the leading ``--``
    help : str or None, default None
        Short help text
    long_help : str or None, default None
        Long help text, preferred over ``help`` when present
    num_args : ValueRange or None, default None
        Accepted number of values; when unset it follows from ``action``
    required : bool, default False
        Whether the argument must be given
    require_equals : bool, default False
        Whether the value must be attached with ``=``
    action : {"set", "flag", "append", "count"}, default "set"
        How occurrences are handled
    value_names : sequence of str or None, default None
        Explicit value names, overriding the identifier
    default_values : sequence of str, default ()
        Values used when the argument is absent
    possible_values : sequence of PossibleValue, default ()
        Allowed values
    env : str or None, default None
        Environment variable the value can be read from
    env_supported : bool, default True
        Whether the producer supports environment variable lookup at all
    value_delimiter : str or None, default None
        Character splitting a single occurrence into multiple values
    help_heading : str or None, default None
        Explicit group heading

    """

    id: str
    short: str | None = None
    long: str | None = None
    help: str | None = None
    long_help: str | None = None
    num_args: ValueRange | None = None
    required: bool = False
    require_equals: bool = False
    action: ArgAction = "set"
    value_names: tuple[str, ...] | None = None
    default_values: tuple[str, ...] = field(default_factory=tuple)
    possible_values: tuple[PossibleValue, ...] = field(default_factory=tuple)
    env: str | None = None
    env_supported: bool = True
    value_delimiter: str | None = None
    help_heading: str | None = None

    def __post_init__(self) -> None:
        if self.action not in ARG_ACTIONS:
            raise ValueError(f"action must be one of {', '.join(ARG_ACTIONS)}, got {self.action!r}")
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"short flag must be a single character, got {self.short!r}")
        if self.value_names is not None:
            _freeze(self, "value_names", self.value_names)
        _freeze(self, "default_values", self.default_values)
        _freeze(self, "possible_values", self.possible_values)

    @property
    def is_positional(self) -> bool:
        """Return True if the argument is matched by position rather than by flag."""
        return self.short is None and self.long is None

    @property
    def value_range(self) -> ValueRange:
        """Return the effective number of accepted values."""
        if self.num_args is not None:
            return self.num_args
        if self.action in ("flag", "count"):
            return ValueRange.exactly(0)
        return ValueRange.exactly(1)

    @property
    def takes_values(self) -> bool:
        return self.value_range.takes_values

    @property
    def heading(self) -> str:
        """Return the group heading this argument is listed under."""
        if self.help_heading:
            return self.help_heading
        return POSITIONAL_HEADING if self.is_positional else OPTIONS_HEADING

    def get_help_text(self) -> str | None:
        """Return the long help if present, else the short help."""
        return self.long_help or self.help

    def display_value_names(self) -> list[str]:
        """Return the value names shown in value syntax.

        A single name is repeated to match the minimum number of values, so
        an argument taking exactly two values named ``FILE`` yields
        ``["FILE", "FILE"]``.
        """
        if self.value_names is not None:
            names = list(self.value_names)
        else:
            names = [self.id.upper()]
        if len(names) == 1:
            names = names * max(self.value_range.min_values, 1)
        return names


@dataclass(frozen=True)
class CommandSpec(CloneFrozenMixin):
    """A command and, recursively, its subcommands.

    Parameters
    ----------
    name : str
        Command name, unique among its siblings
    about : str or None, default None
        Short description
    long_about : str or None, default None
        Long description, preferred over ``about`` when present
    usage : str or None, default None
        Pre-rendered usage text. ``None`` derives usage from the arguments;
        an empty string hides the usage block.
    arguments : sequence of ArgumentSpec, default ()
        Arguments in declaration order
    subcommands : sequence of CommandSpec, default ()
        Subcommands in declaration order
    flatten_help : bool, default False
        List the usage of every subcommand in this command's usage

    """

    name: str
    about: str | None = None
    long_about: str | None = None
    usage: str | None = None
    arguments: tuple[ArgumentSpec, ...] = field(default_factory=tuple)
    subcommands: tuple[CommandSpec, ...] = field(default_factory=tuple)
    flatten_help: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "arguments", self.arguments)
        _freeze(self, "subcommands", self.subcommands)

    @property
    def has_subcommands(self) -> bool:
        return bool(self.subcommands)

    def visible_subcommands(self) -> list[CommandSpec]:
        """Return subcommands excluding the auto-generated ``help`` command."""
        return [sub for sub in self.subcommands if sub.name != HELP_SUBCOMMAND_NAME]

    def get_about_text(self) -> str | None:
        """Return the long description if present, else the short one."""
        return self.long_about or self.about

    def render_usage(self, command_path: str | None = None) -> str:
        """Return the usage text for this command (see :mod:`cli2md.model.usage`)."""
        from cli2md.model.usage import render_usage

        return render_usage(self, command_path)

    def iter_tree(self, parent_path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], CommandSpec]]:
        """Yield ``(path, command)`` pairs depth-first, skipping ``help`` commands."""
        path = parent_path + (self.name,)
        yield path, self
        for sub in self.visible_subcommands():
            yield from sub.iter_tree(path)
