#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/model/loader.py
"""Load command specifications from declarative YAML, TOML or JSON files.

A specification file holds a single mapping describing the root command.
Keys mirror the fields of :class:`~cli2md.model.nodes.CommandSpec` and
:class:`~cli2md.model.nodes.ArgumentSpec`::

    name: git
    about: A fictional versioning CLI
    subcommands:
      - name: clone
        about: Clones repos
        arguments:
          - id: remote
            required: true
            help: The remote to clone

``num_args`` accepts an integer (``2``), a ``[min, max]`` pair where ``max``
may be ``null``, or a range string (``"1.."``, ``"0..=1"``).
``possible_values`` entries are either plain strings or ``{name, help}``
mappings. TOML files may also nest the mapping under ``[command]``.

"""

from __future__ import annotations

import json
import logging
import re
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from cli2md.constants import SPEC_FILE_FORMATS
from cli2md.exceptions import SpecificationError, TargetLoadError
from cli2md.model.nodes import ArgumentSpec, CommandSpec, PossibleValue, ValueRange

logger = logging.getLogger(__name__)

_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*\.\.(=?)\s*(\d*)\s*$")

_COMMAND_KEYS = frozenset(f.name for f in fields(CommandSpec))
_ARGUMENT_KEYS = frozenset(f.name for f in fields(ArgumentSpec))
_STRING_SEQUENCE_KEYS = ("value_names", "default_values")


def _expect(value: Any, expected: type | tuple[type, ...], key: str, location: str) -> Any:
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        names = " or ".join(t.__name__ for t in (expected if isinstance(expected, tuple) else (expected,)))
        raise SpecificationError(f"'{key}' must be {names}, got {type(value).__name__}", location=location)
    return value


def _check_keys(data: Mapping[str, Any], allowed: frozenset[str], location: str) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise SpecificationError(f"unknown key(s): {', '.join(unknown)}", location=location)


def parse_value_range(value: Any, location: str = "num_args") -> ValueRange:
    """Parse a ``num_args`` entry.

    Parameters
    ----------
    value : int, list or str
        ``2``, ``[1, None]``, ``"1.."``, ``"0..=1"``
    location : str
        Position in the document, for error messages

    Returns
    -------
    ValueRange
        The parsed range

    Raises
    ------
    SpecificationError
        If the value cannot be interpreted

    """
    try:
        if isinstance(value, bool):
            raise SpecificationError("'num_args' must not be a boolean", location=location)
        if isinstance(value, int):
            return ValueRange.exactly(value)
        if isinstance(value, (list, tuple)) and len(value) == 2:
            minimum, maximum = value
            return ValueRange.between(int(minimum), None if maximum is None else int(maximum))
        if isinstance(value, str):
            if value.strip().isdigit():
                return ValueRange.exactly(int(value))
            match = _RANGE_PATTERN.match(value)
            if match:
                minimum, inclusive, maximum = match.groups()
                if not maximum:
                    return ValueRange.at_least(int(minimum))
                upper = int(maximum) if inclusive else int(maximum) - 1
                return ValueRange.between(int(minimum), upper)
    except ValueError as e:
        raise SpecificationError(str(e), location=location, original_error=e) from e
    raise SpecificationError(f"cannot interpret num_args {value!r}", location=location)


def _possible_value(entry: Any, location: str) -> PossibleValue:
    if isinstance(entry, (str, int, float)) and not isinstance(entry, bool):
        return PossibleValue(str(entry))
    _expect(entry, dict, "possible_values", location)
    _check_keys(entry, frozenset({"name", "help"}), location)
    if "name" not in entry:
        raise SpecificationError("possible value requires 'name'", location=location)
    help_text = entry.get("help")
    return PossibleValue(str(entry["name"]), None if help_text is None else str(help_text))


def argument_from_dict(data: Mapping[str, Any], location: str = "argument") -> ArgumentSpec:
    """Build an :class:`ArgumentSpec` from a mapping."""
    _expect(data, dict, "argument", location)
    _check_keys(data, _ARGUMENT_KEYS, location)
    if "id" not in data:
        raise SpecificationError("argument requires 'id'", location=location)

    kwargs: dict[str, Any] = dict(data)
    if "num_args" in kwargs and kwargs["num_args"] is not None:
        kwargs["num_args"] = parse_value_range(kwargs["num_args"], f"{location}.num_args")
    for key in _STRING_SEQUENCE_KEYS:
        if kwargs.get(key) is not None:
            values = kwargs[key]
            if isinstance(values, (str, int, float)):
                values = [values]
            _expect(values, list, key, location)
            kwargs[key] = tuple(str(v) for v in values)
    if kwargs.get("possible_values") is not None:
        entries = _expect(kwargs["possible_values"], list, "possible_values", location)
        kwargs["possible_values"] = tuple(
            _possible_value(entry, f"{location}.possible_values[{index}]") for index, entry in enumerate(entries)
        )
    for key in ("required", "require_equals", "env_supported"):
        if key in kwargs:
            _expect(kwargs[key], bool, key, location)

    try:
        return ArgumentSpec(**kwargs)
    except (TypeError, ValueError) as e:
        raise SpecificationError(str(e), location=location, original_error=e) from e


def command_from_dict(data: Mapping[str, Any], location: str | None = None) -> CommandSpec:
    """Build a :class:`CommandSpec` tree from a mapping.

    Parameters
    ----------
    data : Mapping
        Mapping describing the command (see module docstring)
    location : str, optional
        Position in the document, for error messages

    Returns
    -------
    CommandSpec
        The command tree

    Raises
    ------
    SpecificationError
        If a key is unknown, a required key is missing or a value has the
        wrong type

    """
    location = location or "command"
    _expect(data, dict, "command", location)
    _check_keys(data, _COMMAND_KEYS, location)
    if "name" not in data:
        raise SpecificationError("command requires 'name'", location=location)

    name = str(data["name"])
    location = location if location != "command" else name

    arguments = [
        argument_from_dict(entry, f"{location}.arguments[{index}]")
        for index, entry in enumerate(_expect(data.get("arguments") or [], list, "arguments", location))
    ]
    subcommands = [
        command_from_dict(entry, f"{location}.subcommands[{index}]")
        for index, entry in enumerate(_expect(data.get("subcommands") or [], list, "subcommands", location))
    ]

    for key in ("about", "long_about", "usage"):
        if data.get(key) is not None:
            _expect(data[key], str, key, location)
    if "flatten_help" in data:
        _expect(data["flatten_help"], bool, "flatten_help", location)

    return CommandSpec(
        name=name,
        about=data.get("about"),
        long_about=data.get("long_about"),
        usage=data.get("usage"),
        arguments=tuple(arguments),
        subcommands=tuple(subcommands),
        flatten_help=data.get("flatten_help", False),
    )


def _read_spec_data(path: Path) -> Any:
    spec_format = SPEC_FILE_FORMATS.get(path.suffix.lower())
    if spec_format is None:
        raise TargetLoadError(
            str(path), message=f"Unsupported specification format: {path.suffix}. Use .yaml, .toml or .json"
        )

    if spec_format == "toml":
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return data.get("command", data)
    with open(path, "r", encoding="utf-8") as f:
        if spec_format == "yaml":
            return yaml.safe_load(f)
        return json.load(f)


def load_command_file(path: Path | str) -> CommandSpec:
    """Load a command specification from a YAML, TOML or JSON file.

    Parameters
    ----------
    path : Path or str
        Path to the specification file

    Returns
    -------
    CommandSpec
        The command tree

    Raises
    ------
    TargetLoadError
        If the file does not exist, has an unsupported suffix or cannot be parsed
    SpecificationError
        If the parsed document does not describe a valid command

    """
    path = Path(path)
    if not path.is_file():
        raise TargetLoadError(str(path), message=f"Specification file does not exist: {path}")

    try:
        data = _read_spec_data(path)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        raise TargetLoadError(str(path), message=f"Error reading specification {path}: {e}", original_error=e) from e

    logger.debug("Loaded specification document from %s", path)
    return command_from_dict(data)
