#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the cli2md CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and turning them into renderer option
values.

A configuration file is a flat mapping of
:class:`~cli2md.options.markdown.MarkdownRendererOptions` field names::

    # .cli2md.toml
    subcommand_mode = "linked"
    prompt = "%"
    heading_level = 2

"""

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from cli2md.options.markdown import MarkdownRendererOptions

CONFIG_FILENAMES = [".cli2md.toml", ".cli2md.yaml", ".cli2md.yml", ".cli2md.json"]
CONFIG_ENV_VAR = "CLI2MD_CONFIG"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.cli2md] section from a pyproject.toml file.

    Returns an empty dict when the section is absent.

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("cli2md", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.cli2md] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root. In each directory the dedicated config files are
    checked first, in :data:`CONFIG_FILENAMES` order, then a
    ``pyproject.toml`` with a ``[tool.cli2md]`` section.

    Returns
    -------
    Path or None
        Path to the first config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # An unrelated broken pyproject.toml does not stop the search
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in standard locations.

    The parent directory search (see :func:`find_config_in_parents`) runs
    first, then the dedicated config files in the user's home directory.
    """
    found = find_config_in_parents()
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an invalid format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"Config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (CLI2MD_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def options_from_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a configuration mapping against the renderer option fields.

    Parameters
    ----------
    config : dict
        Mapping loaded from a configuration file

    Returns
    -------
    dict
        Keyword arguments for :class:`MarkdownRendererOptions`

    Raises
    ------
    argparse.ArgumentTypeError
        If the mapping has unknown keys or values of the wrong type

    """
    known = {f.name: f for f in fields(MarkdownRendererOptions)}
    unknown = sorted(set(config) - set(known))
    if unknown:
        raise argparse.ArgumentTypeError(f"Unknown configuration key(s): {', '.join(unknown)}")

    result = dict(config)
    for name, value in config.items():
        default = known[name].default
        if name == "prompt":
            # TOML has no null; false disables the prompt
            if value is False:
                result["prompt"] = None
            elif value is not None and not isinstance(value, str):
                raise argparse.ArgumentTypeError(f"'prompt' must be a string, got {type(value).__name__}")
        elif isinstance(default, bool) and not isinstance(value, bool):
            raise argparse.ArgumentTypeError(f"'{name}' must be a boolean, got {type(value).__name__}")
        elif isinstance(default, int) and not isinstance(default, bool):
            if isinstance(value, bool) or not isinstance(value, int):
                raise argparse.ArgumentTypeError(f"'{name}' must be an integer, got {type(value).__name__}")
        elif isinstance(default, str) and not isinstance(value, str):
            raise argparse.ArgumentTypeError(f"'{name}' must be a string, got {type(value).__name__}")

    return result
