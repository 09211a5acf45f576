#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/cli2md/cli/targets.py
"""Resolution of CLI targets into command specifications.

A target is either a path to a declarative specification file
(``.yaml``, ``.yml``, ``.toml`` or ``.json``) or a ``module:attribute``
reference. The attribute may be dotted (``package.cli:app.parser``) and may
name an ``argparse.ArgumentParser``, a :class:`~cli2md.model.CommandSpec`,
or a callable taking no arguments that returns either of them.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import Any

from cli2md.constants import SPEC_FILE_FORMATS
from cli2md.exceptions import SpecificationError, TargetLoadError
from cli2md.model.argparse_adapter import from_argparse, is_argparse_parser
from cli2md.model.loader import load_command_file
from cli2md.model.nodes import CommandSpec

logger = logging.getLogger(__name__)


def is_spec_file_target(target: str) -> bool:
    """Return True if ``target`` names a declarative specification file."""
    return Path(target).suffix.lower() in SPEC_FILE_FORMATS


def _import_module(module_name: str, target: str) -> Any:
    # Targets are usually local scripts, so the working directory must be importable
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        return importlib.import_module(module_name)
    except ImportError as e:
        raise TargetLoadError(target, f"Could not import module '{module_name}': {e}", original_error=e) from e


def _resolve_attribute(module: Any, attribute_path: str, target: str) -> Any:
    obj = module
    for part in attribute_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetLoadError(
                target, f"Module '{module.__name__}' has no attribute '{attribute_path}'", original_error=e
            ) from e
    return obj


def to_command_spec(obj: Any, target: str, name: str | None = None) -> CommandSpec:
    """Convert a resolved target object into a :class:`CommandSpec`.

    Parameters
    ----------
    obj : Any
        An ``ArgumentParser``, a ``CommandSpec``, or a zero-argument callable
        returning one of them
    target : str
        The original target reference, used in error messages
    name : str, optional
        Overrides the root command name

    Raises
    ------
    SpecificationError
        If the object is of an unsupported type

    """
    if callable(obj) and not is_argparse_parser(obj) and not isinstance(obj, CommandSpec):
        logger.debug("Calling factory %r for target %s", obj, target)
        obj = obj()

    if is_argparse_parser(obj):
        return from_argparse(obj, name=name)
    if isinstance(obj, CommandSpec):
        return obj.create_updated(name=name) if name else obj

    raise SpecificationError(
        f"Target '{target}' resolved to {type(obj).__name__}; expected an ArgumentParser or CommandSpec"
    )


def load_target(target: str, name: str | None = None) -> CommandSpec:
    """Load the command specification named by ``target``.

    Parameters
    ----------
    target : str
        ``module:attribute`` reference or specification file path
    name : str, optional
        Overrides the root command name

    Returns
    -------
    CommandSpec
        Root of the command tree

    Raises
    ------
    TargetLoadError
        If the module, attribute or file cannot be loaded
    SpecificationError
        If the target resolves to an unsupported object or the file is malformed

    """
    if is_spec_file_target(target):
        logger.debug("Loading specification file %s", target)
        command = load_command_file(target)
        return command.create_updated(name=name) if name else command

    module_name, sep, attribute_path = target.partition(":")
    if not sep or not module_name or not attribute_path:
        raise TargetLoadError(
            target,
            f"Invalid target '{target}': expected 'module:attribute' or a "
            f"{', '.join(sorted(SPEC_FILE_FORMATS))} specification file",
        )

    module = _import_module(module_name, target)
    obj = _resolve_attribute(module, attribute_path, target)
    return to_command_spec(obj, target, name=name)
