#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/api.py
"""Public API functions for rendering command-line interfaces.

The functions here accept either a :class:`~cli2md.model.nodes.CommandSpec`
tree or an ``argparse.ArgumentParser``, which is converted with
:func:`~cli2md.model.argparse_adapter.from_argparse` first.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import fields
from pathlib import PurePosixPath
from typing import Any, Optional, Union

from cli2md.exceptions import ValidationError
from cli2md.model.argparse_adapter import from_argparse, is_argparse_parser
from cli2md.model.nodes import CommandSpec
from cli2md.options.markdown import MarkdownRendererOptions
from cli2md.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)

CommandSource = Union[CommandSpec, argparse.ArgumentParser]


def _as_command_spec(command: CommandSource) -> CommandSpec:
    if isinstance(command, CommandSpec):
        return command
    if is_argparse_parser(command):
        return from_argparse(command)
    raise ValidationError(
        f"Expected a CommandSpec or ArgumentParser, got {type(command).__name__}",
        parameter_name="command",
        parameter_value=command,
    )


def _merge_options(options: Optional[MarkdownRendererOptions], kwargs: dict[str, Any]) -> MarkdownRendererOptions:
    options = options or MarkdownRendererOptions()
    if not kwargs:
        return options

    known = {f.name for f in fields(MarkdownRendererOptions)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise ValidationError(
            f"Unknown renderer option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=kwargs[unknown[0]],
        )

    try:
        return options.create_updated(**kwargs)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def to_markdown(
    command: CommandSource,
    options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render a command tree to a Markdown document.

    Parameters
    ----------
    command : CommandSpec or argparse.ArgumentParser
        Root command of the interface to document
    options : MarkdownRendererOptions, optional
        Rendering options, defaults are used when omitted
    kwargs : Any
        Individual option values overriding fields of ``options``
        (e.g. ``prompt=None``, ``subcommand_mode="none"``)

    Returns
    -------
    str
        The Markdown document

    Raises
    ------
    ValidationError
        If ``command`` is of an unsupported type or an option is invalid

    Examples
    --------
        >>> from cli2md.model import CommandSpec
        >>> print(to_markdown(CommandSpec("tool", usage=""), prompt=None), end="")
        # **`tool`**

    """
    renderer = MarkdownRenderer(_merge_options(options, kwargs))
    return renderer.render_to_string(_as_command_spec(command))


def to_markdown_pages(
    command: CommandSource,
    options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> dict[PurePosixPath, str]:
    """Render one linked Markdown page per command.

    Accepts the same arguments as :func:`to_markdown`. The subcommand mode is
    always ``"linked"``.

    Returns
    -------
    dict[PurePosixPath, str]
        Relative page path mapped to page content

    """
    renderer = MarkdownRenderer(_merge_options(options, kwargs))
    pages = renderer.render_linked_pages(_as_command_spec(command))
    logger.debug("Rendered %d linked page(s)", len(pages))
    return pages
