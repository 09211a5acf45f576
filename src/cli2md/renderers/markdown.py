#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/renderers/markdown.py
"""Markdown rendering of command specifications.

This module provides the MarkdownRenderer class, which walks a
:class:`~cli2md.model.nodes.CommandSpec` tree depth-first and writes one
section per command:

1. a heading with the (optionally prompted) command path;
2. the command description;
3. the usage in a fenced ``text`` block;
4. the list of subcommands, linked according to the subcommand mode;
5. the arguments, grouped under their help headings;
6. in ``"flatten"`` mode, the sections of all subcommands, one heading level
   deeper.

Subcommands named ``help`` are never listed or rendered.

"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path, PurePosixPath

from cli2md.constants import (
    EMPHASIS_MARKER,
    HEADING_MARKER,
    LIST_ITEM_PREFIX,
    MONOSPACE_MARKER,
    SUBCOMMANDS_HEADING,
    USAGE_FENCE_LANGUAGE,
)
from cli2md.model.nodes import ArgumentSpec, CommandSpec
from cli2md.options.markdown import MarkdownRendererOptions
from cli2md.renderers.arguments import ArgumentFormatter
from cli2md.renderers.base import BaseRenderer
from cli2md.utils.io_utils import TextSink, write_content

logger = logging.getLogger(__name__)


class _BlockWriter:
    """Separate consecutive Markdown blocks with one blank line."""

    def __init__(self, sink: TextSink):
        self._sink = sink
        self._started = False

    def begin_block(self) -> None:
        if self._started:
            self._sink.write("\n")
        self._started = True

    def block(self, text: str) -> None:
        self.begin_block()
        self._sink.write(f"{text}\n")

    def write(self, text: str) -> None:
        self._sink.write(text)


def group_arguments(arguments: tuple[ArgumentSpec, ...] | list[ArgumentSpec]) -> dict[str, list[ArgumentSpec]]:
    """Group arguments by heading, keeping first-seen heading order and declaration order.

    Examples
    --------
        >>> from cli2md.model.nodes import ArgumentSpec
        >>> groups = group_arguments([
        ...     ArgumentSpec("input"),
        ...     ArgumentSpec("debug", long="debug", action="flag"),
        ...     ArgumentSpec("output"),
        ... ])
        >>> {heading: [a.id for a in args] for heading, args in groups.items()}
        {'arguments': ['input', 'output'], 'options': ['debug']}

    """
    groups: dict[str, list[ArgumentSpec]] = {}
    for argument in arguments:
        groups.setdefault(argument.heading, []).append(argument)
    return groups


class MarkdownRenderer(BaseRenderer):
    """Render command specification trees to Markdown.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Rendering options; defaults are used when omitted

    Examples
    --------
    Basic usage:

        >>> from cli2md.model import ArgumentSpec, CommandSpec
        >>> clone = CommandSpec(
        ...     "clone", about="Clones repos", usage="",
        ...     arguments=[ArgumentSpec("remote", required=True)],
        ... )
        >>> print(MarkdownRenderer().render_to_string(clone), end="")
        # `$ `**`clone`**
        <BLANKLINE>
        Clones repos
        <BLANKLINE>
        ## arguments
        <BLANKLINE>
        - `<REMOTE>`

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._formatter = ArgumentFormatter()

    def write(self, command: CommandSpec, sink: TextSink) -> None:
        """Write the Markdown document for ``command`` and, in flatten mode, its subcommands."""
        root = command.create_updated(flatten_help=True)
        self._render_command(root, _BlockWriter(sink), self.options.heading_level, "")

    def render_linked_pages(self, command: CommandSpec) -> dict[PurePosixPath, str]:
        """Render one page per command for the ``"linked"`` subcommand mode.

        The root is rendered to ``<root>.md`` and every subcommand to
        ``<parent directory>/<parent>/<name>.md``, which is where the
        ``<parent>/<name>.md`` link on the parent's page points.

        Parameters
        ----------
        command : CommandSpec
            Root of the command tree

        Returns
        -------
        dict[PurePosixPath, str]
            Relative page path mapped to page content, in depth-first order

        """
        renderer = self
        if self.options.subcommand_mode != "linked":
            renderer = MarkdownRenderer(self.options.with_subcommand_mode("linked"))

        pages: dict[PurePosixPath, str] = {}
        renderer._collect_pages(command, PurePosixPath(), "", pages)
        return pages

    def _collect_pages(
        self,
        command: CommandSpec,
        directory: PurePosixPath,
        parent_name: str,
        pages: dict[PurePosixPath, str],
    ) -> None:
        buffer = StringIO()
        writer = _BlockWriter(TextSink(buffer, destination="<string>"))
        self._render_command(command.create_updated(flatten_help=True), writer, self.options.heading_level, parent_name)
        pages[directory / f"{command.name}.md"] = buffer.getvalue()

        for child in command.visible_subcommands():
            self._collect_pages(child, directory / command.name, f"{parent_name}{command.name} ", pages)

    def _render_command(self, command: CommandSpec, writer: _BlockWriter, level: int, parent_name: str) -> None:
        logger.debug("Rendering %s%s at heading level %d", parent_name, command.name, level)
        heading = HEADING_MARKER * level
        subheading = HEADING_MARKER * (level + 1)

        writer.block(f"{heading} {self._format_title(command.name, parent_name)}")

        about = command.get_about_text()
        if about:
            writer.block(about)

        usage = command.render_usage(f"{parent_name}{command.name}")
        if usage:
            writer.block(f"```{USAGE_FENCE_LANGUAGE}\n{usage}\n```")

        children = command.visible_subcommands()
        if children:
            writer.block(f"{subheading} {SUBCOMMANDS_HEADING}")
            writer.begin_block()
            for child in children:
                writer.write(f"{LIST_ITEM_PREFIX}{self._format_subcommand_entry(command.name, child, parent_name)}")
                if child.about:
                    writer.write(f": {child.about}")
                writer.write("\n")

        for heading_name, arguments in group_arguments(command.arguments).items():
            writer.block(f"{subheading} {heading_name}")
            writer.begin_block()
            for argument in arguments:
                self._formatter.write(argument, writer)

        if children and self.options.subcommand_mode == "flatten":
            child_parent_name = f"{parent_name}{command.name} "
            for child in children:
                self._render_command(child, writer, level + 1, child_parent_name)

    def _format_title(self, name: str, parent_name: str) -> str:
        mono = MONOSPACE_MARKER if self.options.monospace_headings else ""
        prompt = f"{self.options.prompt} " if self.options.prompt is not None else ""
        prefix = f"{prompt}{parent_name}"

        if not self.options.highlight_subcommand_names:
            return f"{mono}{prefix}{name}{mono}"

        title = f"{mono}{prefix}{mono}" if prefix else ""
        return f"{title}{EMPHASIS_MARKER}{mono}{name}{mono}{EMPHASIS_MARKER}"

    def _format_subcommand_entry(self, name: str, child: CommandSpec, parent_name: str) -> str:
        label = f"{MONOSPACE_MARKER}{child.name}{MONOSPACE_MARKER}"
        mode = self.options.subcommand_mode
        if mode == "flatten":
            anchor = f"{parent_name.replace(' ', '-')}-{name}-{child.name}"
            return f"{EMPHASIS_MARKER}[{label}](#{anchor}){EMPHASIS_MARKER}"
        if mode == "linked":
            return f"{EMPHASIS_MARKER}[{label}]({name}/{child.name}.md){EMPHASIS_MARKER}"
        return f"{EMPHASIS_MARKER}{label}{EMPHASIS_MARKER}"


def write_linked_pages(
    command: CommandSpec,
    output_dir: Path | str,
    options: MarkdownRendererOptions | None = None,
) -> list[Path]:
    """Render the linked pages of ``command`` into ``output_dir``.

    Parameters
    ----------
    command : CommandSpec
        Root of the command tree
    output_dir : Path or str
        Directory receiving ``<root>.md`` and the ``<root>/`` page tree
    options : MarkdownRendererOptions, optional
        Rendering options; the subcommand mode is forced to ``"linked"``

    Returns
    -------
    list[Path]
        Paths of the written files

    Raises
    ------
    OutputWriteError
        If a page cannot be written

    """
    output_dir = Path(output_dir)
    written = []
    for relative_path, content in MarkdownRenderer(options).render_linked_pages(command).items():
        path = output_dir.joinpath(*relative_path.parts)
        write_content(content, path)
        logger.info("Wrote %s", path)
        written.append(path)
    return written
