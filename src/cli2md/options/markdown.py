#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering command specifications to Markdown."""
# src/cli2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from cli2md.constants import (
    DEFAULT_HEADING_LEVEL,
    DEFAULT_HIGHLIGHT_SUBCOMMAND_NAMES,
    DEFAULT_MONOSPACE_HEADINGS,
    DEFAULT_PROMPT,
    DEFAULT_SUBCOMMAND_MODE,
    SUBCOMMAND_MODES,
    SubcommandMode,
)
from cli2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for command-to-Markdown rendering.

    Instances are immutable. Use :meth:`create_updated` or one of the
    ``with_*`` helpers to derive a modified copy.

    Parameters
    ----------
    subcommand_mode : {"flatten", "linked", "none"}, default "flatten"
        How subcommands are presented. ``"flatten"`` renders every subcommand
        as a nested section of the same document and links the subcommand
        list to those sections. ``"linked"`` links each subcommand to its own
        ``<command>/<subcommand>.md`` file. ``"none"`` lists subcommands
        without links and does not render them.
    heading_level : int, default 1
        Heading depth used for the root command. Each nesting level adds one.
    prompt : str or None, default "$"
        Shell prompt shown before the command path in headings. ``None``
        disables the prompt.
    monospace_headings : bool, default True
        Wrap the command path in headings in inline code spans.
    highlight_subcommand_names : bool, default True
        Render the command's own name in headings in bold.

    Examples
    --------
        >>> options = MarkdownRendererOptions().with_prompt(None).with_heading_level(2)
        >>> options.prompt is None, options.heading_level
        (True, 2)

    """

    subcommand_mode: SubcommandMode = field(
        default=DEFAULT_SUBCOMMAND_MODE,
        metadata={
            "help": "How to render subcommands: inline sections, links to separate files, or a plain list",
            "choices": list(SUBCOMMAND_MODES),
            "cli_name": "subcommands",
        },
    )
    heading_level: int = field(
        default=DEFAULT_HEADING_LEVEL,
        metadata={"help": "Heading level of the root command (1 = '#')", "type": int},
    )
    prompt: str | None = field(
        default=DEFAULT_PROMPT,
        metadata={"help": "Shell prompt shown before command names in headings"},
    )
    monospace_headings: bool = field(
        default=DEFAULT_MONOSPACE_HEADINGS,
        metadata={"help": "Render command names in headings as inline code", "cli_name": "no-monospace-headings"},
    )
    highlight_subcommand_names: bool = field(
        default=DEFAULT_HIGHLIGHT_SUBCOMMAND_NAMES,
        metadata={"help": "Render the command's own name in headings in bold", "cli_name": "no-highlight-subcommands"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the subcommand mode is unknown or the heading level is below 1.

        """
        if self.subcommand_mode not in SUBCOMMAND_MODES:
            raise ValueError(
                f"subcommand_mode must be one of {', '.join(SUBCOMMAND_MODES)}, got {self.subcommand_mode!r}"
            )
        if self.heading_level < 1:
            raise ValueError(f"heading_level must be at least 1, got {self.heading_level}")

    def with_subcommand_mode(self, subcommand_mode: SubcommandMode) -> MarkdownRendererOptions:
        """Return a copy using ``subcommand_mode``."""
        return self.create_updated(subcommand_mode=subcommand_mode)

    def with_heading_level(self, heading_level: int) -> MarkdownRendererOptions:
        """Return a copy whose root heading uses ``heading_level``."""
        return self.create_updated(heading_level=heading_level)

    def with_prompt(self, prompt: str | None) -> MarkdownRendererOptions:
        """Return a copy with ``prompt`` (``None`` disables it)."""
        return self.create_updated(prompt=prompt)

    def with_monospace_headings(self, monospace_headings: bool) -> MarkdownRendererOptions:
        """Return a copy with monospace headings switched on or off."""
        return self.create_updated(monospace_headings=monospace_headings)

    def with_highlighted_subcommand_names(self, highlight_subcommand_names: bool) -> MarkdownRendererOptions:
        """Return a copy with subcommand name emphasis switched on or off."""
        return self.create_updated(highlight_subcommand_names=highlight_subcommand_names)
