#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for cli2md.

This module centralizes the literal types, markers and default configuration
values shared by the command model, the renderers and the CLI.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Rendering Defaults - Default values for renderer options
3. Markdown Markers - Fixed markers emitted by the renderers
4. Command Model - Names and headings with special meaning
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

SubcommandMode = Literal["flatten", "linked", "none"]
ArgAction = Literal["set", "flag", "append", "count"]

SUBCOMMAND_MODES: tuple[SubcommandMode, ...] = ("flatten", "linked", "none")
ARG_ACTIONS: tuple[ArgAction, ...] = ("set", "flag", "append", "count")

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_SUBCOMMAND_MODE: SubcommandMode = "flatten"
DEFAULT_HEADING_LEVEL = 1
DEFAULT_PROMPT: str | None = "$"
DEFAULT_MONOSPACE_HEADINGS = True
DEFAULT_HIGHLIGHT_SUBCOMMAND_NAMES = True

# =============================================================================
# Markdown Markers
# =============================================================================

HEADING_MARKER = "#"
MONOSPACE_MARKER = "`"
EMPHASIS_MARKER = "**"
LIST_ITEM_PREFIX = "- "
SUB_BULLET_INDENT = "    "
NESTED_SUB_BULLET_INDENT = "      "
USAGE_FENCE_LANGUAGE = "text"
ELLIPSIS = "..."

# =============================================================================
# Command Model
# =============================================================================

HELP_SUBCOMMAND_NAME = "help"
SUBCOMMANDS_HEADING = "subcommands"
POSITIONAL_HEADING = "arguments"
OPTIONS_HEADING = "options"
USAGE_PREFIX = "Usage: "
OPTIONS_PLACEHOLDER = "[OPTIONS]"
COMMAND_PLACEHOLDER = "<COMMAND>"

# Spec files recognized by the loader, keyed by suffix
SPEC_FILE_FORMATS: dict[str, str] = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".json": "json",
}
