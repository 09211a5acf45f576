#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Dynamic CLI argument builder for cli2md.

This module builds the ``cli2md`` argument parser. Rendering flags are
generated from the :class:`~cli2md.options.markdown.MarkdownRendererOptions`
dataclass fields and their metadata, so adding an option field adds the
matching command-line flag.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, Field, fields
from typing import Any, Dict, Optional, Type

from cli2md.exceptions import (
    OutputWriteError,
    RenderingError,
    SpecificationError,
    TargetLoadError,
    ValidationError,
)
from cli2md.options.markdown import MarkdownRendererOptions

logger = logging.getLogger(__name__)


class DynamicCLIBuilder:
    """Builds CLI arguments dynamically from options dataclasses.

    Generated arguments default to ``argparse.SUPPRESS`` so that only flags
    given on the command line appear in the parsed namespace. That lets
    :meth:`map_args_to_options` layer them over configuration file values.
    """

    def __init__(self) -> None:
        self.dest_to_cli_flag: Dict[str, str] = {}

    def snake_to_kebab(self, name: str) -> str:
        """Convert snake_case to kebab-case."""
        return name.replace("_", "-")

    def infer_cli_name(self, field_name: str, is_boolean_with_true_default: bool = False) -> str:
        """Infer CLI argument name from field name.

        Parameters
        ----------
        field_name : str
            Dataclass field name
        is_boolean_with_true_default : bool
            Whether this is a boolean field with default=True

        Returns
        -------
        str
            CLI argument name with -- prefix

        """
        kebab_name = self.snake_to_kebab(field_name)
        if is_boolean_with_true_default and not kebab_name.startswith("no-"):
            kebab_name = f"no-{kebab_name}"
        return f"--{kebab_name}"

    @staticmethod
    def _accepts_none(field: Field) -> bool:
        # Option modules use postponed annotations, so field.type is a string
        return "None" in str(field.type)

    def get_argument_kwargs(self, field: Field, metadata: Dict[str, Any]) -> Dict[str, Any]:
        """Build argparse keyword arguments for an options field.

        Parameters
        ----------
        field : Field
            Dataclass field
        metadata : dict
            Field metadata

        Returns
        -------
        dict
            Keyword arguments for ``add_argument``

        """
        kwargs: Dict[str, Any] = {
            "dest": field.name,
            "default": argparse.SUPPRESS,
            "help": metadata.get("help", f"Configure {field.name}"),
        }

        default = field.default if field.default is not MISSING else None
        if isinstance(default, bool):
            kwargs["action"] = "store_false" if default else "store_true"
            return kwargs

        if "choices" in metadata:
            kwargs["choices"] = metadata["choices"]
        if metadata.get("type") in (int, float):
            kwargs["type"] = metadata["type"]
            kwargs["metavar"] = "N"
        elif "choices" not in metadata:
            kwargs["metavar"] = "TEXT"

        if default is not None and not isinstance(default, bool):
            kwargs["help"] = f"{kwargs['help']} (default: {default})"
        return kwargs

    def add_options_class_arguments(
        self, parser: argparse.ArgumentParser, options_class: Type[Any], group_title: str
    ) -> None:
        """Add one argument per field of ``options_class`` to a new argument group.

        Parameters
        ----------
        parser : ArgumentParser
            Parser receiving the arguments
        options_class : type
            Options dataclass to introspect
        group_title : str
            Title of the argument group

        """
        group = parser.add_argument_group(group_title)

        for field in fields(options_class):
            metadata = dict(field.metadata)
            if "cli_name" in metadata:
                cli_name = f"--{metadata['cli_name']}"
            else:
                cli_name = self.infer_cli_name(field.name, field.default is True)

            kwargs = self.get_argument_kwargs(field, metadata)
            try:
                group.add_argument(cli_name, **kwargs)
                self.dest_to_cli_flag[field.name] = cli_name
            except argparse.ArgumentError as e:
                logger.warning(f"Could not add argument {cli_name}: {e}")
                continue

            if self._accepts_none(field) and field.default is not None:
                group.add_argument(
                    f"--no-{self.snake_to_kebab(field.name)}",
                    dest=field.name,
                    action="store_const",
                    const=None,
                    default=argparse.SUPPRESS,
                    help=f"Disable {field.name.replace('_', ' ')}",
                )

    def map_args_to_options(
        self, parsed_args: argparse.Namespace, config_options: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Merge configuration values with options given on the command line.

        Parameters
        ----------
        parsed_args : argparse.Namespace
            Parsed command line arguments
        config_options : dict, optional
            Option values loaded from a configuration file

        Returns
        -------
        dict
            Keyword arguments for :class:`MarkdownRendererOptions`; command line
            values take precedence

        """
        options = dict(config_options or {})
        for dest in self.dest_to_cli_flag:
            if hasattr(parsed_args, dest):
                options[dest] = getattr(parsed_args, dest)
        return options

    def build_parser(self) -> argparse.ArgumentParser:
        """Build the complete argument parser with dynamic arguments.

        Returns
        -------
        ArgumentParser
            Configured parser

        """
        from cli2md import __version__

        parser = argparse.ArgumentParser(
            prog="cli2md",
            description="Generate Markdown documentation for a command-line interface",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Targets:
  module:attribute   an argparse.ArgumentParser, a CommandSpec, or a function returning one
  FILE               a .yaml, .yml, .toml or .json command specification

Examples:
  cli2md mytool.cli:build_parser
  cli2md mytool.cli:parser --out docs/cli.md --heading-level 2
  cli2md commands.yaml --subcommands none --no-prompt
  cli2md mytool.cli:parser --output-dir docs/cli
  cli2md mytool.cli:parser --rich
        """,
        )

        parser.add_argument("target", help="'module:attribute' reference or specification file path")
        parser.add_argument("--name", metavar="NAME", help="Override the name of the root command")
        parser.add_argument("--out", "-o", metavar="FILE", help="Output file path (default: print to stdout)")
        parser.add_argument(
            "--output-dir",
            metavar="DIR",
            help="Write one page per command into DIR (implies --subcommands linked)",
        )
        parser.add_argument(
            "--rich",
            action="store_true",
            help="Enable rich terminal output with formatting (automatically disabled when output is piped)",
        )

        self.add_options_class_arguments(parser, MarkdownRendererOptions, "Rendering options")

        config_group = parser.add_argument_group("Configuration")
        config_group.add_argument(
            "--config",
            metavar="FILE",
            help="Path to configuration file (TOML, YAML or JSON). "
            "If not specified, searches for .cli2md.toml/.yaml/.json or a [tool.cli2md] section "
            "in pyproject.toml from the current directory upward, then in the home directory.",
        )
        config_group.add_argument(
            "--no-config",
            action="store_true",
            dest="no_config",
            help="Disable loading of configuration files. Ignores auto-discovered configs, "
            "CLI2MD_CONFIG environment variable, and any --config flag.",
        )

        logging_group = parser.add_argument_group("Logging")
        logging_group.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
        )
        logging_group.add_argument(
            "--log-level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            default="WARNING",
            help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
        )
        logging_group.add_argument(
            "--log-file",
            type=str,
            metavar="PATH",
            help="Write log messages to specified file in addition to console output",
        )
        logging_group.add_argument(
            "--trace",
            action="store_true",
            help="Enable trace mode with very verbose logging",
        )

        parser.add_argument("--version", "-V", action="version", version=f"cli2md {__version__}")

        return parser


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, SpecificationError, argparse.ArgumentTypeError, ValueError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (TargetLoadError, FileNotFoundError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, (OutputWriteError, RenderingError)):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def create_parser() -> tuple[argparse.ArgumentParser, DynamicCLIBuilder]:
    """Create the argument parser and the builder that maps its options."""
    builder = DynamicCLIBuilder()
    return builder.build_parser(), builder
