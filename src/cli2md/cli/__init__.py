"""Command-line interface for the cli2md documentation generator.

This module provides the ``cli2md`` command, which loads a command-line
interface definition and writes its Markdown reference documentation.

Examples
--------
Document an argparse parser::

    $ cli2md mytool.cli:build_parser

Specify output file::

    $ cli2md mytool.cli:parser --out docs/cli.md

Render from a declarative specification::

    $ cli2md commands.yaml --subcommands none --no-prompt

Write one page per subcommand::

    $ cli2md mytool.cli:parser --output-dir docs/cli

Preview in the terminal::

    $ cli2md mytool.cli:parser --rich

Use a configuration file from an environment variable::

    $ export CLI2MD_CONFIG=docs/cli2md.toml
    $ cli2md mytool.cli:parser

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys

from cli2md.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    DynamicCLIBuilder,
    create_parser,
    get_exit_code_for_exception,
)
from cli2md.cli.config import CONFIG_ENV_VAR, load_config_with_priority, options_from_config
from cli2md.cli.output import print_error, render_rich_preview, should_use_rich_output
from cli2md.cli.targets import load_target
from cli2md.exceptions import Cli2MdError
from cli2md.logging_utils import configure_logging, resolve_log_level
from cli2md.options.markdown import MarkdownRendererOptions
from cli2md.renderers.markdown import MarkdownRenderer, write_linked_pages
from cli2md.utils.io_utils import write_content

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "DynamicCLIBuilder",
    "create_parser",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    log_level = resolve_log_level(parsed_args.log_level, verbose=parsed_args.verbose, trace=parsed_args.trace)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _build_options(parsed_args: argparse.Namespace, builder: DynamicCLIBuilder) -> MarkdownRendererOptions:
    """Combine configuration file values and command-line flags into renderer options.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file cannot be loaded or has invalid entries
    ValueError
        If the combined option values are invalid

    """
    config_options: dict = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        config_options = options_from_config(config)
        if config_options:
            logger.debug("Loaded configuration options: %s", config_options)

    options = MarkdownRendererOptions(**builder.map_args_to_options(parsed_args, config_options))
    if parsed_args.output_dir and options.subcommand_mode != "linked":
        options = options.with_subcommand_mode("linked")
    return options


def _validate_arguments(parsed_args: argparse.Namespace) -> bool:
    if parsed_args.out and parsed_args.output_dir:
        print_error("--out and --output-dir cannot be used together")
        return False
    return True


def main(args: list[str] | None = None) -> int:
    """Execute main CLI entry point."""
    parser, builder = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    if not _validate_arguments(parsed_args):
        return EXIT_VALIDATION_ERROR

    try:
        options = _build_options(parsed_args, builder)
    except (argparse.ArgumentTypeError, ValueError) as e:
        print_error(str(e))
        return EXIT_VALIDATION_ERROR

    try:
        command = load_target(parsed_args.target, name=parsed_args.name)
        logger.info("Loaded command tree for '%s'", command.name)

        if parsed_args.output_dir:
            written = write_linked_pages(command, parsed_args.output_dir, options)
            print(f"Wrote {len(written)} page(s) to {parsed_args.output_dir}", file=sys.stderr)
            return EXIT_SUCCESS

        renderer = MarkdownRenderer(options)
        if parsed_args.out:
            renderer.render(command, parsed_args.out)
            logger.info("Wrote %s", parsed_args.out)
            return EXIT_SUCCESS

        content = renderer.render_to_string(command)
        if should_use_rich_output(parsed_args):
            render_rich_preview(content)
        else:
            write_content(content, sys.stdout)
        return EXIT_SUCCESS
    except Cli2MdError as e:
        logger.debug("Failure details", exc_info=True)
        print_error(e.message)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
