"""Pytest configuration and shared fixtures for cli2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import argparse

import pytest

from cli2md.model import ArgumentSpec, CommandSpec, PossibleValue, ValueRange


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch, tmp_path):
    """Keep user configuration files and CLI2MD_CONFIG out of tests."""
    monkeypatch.delenv("CLI2MD_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))


@pytest.fixture
def git_command() -> CommandSpec:
    """Provide a small git-like command tree.

    Returns
    -------
    CommandSpec
        ``git`` with ``clone``, ``diff``, ``push``, ``stash`` (which has its
        own ``push`` and ``pop``) and an auto-generated ``help`` subcommand.

    """
    clone = CommandSpec(
        "clone",
        about="Clones repos",
        arguments=[ArgumentSpec("remote", help="The remote to clone", required=True)],
    )
    diff = CommandSpec(
        "diff",
        about="Compare two commits",
        arguments=[
            ArgumentSpec("base", value_names=["COMMIT"]),
            ArgumentSpec("head", value_names=["COMMIT"]),
            ArgumentSpec("path", num_args=ValueRange.at_least(0), help_heading="paths"),
            ArgumentSpec(
                "color",
                long="color",
                require_equals=True,
                num_args=ValueRange(0, 1),
                value_names=["WHEN"],
                default_values=["auto"],
                possible_values=[
                    PossibleValue("always"),
                    PossibleValue("auto", help="Use colors when writing to a terminal"),
                    PossibleValue("never"),
                ],
            ),
        ],
    )
    push = CommandSpec(
        "push",
        about="pushes things",
        arguments=[ArgumentSpec("remote", help="The remote to target", required=True)],
    )
    stash = CommandSpec(
        "stash",
        about="Stash changes",
        arguments=[ArgumentSpec("message", short="m", long="message", help="Stash message")],
        subcommands=[
            CommandSpec("push", arguments=[ArgumentSpec("message", short="m", long="message")]),
            CommandSpec("pop", arguments=[ArgumentSpec("stash", value_names=["STASH"])]),
        ],
    )
    return CommandSpec(
        "git",
        about="A fictional versioning CLI",
        subcommands=[clone, diff, push, stash, CommandSpec("help", about="Print this message")],
    )


@pytest.fixture
def git_parser() -> argparse.ArgumentParser:
    """Provide an argparse parser shaped like :func:`git_command`."""
    parser = argparse.ArgumentParser(prog="git", description="A fictional versioning CLI")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity")
    sub = parser.add_subparsers(dest="command")

    clone = sub.add_parser("clone", help="Clones repos", description="Clone a repository into a new directory")
    clone.add_argument("remote", help="The remote to clone")
    clone.add_argument("--depth", type=int, metavar="DEPTH", help="Create a shallow clone of %(metavar)s commits")

    push = sub.add_parser("push", help="pushes things", aliases=["p"])
    push.add_argument("remote", help="The remote to target")
    push.add_argument("--force", "-f", action="store_true", help="Force the push")

    stash = sub.add_parser("stash", help="Stash changes")
    stash_group = stash.add_argument_group("stash options")
    stash_group.add_argument("-m", "--message", help="Stash message")

    return parser
