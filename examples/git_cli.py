#  Copyright (c) 2025 Tom Villani, Ph.D.
"""A fictional versioning CLI built with argparse.

Render its reference documentation with::

    $ cli2md examples.git_cli:build_parser --no-monospace-headings --no-prompt

or from Python::

    $ python examples/git_cli.py

"""

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="git", description="A fictional versioning CLI")
    commands = parser.add_subparsers(dest="command", required=True)

    clone = commands.add_parser("clone", help="Clones repos")
    clone.add_argument("remote", help="The remote to clone")

    diff = commands.add_parser("diff", help="Compare two commits")
    diff.add_argument("base", nargs="?", metavar="COMMIT")
    diff.add_argument("head", nargs="?", metavar="COMMIT")
    diff.add_argument("path", nargs=argparse.REMAINDER)
    diff.add_argument(
        "--color",
        nargs="?",
        metavar="WHEN",
        choices=["always", "auto", "never"],
        default="auto",
        const="always",
    )

    push = commands.add_parser("push", help="pushes things")
    push.add_argument("remote", help="The remote to target")

    add = commands.add_parser("add", help="adds things")
    add.add_argument("path", nargs="+", help="Stuff to add")

    stash = commands.add_parser("stash")
    stash.add_argument("-m", "--message")
    stash_commands = stash.add_subparsers(dest="stash_command")
    stash_push = stash_commands.add_parser("push")
    stash_push.add_argument("-m", "--message")
    stash_pop = stash_commands.add_parser("pop")
    stash_pop.add_argument("stash", nargs="?")
    stash_apply = stash_commands.add_parser("apply")
    stash_apply.add_argument("stash", nargs="?")

    return parser


if __name__ == "__main__":
    from cli2md import to_markdown

    print(to_markdown(build_parser(), monospace_headings=False, prompt=None))
