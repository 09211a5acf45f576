#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_argument_formatter.py
"""Unit tests for ArgumentFormatter.

Tests cover:
- Flag and value syntax rendering
- Help text handling
- Default, possible value, env and delimiter sub-bullets

"""

import pytest

from cli2md.model import ArgumentSpec, PossibleValue, ValueRange
from cli2md.renderers import ArgumentFormatter
from cli2md.renderers.arguments import collapse_newlines


@pytest.fixture
def formatter() -> ArgumentFormatter:
    return ArgumentFormatter()


@pytest.mark.unit
class TestValueSuffix:
    """Tests for the value syntax token."""

    def test_optional_value_requiring_equals(self, formatter):
        argument = ArgumentSpec("id", long="id", require_equals=True, num_args=ValueRange(0, 1))
        assert formatter.format_value_suffix(argument) == "`[=<ID>]`"

    def test_required_value_requiring_equals(self, formatter):
        argument = ArgumentSpec("id", long="id", require_equals=True)
        assert formatter.format_value_suffix(argument) == "`=<ID>`"

    def test_optional_value(self, formatter):
        argument = ArgumentSpec("level", long="level", num_args=ValueRange(0, 1))
        assert formatter.format_value_suffix(argument) == "`[<LEVEL>]`"

    def test_required_positional(self, formatter):
        assert formatter.format_value_suffix(ArgumentSpec("path", required=True)) == "`<PATH>`"

    def test_optional_positional(self, formatter):
        assert formatter.format_value_suffix(ArgumentSpec("path")) == "`[PATH]`"

    def test_counting_flag(self, formatter):
        argument = ArgumentSpec("verbose", short="v", action="count")
        assert formatter.format_value_suffix(argument) == "`...`"

    def test_plain_flag_has_no_suffix(self, formatter):
        argument = ArgumentSpec("force", long="force", action="flag")
        assert formatter.format_value_suffix(argument) is None

    def test_multiple_values(self, formatter):
        argument = ArgumentSpec("file", long="file", num_args=ValueRange.at_least(1))
        assert formatter.format_value_suffix(argument) == "`<FILE>...`"

    def test_explicit_value_names(self, formatter):
        argument = ArgumentSpec("range", long="range", num_args=ValueRange.exactly(2), value_names=["FROM", "TO"])
        assert formatter.format_value_suffix(argument) == "`<FROM> <TO>`"


@pytest.mark.unit
class TestArgumentLine:
    """Tests for the main argument line."""

    def test_required_positional_line(self, formatter):
        assert formatter.format(ArgumentSpec("remote", required=True)) == "- `<REMOTE>`\n"

    def test_short_and_long_flags(self, formatter):
        argument = ArgumentSpec("force", short="f", long="force", action="flag", help="Force the push")
        assert formatter.format(argument) == "- `-f`, `--force`: Force the push\n"

    def test_flag_with_value(self, formatter):
        argument = ArgumentSpec("message", short="m", long="message", help="Stash message")
        assert formatter.format(argument) == "- `-m`, `--message` `<MESSAGE>`: Stash message\n"

    def test_counting_flag_line(self, formatter):
        argument = ArgumentSpec("verbose", short="v", action="count")
        assert formatter.format(argument) == "- `-v` `...`\n"

    def test_positional_without_values_has_no_token(self, formatter):
        argument = ArgumentSpec("marker", num_args=ValueRange.exactly(0), help="Marks the spot")
        assert formatter.format(argument) == "- : Marks the spot\n"

    def test_long_help_preferred_and_collapsed(self, formatter):
        argument = ArgumentSpec("x", long="x", action="flag", help="short", long_help="First line\n  second line")
        assert formatter.format(argument) == "- `--x`: First line second line\n"


@pytest.mark.unit
class TestSubBullets:
    """Tests for metadata sub-bullets."""

    def test_no_sub_bullets_without_metadata(self, formatter):
        assert formatter.format(ArgumentSpec("name", long="name")).count("\n") == 1

    def test_default_values(self, formatter):
        argument = ArgumentSpec("jobs", short="j", default_values=["4"])
        assert formatter.format(argument) == "- `-j` `<JOBS>`\n    - **default:** `4`\n"

    def test_multiple_default_values(self, formatter):
        argument = ArgumentSpec("tag", long="tag", action="append", default_values=["a", "b"])
        assert "    - **default:** `a` `b`\n" in formatter.format(argument)

    def test_possible_values_with_and_without_help(self, formatter):
        argument = ArgumentSpec(
            "color",
            long="color",
            possible_values=[PossibleValue("always", help="Always colorize"), PossibleValue("never")],
        )
        assert formatter.format(argument) == (
            "- `--color` `<COLOR>`\n"
            "    - **possible values:**\n"
            "      - `always`: Always colorize\n"
            "      - `never`\n"
        )

    def test_env_shown_when_supported(self, formatter):
        argument = ArgumentSpec("token", long="token", env="API_TOKEN")
        assert "    - **env:** `API_TOKEN`\n" in formatter.format(argument)

    def test_env_hidden_when_unsupported(self, formatter):
        argument = ArgumentSpec("token", long="token", env="API_TOKEN", env_supported=False)
        assert "env" not in formatter.format(argument)

    def test_value_delimiter(self, formatter):
        argument = ArgumentSpec("tags", long="tags", value_delimiter=",")
        assert formatter.format(argument).endswith("    - **value delimiter:** `,`\n")

    def test_sub_bullet_order(self, formatter):
        argument = ArgumentSpec(
            "mode",
            long="mode",
            default_values=["fast"],
            possible_values=[PossibleValue("fast"), PossibleValue("slow")],
            env="MODE",
            value_delimiter=",",
        )
        lines = formatter.format(argument).splitlines()
        assert lines == [
            "- `--mode` `<MODE>`",
            "    - **default:** `fast`",
            "    - **possible values:**",
            "      - `fast`",
            "      - `slow`",
            "    - **env:** `MODE`",
            "    - **value delimiter:** `,`",
        ]


@pytest.mark.unit
class TestWrite:
    """Tests for streaming output."""

    def test_write_matches_format(self, formatter):
        class Collector:
            def __init__(self):
                self.parts = []

            def write(self, text):
                self.parts.append(text)

        argument = ArgumentSpec("color", long="color", default_values=["auto"])
        out = Collector()
        formatter.write(argument, out)
        assert "".join(out.parts) == formatter.format(argument)
        assert len(out.parts) > 1


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("one line", "one line"),
        ("first\nsecond", "first second"),
        ("first  \n\n   second\r\nthird", "first second third"),
        ("  padded\n", "padded"),
    ],
)
def test_collapse_newlines(text, expected):
    assert collapse_newlines(text) == expected
