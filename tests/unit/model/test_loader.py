#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the declarative specification loader.

Tests cover:
- num_args parsing
- Building trees from mappings
- Loading YAML, TOML and JSON files
- Error reporting for malformed documents

"""

import json
from pathlib import Path

import pytest
import yaml

from cli2md.exceptions import SpecificationError, TargetLoadError
from cli2md.model import PossibleValue, ValueRange, command_from_dict, load_command_file
from cli2md.model.loader import parse_value_range

GIT_SPEC = {
    "name": "git",
    "about": "A fictional versioning CLI",
    "subcommands": [
        {
            "name": "clone",
            "about": "Clones repos",
            "arguments": [{"id": "remote", "required": True, "help": "The remote to clone"}],
        },
        {
            "name": "diff",
            "arguments": [
                {
                    "id": "color",
                    "long": "color",
                    "require_equals": True,
                    "num_args": "0..=1",
                    "value_names": "WHEN",
                    "default_values": ["auto"],
                    "possible_values": ["always", {"name": "auto", "help": "Detect"}, "never"],
                }
            ],
        },
    ],
}

GIT_TOML = """
[command]
name = "git"
about = "A fictional versioning CLI"

[[command.subcommands]]
name = "clone"
about = "Clones repos"

[[command.subcommands.arguments]]
id = "remote"
required = true
help = "The remote to clone"

[[command.subcommands]]
name = "diff"

[[command.subcommands.arguments]]
id = "color"
long = "color"
require_equals = true
num_args = "0..=1"
value_names = "WHEN"
default_values = ["auto"]
possible_values = ["always", { name = "auto", help = "Detect" }, "never"]
"""


@pytest.mark.unit
class TestParseValueRange:
    """Tests for num_args parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (2, ValueRange.exactly(2)),
            ("3", ValueRange.exactly(3)),
            ([0, 1], ValueRange(0, 1)),
            ([1, None], ValueRange.at_least(1)),
            ("1..", ValueRange.at_least(1)),
            ("0..=1", ValueRange(0, 1)),
            ("1..3", ValueRange(1, 2)),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_value_range(value) == expected

    @pytest.mark.parametrize("value", [True, "many", [1, 2, 3], 1.5, "2..=1"])
    def test_invalid(self, value):
        with pytest.raises(SpecificationError, match="num_args"):
            parse_value_range(value)


@pytest.mark.unit
class TestCommandFromDict:
    """Tests for building command trees from mappings."""

    def test_builds_tree(self):
        command = command_from_dict(GIT_SPEC)
        assert command.name == "git"
        assert [sub.name for sub in command.subcommands] == ["clone", "diff"]

        remote = command.subcommands[0].arguments[0]
        assert remote.id == "remote"
        assert remote.required is True
        assert remote.is_positional is True

    def test_argument_fields(self):
        color = command_from_dict(GIT_SPEC).subcommands[1].arguments[0]
        assert color.num_args == ValueRange(0, 1)
        assert color.value_names == ("WHEN",)
        assert color.default_values == ("auto",)
        assert color.possible_values == (
            PossibleValue("always"),
            PossibleValue("auto", "Detect"),
            PossibleValue("never"),
        )

    def test_unknown_command_key(self):
        with pytest.raises(SpecificationError, match="unknown key"):
            command_from_dict({"name": "git", "aliases": ["g"]})

    def test_unknown_argument_key_reports_location(self):
        data = {"name": "git", "subcommands": [{"name": "clone", "arguments": [{"id": "remote", "flag": True}]}]}
        with pytest.raises(SpecificationError, match=r"git\.subcommands\[0\]\.arguments\[0\]"):
            command_from_dict(data)

    def test_missing_name(self):
        with pytest.raises(SpecificationError, match="name"):
            command_from_dict({"about": "nameless"})

    def test_missing_argument_id(self):
        with pytest.raises(SpecificationError, match="id"):
            command_from_dict({"name": "git", "arguments": [{"long": "verbose"}]})

    def test_wrong_type(self):
        with pytest.raises(SpecificationError, match="required"):
            command_from_dict({"name": "git", "arguments": [{"id": "remote", "required": "yes"}]})

    def test_flatten_help_must_be_boolean(self):
        with pytest.raises(SpecificationError, match="flatten_help"):
            command_from_dict({"name": "git", "flatten_help": "false"})
        assert command_from_dict({"name": "git", "flatten_help": True}).flatten_help is True
        assert command_from_dict({"name": "git"}).flatten_help is False

    def test_invalid_action(self):
        with pytest.raises(SpecificationError, match="action"):
            command_from_dict({"name": "git", "arguments": [{"id": "x", "action": "toggle"}]})

    def test_not_a_mapping(self):
        with pytest.raises(SpecificationError):
            command_from_dict(["git"])  # type: ignore[arg-type]


@pytest.mark.unit
class TestLoadCommandFile:
    """Tests for loading specification files."""

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "git.yaml"
        path.write_text(yaml.safe_dump(GIT_SPEC), encoding="utf-8")
        assert load_command_file(path) == command_from_dict(GIT_SPEC)

    def test_json(self, tmp_path: Path):
        path = tmp_path / "git.json"
        path.write_text(json.dumps(GIT_SPEC), encoding="utf-8")
        assert load_command_file(str(path)) == command_from_dict(GIT_SPEC)

    def test_toml_command_table(self, tmp_path: Path):
        path = tmp_path / "git.toml"
        path.write_text(GIT_TOML, encoding="utf-8")
        assert load_command_file(path) == command_from_dict(GIT_SPEC)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(TargetLoadError, match="does not exist"):
            load_command_file(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "git.ini"
        path.write_text("[git]", encoding="utf-8")
        with pytest.raises(TargetLoadError, match="Unsupported"):
            load_command_file(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("name: [unclosed", encoding="utf-8")
        with pytest.raises(TargetLoadError):
            load_command_file(path)
