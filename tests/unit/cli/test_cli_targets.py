"""Unit tests for CLI target resolution."""

import argparse
import sys
import textwrap
import uuid

import pytest

from cli2md.cli.targets import is_spec_file_target, load_target, to_command_spec
from cli2md.exceptions import SpecificationError, TargetLoadError
from cli2md.model import CommandSpec

MODULE_SOURCE = textwrap.dedent(
    """
    import argparse

    from cli2md.model import CommandSpec


    def build_parser():
        parser = argparse.ArgumentParser(prog="greet", description="Say hello")
        parser.add_argument("name", help="Who to greet")
        return parser


    parser = build_parser()
    spec = CommandSpec("greet", about="Say hello", usage="")


    class App:
        parser = parser


    def make_spec():
        return spec


    not_a_command = 42
    """
)


@pytest.fixture
def target_module(tmp_path, monkeypatch):
    """Write an importable module and return its name."""
    name = f"cli2md_target_{uuid.uuid4().hex}"
    (tmp_path / f"{name}.py").write_text(MODULE_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    yield name
    sys.modules.pop(name, None)


@pytest.mark.unit
@pytest.mark.cli
class TestLoadTarget:
    """Test loading module:attribute targets."""

    def test_parser_attribute(self, target_module):
        command = load_target(f"{target_module}:parser")
        assert command.name == "greet"
        assert command.about == "Say hello"
        assert [argument.id for argument in command.arguments] == ["help", "name"]

    def test_parser_factory(self, target_module):
        assert load_target(f"{target_module}:build_parser").name == "greet"

    def test_command_spec_attribute(self, target_module):
        command = load_target(f"{target_module}:spec")
        assert command == CommandSpec("greet", about="Say hello", usage="")

    def test_command_spec_factory(self, target_module):
        assert load_target(f"{target_module}:make_spec").about == "Say hello"

    def test_dotted_attribute(self, target_module):
        assert load_target(f"{target_module}:App.parser").name == "greet"

    def test_name_override(self, target_module):
        assert load_target(f"{target_module}:spec", name="hello").name == "hello"
        assert load_target(f"{target_module}:parser", name="hello").name == "hello"

    def test_unsupported_object(self, target_module):
        with pytest.raises(SpecificationError, match="int"):
            load_target(f"{target_module}:not_a_command")

    def test_missing_attribute(self, target_module):
        with pytest.raises(TargetLoadError, match="no attribute"):
            load_target(f"{target_module}:missing")

    def test_missing_module(self):
        with pytest.raises(TargetLoadError, match="Could not import"):
            load_target("cli2md_no_such_module_xyz:parser")

    @pytest.mark.parametrize("target", ["justamodule", ":parser", "module:"])
    def test_malformed_target(self, target):
        with pytest.raises(TargetLoadError, match="Invalid target"):
            load_target(target)


@pytest.mark.unit
@pytest.mark.cli
class TestSpecFileTargets:
    """Test specification file targets."""

    @pytest.mark.parametrize(
        "target,expected",
        [("cli.yaml", True), ("cli.YML", True), ("cli.toml", True), ("cli.json", True), ("pkg.cli:parser", False)],
    )
    def test_is_spec_file_target(self, target, expected):
        assert is_spec_file_target(target) is expected

    def test_load_spec_file(self, tmp_path):
        path = tmp_path / "tool.yaml"
        path.write_text("name: tool\nabout: A tool\n", encoding="utf-8")
        command = load_target(str(path))
        assert command.name == "tool"
        assert command.about == "A tool"

    def test_spec_file_name_override(self, tmp_path):
        path = tmp_path / "tool.json"
        path.write_text('{"name": "tool"}', encoding="utf-8")
        assert load_target(str(path), name="renamed").name == "renamed"

    def test_missing_spec_file(self, tmp_path):
        with pytest.raises(TargetLoadError):
            load_target(str(tmp_path / "missing.toml"))


@pytest.mark.unit
@pytest.mark.cli
def test_to_command_spec_with_parser():
    parser = argparse.ArgumentParser(prog="tool")
    assert to_command_spec(parser, "inline").name == "tool"
