#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for output destination helpers."""

import io
from io import BytesIO, StringIO

import pytest

from cli2md.exceptions import OutputWriteError, RenderingError
from cli2md.utils.io_utils import TextSink, is_binary_stream, open_text_sink, write_content


@pytest.mark.unit
class TestIsBinaryStream:
    """Tests for binary stream detection."""

    def test_bytes_io(self):
        assert is_binary_stream(BytesIO()) is True

    def test_string_io(self):
        assert is_binary_stream(StringIO()) is False

    def test_text_file(self, tmp_path):
        with open(tmp_path / "out.md", "w", encoding="utf-8") as f:
            assert is_binary_stream(f) is False

    def test_binary_file(self, tmp_path):
        with open(tmp_path / "out.md", "wb") as f:
            assert is_binary_stream(f) is True

    def test_mode_attribute(self):
        class Custom:
            mode = "wb"

            def write(self, data):
                pass

        assert is_binary_stream(Custom()) is True

    def test_unknown_object_is_text(self):
        class Custom:
            def write(self, data):
                pass

        assert is_binary_stream(Custom()) is False


@pytest.mark.unit
class TestTextSink:
    """Tests for TextSink."""

    def test_writes_text(self):
        buffer = StringIO()
        sink = TextSink(buffer)
        sink.write("# git\n")
        sink.write("more")
        assert buffer.getvalue() == "# git\nmore"

    def test_encodes_for_binary_streams(self):
        buffer = BytesIO()
        TextSink(buffer).write("café")
        assert buffer.getvalue() == "café".encode("utf-8")

    def test_write_error_wrapped(self):
        buffer = StringIO()
        buffer.close()
        sink = TextSink(buffer, destination="closed buffer")
        with pytest.raises(OutputWriteError) as exc_info:
            sink.write("text")

        error = exc_info.value
        assert isinstance(error, RenderingError)
        assert error.destination == "closed buffer"
        assert error.rendering_stage == "write"
        assert isinstance(error.original_error, ValueError)

    def test_os_error_wrapped(self):
        class BrokenPipe(io.TextIOBase):
            def write(self, text):
                raise BrokenPipeError("pipe closed")

        with pytest.raises(OutputWriteError, match="pipe closed"):
            TextSink(BrokenPipe()).write("text")


@pytest.mark.unit
class TestOpenTextSink:
    """Tests for open_text_sink and write_content."""

    def test_path_is_written_as_utf8(self, tmp_path):
        target = tmp_path / "out.md"
        with open_text_sink(target) as sink:
            sink.write("café\n")
        assert target.read_bytes() == "café\n".encode("utf-8")

    def test_stream_left_open(self):
        buffer = StringIO()
        with open_text_sink(buffer) as sink:
            sink.write("x")
        assert not buffer.closed
        assert buffer.getvalue() == "x"

    def test_unwritable_output(self):
        with pytest.raises(TypeError):
            with open_text_sink(42):  # type: ignore[arg-type]
                pass

    def test_missing_directory_created(self, tmp_path):
        target = tmp_path / "missing" / "out.md"
        with open_text_sink(target) as sink:
            sink.write("# git\n")
        assert target.read_text(encoding="utf-8") == "# git\n"

    def test_parent_is_a_file(self, tmp_path):
        (tmp_path / "blocker").write_text("", encoding="utf-8")
        with pytest.raises(OutputWriteError):
            with open_text_sink(tmp_path / "blocker" / "out.md"):
                pass

    def test_write_content_creates_parents(self, tmp_path):
        target = tmp_path / "docs" / "cli" / "git.md"
        write_content("# git\n", target)
        assert target.read_text(encoding="utf-8") == "# git\n"

    def test_write_content_to_stream(self):
        buffer = StringIO()
        write_content("# git\n", buffer)
        assert buffer.getvalue() == "# git\n"
