#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module provides the text sink the renderers write into, and a helper
for writing a finished document to a path or file-like object.

"""

from __future__ import annotations

import io
from contextlib import contextmanager
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Iterator, Union, cast

from cli2md.exceptions import OutputWriteError

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def is_binary_stream(output: object) -> bool:
    """Return True if ``output`` expects bytes rather than str.

    Detection tries concrete types first, then the :mod:`io` base classes,
    then the ``mode`` attribute. Streams that cannot be classified are
    treated as text streams.
    """
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


class TextSink:
    """Write-only text destination used by the renderers.

    Every write goes straight to the underlying stream. A write the stream
    rejects raises :class:`~cli2md.exceptions.OutputWriteError` and leaves
    previously written text in place.

    Parameters
    ----------
    stream : IO[str] or IO[bytes]
        Destination stream
    destination : str, optional
        Description of the destination used in error messages

    """

    def __init__(self, stream: IO[str] | IO[bytes], destination: str | None = None):
        self._stream = stream
        self._binary = is_binary_stream(stream)
        self.destination = destination or repr(stream)

    def write(self, text: str) -> None:
        try:
            if self._binary:
                cast(IO[bytes], self._stream).write(text.encode("utf-8"))
            else:
                cast(IO[str], self._stream).write(text)
        except (OSError, ValueError) as e:
            raise OutputWriteError(self.destination, original_error=e) from e


@contextmanager
def open_text_sink(output: OutputDestination) -> Iterator[TextSink]:
    """Open ``output`` as a :class:`TextSink`.

    Parameters
    ----------
    output : str, Path, IO[bytes] or IO[str]
        File path (created or truncated, UTF-8) or an already open stream.
        Missing parent directories of a path are created. Streams are not
        closed on exit.

    Yields
    ------
    TextSink
        Sink writing to the destination

    Raises
    ------
    OutputWriteError
        If the file or its parent directories cannot be created
    TypeError
        If ``output`` is neither a path nor a writable object

    """
    if isinstance(output, (str, Path)):
        path = Path(output)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = open(path, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            raise OutputWriteError(str(path), original_error=e) from e
        with handle:
            yield TextSink(handle, destination=str(path))
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")
    yield TextSink(output)


def write_content(content: str, output: OutputDestination) -> None:
    """Write a complete text document to a path or stream.

    Parent directories of a path destination are created as needed.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination

    Raises
    ------
    OutputWriteError
        If the destination rejects the write

    """
    with open_text_sink(output) as sink:
        sink.write(content)


__all__ = ["OutputDestination", "TextSink", "is_binary_stream", "open_text_sink", "write_content"]
