#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cli2md/renderers/base.py
"""Base classes for command specification renderers.

This module defines the abstract base class that all renderers inherit from.
The BaseRenderer provides a consistent interface for turning a
:class:`~cli2md.model.nodes.CommandSpec` tree into an output document.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import StringIO

from cli2md.exceptions import InvalidOptionsError
from cli2md.model.nodes import CommandSpec
from cli2md.options.base import BaseRendererOptions
from cli2md.utils.io_utils import OutputDestination, TextSink, open_text_sink


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Subclasses implement :meth:`write`, which emits the document into a
    :class:`~cli2md.utils.io_utils.TextSink`. :meth:`render` and
    :meth:`render_to_string` are built on top of it.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from cli2md.renderers.base import BaseRenderer
        >>>
        >>> class NameOnlyRenderer(BaseRenderer):
        ...     def write(self, command, sink):
        ...         sink.write(command.name)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def write(self, command: CommandSpec, sink: TextSink) -> None:
        """Emit the rendered document for ``command`` into ``sink``.

        Parameters
        ----------
        command : CommandSpec
            Root of the command tree to render
        sink : TextSink
            Destination for the rendered text

        Raises
        ------
        OutputWriteError
            If the sink rejects a write. Text already written is kept.

        """

    def render(self, command: CommandSpec, output: OutputDestination) -> None:
        """Render ``command`` to a file path or stream.

        Parameters
        ----------
        command : CommandSpec
            Root of the command tree to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the destination cannot be opened or rejects a write

        """
        with open_text_sink(output) as sink:
            self.write(command, sink)

    def render_to_string(self, command: CommandSpec) -> str:
        """Render ``command`` and return the document as a string."""
        buffer = StringIO()
        self.write(command, TextSink(buffer, destination="<string>"))
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
