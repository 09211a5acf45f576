#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the cli2md library.

This module defines specialized exception classes for the error conditions
that can occur while building a command specification and rendering it to
Markdown. These exceptions provide more specific error information than
generic built-ins.

Exception Hierarchy
-------------------
- Cli2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - SpecificationError (malformed declarative command specification)

  - TargetLoadError (module, attribute or file could not be loaded)

  - RenderingError (output generation failures)
    - OutputWriteError (the output sink rejected a write)

"""

from typing import Any


class Cli2MdError(Exception):
    """Base exception class for all cli2md-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Cli2MdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class SpecificationError(Cli2MdError):
    """Exception raised when a command specification cannot be built.

    Raised by the declarative loader for unknown keys and values of the wrong
    type, and by the CLI when a target resolves to an unsupported object.

    Parameters
    ----------
    message : str
        Description of the problem
    location : str, optional
        Dotted path to the offending entry (e.g. ``git.subcommands[0].arguments[1]``)
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, location: str | None = None, original_error: Exception | None = None):
        """Initialize the specification error."""
        if location:
            message = f"{location}: {message}"
        super().__init__(message, original_error=original_error)
        self.location = location


class TargetLoadError(Cli2MdError):
    """Exception raised when a rendering target cannot be loaded.

    Parameters
    ----------
    target : str
        The ``module:attribute`` reference or file path that failed to load
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, target: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the target load error."""
        if message is None:
            message = f"Could not load target: {target}"
        super().__init__(message, original_error=original_error)
        self.target = target


class RenderingError(Cli2MdError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when the output destination rejects a write.

    Text already written before the failure is left in place.

    Parameters
    ----------
    destination : str
        Description of the output destination (file path or stream repr)
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, destination: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output: {destination}"
            if original_error is not None:
                message += f" ({original_error})"
        super().__init__(message, rendering_stage="write", original_error=original_error)
        self.destination = destination
