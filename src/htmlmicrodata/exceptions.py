#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the htmlmicrodata library.

The rendering engine is built to be total: a renderer is always found,
cycles are cut structurally and ``None`` renders as an empty element. The
exceptions below cover the remaining failure modes.

Exception Hierarchy
-------------------
- HtmlMicrodataError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class)

  - ConfigurationError (faults in application configuration)
    - RendererRegistrationError (bad or late renderer registration)
    - RouteTemplateError (malformed route template)

  - RenderingError (a member failed to render and isolation is off)

  - MarkupError (markup tree invariant violations)

"""

from typing import Any


class HtmlMicrodataError(Exception):
    """Base exception class for all htmlmicrodata-specific errors.

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


class ValidationError(HtmlMicrodataError):
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
    """Exception raised when an options object of the wrong class is supplied.

    Parameters
    ----------
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error with type information."""
        if message is None:
            message = (
                f"'{component_name}' expected options of type '{expected_type.__name__}', "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type, original_error=original_error)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(HtmlMicrodataError):
    """Exception raised for faults in application configuration.

    Configuration errors are never isolated to a subtree: they indicate a
    problem the application must fix, not a bad value in one response.
    """


class RendererRegistrationError(ConfigurationError):
    """Exception raised when a renderer cannot be registered.

    Parameters
    ----------
    message : str
        Description of the registration failure
    renderer : Any, optional
        The object that was offered for registration

    """

    def __init__(self, message: str, renderer: Any = None, original_error: Exception | None = None):
        """Initialize the registration error."""
        super().__init__(message, original_error)
        self.renderer = renderer


class RouteTemplateError(ConfigurationError):
    """Exception raised for a malformed route template.

    Parameters
    ----------
    template : str
        The offending route template
    position : int
        Character offset where the template stopped making sense
    reason : str
        Short description of the problem

    """

    def __init__(self, template: str, position: int, reason: str):
        """Initialize the route template error."""
        super().__init__(f"Malformed route template {template!r} at position {position}: {reason}")
        self.template = template
        self.position = position
        self.reason = reason


class RenderingError(HtmlMicrodataError):
    """Exception raised when a value fails to render and fault isolation is disabled.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred (usually the property name)
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class MarkupError(HtmlMicrodataError):
    """Exception raised when a markup tree operation would break the tree shape."""
