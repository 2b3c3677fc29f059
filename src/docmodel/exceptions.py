#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docmodel library.

The tree operations themselves never raise on well-formed input: malformed
trees (cycles, shared children) are caller precondition violations and are
not checked at runtime. These exceptions cover the opt-in strict paths and
the ambient layers around the core (validation, serialization, config).

Exception Hierarchy
-------------------
- DocModelError (base exception)

  - ValidationError (shape violations, invalid option values)

  - TransformError (tree operation failures)
    - MissingReferenceError (section without a reference)
    - DuplicateReferenceError (reference used by more than one section)

  - SerializationError (malformed dict/JSON input)

  - ConfigError (configuration file problems)

"""


class DocModelError(Exception):
    """Base exception class for all docmodel-specific errors.

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


class ValidationError(DocModelError):
    """Exception raised when a tree or option violates a shape constraint.

    Parameters
    ----------
    message : str
        Description of the violation
    path : str, optional
        Location of the offending node (e.g. ``document.children[0].items[1]``)
    original_error : Exception, optional
        Underlying exception

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the validation error with an optional node path."""
        if path:
            message = f"{path}: {message}"
        super().__init__(message, original_error)
        self.path = path


class TransformError(DocModelError):
    """Exception raised when a tree operation cannot produce its result."""


class MissingReferenceError(TransformError):
    """Exception raised when a section has no reference where one is required.

    Parameters
    ----------
    title : str
        Extracted title text of the section

    """

    def __init__(self, title: str):
        """Initialize with the offending section's title text."""
        super().__init__(f"Section '{title}' has no reference; assign references before building a table of contents")
        self.title = title


class DuplicateReferenceError(TransformError):
    """Exception raised when two sections share a reference.

    Parameters
    ----------
    reference : str
        The duplicated reference

    """

    def __init__(self, reference: str):
        """Initialize with the duplicated reference."""
        super().__init__(f"Reference '{reference}' is used by more than one section")
        self.reference = reference


class SerializationError(DocModelError):
    """Exception raised when dict or JSON input cannot be turned into a tree."""


class ConfigError(DocModelError):
    """Exception raised for unreadable or invalid configuration files.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        Underlying parse or I/O exception

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error with an optional file path."""
        super().__init__(message, original_error)
        self.config_path = config_path


__all__ = [
    "DocModelError",
    "ValidationError",
    "TransformError",
    "MissingReferenceError",
    "DuplicateReferenceError",
    "SerializationError",
    "ConfigError",
]
