"""Errors raised while evaluating an include() directive.

Every error carries the human-readable text that the host interpreter shows
next to the failing directive.
"""

from __future__ import annotations


class IncludeError(Exception):
    """Base class for include() failures.

    ``reported`` is True when the message has already been issued through the
    message sink, so the host must not surface it a second time.
    """

    reported = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IncludeArgumentError(IncludeError):
    """Raised when the directive's argument list has the wrong shape."""


class ArgumentCountError(IncludeArgumentError):
    """Raised when include() receives no arguments or too many."""


class DuplicateModifierError(IncludeArgumentError):
    """Raised when OPTIONAL or RESULT_VARIABLE is given more than once."""


class MissingValueError(IncludeArgumentError):
    """Raised when RESULT_VARIABLE is the last argument."""


class UnknownArgumentError(IncludeArgumentError):
    """Raised for an unrecognized modifier after the second argument."""

    def __init__(self, message: str, argument: str) -> None:
        super().__init__(message)
        self.argument = argument


class ExportFilePolicyError(IncludeError):
    """Raised when policy forbids including a file generated by export()."""

    reported = True

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class IncludeFileNotFoundError(IncludeError):
    """Raised when a mandatory include could not be loaded."""

    def __init__(self, message: str, specifier: str) -> None:
        super().__init__(message)
        self.specifier = specifier
