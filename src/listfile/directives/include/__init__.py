"""include() directive package.

This package evaluates ``include(<file|module> [OPTIONAL] [NO_POLICY_SCOPE]
[RESULT_VARIABLE <var>])`` on behalf of a listfile interpreter.
"""

from listfile.directives.include.errors import (
    ArgumentCountError,
    DuplicateModifierError,
    ExportFilePolicyError,
    IncludeArgumentError,
    IncludeError,
    IncludeFileNotFoundError,
    MissingValueError,
    UnknownArgumentError,
)
from listfile.directives.include.include_directive import IncludeKeyword, IncludeOptions, IncludeOutcome, OutcomeKind
from listfile.directives.include.resolver import IncludeContext, IncludeResolver

__all__ = [
    "IncludeContext",
    "IncludeResolver",
    "IncludeKeyword",
    "IncludeOptions",
    "IncludeOutcome",
    "OutcomeKind",
    "IncludeError",
    "IncludeArgumentError",
    "ArgumentCountError",
    "DuplicateModifierError",
    "MissingValueError",
    "UnknownArgumentError",
    "ExportFilePolicyError",
    "IncludeFileNotFoundError",
]
