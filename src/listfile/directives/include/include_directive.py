"""Include directive data model.

This module provides the value types handled while evaluating an
``include(<file|module> [OPTIONAL] [NO_POLICY_SCOPE] [RESULT_VARIABLE <var>])``
directive: the recognized keywords, the parsed options and the outcome
reported back to the host interpreter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from listfile.directives.include.errors import IncludeError


class IncludeKeyword(Enum):
    """Modifier keywords accepted after the include() target."""

    OPTIONAL = "OPTIONAL"
    RESULT_VARIABLE = "RESULT_VARIABLE"
    NO_POLICY_SCOPE = "NO_POLICY_SCOPE"

    @classmethod
    def classify(cls, token: str) -> IncludeKeyword | None:
        """Return the keyword spelled exactly by ``token``, or None."""
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass(frozen=True)
class IncludeOptions:
    """Validated arguments of one include() directive.

    Attributes:
        target: The file or module name as written by the script author
        optional: Whether a missing file is tolerated (OPTIONAL)
        no_policy_scope: Whether the included file shares the caller's policy scope
        result_variable: Variable receiving the loaded path or the not-found value
    """

    target: str
    optional: bool = False
    no_policy_scope: bool = False
    result_variable: str | None = None


class OutcomeKind(Enum):
    """How an include() directive ended."""

    LOADED = "loaded"
    NOT_LOADED = "not_loaded"
    IGNORED = "ignored"
    FAILED = "failed"


@dataclass(frozen=True)
class IncludeOutcome:
    """Result of evaluating one include() directive.

    Attributes:
        kind: How the directive ended
        path: The canonical absolute path that was (or would have been) loaded
        result_variable: Name of the variable bound by the directive, if any
        result_value: Value bound to ``result_variable``, if any
        error: The failure, set only when ``kind`` is FAILED
    """

    kind: OutcomeKind
    path: str | None = None
    result_variable: str | None = None
    result_value: str | None = None
    error: IncludeError | None = None

    @property
    def succeeded(self) -> bool:
        return self.kind is not OutcomeKind.FAILED

    @property
    def loaded(self) -> bool:
        return self.kind is OutcomeKind.LOADED

    @property
    def message(self) -> str | None:
        return self.error.message if self.error is not None else None
