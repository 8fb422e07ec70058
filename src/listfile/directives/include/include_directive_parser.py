"""Argument parser for the include() directive.

This module provides the IncludeArgumentParser class, which validates the
already-expanded argument list of an include() call and turns it into an
IncludeOptions value.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from listfile.directives.include.errors import (
    ArgumentCountError,
    DuplicateModifierError,
    MissingValueError,
    UnknownArgumentError,
)
from listfile.directives.include.include_directive import IncludeKeyword, IncludeOptions
from listfile.settings import IncludeSettings

log = logging.getLogger(__name__)


class IncludeArgumentParser:
    """Parser for include() argument lists.

    The first argument is the target; every later argument is classified
    against the closed IncludeKeyword set. Older releases ignored a second
    argument that was not OPTIONAL, so an unrecognized token is only rejected
    from the third position onwards.
    """

    def __init__(self, settings: IncludeSettings | None = None) -> None:
        """Initialize the parser.

        Args:
            settings: Directive settings; defaults are used when omitted.
        """
        self._settings = settings or IncludeSettings()

    def parse(self, arguments: Sequence[str]) -> IncludeOptions:
        """Validate an argument list.

        Args:
            arguments: The directive arguments, target first.

        Returns:
            The parsed options.

        Raises:
            ArgumentCountError: No arguments or more than the allowed maximum.
            DuplicateModifierError: OPTIONAL or RESULT_VARIABLE repeated.
            MissingValueError: RESULT_VARIABLE without a following name.
            UnknownArgumentError: An unrecognized token after position 1.
        """
        if not arguments or len(arguments) > self._settings.max_arguments:
            raise ArgumentCountError("called with wrong number of arguments.  include() only takes one file.")

        target = arguments[0]
        optional = False
        no_policy_scope = False
        result_variable: str | None = None

        index = 1
        while index < len(arguments):
            token = arguments[index]
            keyword = IncludeKeyword.classify(token)

            if keyword is IncludeKeyword.OPTIONAL:
                if optional:
                    raise DuplicateModifierError("called with invalid arguments: OPTIONAL used twice")
                optional = True
            elif keyword is IncludeKeyword.RESULT_VARIABLE:
                if result_variable is not None:
                    raise DuplicateModifierError("called with invalid arguments: only one result variable allowed")
                index += 1
                if index >= len(arguments):
                    raise MissingValueError("called with no value for RESULT_VARIABLE.")
                # An empty name binds nothing
                result_variable = arguments[index] or None
            elif keyword is IncludeKeyword.NO_POLICY_SCOPE:
                no_policy_scope = True
            elif index > 1:
                raise UnknownArgumentError(f"called with invalid argument: {token}", token)
            else:
                log.debug(f"Ignoring legacy second argument to include(): {token!r}")

            index += 1

        return IncludeOptions(
            target=target,
            optional=optional,
            no_policy_scope=no_policy_scope,
            result_variable=result_variable,
        )
