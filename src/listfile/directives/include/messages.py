"""Message reporting for listfile directives.

This module provides the MessageType severities, the IssuedMessage record and
RecordingMessageSink, a message sink that logs every message, keeps them for
later inspection and latches the interpreter-wide fatal error flag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lsprotocol import types

log = logging.getLogger(__name__)


class MessageType(Enum):
    """Severity of a message issued while evaluating a listfile."""

    AUTHOR_WARNING = "author_warning"
    AUTHOR_ERROR = "author_error"
    WARNING = "warning"
    DEPRECATION_WARNING = "deprecation_warning"
    DEPRECATION_ERROR = "deprecation_error"
    FATAL_ERROR = "fatal_error"
    INTERNAL_ERROR = "internal_error"
    MESSAGE = "message"
    LOG = "log"

    @property
    def is_error(self) -> bool:
        return self in _ERROR_TYPES

    @property
    def is_fatal(self) -> bool:
        return self in (MessageType.FATAL_ERROR, MessageType.INTERNAL_ERROR)


_ERROR_TYPES = frozenset(
    {
        MessageType.AUTHOR_ERROR,
        MessageType.DEPRECATION_ERROR,
        MessageType.FATAL_ERROR,
        MessageType.INTERNAL_ERROR,
    }
)

_LOG_LEVELS = {
    MessageType.AUTHOR_WARNING: logging.WARNING,
    MessageType.AUTHOR_ERROR: logging.ERROR,
    MessageType.WARNING: logging.WARNING,
    MessageType.DEPRECATION_WARNING: logging.WARNING,
    MessageType.DEPRECATION_ERROR: logging.ERROR,
    MessageType.FATAL_ERROR: logging.ERROR,
    MessageType.INTERNAL_ERROR: logging.CRITICAL,
    MessageType.MESSAGE: logging.INFO,
    MessageType.LOG: logging.DEBUG,
}


@dataclass(frozen=True)
class IssuedMessage:
    """A message issued through the sink.

    Attributes:
        severity: The message severity
        text: The message text
        source_file: The listfile being evaluated when the message was issued
        line: Line of the issuing directive (0-indexed)
    """

    severity: MessageType
    text: str
    source_file: str | None = None
    line: int = 0

    def to_diagnostic(self) -> types.Diagnostic:
        """Convert this message to an LSP Diagnostic for editor tooling.

        Returns:
            An LSP Diagnostic spanning the issuing directive's line.
        """
        from lsprotocol import types

        if self.severity.is_error:
            severity = types.DiagnosticSeverity.Error
        elif self.severity is MessageType.MESSAGE:
            severity = types.DiagnosticSeverity.Information
        elif self.severity is MessageType.LOG:
            severity = types.DiagnosticSeverity.Hint
        else:
            severity = types.DiagnosticSeverity.Warning

        return types.Diagnostic(
            range=types.Range(
                start=types.Position(line=self.line, character=0),
                end=types.Position(line=self.line + 1, character=0),
            ),
            message=self.text,
            severity=severity,
            source="listfile",
            code=self.severity.name,
        )


class RecordingMessageSink:
    """Message sink that logs and records every issued message.

    A FATAL_ERROR or INTERNAL_ERROR latches the fatal flag; once set it stays
    set for the lifetime of the sink, which is the lifetime of one evaluation.
    """

    def __init__(self, source_file: str | None = None) -> None:
        """Initialize an empty sink.

        Args:
            source_file: Listfile attributed to messages issued through this sink.
        """
        self.source_file = source_file
        self._messages: list[IssuedMessage] = []
        self._fatal_error = False

    def report(self, severity: MessageType, text: str, line: int = 0) -> None:
        message = IssuedMessage(severity=severity, text=text, source_file=self.source_file, line=line)
        self._messages.append(message)
        if severity.is_fatal:
            self._fatal_error = True
        log.log(_LOG_LEVELS[severity], f"{severity.name}: {text}")

    def fatal_error_occurred(self) -> bool:
        return self._fatal_error

    @property
    def messages(self) -> list[IssuedMessage]:
        return list(self._messages)

    def messages_of(self, severity: MessageType) -> list[IssuedMessage]:
        return [message for message in self._messages if message.severity is severity]

    def to_diagnostics(self) -> list[types.Diagnostic]:
        return [message.to_diagnostic() for message in self._messages]

    def clear(self) -> None:
        """Forget recorded messages and reset the fatal flag."""
        self._messages.clear()
        self._fatal_error = False
