"""Policy handling for the include() directive.

This module provides the PolicyStatus values, the PolicyTable store and the
ExportFilePolicy gate deciding what happens when a script includes a file that
was generated by the export() command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from listfile.directives.include.messages import MessageType

log = logging.getLogger(__name__)


class PolicyStatus(Enum):
    """Behavior-compatibility setting of a single policy."""

    OLD = "OLD"
    WARN = "WARN"
    NEW = "NEW"
    REQUIRED_IF_USED = "REQUIRED_IF_USED"
    REQUIRED_ALWAYS = "REQUIRED_ALWAYS"


class PolicyAction(Enum):
    """What the export file gate does for a given policy status."""

    PROCEED = "proceed"
    WARN = "warn"
    ABORT = "abort"


# Policies known to this package: id -> (version introduced, short description)
KNOWN_POLICIES: dict[str, tuple[tuple[int, ...], str]] = {
    "CMP0024": ((3, 0, 0), "Disallow include export result."),
}

EXPORT_FILE_POLICY_ACTIONS: dict[PolicyStatus, PolicyAction] = {
    PolicyStatus.OLD: PolicyAction.PROCEED,
    PolicyStatus.WARN: PolicyAction.WARN,
    PolicyStatus.REQUIRED_IF_USED: PolicyAction.ABORT,
    PolicyStatus.REQUIRED_ALWAYS: PolicyAction.ABORT,
    PolicyStatus.NEW: PolicyAction.ABORT,
}


def parse_version(version: str) -> tuple[int, ...]:
    """Parse a dotted version such as ``3.0`` or ``2.8.12``.

    Missing components count as zero, so ``3.0`` equals ``3.0.0``.

    Raises:
        ValueError: If a component is not a non-negative integer.
    """
    parts = version.strip().split(".")
    if not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid policy version: {version!r}")
    numbers = [int(part) for part in parts]
    numbers.extend([0] * (3 - len(numbers)))
    return tuple(numbers)


def policy_warning(policy_id: str) -> str:
    """Return the standard "policy is not set" warning for ``policy_id``."""
    description = KNOWN_POLICIES.get(policy_id, ((), ""))[1]
    text = f"Policy {policy_id} is not set: {description}"
    return (
        f"{text.rstrip()}  Run \"cmake --help-policy {policy_id}\" for policy details.  "
        "Use the cmake_policy command to set the policy and suppress this warning."
    )


class PolicyTable:
    """In-memory policy store.

    Policies that were never set report WARN, which is how an unset policy
    behaves in a listfile that did not request a policy version.
    """

    def __init__(self, statuses: dict[str, PolicyStatus] | None = None) -> None:
        self._statuses: dict[str, PolicyStatus] = dict(statuses or {})

    def get_status(self, policy_id: str) -> PolicyStatus:
        return self._statuses.get(policy_id, PolicyStatus.WARN)

    def set_status(self, policy_id: str, status: PolicyStatus) -> None:
        self._statuses[policy_id] = status

    def set_version_defaults(self, version: str) -> None:
        """Set every known policy introduced at or before ``version`` to NEW.

        Later policies are left untouched.
        """
        requested = parse_version(version)
        for policy_id, (introduced, _description) in KNOWN_POLICIES.items():
            if introduced <= requested:
                self._statuses[policy_id] = PolicyStatus.NEW
        log.debug(f"Applied policy defaults for version {version}")


@dataclass(frozen=True)
class PolicyDecision:
    """Decision of the export file gate.

    Attributes:
        action: Whether to proceed silently, proceed with a warning, or abort
        severity: Severity of the message to issue, None when silent
        text: The message to issue, None when silent
    """

    action: PolicyAction
    severity: MessageType | None = None
    text: str | None = None

    @property
    def aborts(self) -> bool:
        return self.action is PolicyAction.ABORT


class ExportFilePolicy:
    """Gate for including files generated by the export() command."""

    def __init__(self, policy_id: str = "CMP0024") -> None:
        self.policy_id = policy_id

    def evaluate(self, path: str, status: PolicyStatus) -> PolicyDecision:
        """Decide how to treat an include of the export file at ``path``.

        Args:
            path: Canonical absolute path of the export file.
            status: Current status of the governing policy.

        Returns:
            The decision, including the message to issue if any.
        """
        action = EXPORT_FILE_POLICY_ACTIONS[status]
        if action is PolicyAction.PROCEED:
            return PolicyDecision(action=action)

        if action is PolicyAction.WARN:
            text = policy_warning(self.policy_id) + "\n" + self._explanation(path, "should")
            return PolicyDecision(action=action, severity=MessageType.AUTHOR_WARNING, text=text)

        return PolicyDecision(
            action=action,
            severity=MessageType.FATAL_ERROR,
            text=self._explanation(path, "may"),
        )

    def _explanation(self, path: str, modal: str) -> str:
        return (
            f"The file\n  {path}\nwas generated by the export() command.  "
            f"It {modal} not be used as the argument to the include() command.  "
            "Use ALIAS targets instead to refer to targets by alternative names.\n"
        )
