"""Variable storage for listfile evaluation."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)


class VariableScope:
    """A flat, dict-backed variable scope.

    Values are strings, as every listfile value is.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def define(self, name: str, value: str) -> None:
        log.debug(f"Setting variable {name} = {value!r}")
        self._values[name] = value

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._values.get(name, default)

    def is_defined(self, name: str) -> bool:
        return name in self._values

    def unset(self, name: str) -> None:
        self._values.pop(name, None)

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)
