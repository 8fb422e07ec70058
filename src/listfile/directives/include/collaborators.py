"""Interfaces the include() directive consumes from its host interpreter.

The resolver only talks to these protocols. Local implementations live in
``paths``, ``variables``, ``policy``, ``export_registry`` and ``messages``;
the interpreter itself is always supplied by the host.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from listfile.directives.include.messages import MessageType
    from listfile.directives.include.policy import PolicyStatus


class ModuleSearch(Protocol):
    def resolve(self, module_file_name: str) -> str | None: ...


class PathUtil(Protocol):
    def is_absolute(self, path: str) -> bool: ...

    def collapse(self, path: str, base_dir: str) -> str: ...


class FileSystem(Protocol):
    def exists(self, path: str) -> bool: ...


class ExportRegistry(Protocol):
    def is_exported_targets_file(self, path: str) -> bool: ...

    def materialize_and_generate(self, path: str) -> None: ...


class PolicyStore(Protocol):
    def get_status(self, policy_id: str) -> PolicyStatus: ...


class Interpreter(Protocol):
    def load_file(self, path: str, no_policy_scope: bool) -> bool:
        """Parse and execute the listfile at ``path``; return whether it was read."""
        ...


class VariableStore(Protocol):
    def define(self, name: str, value: str) -> None: ...


class MessageSink(Protocol):
    def report(self, severity: MessageType, text: str) -> None: ...

    def fatal_error_occurred(self) -> bool: ...
