"""File system backed collaborators for the include() directive.

This module provides path utilities, existence checks and the module search
path used to turn a bare module name into a listfile.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

log = logging.getLogger(__name__)


class LocalPathUtil:
    """Path primitives for the local file system.

    Collapsing is lexical: ``..`` segments are folded without consulting the
    file system, so symbolic links are never expanded. A relative base
    directory is anchored at the current working directory, so the result is
    always absolute.
    """

    def is_absolute(self, path: str) -> bool:
        return Path(path.replace("\\", "/")).is_absolute()

    def collapse(self, path: str, base_dir: str) -> str:
        # Normalize backslashes to forward slashes for cross-platform compatibility
        base = Path(base_dir.replace("\\", "/"))
        if not base.is_absolute():
            base = Path.cwd() / base
        joined = base / path.replace("\\", "/")

        parts: list[str] = []
        for part in joined.parts[1:]:
            if part == "..":
                if parts:
                    parts.pop()
            else:
                parts.append(part)

        return Path(joined.anchor, *parts).as_posix()


class LocalFileSystem:
    """Existence checks against the local file system."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()


class ModuleSearchPath:
    """Ordered list of directories searched for module files.

    User module directories are searched first, in the order given, then the
    built-in modules directory. Only regular files count as a hit.
    """

    def __init__(
        self,
        module_dirs: Iterable[str] = (),
        builtin_dir: str | None = None,
        path_util: LocalPathUtil | None = None,
        file_system: LocalFileSystem | None = None,
    ) -> None:
        """Initialize the search path.

        Args:
            module_dirs: User module directories, highest priority first.
            builtin_dir: Directory holding the modules shipped with the interpreter.
            path_util: Path primitives; the local implementation when omitted.
            file_system: File checks; the local implementation when omitted.
        """
        self._module_dirs = [directory for directory in module_dirs if directory]
        self._builtin_dir = builtin_dir
        self._path_util = path_util or LocalPathUtil()
        self._file_system = file_system or LocalFileSystem()

    @property
    def directories(self) -> list[str]:
        directories = list(self._module_dirs)
        if self._builtin_dir:
            directories.append(self._builtin_dir)
        return directories

    def prepend(self, directory: str) -> None:
        """Search ``directory`` before every directory already on the path."""
        self._module_dirs.insert(0, directory)

    def append(self, directory: str) -> None:
        """Search ``directory`` after the other user module directories."""
        self._module_dirs.append(directory)

    def resolve(self, module_file_name: str) -> str | None:
        """Find a module file.

        Args:
            module_file_name: The module's file name, suffix included.

        Returns:
            The absolute path of the first regular file found, or None.
        """
        for directory in self.directories:
            candidate = self._path_util.collapse(module_file_name, directory)
            if self._file_system.is_file(candidate):
                log.debug(f"Module {module_file_name} found at {candidate}")
                return candidate

        log.debug(f"Module {module_file_name} not found in {self.directories}")
        return None
