"""Registry of import files generated by the export() command.

This module provides the ExportFileRegistry class. export() only records the
file it will produce; the content is written lazily, so anything that wants to
read such a file has to ask the registry to generate it first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass
class ExportFile:
    """An import file registered by export().

    Attributes:
        path: Canonical absolute path of the generated file
        generate: Callable writing the file content to ``path``
        generation_count: How many times the file has been generated
    """

    path: str
    generate: Callable[[str], None]
    generation_count: int = 0


class ExportFileRegistry:
    """Registry of generated target-export files.

    Generation objects for the whole build graph are created once, the first
    time any export file is materialized. Each export file is regenerated on
    every request, so repeated requests for the same file are safe.
    """

    def __init__(self, create_generation_objects: Callable[[], None] | None = None) -> None:
        """Initialize an empty registry.

        Args:
            create_generation_objects: Callable building the generator objects
                the export files are computed from.
        """
        self._create_generation_objects = create_generation_objects
        self._generation_objects_created = False
        self._files: dict[str, ExportFile] = {}

    def register(self, path: str, generate: Callable[[str], None]) -> ExportFile:
        """Record that export() will produce the file at ``path``."""
        export_file = ExportFile(path=path, generate=generate)
        self._files[path] = export_file
        return export_file

    def unregister(self, path: str) -> None:
        self._files.pop(path, None)

    def is_exported_targets_file(self, path: str) -> bool:
        return path in self._files

    def get(self, path: str) -> ExportFile | None:
        return self._files.get(path)

    @property
    def generation_objects_created(self) -> bool:
        return self._generation_objects_created

    def materialize_and_generate(self, path: str) -> None:
        """Create the generation objects if needed and (re)generate ``path``.

        Raises:
            KeyError: If ``path`` was never registered.
        """
        export_file = self._files.get(path)
        if export_file is None:
            raise KeyError(f"Not an export file: {path}")

        if not self._generation_objects_created:
            log.debug("Creating generation objects")
            if self._create_generation_objects is not None:
                self._create_generation_objects()
            self._generation_objects_created = True

        log.info(f"Generating import file {path}")
        export_file.generate(path)
        export_file.generation_count += 1
