"""Listfile dependency graph.

This module provides the IncludeEdge dataclass and the ListFileGraph class,
which records which listfile included which. The set of files in the graph is
what the build system has to watch to know when configuration must be re-run.
"""

from __future__ import annotations

from dataclasses import dataclass

from listfile.directives.include.include_directive import IncludeOptions


@dataclass(frozen=True)
class IncludeEdge:
    """Represents one successful include.

    Attributes:
        source: The listfile containing the include() directive.
        target: The canonical path of the loaded listfile.
        options: The options the directive was evaluated with.
    """

    source: str
    target: str
    options: IncludeOptions


class ListFileGraph:
    """Record of the includes performed during one configuration run.

    Edges are kept in load order. A listfile may include the same file more
    than once; each include is its own edge.
    """

    def __init__(self) -> None:
        self._edges: list[IncludeEdge] = []

    def add(self, source: str, target: str, options: IncludeOptions) -> IncludeEdge:
        """Record that ``source`` loaded ``target``."""
        edge = IncludeEdge(source=source, target=target, options=options)
        self._edges.append(edge)
        return edge

    def get_edges(self, source: str) -> list[IncludeEdge]:
        return [edge for edge in self._edges if edge.source == source]

    def get_direct_includes(self, source: str) -> list[str]:
        """Files loaded by ``source``, once each, in load order."""
        return list(dict.fromkeys(edge.target for edge in self._edges if edge.source == source))

    def get_includers(self, target: str) -> list[str]:
        """Listfiles that loaded ``target``, once each, in load order."""
        return list(dict.fromkeys(edge.source for edge in self._edges if edge.target == target))

    def list_files(self) -> list[str]:
        """Every listfile taking part in an include, once each, in first-seen order."""
        files: dict[str, None] = {}
        for edge in self._edges:
            files.setdefault(edge.source)
            files.setdefault(edge.target)
        return list(files)
