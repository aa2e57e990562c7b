"""Requirer-path nodes produced by path reconstruction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .artifacts import Artifact, ArtifactVersion
from .dependency import Dependency


@dataclass(frozen=True)
class PathNode:
    """One step of a requirer chain.

    ``parent`` points back toward the queried artifact; the node without a
    parent wraps the edge that targets the queried artifact directly. Nodes
    returned from a path query are terminal: their ``root_requirer`` has no
    further requirers.
    """

    dependency: Dependency
    parent: Optional["PathNode"] = None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def root_requirer(self) -> ArtifactVersion:
        return self.dependency.from_artifact_version

    @property
    def depth(self) -> int:
        return sum(1 for _ in self._walk())

    def _walk(self) -> Iterator["PathNode"]:
        node: Optional[PathNode] = self
        while node is not None:
            yield node
            node = node.parent

    def chain(self) -> List[Dependency]:
        """Dependencies ordered from the queried artifact outward."""
        dependencies = [node.dependency for node in self._walk()]
        dependencies.reverse()
        return dependencies

    def requirers(self) -> List[ArtifactVersion]:
        """Requiring versions ordered from the queried artifact outward."""
        return [dep.from_artifact_version for dep in self.chain()]

    def render(self, target: Artifact) -> str:
        """Render as ``target <- requirer <- ... <- root``."""
        segments = [str(target)]
        segments.extend(str(version) for version in self.requirers())
        return " <- ".join(segments)
