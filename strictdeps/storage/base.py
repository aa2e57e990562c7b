"""Abstract repository interface for declared dependency edges."""

from __future__ import annotations

from typing import List, Protocol

from strictdeps.models import Artifact, Dependency


class DependencyRepository(Protocol):
    """Append-only store of edges indexed by target artifact."""

    def add_dependency(self, dependency: Dependency) -> None:
        """Record an edge; duplicates are kept."""

    def get_dependencies(self, artifact: Artifact) -> List[Dependency]:
        """
        Return every edge whose ``to_artifact`` equals ``artifact``.

        The returned list is owned by the caller; mutating it must not
        affect the repository.
        """

    def __len__(self) -> int:
        """Return the total number of registered edges."""
