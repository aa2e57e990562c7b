"""In-memory dependency store used by the analyzer."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List

from strictdeps.models import Artifact, Dependency

from .base import DependencyRepository


class InMemoryDependencyRepository(DependencyRepository):
    """Dictionary-backed reverse index from target artifact to edges."""

    def __init__(self) -> None:
        self._by_target: Dict[Artifact, List[Dependency]]
        self._by_target = defaultdict(list)
        self._count = 0

    def add_dependency(self, dependency: Dependency) -> None:
        self._by_target[dependency.to_artifact].append(dependency)
        self._count += 1

    def get_dependencies(self, artifact: Artifact) -> List[Dependency]:
        # .get avoids creating empty buckets for unknown artifacts.
        return list(self._by_target.get(artifact, ()))

    def __len__(self) -> int:
        return self._count
