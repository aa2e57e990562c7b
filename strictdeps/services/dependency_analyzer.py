"""
strictdeps
Collector and analyzer for declared dependencies between build artifacts.

Dependencies are registered once, typically while build plugins configure
themselves, and analyzed after the build's resolver has chosen a version for
each artifact. The analyzer answers two questions:

* which declared dependencies still bind given the resolved versions, so a
  caller can tell when resolution ignored a declared requirement;
* which chains of requirers lead to an artifact, so a caller can explain why
  a version was pulled in.

Every operation runs under one re-entrant lock. Query results are fresh
lists; the entities in them are immutable and shared by reference.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from strictdeps.errors import DependencyCycleError
from strictdeps.models import Artifact, ArtifactVersion, Dependency, PathNode
from strictdeps.storage import (DependencyRepository,
                                InMemoryDependencyRepository)
from strictdeps.utils.env import trace_groups as _env_trace_groups

_LOGGER = logging.getLogger(__name__)


class DependencyAnalyzer:
    """Thread-safe façade over the dependency store."""

    def __init__(
        self,
        repository: Optional[DependencyRepository] = None,
        *,
        trace_groups: Optional[Sequence[str]] = None,
    ) -> None:
        self._repository: DependencyRepository = (
            repository
            if repository is not None
            else InMemoryDependencyRepository()
        )
        self._trace_groups = frozenset(
            trace_groups if trace_groups is not None else _env_trace_groups()
        )
        self._lock = threading.RLock()

    def register_dependency(self, dependency: Dependency) -> None:
        with self._lock:
            self._repository.add_dependency(dependency)

    def register_dependencies(self, dependencies: Iterable[Dependency]) -> int:
        """Register several edges under one lock acquisition."""
        count = 0
        with self._lock:
            for dependency in dependencies:
                self._repository.add_dependency(dependency)
                count += 1
        _LOGGER.debug("Registered %d dependencies", count)
        return count

    def get_dependencies(self, artifact: Artifact) -> List[Dependency]:
        """Return every registered edge that targets ``artifact``."""
        with self._lock:
            return self._repository.get_dependencies(artifact)

    def get_active_dependencies(
        self, resolved_versions: Iterable[ArtifactVersion]
    ) -> List[Dependency]:
        """
        Return the declared dependencies that hold between resolved versions.

        An edge is active when its declaring version was the one resolved and
        its target artifact was resolved at all. Duplicate registrations are
        returned once per registration.
        """
        with self._lock:
            artifacts: Set[Artifact] = set()
            artifact_versions: Set[ArtifactVersion] = set()
            for version in resolved_versions:
                if version.group in self._trace_groups:
                    _LOGGER.debug(
                        "Getting artifact: %s:%s", version, version.artifact
                    )
                artifacts.add(version.artifact)
                artifact_versions.add(version)

            active: List[Dependency] = []
            for artifact in artifacts:
                for dep in self._repository.get_dependencies(artifact):
                    if (
                        dep.from_artifact_version in artifact_versions
                        and dep.to_artifact in artifacts
                    ):
                        active.append(dep)
            _LOGGER.info(
                "Found %d active dependencies across %d resolved artifacts",
                len(active),
                len(artifacts),
            )
            return active

    def get_paths(self, artifact: Artifact) -> List[PathNode]:
        """
        Return the terminal node of every requirer chain leading to
        ``artifact``.

        Raises DependencyCycleError when the declared edges loop back onto a
        version already on the chain being built.

        Chains are followed recursively, so one deeper than the interpreter's
        recursion limit raises RecursionError; the lock is released as the
        error unwinds.
        """
        with self._lock:
            terminal_paths: List[PathNode] = []
            for dep in self._repository.get_dependencies(artifact):
                self._extend_path(
                    terminal_paths,
                    PathNode(dependency=dep),
                    dep.from_artifact_version,
                    (dep.from_artifact_version,),
                )
            _LOGGER.debug(
                "Reconstructed %d paths to %s", len(terminal_paths), artifact
            )
            return terminal_paths

    def _extend_path(
        self,
        terminal_paths: List[PathNode],
        node: PathNode,
        artifact_version: ArtifactVersion,
        on_path: Tuple[ArtifactVersion, ...],
    ) -> None:
        with self._lock:
            deps = self._repository.get_dependencies(artifact_version.artifact)
            if not deps:
                terminal_paths.append(node)
                return
            for dep in deps:
                if not dep.is_version_compatible(artifact_version.version):
                    continue
                requirer = dep.from_artifact_version
                if requirer in on_path:
                    cycle = on_path[on_path.index(requirer):] + (requirer,)
                    raise DependencyCycleError(cycle)
                self._extend_path(
                    terminal_paths,
                    PathNode(dependency=dep, parent=node),
                    requirer,
                    on_path + (requirer,),
                )

    def __len__(self) -> int:
        with self._lock:
            return len(self._repository)
