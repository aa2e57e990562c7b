"""Detect declared version requirements that resolution did not honor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from strictdeps.errors import VersionConflictError
from strictdeps.models import Artifact, ArtifactVersion, Dependency, PathNode
from strictdeps.utils.env import fail_on_conflict as _env_fail_on_conflict

from .dependency_analyzer import DependencyAnalyzer

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersionFailure:
    """An active dependency whose target resolved outside its constraint."""

    dependency: Dependency
    resolved: ArtifactVersion
    paths: Sequence[PathNode] = field(default_factory=tuple)

    def message(self) -> str:
        dep = self.dependency
        lines = [
            f"{dep.from_artifact_version} requires {dep.to_artifact} at "
            f"'{dep.constraint}' but it resolved to {self.resolved.version}."
        ]
        requiring = dep.from_artifact_version.artifact
        for node in self.paths:
            lines.append(f"  {node.render(requiring)}")
        return "\n".join(lines)


def index_resolved(
    resolved_versions: Iterable[ArtifactVersion],
) -> Dict[Artifact, ArtifactVersion]:
    """Map each artifact to its single resolved version."""
    index: Dict[Artifact, ArtifactVersion] = {}
    for version in resolved_versions:
        existing = index.get(version.artifact)
        if existing is not None and existing != version:
            raise ValueError(
                f"Artifact {version.artifact} resolved to both "
                f"{existing.version} and {version.version}"
            )
        index[version.artifact] = version
    return index


def find_version_failures(
    analyzer: DependencyAnalyzer,
    resolved_versions: Iterable[ArtifactVersion],
    *,
    include_paths: bool = True,
) -> List[VersionFailure]:
    """Return one failure per active dependency the resolver overrode."""
    resolved = index_resolved(resolved_versions)
    failures: List[VersionFailure] = []
    for dep in analyzer.get_active_dependencies(resolved.values()):
        actual = resolved[dep.to_artifact]
        if dep.is_version_compatible(actual.version):
            continue
        paths: Sequence[PathNode] = ()
        if include_paths:
            paths = tuple(
                analyzer.get_paths(dep.from_artifact_version.artifact)
            )
        failures.append(
            VersionFailure(dependency=dep, resolved=actual, paths=paths)
        )
    return failures


def check_versions(
    analyzer: DependencyAnalyzer,
    resolved_versions: Iterable[ArtifactVersion],
    *,
    fail_on_conflict: Optional[bool] = None,
) -> List[VersionFailure]:
    """Warn about, or raise on, overridden version requirements."""
    failures = find_version_failures(analyzer, resolved_versions)
    if not failures:
        return failures

    should_fail = (
        _env_fail_on_conflict() if fail_on_conflict is None else fail_on_conflict
    )
    if should_fail:
        raise VersionConflictError(failures)

    for failure in failures:
        _LOGGER.warning("Dependency version failure: %s", failure.message())
    return failures
