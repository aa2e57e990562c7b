"""Dependency analysis for resolved build artifacts."""

from .errors import (DependencyCycleError, ManifestError, StrictDepsError,
                     VersionConflictError)
from .models import (Artifact, ArtifactVersion, Dependency, PathNode,
                     VersionConstraint)
from .services import (DependencyAnalyzer, VersionFailure, check_versions,
                       find_version_failures)

__version__ = "0.1.0"

__all__ = [
    "Artifact",
    "ArtifactVersion",
    "Dependency",
    "DependencyAnalyzer",
    "DependencyCycleError",
    "ManifestError",
    "PathNode",
    "StrictDepsError",
    "VersionConflictError",
    "VersionConstraint",
    "VersionFailure",
    "check_versions",
    "find_version_failures",
]
