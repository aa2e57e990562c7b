"""Domain model package exports."""

from .artifacts import Artifact, ArtifactVersion, validate_coordinate_part
from .dependency import ConstraintKind, Dependency, VersionConstraint
from .path import PathNode

__all__ = [
    "Artifact",
    "ArtifactVersion",
    "ConstraintKind",
    "Dependency",
    "PathNode",
    "VersionConstraint",
    "validate_coordinate_part",
]
