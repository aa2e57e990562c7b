"""
strictdeps
Domain models for artifact identities and resolved versions.
"""

from __future__ import annotations

from dataclasses import dataclass

from strictdeps.config import COORDINATE_SEPARATOR


def validate_coordinate_part(value: str, label: str) -> str:
    """Ensure a group, name or version segment is usable as a coordinate."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Artifact {label} cannot be empty")
    if COORDINATE_SEPARATOR in value:
        raise ValueError(
            f"Artifact {label} '{value}' must not contain "
            f"'{COORDINATE_SEPARATOR}'"
        )
    return value


def _split_coordinates(coordinates: str, expected: int) -> list[str]:
    parts = [part.strip() for part in coordinates.strip().split(":")]
    if len(parts) != expected:
        raise ValueError(
            f"Coordinates '{coordinates}' must have {expected} "
            f"'{COORDINATE_SEPARATOR}'-separated parts"
        )
    return parts


@dataclass(frozen=True)
class Artifact:
    """Library identity independent of version."""

    group: str
    name: str

    def __post_init__(self) -> None:
        validate_coordinate_part(self.group, "group")
        validate_coordinate_part(self.name, "name")

    @classmethod
    def from_coordinates(cls, coordinates: str) -> "Artifact":
        """Parse ``group:name``."""
        group, name = _split_coordinates(coordinates, 2)
        return cls(group=group, name=name)

    def __str__(self) -> str:
        return f"{self.group}{COORDINATE_SEPARATOR}{self.name}"


@dataclass(frozen=True)
class ArtifactVersion:
    """An artifact pinned to one concrete version."""

    artifact: Artifact
    version: str

    def __post_init__(self) -> None:
        if not isinstance(self.artifact, Artifact):
            raise ValueError(
                f"Expected an Artifact, got {type(self.artifact).__name__}"
            )
        validate_coordinate_part(self.version, "version")

    @classmethod
    def of(cls, group: str, name: str, version: str) -> "ArtifactVersion":
        return cls(artifact=Artifact(group=group, name=name), version=version)

    @classmethod
    def from_coordinates(cls, coordinates: str) -> "ArtifactVersion":
        """Parse ``group:name:version``."""
        group, name, version = _split_coordinates(coordinates, 3)
        return cls.of(group, name, version)

    @property
    def group(self) -> str:
        return self.artifact.group

    @property
    def name(self) -> str:
        return self.artifact.name

    def __str__(self) -> str:
        return f"{self.artifact}{COORDINATE_SEPARATOR}{self.version}"
