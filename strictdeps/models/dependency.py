"""Declared dependency edges and their version-compatibility rules."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from packaging.version import InvalidVersion, Version

from strictdeps.config import ANY_VERSION_MARKERS

from .artifacts import Artifact, ArtifactVersion

_LOGGER = logging.getLogger(__name__)

_RANGE_PATTERN = re.compile(r"^([\[\(])([^\[\]\(\)]*)([\]\)])$")


class ConstraintKind(str, Enum):
    """How a declared version string is interpreted."""

    ANY = "any"
    EXACT = "exact"
    RANGE = "range"
    COMPATIBLE = "compatible"


def _parse_version(value: str) -> Optional[Version]:
    try:
        return Version(value)
    except InvalidVersion:
        _LOGGER.debug("Ignoring unparseable version '%s'", value)
        return None


@dataclass(frozen=True)
class VersionConstraint:
    """Maven-style version requirement.

    ``[1.2.3]`` pins an exact version, ``[1.0,2.0)`` and friends describe a
    range with inclusive/exclusive bounds (either end may be open), a bare
    ``1.2.3`` accepts any version with the same major component that is not
    older, and an empty string, ``+`` or ``*`` accept everything.
    """

    raw: str
    kind: ConstraintKind
    lower: Optional[str] = None
    upper: Optional[str] = None
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    @classmethod
    def any(cls) -> "VersionConstraint":
        return cls(raw="", kind=ConstraintKind.ANY)

    @classmethod
    def parse(cls, raw: str) -> "VersionConstraint":
        """Build a constraint from a declared version string.

        Bounds that are not PEP 440 versions (``31.1-jre``, ``1.0-SNAPSHOT``)
        are kept as declared and only ever match themselves.
        """
        text = (raw or "").strip()
        if text in ANY_VERSION_MARKERS:
            return cls(raw=text, kind=ConstraintKind.ANY)

        if text[0] not in "[(" and text[-1] not in "])":
            return cls(raw=text, kind=ConstraintKind.COMPATIBLE, lower=text)

        match = _RANGE_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Version constraint '{raw}' is malformed")
        opening, body, closing = match.groups()

        if "," not in body:
            pinned = body.strip()
            if opening != "[" or closing != "]" or not pinned:
                raise ValueError(
                    f"Exact version constraint '{raw}' must look like '[1.0]'"
                )
            return cls(
                raw=text,
                kind=ConstraintKind.EXACT,
                lower=pinned,
                upper=pinned,
            )

        bounds = [bound.strip() for bound in body.split(",")]
        if len(bounds) != 2:
            raise ValueError(
                f"Version constraint '{raw}' must have exactly two bounds"
            )
        lower, upper = bounds
        return cls(
            raw=text,
            kind=ConstraintKind.RANGE,
            lower=lower or None,
            upper=upper or None,
            lower_inclusive=opening == "[",
            upper_inclusive=closing == "]",
        )

    def contains(self, version: str) -> bool:
        """Return True when ``version`` satisfies this requirement."""
        if self.kind is ConstraintKind.ANY:
            return True

        candidate = (version or "").strip()
        if candidate and self._matches_declared_bound(candidate):
            return True

        parsed = _parse_version(candidate) if candidate else None
        if parsed is None:
            return False

        if self.kind is ConstraintKind.EXACT:
            return parsed == _parse_version(str(self.lower))

        if self.kind is ConstraintKind.COMPATIBLE:
            minimum = _parse_version(str(self.lower))
            if minimum is None:
                return False
            return parsed >= minimum and parsed.major == minimum.major

        lower = _parse_version(self.lower) if self.lower is not None else None
        upper = _parse_version(self.upper) if self.upper is not None else None
        if (self.lower is not None and lower is None) or (
            self.upper is not None and upper is None
        ):
            # Unorderable bound; only identical strings matched above.
            return False
        if lower is not None:
            if parsed < lower or (not self.lower_inclusive and parsed == lower):
                return False
        if upper is not None:
            if parsed > upper or (not self.upper_inclusive and parsed == upper):
                return False
        return True

    def _matches_declared_bound(self, candidate: str) -> bool:
        if self.kind in (ConstraintKind.EXACT, ConstraintKind.COMPATIBLE):
            return candidate == self.lower
        return (self.lower_inclusive and candidate == self.lower) or (
            self.upper_inclusive and candidate == self.upper
        )

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class Dependency:
    """``from_artifact_version`` requires ``to_artifact`` under ``constraint``."""

    from_artifact_version: ArtifactVersion
    to_artifact: Artifact
    constraint: VersionConstraint = field(default_factory=VersionConstraint.any)

    @classmethod
    def declare(
        cls,
        from_coordinates: str,
        to_coordinates: str,
        version: str = "",
    ) -> "Dependency":
        """Build an edge from ``g:n:v`` and ``g:n`` strings."""
        return cls(
            from_artifact_version=ArtifactVersion.from_coordinates(
                from_coordinates
            ),
            to_artifact=Artifact.from_coordinates(to_coordinates),
            constraint=VersionConstraint.parse(version),
        )

    def is_version_compatible(self, version: str) -> bool:
        return self.constraint.contains(version)

    def __str__(self) -> str:
        suffix = f" {self.constraint}" if self.constraint.raw else ""
        return f"{self.from_artifact_version} -> {self.to_artifact}{suffix}"
