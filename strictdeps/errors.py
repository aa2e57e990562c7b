"""Common errors raised across the dependency analysis layers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from strictdeps.models.artifacts import ArtifactVersion
    from strictdeps.services.version_check import VersionFailure


class StrictDepsError(RuntimeError):
    """Base class for analysis failures."""


class ManifestError(StrictDepsError, ValueError):
    """Raised when a dependency manifest cannot be interpreted."""


class DependencyCycleError(StrictDepsError):
    """Raised when path reconstruction revisits a version on its own chain."""

    def __init__(self, cycle: Sequence["ArtifactVersion"]) -> None:
        self.cycle: Tuple["ArtifactVersion", ...] = tuple(cycle)
        rendered = " -> ".join(str(version) for version in self.cycle)
        super().__init__(f"Dependency cycle detected: {rendered}")


class VersionConflictError(StrictDepsError):
    """Raised when resolution overrode one or more declared versions."""

    def __init__(self, failures: Sequence["VersionFailure"]) -> None:
        self.failures = list(failures)
        lines = [failure.message() for failure in self.failures]
        super().__init__(
            f"{len(self.failures)} declared version requirement(s) "
            "were not honored by resolution:\n" + "\n".join(lines)
        )
