"""Analysis services built on the dependency store."""

from .dependency_analyzer import DependencyAnalyzer
from .version_check import (VersionFailure, check_versions,
                            find_version_failures, index_resolved)

__all__ = [
    "DependencyAnalyzer",
    "VersionFailure",
    "check_versions",
    "find_version_failures",
    "index_resolved",
]
