"""
strictdeps
Central configuration constants for dependency analysis.
"""

from __future__ import annotations

# Coordinates ---------------------------------------------------------------

COORDINATE_SEPARATOR = ":"
"""Separator between group, name and version in artifact coordinates."""

# Tracing -------------------------------------------------------------------

DEFAULT_TRACE_GROUPS = ("com.google.android.gms",)
"""Groups whose resolved versions are logged at DEBUG during analysis."""

# Constraints ---------------------------------------------------------------

ANY_VERSION_MARKERS = frozenset({"", "+", "*"})
"""Declared version strings that accept every version."""
