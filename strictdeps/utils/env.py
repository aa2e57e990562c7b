from __future__ import annotations

"""Helpers for loading environment configuration."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from strictdeps.config import DEFAULT_TRACE_GROUPS

_ENV_LOADED = False

_LOGGER = logging.getLogger(__name__)


def load_dotenv(dotenv_path: Union[str, Path] = ".env") -> None:
    """Load environment variables from a simple ``.env`` file if present."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return

    path = Path(dotenv_path)
    if path.exists():
        for line in path.read_text().splitlines():
            parsed = _parse_line(line)
            if parsed:
                key, value = parsed
                os.environ.setdefault(key, value)
        _LOGGER.debug("Loaded environment defaults from %s", path)

    _ENV_LOADED = True


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    if "=" not in stripped:
        return None

    key, value = stripped.split("=", 1)
    return (key.strip(), value.strip())


def _truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    lowered = value.strip().lower()
    return lowered in {"1", "true", "yes", "on"}


def fail_on_conflict() -> bool:
    """Return True when version failures should abort instead of warn.

    Controlled by ``STRICTDEPS_FAIL_ON_CONFLICT``; any of "1/true/yes/on"
    enables failing.
    """

    load_dotenv()
    return _truthy(os.environ.get("STRICTDEPS_FAIL_ON_CONFLICT"))


def trace_groups() -> Tuple[str, ...]:
    """Groups whose versions are traced at DEBUG during analysis."""

    load_dotenv()
    raw = os.environ.get("STRICTDEPS_TRACE_GROUPS")
    if raw is None:
        return DEFAULT_TRACE_GROUPS
    return tuple(group.strip() for group in raw.split(",") if group.strip())
