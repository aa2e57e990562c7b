from __future__ import annotations

"""Utilities for turning analysis results into CLI output records."""

import json
from typing import Any, Dict, Mapping

from strictdeps.models import Artifact, Dependency, PathNode
from strictdeps.services import VersionFailure


def format_dependency(dependency: Dependency) -> str:
    return str(dependency)


def format_path(node: PathNode, artifact: Artifact) -> str:
    """Render a terminal node as ``target <- requirer <- ... <- root``."""
    return node.render(artifact)


def dependency_record(dependency: Dependency) -> Dict[str, Any]:
    return {
        "type": "dependency",
        "from": str(dependency.from_artifact_version),
        "to": str(dependency.to_artifact),
        "version": dependency.constraint.raw,
        "text": format_dependency(dependency),
    }


def path_record(node: PathNode, artifact: Artifact) -> Dict[str, Any]:
    return {
        "type": "path",
        "artifact": str(artifact),
        "depth": node.depth,
        "requirers": [str(version) for version in node.requirers()],
        "root": str(node.root_requirer),
        "text": format_path(node, artifact),
    }


def failure_record(failure: VersionFailure) -> Dict[str, Any]:
    return {
        "type": "version_failure",
        "dependency": dependency_record(failure.dependency),
        "resolved": failure.resolved.version,
        "paths": [
            format_path(node, failure.dependency.from_artifact_version.artifact)
            for node in failure.paths
        ],
        "message": failure.message(),
    }


def to_ndjson_line(record: Mapping[str, Any]) -> str:
    """Serialize a record to a single compact JSON line."""

    return json.dumps(record, separators=(",", ":"))
