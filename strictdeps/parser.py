"""Manifest parser for JSON dependency declarations and resolved versions."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Union

from strictdeps.errors import ManifestError
from strictdeps.models import ArtifactVersion, Dependency

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Manifest:
    """Declared edges plus the resolver's chosen versions."""

    dependencies: Sequence[Dependency]
    resolved: Sequence[ArtifactVersion]


class ManifestParser:
    """Parse a JSON manifest into domain objects.

    The document carries a ``dependencies`` list of
    ``{"from": "g:n:v", "to": "g:n", "version": "[1.0]"}`` objects and a
    ``resolved`` list whose entries are either ``g:n:v`` strings or objects
    with ``group``, ``name`` and ``version`` keys. Both keys are optional.
    """

    def __init__(self, manifest_file: Union[Path, str]) -> None:
        self._manifest_file = Path(manifest_file)

    def parse(self) -> Manifest:
        document = self._read_document()
        manifest = Manifest(
            dependencies=self._parse_dependencies(
                document.get("dependencies", [])
            ),
            resolved=self._parse_resolved(document.get("resolved", [])),
        )
        _LOGGER.info(
            "Parsed %d dependencies and %d resolved versions from %s",
            len(manifest.dependencies),
            len(manifest.resolved),
            self._manifest_file,
        )
        return manifest

    def _read_document(self) -> Mapping[str, Any]:
        if not self._manifest_file.exists():
            raise FileNotFoundError(
                f"Manifest file not found: {self._manifest_file}"
            )

        with self._manifest_file.open("r", encoding="utf-8") as handle:
            try:
                document = json.load(handle)
            except json.JSONDecodeError as error:
                raise ManifestError(
                    f"{self._manifest_file} is not valid JSON: {error}"
                ) from error

        if not isinstance(document, Mapping):
            raise ManifestError(
                f"{self._manifest_file} must contain a JSON object"
            )
        return document

    def _parse_dependencies(self, entries: Any) -> List[Dependency]:
        dependencies: List[Dependency] = []
        for index, entry in enumerate(self._as_list(entries, "dependencies")):
            if not isinstance(entry, Mapping):
                raise ManifestError(f"dependencies[{index}] must be an object")
            try:
                dependencies.append(
                    Dependency.declare(
                        str(entry["from"]),
                        str(entry["to"]),
                        str(entry.get("version") or ""),
                    )
                )
            except KeyError as error:
                raise ManifestError(
                    f"dependencies[{index}] is missing {error}"
                ) from error
            except ValueError as error:
                raise ManifestError(
                    f"dependencies[{index}] is invalid: {error}"
                ) from error
        return dependencies

    def _parse_resolved(self, entries: Any) -> List[ArtifactVersion]:
        resolved: List[ArtifactVersion] = []
        for index, entry in enumerate(self._as_list(entries, "resolved")):
            try:
                resolved.append(self._parse_artifact_version(entry))
            except (KeyError, TypeError, ValueError) as error:
                raise ManifestError(
                    f"resolved[{index}] is invalid: {error}"
                ) from error
        return resolved

    @staticmethod
    def _parse_artifact_version(entry: Any) -> ArtifactVersion:
        if isinstance(entry, str):
            return ArtifactVersion.from_coordinates(entry)
        if isinstance(entry, Mapping):
            # Extra keys such as fileLocation are ignored.
            return ArtifactVersion.of(
                str(entry["group"]), str(entry["name"]), str(entry["version"])
            )
        raise TypeError(f"unsupported entry type {type(entry).__name__}")

    def _as_list(self, entries: Any, key: str) -> List[Any]:
        if not isinstance(entries, list):
            raise ManifestError(f"'{key}' must be a JSON array")
        return entries
