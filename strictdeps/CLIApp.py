"""CLI wiring that loads a manifest and emits analysis results as NDJSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .errors import DependencyCycleError, VersionConflictError
from .logging_config import configure_logging
from .models import Artifact
from .parser import Manifest, ManifestParser
from .results import (dependency_record, failure_record, path_record,
                      to_ndjson_line)
from .services import DependencyAnalyzer, check_versions

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VERSION_FAILURE = 1
EXIT_INPUT_ERROR = 2


class CLIApp:
    """Command-line entry point for strictdeps."""

    def __init__(
        self,
        manifest_file: Path,
        analyzer: Optional[DependencyAnalyzer] = None,
    ) -> None:
        self._manifest_file = Path(manifest_file)
        self._analyzer = analyzer or DependencyAnalyzer()
        self._manifest: Optional[Manifest] = None
        self.conflict: Optional[VersionConflictError] = None

    def load(self) -> Manifest:
        """Parse the manifest and register its dependencies once."""
        if self._manifest is None:
            manifest = ManifestParser(self._manifest_file).parse()
            self._analyzer.register_dependencies(manifest.dependencies)
            self._manifest = manifest
        return self._manifest

    def generate_results(
        self,
        *,
        paths: Sequence[str] = (),
        active: bool = False,
        check: bool = False,
        fail_on_conflict: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        """Build every requested record.

        A failing version check does not discard the other records; the
        conflict is kept on ``self.conflict`` for the caller to act on.
        """
        manifest = self.load()
        records: List[Dict[str, Any]] = []
        self.conflict = None

        if active:
            for dep in self._analyzer.get_active_dependencies(
                manifest.resolved
            ):
                records.append(dependency_record(dep))

        for coordinates in paths:
            artifact = Artifact.from_coordinates(coordinates)
            for node in self._analyzer.get_paths(artifact):
                records.append(path_record(node, artifact))

        if check:
            try:
                failures = check_versions(
                    self._analyzer,
                    manifest.resolved,
                    fail_on_conflict=fail_on_conflict,
                )
            except VersionConflictError as error:
                self.conflict = error
                failures = error.failures
            records.extend(failure_record(failure) for failure in failures)

        return records

    def run(
        self,
        *,
        paths: Sequence[str] = (),
        active: bool = False,
        check: bool = False,
        fail_on_conflict: Optional[bool] = None,
    ) -> int:
        """Execute the CLI workflow and emit NDJSON to stdout."""
        if not (paths or active or check):
            active = True
        try:
            records = self.generate_results(
                paths=paths,
                active=active,
                check=check,
                fail_on_conflict=fail_on_conflict,
            )
        except (FileNotFoundError, ValueError) as error:
            # ManifestError and duplicate resolved versions both land here.
            logger.error("Invalid analysis input: %s", error)
            print(f"error: {error}", file=sys.stderr)
            return EXIT_INPUT_ERROR
        except DependencyCycleError as error:
            logger.error("%s", error)
            print(f"error: {error}", file=sys.stderr)
            return EXIT_INPUT_ERROR

        for record in records:
            print(to_ndjson_line(record))
        if self.conflict is not None:
            print(f"error: {self.conflict}", file=sys.stderr)
            return EXIT_VERSION_FAILURE
        return EXIT_OK


def build_arg_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(
        prog="strictdeps",
        description=(
            "Analyze declared dependencies against the versions a resolver "
            "picked."
        ),
    )
    argument_parser.add_argument(
        "manifest_file",
        type=Path,
        help="JSON manifest with 'dependencies' and 'resolved' entries.",
    )
    argument_parser.add_argument(
        "--paths",
        nargs="+",
        default=[],
        metavar="GROUP:NAME",
        help="Print every requirer chain leading to these artifacts.",
    )
    argument_parser.add_argument(
        "--active",
        action="store_true",
        help="Print dependencies active for the resolved versions.",
    )
    argument_parser.add_argument(
        "--check",
        action="store_true",
        help="Report declared versions that resolution overrode.",
    )
    argument_parser.add_argument(
        "--fail-on-conflict",
        action="store_true",
        default=None,
        help=(
            "Exit non-zero on version failures "
            "(default: STRICTDEPS_FAIL_ON_CONFLICT)."
        ),
    )
    return argument_parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    argument_parser = build_arg_parser()
    parsed_args = argument_parser.parse_args(argv)

    try:
        for coordinates in parsed_args.paths:
            Artifact.from_coordinates(coordinates)
    except ValueError as error:
        argument_parser.error(str(error))

    app = CLIApp(parsed_args.manifest_file)
    return app.run(
        paths=parsed_args.paths,
        active=parsed_args.active,
        check=parsed_args.check,
        fail_on_conflict=parsed_args.fail_on_conflict,
    )


if __name__ == "__main__":
    sys.exit(main())
