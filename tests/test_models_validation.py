from __future__ import annotations

import pytest

from strictdeps.models import (Artifact, ArtifactVersion, ConstraintKind,
                               Dependency, PathNode, VersionConstraint)


def test_artifact_identity_is_by_group_and_name() -> None:
    first = Artifact("com.example", "core")
    second = Artifact.from_coordinates("com.example:core")

    assert first == second
    assert hash(first) == hash(second)
    assert first != Artifact("com.example", "ui")
    assert str(first) == "com.example:core"


def test_artifact_version_equality_and_accessors() -> None:
    version = ArtifactVersion.from_coordinates("com.example:core:1.0")

    assert version == ArtifactVersion.of("com.example", "core", "1.0")
    assert version != ArtifactVersion.of("com.example", "core", "1.1")
    assert version.group == "com.example"
    assert version.name == "core"
    assert version.artifact == Artifact("com.example", "core")
    assert str(version) == "com.example:core:1.0"


@pytest.mark.parametrize(
    "coordinates",
    ["", "com.example", "com.example:core:1.0", ":core", "com.example: "],
)
def test_artifact_from_coordinates_rejects_bad_input(coordinates: str) -> None:
    with pytest.raises(ValueError):
        Artifact.from_coordinates(coordinates)


def test_artifact_version_rejects_missing_version() -> None:
    with pytest.raises(ValueError, match="version"):
        ArtifactVersion.from_coordinates("com.example:core:")
    with pytest.raises(ValueError, match="Expected an Artifact"):
        ArtifactVersion(artifact="com.example:core", version="1.0")  # type: ignore[arg-type]


def test_entities_are_immutable() -> None:
    artifact = Artifact("g", "a")
    with pytest.raises(AttributeError):
        artifact.name = "b"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("raw", "version", "expected"),
    [
        ("", "0.0.1", True),
        ("+", "99", True),
        ("[15.0.1]", "15.0.1", True),
        ("[15.0.1]", "15.0.2", False),
        ("[1.0]", "1.0.0", True),
        ("[1.0,2.0)", "1.0", True),
        ("[1.0,2.0)", "1.9.9", True),
        ("[1.0,2.0)", "2.0", False),
        ("(1.0,2.0]", "1.0", False),
        ("(1.0,2.0]", "2.0", True),
        ("[1.5,)", "10.0", True),
        ("[1.5,)", "1.4", False),
        ("(,3)", "2.9", True),
        ("(,3)", "3.0", False),
        ("1.2.0", "1.4.1", True),
        ("1.2.0", "1.1.9", False),
        ("1.2.0", "2.0.0", False),
        ("[1.0,2.0)", "not-a-version", False),
        ("31.1-jre", "31.1-jre", True),
        ("31.1-jre", "32.0-jre", False),
        ("31.1-jre", "31.1", False),
        ("[1.0-SNAPSHOT,2.0)", "1.0-SNAPSHOT", True),
        ("[1.0-SNAPSHOT,2.0)", "1.5", False),
        ("(1.0-SNAPSHOT,2.0)", "1.0-SNAPSHOT", False),
        ("[1.0,2.0-rc-x]", "2.0-rc-x", True),
    ],
)
def test_version_constraint_contains(
    raw: str, version: str, expected: bool
) -> None:
    assert VersionConstraint.parse(raw).contains(version) is expected


def test_exact_constraint_accepts_identical_non_pep440_versions() -> None:
    constraint = VersionConstraint.parse("[1.0-SNAPSHOT]")

    assert constraint.kind is ConstraintKind.EXACT
    assert constraint.contains("1.0-SNAPSHOT")
    assert not constraint.contains("1.0")


@pytest.mark.parametrize(
    "raw", ["[1.0", "1.0]", "(1.0)", "[]", "[1.0,2.0,3.0]", "[1.0,2.0"]
)
def test_version_constraint_rejects_malformed_strings(raw: str) -> None:
    with pytest.raises(ValueError):
        VersionConstraint.parse(raw)


def test_dependency_declare_and_compatibility() -> None:
    dep = Dependency.declare("g:a:1.0", "g:b", "[2.0]")

    assert dep.from_artifact_version == ArtifactVersion.of("g", "a", "1.0")
    assert dep.to_artifact == Artifact("g", "b")
    assert dep.is_version_compatible("2.0")
    assert not dep.is_version_compatible("2.1")
    assert str(dep) == "g:a:1.0 -> g:b [2.0]"


def test_dependency_without_version_accepts_everything() -> None:
    dep = Dependency(
        from_artifact_version=ArtifactVersion.of("g", "a", "1.0"),
        to_artifact=Artifact("g", "b"),
    )

    assert dep.constraint.kind is ConstraintKind.ANY
    assert dep.is_version_compatible("anything")
    assert str(dep) == "g:a:1.0 -> g:b"


def test_path_node_chain_walks_back_to_start() -> None:
    start = PathNode(Dependency.declare("g:b:2.0", "g:c"))
    middle = PathNode(Dependency.declare("g:a:1.0", "g:b"), parent=start)

    assert start.is_root
    assert not middle.is_root
    assert middle.depth == 2
    assert [str(dep.to_artifact) for dep in middle.chain()] == ["g:c", "g:b"]
    assert middle.requirers() == [
        ArtifactVersion.of("g", "b", "2.0"),
        ArtifactVersion.of("g", "a", "1.0"),
    ]
    assert middle.root_requirer == ArtifactVersion.of("g", "a", "1.0")
