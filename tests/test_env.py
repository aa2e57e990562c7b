from __future__ import annotations

import os
from pathlib import Path

import pytest

from strictdeps.config import DEFAULT_TRACE_GROUPS
from strictdeps.utils import env


def test_load_dotenv_populates_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("STRICTDEPS_FAIL_ON_CONFLICT=1\n# comment\nEMPTY=\n")

    monkeypatch.chdir(tmp_path)
    # Register both keys so monkeypatch removes them after the test.
    for key in ("STRICTDEPS_FAIL_ON_CONFLICT", "EMPTY"):
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)

    env.load_dotenv()

    assert os.environ["STRICTDEPS_FAIL_ON_CONFLICT"] == "1"
    assert env.fail_on_conflict() is True


def test_load_dotenv_does_not_override_and_is_idempotent(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("STRICTDEPS_TRACE_GROUPS=from-file\n")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STRICTDEPS_TRACE_GROUPS", "existing")

    env.load_dotenv()
    dotenv.write_text("STRICTDEPS_TRACE_GROUPS=changed\n")
    monkeypatch.delenv("STRICTDEPS_TRACE_GROUPS")
    env.load_dotenv()  # Second call should be a no-op.

    assert "STRICTDEPS_TRACE_GROUPS" not in os.environ


def test_parse_line_helpers() -> None:
    assert env._parse_line("KEY=value") == ("KEY", "value")
    assert env._parse_line("   # comment") is None
    assert env._parse_line("   ") is None
    assert env._parse_line("INVALID") is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, False), ("", False), ("0", False), ("no", False),
     ("1", True), ("TRUE", True), (" yes ", True), ("on", True)],
)
def test_truthy(value: str, expected: bool) -> None:
    assert env._truthy(value) is expected


def test_fail_on_conflict_defaults_to_false() -> None:
    assert env.fail_on_conflict() is False


def test_trace_groups_default_and_override(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    assert env.trace_groups() == DEFAULT_TRACE_GROUPS

    monkeypatch.setenv("STRICTDEPS_TRACE_GROUPS", "com.a, com.b,,")
    assert env.trace_groups() == ("com.a", "com.b")

    monkeypatch.setenv("STRICTDEPS_TRACE_GROUPS", "")
    assert env.trace_groups() == ()
