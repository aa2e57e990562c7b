"""Shared fixtures for the strictdeps test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from strictdeps.utils import env


@pytest.fixture(autouse=True)
def _isolated_runtime_env(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path_factory: pytest.TempPathFactory,
) -> None:
    """Keep tests independent of the developer's shell and .env file."""

    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    monkeypatch.setattr(env, "_ENV_LOADED", False)
    for key in (
        "STRICTDEPS_FAIL_ON_CONFLICT",
        "STRICTDEPS_TRACE_GROUPS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    log_dir = tmp_path_factory.mktemp("logs")
    monkeypatch.setenv("LOG_FILE", str(Path(log_dir) / "strictdeps.log"))
