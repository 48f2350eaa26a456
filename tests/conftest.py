"""Shared pytest fixtures for ci_group tests."""

from __future__ import annotations

import io

import pytest

from ci_group.config import (
    AZURE_PIPELINES_VAR,
    DIALECT_OVERRIDE_VAR,
    GITHUB_ACTIONS_VAR,
    PLAIN_HEADERS_VAR,
)

CI_VARS = (
    GITHUB_ACTIONS_VAR,
    AZURE_PIPELINES_VAR,
    DIALECT_OVERRIDE_VAR,
    PLAIN_HEADERS_VAR,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test as if outside CI, whatever runner executes the suite."""
    for name in CI_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def github(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(GITHUB_ACTIONS_VAR, "true")


@pytest.fixture
def azure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(AZURE_PIPELINES_VAR, "True")


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()
