"""Shared fixtures."""

import sys
from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
from pytest import MonkeyPatch

from projectversion import BuildEnvironment
from projectversion.environment import BRANCH_ENV_VAR, CI_ENV_VAR, COMMIT_ENV_VAR


@pytest.fixture(autouse=True)
def developer_env(monkeypatch: MonkeyPatch) -> None:
    """Run every test as a developer build with no git signals."""
    for name in (CI_ENV_VAR, BRANCH_ENV_VAR, COMMIT_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ci_env(monkeypatch: MonkeyPatch) -> None:
    """Set the process environment up as a CI build of master."""
    monkeypatch.setenv(CI_ENV_VAR, "true")
    monkeypatch.setenv(BRANCH_ENV_VAR, "master")
    monkeypatch.setenv(COMMIT_ENV_VAR, "a5b7f46")


@pytest.fixture
def ci_environment() -> BuildEnvironment:
    """An injected CI build environment."""
    return BuildEnvironment(ci="true", git_branch="master", git_commit="a5b7f46")


@pytest.fixture
def developer_environment() -> BuildEnvironment:
    """An injected developer build environment."""
    return BuildEnvironment()


@pytest.fixture
def built_at() -> datetime:
    """A fixed build time: 2024-05-23T00:02:36.680Z."""
    return datetime(2024, 5, 23, 0, 2, 36, 680000, tzinfo=UTC)


@pytest.fixture
def int_digit_limit() -> Iterator[int]:
    """Apply the default integer string conversion limit for the test."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
