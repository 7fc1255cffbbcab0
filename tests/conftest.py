"""Shared pytest fixtures and configuration for the dockpull test suite.

Guidelines
----------
* No container runtime and no network access in unit tests.
* Process execution must be mocked at the infra boundary.
* Core tests must be pure; no side effects.
* Tests that drive a real runtime carry the ``integration`` marker.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from dockpull.core.models import ExecutionResult


def make_result(
    args: Sequence[str] = ("docker", "pull", "hello-world"),
    *,
    returncode: int = 0,
    stdout: str = "",
    stderr: str = "",
) -> ExecutionResult:
    """Factory with sensible defaults for concise tests."""
    return ExecutionResult(
        args=tuple(args),
        returncode=returncode,
        stdout=stdout,
        stderr=stderr,
    )


class RecordingExecutor:
    """In-memory executor that records calls and replays queued results."""

    def __init__(self, *results: ExecutionResult) -> None:
        self.calls: list[list[str]] = []
        self._results = list(results)

    def execute(self, args: Sequence[str]) -> ExecutionResult:
        self.calls.append(list(args))
        if self._results:
            queued = self._results.pop(0)
            return ExecutionResult(
                args=tuple(args),
                returncode=queued.returncode,
                stdout=queued.stdout,
                stderr=queued.stderr,
            )
        return make_result(args)


@pytest.fixture
def executor() -> RecordingExecutor:
    """Executor whose every call succeeds with empty output."""
    return RecordingExecutor()
