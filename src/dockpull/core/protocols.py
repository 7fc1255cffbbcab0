"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from dockpull.core.models import ExecutionResult


class CommandExecutor(Protocol):
    """Contract for running an external command to completion.

    Any object that implements :meth:`execute` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def execute(self, args: Sequence[str]) -> ExecutionResult:
        """Run *args* synchronously and return the captured outcome.

        A non-zero exit status is NOT an error at this level; it is
        reported through :attr:`ExecutionResult.returncode`.

        Raises
        ------
        LaunchFailedError
            When the process cannot be started (missing binary,
            permission denied, ...).
        """
        ...  # pragma: no cover
