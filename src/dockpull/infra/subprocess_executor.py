"""subprocess-backed implementation of :class:`~dockpull.core.protocols.CommandExecutor`.

This module is the **only** place in the codebase that spawns
processes.  ``OSError`` raised while starting a process is caught here
and re-raised as :class:`~dockpull.exceptions.LaunchFailedError`;
nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from dockpull.core.models import ExecutionResult
from dockpull.exceptions import LaunchFailedError
from dockpull.infra.runtime_detector import install_hint


class SubprocessExecutor:
    """Concrete :class:`CommandExecutor` backed by :func:`subprocess.run`.

    Usage::

        executor = SubprocessExecutor()
        result = executor.execute(["docker", "pull", "hello-world"])

    Calls block until the child exits; there is no timeout.
    """

    def execute(self, args: Sequence[str]) -> ExecutionResult:
        """Run *args* and capture stdout, stderr and the exit status.

        Raises
        ------
        LaunchFailedError
            When the executable is missing, not permitted, or the OS
            otherwise refuses to start it.
        """
        argv = list(args)
        if not argv:
            raise LaunchFailedError("No command given to execute.")
        program = argv[0]

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise LaunchFailedError(
                f"{program} executable not found: {exc}",
                hint=install_hint(program),
            ) from exc
        except PermissionError as exc:
            raise LaunchFailedError(
                f"Permission denied launching {program}: {exc}",
                hint=f"Check that your user is allowed to run {program}.",
            ) from exc
        except OSError as exc:
            raise LaunchFailedError(
                f"Could not launch {program}: {exc}",
            ) from exc

        return ExecutionResult(
            args=tuple(argv),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
