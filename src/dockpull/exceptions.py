"""Custom exception hierarchy for dockpull.

All exceptions that cross layer boundaries must inherit from
:class:`DockpullError`.  Raw ``OSError`` / ``subprocess`` exceptions
must NEVER propagate beyond the infrastructure layer; they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
DockpullError
├── ArgumentError
└── ContainerRuntimeError
    ├── LaunchFailedError
    └── CommandFailedError
        ├── PullFailedError
        └── RunFailedError
"""

from __future__ import annotations


class DockpullError(Exception):
    """Base exception for all dockpull errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class ArgumentError(DockpullError):
    """Raised when the command-line arguments are missing or malformed."""


# --- Container runtime -----------------------------------------------------

class ContainerRuntimeError(DockpullError):
    """Base class for failures while driving the container runtime."""


class LaunchFailedError(ContainerRuntimeError):
    """Raised when the runtime subprocess could not be started at all."""


class CommandFailedError(ContainerRuntimeError):
    """Raised when the runtime ran but exited with a failure status.

    The captured standard-error text is kept on the exception so the
    underlying cause (unknown image, registry auth, ...) stays visible.
    """

    def __init__(
        self,
        message: str,
        *,
        stderr: str = "",
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.stderr: str = stderr
        self.returncode: int | None = returncode


class PullFailedError(CommandFailedError):
    """Raised when ``<runtime> pull`` exits non-zero."""


class RunFailedError(CommandFailedError):
    """Raised when ``<runtime> run`` exits non-zero."""
