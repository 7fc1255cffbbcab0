"""Domain models for dockpull.

All models are **frozen** dataclasses, i.e. immutable value objects.  They
carry zero I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from dockpull.exceptions import ArgumentError


# ---------------------------------------------------------------------------
# Invocation configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Config:
    """Validated configuration for a single invocation."""

    image_reference: str
    """Image reference exactly as supplied (registry/repository:tag)."""

    def __post_init__(self) -> None:
        if not self.image_reference:
            raise ArgumentError("image reference must not be empty")

    @classmethod
    def parse(cls, args: Sequence[str]) -> Config:
        """Build a :class:`Config` from a full argument vector.

        ``args[0]`` is the program name and ``args[1]`` the image
        reference.  Trailing elements are ignored and the reference is
        kept verbatim; syntax checks are left to the runtime.

        Raises
        ------
        ArgumentError
            When fewer than two elements are supplied.
        """
        if len(args) < 2:
            raise ArgumentError("not enough arguments")
        return cls(image_reference=args[1])


# ---------------------------------------------------------------------------
# Subprocess outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Captured outcome of one runtime subprocess call."""

    args: tuple[str, ...]
    """Argument vector that was executed."""

    returncode: int
    """Process exit status."""

    stdout: str
    """Captured standard output (decoded, lossy)."""

    stderr: str
    """Captured standard error (decoded, lossy)."""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0
