"""Infrastructure: container runtime detection and platform guidance.

This module is responsible for locating the runtime binary on the
system PATH and providing platform-specific installation guidance when
it is missing.

Rules
-----
* Detection via :func:`shutil.which` only; no subprocess.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RuntimeStatus:
    """Result of a runtime detection probe.

    Attributes
    ----------
    name : str
        Executable name that was probed (e.g. ``docker``).
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested install commands for the current platform.  Empty
        when the runtime is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_runtime(name: str = "docker") -> RuntimeStatus:
    """Probe the system for the *name* runtime binary.

    Returns a :class:`RuntimeStatus` regardless of whether the binary is
    present; the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)

    if result is not None:
        resolved = Path(result).resolve()
        return RuntimeStatus(
            name=name,
            found=True,
            path=resolved,
            install_commands=(),
        )

    return RuntimeStatus(
        name=name,
        found=False,
        path=None,
        install_commands=platform_install_commands(name),
    )


def install_hint(name: str) -> str:
    """Return a multi-line install hint for the *name* runtime."""
    lines = [f"Install {name} using one of:"]
    lines.extend(f"  {cmd}" for cmd in platform_install_commands(name))
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def platform_install_commands(name: str = "docker") -> tuple[str, ...]:
    """Return install commands for *name* appropriate for the current OS."""
    system = platform.system().lower()
    if name == "podman":
        if system == "windows":
            return ("winget install RedHat.Podman",)
        if system == "linux":
            return (
                "sudo apt install podman",
                "sudo dnf install podman",
                "sudo pacman -S podman",
            )
        if system == "darwin":
            return ("brew install podman",)
        return ("Please install podman from https://podman.io/docs/installation",)

    if system == "windows":
        return ("winget install Docker.DockerDesktop",)
    if system == "linux":
        return (
            "sudo apt install docker.io",
            "sudo dnf install docker-ce",
            "sudo pacman -S docker",
        )
    if system == "darwin":
        return ("brew install --cask docker",)
    return ("Please install Docker from https://docs.docker.com/get-docker/",)
