"""Infrastructure layer: external system integration.

This layer wraps all interaction with the operating system and the
container runtime binary.  Every raw ``OSError`` must be caught here and
re-raised as a :class:`~dockpull.exceptions.DockpullError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from dockpull.infra.runtime_detector import RuntimeStatus, detect_runtime, install_hint
from dockpull.infra.subprocess_executor import SubprocessExecutor

__all__: list[str] = [
    "RuntimeStatus",
    "SubprocessExecutor",
    "detect_runtime",
    "install_hint",
]
