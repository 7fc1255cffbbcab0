"""Core / service layer: pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No subprocess, filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from dockpull.core.models import Config, ExecutionResult
from dockpull.core.naming import CONTAINER_NAME_PREFIX, generate_container_name
from dockpull.core.protocols import CommandExecutor
from dockpull.core.runtime_client import DEFAULT_RUNTIME, RuntimeClient

__all__: list[str] = [
    "CONTAINER_NAME_PREFIX",
    "CommandExecutor",
    "Config",
    "DEFAULT_RUNTIME",
    "ExecutionResult",
    "RuntimeClient",
    "generate_container_name",
]
