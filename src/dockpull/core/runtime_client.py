"""Core runtime client: builds and sequences container runtime commands.

This client delegates process execution to a
:class:`~dockpull.core.protocols.CommandExecutor` injected at
construction time.  It is responsible for:

* Building the ``pull`` / ``run`` argument vectors.
* Delegating execution to the executor.
* Mapping a failed exit status to a typed error carrying stderr.
* Ensuring only :class:`~dockpull.exceptions.DockpullError` subclasses
  escape.

Guarantees
----------
* Pure orchestration; no ``print()``, no direct subprocess use.
* No retries and no timeouts.
"""

from __future__ import annotations

from dockpull.core.models import Config, ExecutionResult
from dockpull.core.protocols import CommandExecutor
from dockpull.exceptions import (
    CommandFailedError,
    DockpullError,
    LaunchFailedError,
    PullFailedError,
    RunFailedError,
)

DEFAULT_RUNTIME: str = "docker"


class RuntimeClient:
    """Stateless client issuing one runtime command per call.

    Parameters
    ----------
    config:
        Validated invocation configuration.
    container_name:
        Name passed to ``run --name``.
    executor:
        Any object satisfying the :class:`CommandExecutor` protocol.
    runtime:
        Runtime executable to invoke (``docker`` by default).
    """

    def __init__(
        self,
        config: Config,
        container_name: str,
        executor: CommandExecutor,
        *,
        runtime: str = DEFAULT_RUNTIME,
    ) -> None:
        self._config: Config = config
        self._container_name: str = container_name
        self._executor: CommandExecutor = executor
        self._runtime: str = runtime

    @property
    def image_reference(self) -> str:
        return self._config.image_reference

    @property
    def container_name(self) -> str:
        return self._container_name

    @property
    def runtime(self) -> str:
        return self._runtime

    # ------------------------------------------------------------------
    # Argument vectors (pure)
    # ------------------------------------------------------------------

    def pull_args(self) -> list[str]:
        """Return ``<runtime> pull <image>``."""
        return [self._runtime, "pull", self.image_reference]

    def run_args(self) -> list[str]:
        """Return ``<runtime> run --name <name> -d -ti --rm <image>``.

        Detached mode, a TTY and auto-remove are requested together and
        handed to the runtime verbatim; whether that combination is
        accepted is the runtime's decision.
        """
        return [
            self._runtime,
            "run",
            "--name",
            self._container_name,
            "-d",
            "-ti",
            "--rm",
            self.image_reference,
        ]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def pull(self) -> ExecutionResult:
        """Pull the configured image.

        Raises
        ------
        PullFailedError
            When the runtime exits with a failure status.
        LaunchFailedError
            When the runtime process cannot be started.
        """
        return self._invoke(
            self.pull_args(),
            PullFailedError,
            f"Failed to pull image {self.image_reference}",
        )

    def run_detached(self) -> ExecutionResult:
        """Launch the configured image as a detached, auto-removing container.

        Raises
        ------
        RunFailedError
            When the runtime exits with a failure status.
        LaunchFailedError
            When the runtime process cannot be started.
        """
        return self._invoke(
            self.run_args(),
            RunFailedError,
            f"Failed to run image {self.image_reference}",
        )

    # ------------------------------------------------------------------
    # Status mapping
    # ------------------------------------------------------------------

    def _invoke(
        self,
        args: list[str],
        failure: type[CommandFailedError],
        message: str,
    ) -> ExecutionResult:
        try:
            result = self._executor.execute(args)
        except DockpullError:
            # Already one of ours; propagate unchanged.
            raise
        except Exception as exc:
            raise LaunchFailedError(
                f"Unexpected error launching {self._runtime}: {exc}",
            ) from exc

        if not result.succeeded:
            stderr = result.stderr.strip()
            raise failure(
                f"{message}: {stderr}" if stderr else message,
                stderr=result.stderr,
                returncode=result.returncode,
            )
        return result
