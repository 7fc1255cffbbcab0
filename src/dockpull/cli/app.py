"""CLI application entry point and command routing for dockpull.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dockpull.exceptions.DockpullError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core and
  infrastructure layers.
* Informational messages go to stdout, every error to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import shlex
import sys
from typing import NoReturn

from dockpull.cli import exit_codes
from dockpull.cli.console import console, err_console, escape
from dockpull.core.models import Config
from dockpull.core.runtime_client import DEFAULT_RUNTIME
from dockpull.exceptions import ArgumentError, DockpullError
from dockpull.version import __version__

PROG: str = "dockpull"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that reports usage errors as :class:`ArgumentError`.

    argparse would otherwise exit with status 2; routing through the
    error boundary keeps every argument problem on exit code 1.
    """

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message, hint=self.format_usage().strip())


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``dockpull <image>``: pull the image, then run it detached
    * ``dockpull --pull-only <image>``
    * ``dockpull --doctor``: environment diagnostics
    * ``dockpull --version``
    """
    parser = _ArgumentParser(
        prog=PROG,
        description=(
            "Pull a container image and launch it as a detached, "
            "auto-removing container."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check the environment (runtime binary, Python, OS) and exit.",
    )
    parser.add_argument(
        "--pull-only",
        action="store_true",
        help="Only pull the image; do not start a container.",
    )
    parser.add_argument(
        "--runtime",
        default=DEFAULT_RUNTIME,
        metavar="NAME",
        help=f"Container runtime executable (default: {DEFAULT_RUNTIME}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo each runtime command before executing it.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Image reference to pull and run, passed to the runtime as given.",
    )
    return parser


def _usage_hint() -> str:
    return f"Usage: {PROG} <image-reference>"


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _echo_command(args: list[str]) -> None:
    console.print(f"[dim]$ {escape(shlex.join(args))}[/dim]")


def _handle_pull(
    config: Config,
    *,
    runtime: str,
    pull_only: bool,
    verbose: bool,
) -> int:
    """Pull the configured image and, unless *pull_only*, launch it.

    Flow:
    1. Generate a container name and build the runtime client.
    2. Pull the image.
    3. Run it detached with auto-remove.

    A failed run leaves the pulled image in place.
    """
    from dockpull.core.naming import generate_container_name
    from dockpull.core.runtime_client import RuntimeClient
    from dockpull.infra.subprocess_executor import SubprocessExecutor

    image = escape(config.image_reference)
    console.print(f"[bold]Image:[/bold] {image}")

    client = RuntimeClient(
        config,
        generate_container_name(),
        SubprocessExecutor(),
        runtime=runtime,
    )

    if verbose:
        _echo_command(client.pull_args())
    client.pull()
    console.print(f"[bold green]Successfully pulled image:[/bold green] {image}")

    if pull_only:
        return exit_codes.SUCCESS

    if verbose:
        _echo_command(client.run_args())
    result = client.run_detached()

    container_id = result.stdout.strip()
    suffix = f" ({escape(container_id[:12])})" if container_id else ""
    console.print(
        f"[bold green]Started container:[/bold green] "
        f"{escape(client.container_name)}{suffix}"
    )
    return exit_codes.SUCCESS


def _handle_doctor(runtime: str) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from dockpull.cli.doctor import run_doctor

    return run_doctor(runtime)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the dockpull CLI.

    Parameters
    ----------
    argv:
        Explicit argument list (without the program name).  When
        ``None`` (default), ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    DockpullError
        Propagated to :func:`cli`, which renders it.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.doctor:
        return _handle_doctor(args.runtime)

    target: str | None = args.target
    positional = [PROG] if target is None else [PROG, target]
    try:
        config = Config.parse(positional)
    except ArgumentError as exc:
        raise ArgumentError(
            f"Problem parsing arguments: {exc}",
            hint=_usage_hint(),
        ) from exc

    return _handle_pull(
        config,
        runtime=args.runtime,
        pull_only=args.pull_only,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DockpullError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
