"""``dockpull --doctor``: environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies dockpull's requirements.

This module lives in the CLI layer; it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from dockpull.cli import exit_codes
from dockpull.cli.console import console
from dockpull.core.runtime_client import DEFAULT_RUNTIME
from dockpull.infra.runtime_detector import RuntimeStatus, detect_runtime
from dockpull.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _runtime_check(status_obj: RuntimeStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the container runtime row."""
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return status_obj.name, path_str, "[green]OK[/green]"
    return status_obj.name, "not found", "[red]FAIL[/red]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _dockpull_version_check() -> tuple[str, str, str]:
    return "dockpull", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ndockpull doctor")
    print("=" * 56)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}")
    print("-" * 56)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}")
    print()


def _print_rich_doctor_table(table_class: type, checks: list[tuple[str, str, str]]) -> None:
    table = table_class(
        title="dockpull doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)

    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(runtime: str = DEFAULT_RUNTIME) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    runtime_status = detect_runtime(runtime)
    checks = [
        _dockpull_version_check(),
        _python_version_check(),
        _runtime_check(runtime_status),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        Table = None

    if Table is not None:
        _print_rich_doctor_table(Table, checks)
    else:
        _print_plain_doctor_table(checks)

    # Install guidance when the runtime is missing.
    if not runtime_status.found and runtime_status.install_commands:
        console.print(f"{runtime} is not installed.")
        console.print("Install using one of the following commands:\n")
        for cmd in runtime_status.install_commands:
            console.print(f"  {cmd}")
        console.print()

    if has_failure:
        console.print("Some checks failed.")
        return exit_codes.GENERAL_ERROR

    console.print("All checks passed.")
    return exit_codes.SUCCESS
