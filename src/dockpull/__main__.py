"""Allow ``python -m dockpull`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m dockpull`` behaves identically to the ``dockpull``
console script.
"""

from __future__ import annotations

from dockpull.cli.app import cli

if __name__ == "__main__":
    cli()
