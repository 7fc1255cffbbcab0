"""dockpull: pull a container image and launch it detached.

A thin layered wrapper around an external container runtime CLI.
"""

from dockpull.version import __version__

__all__: list[str] = ["__version__"]
