"""llauncher — YAML-configured launcher for llama-server.

Turns a configuration document into a ``llama-server`` command line and
supervises the resulting child process.
"""

from llauncher.version import __version__

__all__: list[str] = ["__version__"]
