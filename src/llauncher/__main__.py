"""Allow ``python -m llauncher`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m llauncher`` behaves identically to the ``llauncher``
console script.
"""

from __future__ import annotations

from llauncher.cli.app import cli

if __name__ == "__main__":
    cli()
