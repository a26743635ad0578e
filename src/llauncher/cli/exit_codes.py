"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.

A child that exits normally is never mapped: its own code becomes the
launcher's code, so it can collide with any value below.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the server (or command) completed without error."""

GENERAL_ERROR: int = 1
"""A LauncherError without a more specific code was caught."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

ARGUMENT_BUILD_FAILED: int = 70
"""The option table holds a value kind the builder cannot render (EX_SOFTWARE)."""

CONFIG_ERROR: int = 78
"""The configuration file could not be read or decoded (EX_CONFIG)."""

SPAWN_FAILED: int = 127
"""The server executable could not be started.  Follows the shell's "command not found"."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C before the server was started.  POSIX 128 + SIGINT=2."""
