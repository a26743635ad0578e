"""Custom exception hierarchy for llauncher.

All exceptions that cross layer boundaries must inherit from
:class:`LauncherError`.  Raw ``OSError`` and ``yaml.YAMLError`` must
never propagate beyond the infrastructure layer — they are caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
LauncherError
├── ConfigError
│   ├── ConfigReadError
│   └── ConfigParseError
├── ConfigFieldError
├── SpawnError
├── SupervisorStateError
└── EnvironmentError
"""

from __future__ import annotations


class LauncherError(Exception):
    """Base exception for all llauncher errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    and pick a well-defined exit code.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration document -------------------------------------------------

class ConfigError(LauncherError):
    """Raised when the configuration document cannot be turned into a record."""


class ConfigReadError(ConfigError):
    """Raised when the configuration file cannot be read."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid YAML or a value has the wrong type."""


# --- Argument building --------------------------------------------------------

class ConfigFieldError(LauncherError):
    """Raised when an option has a value kind the argument builder cannot render."""


# --- Process supervision ------------------------------------------------------

class SpawnError(LauncherError):
    """Raised when the target executable cannot be started."""


class SupervisorStateError(LauncherError):
    """Raised when a supervisor is asked to run more than once."""


# --- Environment / tooling ----------------------------------------------------

class EnvironmentError(LauncherError):
    """Raised when a required runtime dependency is not available."""


def append_help_suggestion(hint: str) -> str:
    """Append a pointer to ``llauncher --help`` to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Run 'llauncher --help'"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            f"{marker} for the configuration file format.",
        )
    )
