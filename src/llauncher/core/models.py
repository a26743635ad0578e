"""Domain models for llauncher.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Option descriptors
# ---------------------------------------------------------------------------

class OptionKind(enum.Enum):
    """Closed set of value kinds an option can carry."""

    FLAG = "flag"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    STRING_LIST = "string_list"

    @property
    def zero(self) -> object:
        """The value that means "option not specified" for this kind."""
        return _ZERO_VALUES[self]


_ZERO_VALUES: dict[OptionKind, object] = {
    OptionKind.FLAG: False,
    OptionKind.STRING: "",
    OptionKind.INTEGER: 0,
    OptionKind.FLOAT: 0.0,
    OptionKind.STRING_LIST: (),
}


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One row of the option table."""

    name: str
    """Semantic name used by :class:`~llauncher.core.record.ConfigRecord`."""

    key: str
    """Key of the option in the configuration document."""

    flag: str
    """Flag token rendered on the ``llama-server`` command line."""

    kind: OptionKind
    """Value kind; decides both decoding and rendering."""


# ---------------------------------------------------------------------------
# Supervision
# ---------------------------------------------------------------------------

class SupervisorState(enum.Enum):
    """Lifecycle of a single supervised child process."""

    NOT_STARTED = "not_started"
    SPAWNING = "spawning"
    RUNNING = "running"
    EXITED = "exited"
    SIGNAL_TERMINATED = "signal_terminated"
    SPAWN_FAILED = "spawn_failed"

    @property
    def terminal(self) -> bool:
        return self in (
            SupervisorState.EXITED,
            SupervisorState.SIGNAL_TERMINATED,
            SupervisorState.SPAWN_FAILED,
        )


@dataclass(frozen=True, slots=True)
class SupervisionResult:
    """Outcome of a supervised run once the child has terminated."""

    state: SupervisorState
    """Either :attr:`SupervisorState.EXITED` or :attr:`SupervisorState.SIGNAL_TERMINATED`."""

    exit_code: int
    """Code the launcher itself should exit with."""

    signal: int | None = None
    """Number of the signal that killed the child, if any."""
