"""Core / service layer — argument building and process supervision.

Rules
-----
* No ``print()`` calls and no Rich rendering.
* No configuration-file I/O; the record arrives already decoded.
* No imports from ``cli`` or ``infra``.
* Process creation only through an injected :class:`ProcessSpawner`.
"""

from llauncher.core.arguments import build_args
from llauncher.core.models import OptionKind, OptionSpec, SupervisionResult, SupervisorState
from llauncher.core.options import OPTION_GROUPS, OPTIONS
from llauncher.core.protocols import ChildProcess, ProcessSpawner
from llauncher.core.record import ConfigRecord
from llauncher.core.supervisor import ProcessSupervisor, fixed_exit_code, shell_exit_code

__all__: list[str] = [
    "OPTIONS",
    "OPTION_GROUPS",
    "ChildProcess",
    "ConfigRecord",
    "OptionKind",
    "OptionSpec",
    "ProcessSpawner",
    "ProcessSupervisor",
    "SupervisionResult",
    "SupervisorState",
    "build_args",
    "fixed_exit_code",
    "shell_exit_code",
]
