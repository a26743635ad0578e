"""Infrastructure: target executable resolution and process creation.

Rules
-----
* Detection via :func:`shutil.which` only — the server is never probed
  by running it.
* :func:`popen_spawner` is the production
  :class:`~llauncher.core.protocols.ProcessSpawner`; it is the only
  place that calls :class:`subprocess.Popen`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SERVER: str = "llama-server"
SERVER_ENV_VAR: str = "LLAMA_SERVER_BIN"


# ---------------------------------------------------------------------------
# Executable resolution
# ---------------------------------------------------------------------------

def resolve_server_executable(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the executable to launch: ``--server``, ``$LLAMA_SERVER_BIN`` or ``llama-server``."""
    if explicit:
        return explicit
    env = os.environ if environ is None else environ
    return env.get(SERVER_ENV_VAR) or DEFAULT_SERVER


@dataclass(frozen=True, slots=True)
class ServerStatus:
    """Result of probing for the server executable.

    Attributes
    ----------
    executable : str
        The name or path that was probed.
    found : bool
        Whether it resolves to an executable file.
    path : Path | None
        Resolved absolute path, or ``None``.
    """

    executable: str
    found: bool
    path: Path | None


def detect_server(executable: str) -> ServerStatus:
    """Probe ``PATH`` (or the given path) for *executable*."""
    result = shutil.which(executable)
    if result is None:
        return ServerStatus(executable=executable, found=False, path=None)
    return ServerStatus(executable=executable, found=True, path=Path(result).resolve())


# ---------------------------------------------------------------------------
# Process creation
# ---------------------------------------------------------------------------

def popen_spawner(argv: Sequence[str]) -> subprocess.Popen[bytes]:
    """Start *argv* with inherited stdout/stderr and stdin closed.

    Raises
    ------
    OSError
        Propagated from :class:`subprocess.Popen` (missing executable,
        permission denied, ...); the supervisor maps it to
        :class:`~llauncher.exceptions.SpawnError`.
    """
    return subprocess.Popen(list(argv), stdin=subprocess.DEVNULL)
