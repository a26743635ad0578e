"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on ``subprocess``
directly — so the supervisor can be driven by a fake in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class ChildProcess(Protocol):
    """Handle to one spawned OS process.

    :class:`subprocess.Popen` satisfies this protocol structurally.
    """

    pid: int

    def wait(self) -> int:
        """Block until the process terminates and return its return code.

        A negative value ``-N`` means the process was killed by signal
        ``N`` (POSIX only).
        """
        ...  # pragma: no cover

    def send_signal(self, sig: int) -> None:
        """Deliver signal *sig* to the process."""
        ...  # pragma: no cover


class ProcessSpawner(Protocol):
    """Contract for process creation backends."""

    def __call__(self, argv: Sequence[str]) -> ChildProcess:
        """Start ``argv[0]`` with arguments ``argv[1:]``.

        The child inherits the parent's stdout and stderr and has no
        stdin.

        Raises
        ------
        OSError
            When the executable is missing or the OS refuses to create
            the process.
        """
        ...  # pragma: no cover
