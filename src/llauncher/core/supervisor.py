"""Process supervisor — spawn, signal relay, wait and exit-code mapping.

The supervisor owns exactly one child process for its whole lifetime.
Once the child is spawned two things happen concurrently:

* the calling (main) thread blocks in :meth:`ChildProcess.wait`, and
* SIGINT / SIGTERM delivered to the launcher are forwarded unchanged to
  the child by temporary signal handlers.

The child handle is assigned once, before the handlers are installed,
and never reassigned, so the two paths need no lock.  There is no
timeout and no retry: one spawn attempt per supervisor.

The spawn function is injected at construction time so tests can
substitute a fake without touching process-wide state.
"""

from __future__ import annotations

import logging
import signal
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from types import FrameType

from llauncher.core.models import SupervisionResult, SupervisorState
from llauncher.core.protocols import ChildProcess, ProcessSpawner
from llauncher.exceptions import SpawnError, SupervisorStateError

logger = logging.getLogger(__name__)

SignalExitPolicy = Callable[[int], int]
"""Maps the number of the signal that killed the child to an exit code."""

RELAYED_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


# ---------------------------------------------------------------------------
# Signal exit policies
# ---------------------------------------------------------------------------

def shell_exit_code(signum: int) -> int:
    """Shell convention: a child killed by signal N exits with ``128 + N``."""
    return 128 + signum


def fixed_exit_code(code: int) -> SignalExitPolicy:
    """Return a policy that reports *code* whatever the signal was."""

    def policy(_signum: int) -> int:
        return code

    return policy


def signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


# ---------------------------------------------------------------------------
# Supervisor
# ---------------------------------------------------------------------------

class ProcessSupervisor:
    """Runs one child process to completion.

    Parameters
    ----------
    spawner:
        Any object satisfying the :class:`ProcessSpawner` protocol.
    signal_exit_policy:
        Decides the exit code when the child is killed by a signal.
        Defaults to :func:`shell_exit_code`.
    relay_signals:
        Signals forwarded from the launcher to the child.
    """

    def __init__(
        self,
        spawner: ProcessSpawner,
        *,
        signal_exit_policy: SignalExitPolicy = shell_exit_code,
        relay_signals: Sequence[int] = RELAYED_SIGNALS,
    ) -> None:
        self._spawner: ProcessSpawner = spawner
        self._signal_exit_policy: SignalExitPolicy = signal_exit_policy
        self._relay_signals: tuple[int, ...] = tuple(relay_signals)
        self._state: SupervisorState = SupervisorState.NOT_STARTED
        self._process: ChildProcess | None = None

    @property
    def state(self) -> SupervisorState:
        return self._state

    @property
    def process(self) -> ChildProcess | None:
        """The child handle, once spawned."""
        return self._process

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, executable: str, args: Sequence[str]) -> SupervisionResult:
        """Spawn *executable* with *args*, wait for it and map its status.

        Raises
        ------
        SpawnError
            When the process cannot be created.  No retry is attempted.
        SupervisorStateError
            When this supervisor has already been used.
        """
        if self._state is not SupervisorState.NOT_STARTED:
            raise SupervisorStateError(
                f"Supervisor already used (state: {self._state.value}).",
            )

        process = self._spawn([executable, *args])
        with self._relay(process):
            returncode = process.wait()
        return self._finish(executable, returncode)

    # ------------------------------------------------------------------
    # Lifecycle steps
    # ------------------------------------------------------------------

    def _spawn(self, argv: list[str]) -> ChildProcess:
        self._state = SupervisorState.SPAWNING
        try:
            process = self._spawner(argv)
        except OSError as exc:
            self._state = SupervisorState.SPAWN_FAILED
            raise SpawnError(
                f"Failed to start {argv[0]}: {exc.strerror or exc}",
                hint="Check that the executable exists and is on PATH.",
            ) from exc

        self._process = process
        self._state = SupervisorState.RUNNING
        logger.info("Started %s (pid %d)", argv[0], process.pid)
        return process

    @contextmanager
    def _relay(self, process: ChildProcess) -> Iterator[None]:
        """Forward relayed signals to *process* until the block exits."""
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on the main thread; signals will not be relayed.")
            yield
            return

        def forward(signum: int, _frame: FrameType | None) -> None:
            logger.info(
                "Received %s, forwarding to pid %d",
                signal_name(signum),
                process.pid,
            )
            process.send_signal(signum)

        previous = {sig: signal.signal(sig, forward) for sig in self._relay_signals}
        try:
            yield
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, signal.SIG_DFL if handler is None else handler)

    def _finish(self, executable: str, returncode: int) -> SupervisionResult:
        if returncode < 0:
            signum = -returncode
            exit_code = self._signal_exit_policy(signum)
            self._state = SupervisorState.SIGNAL_TERMINATED
            logger.warning(
                "%s was terminated by %s; exiting with status %d",
                executable,
                signal_name(signum),
                exit_code,
            )
            return SupervisionResult(self._state, exit_code, signum)

        self._state = SupervisorState.EXITED
        if returncode == 0:
            logger.info("%s exited successfully.", executable)
        else:
            logger.info("%s exited with status %d", executable, returncode)
        return SupervisionResult(self._state, returncode)
