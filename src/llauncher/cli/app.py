"""CLI application entry point and command routing for llauncher.

This module is the **sole error boundary** for the entire application.
It catches :class:`~llauncher.exceptions.LauncherError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* stdout belongs to ``llama-server``; the launcher writes to stderr only.
* This module is the only place that translates between the domain world
  and the OS process exit code.  A server that ran to completion hands
  its own exit code straight through.
"""

from __future__ import annotations

import argparse
import logging
import sys

from llauncher.cli import exit_codes
from llauncher.cli.help import render_config_reference
from llauncher.cli.log import configure_logging, console
from llauncher.exceptions import (
    ConfigError,
    ConfigFieldError,
    LauncherError,
    SpawnError,
)
from llauncher.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``llauncher [--config FILE] [--server PATH] [--debug]`` — launch
    * ``llauncher doctor``  — environment diagnostics
    * ``llauncher --version``
    """
    parser = argparse.ArgumentParser(
        prog="llauncher",
        description="Launch llama-server from a YAML configuration file.",
        epilog=render_config_reference(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        default=None,
        help="YAML configuration file (default: $LLAMA_CONFIG_PATH or ./config.yaml).",
    )
    parser.add_argument(
        "--server",
        metavar="PATH",
        default=None,
        help="Server executable (default: $LLAMA_SERVER_BIN or llama-server on PATH).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug output, including the full server command line.",
    )
    parser.add_argument(
        "--signal-exit-code",
        metavar="N",
        type=int,
        default=None,
        help="Exit with N when the server is killed by a signal (default: 128 + signal).",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=["doctor"],
        help="'doctor' to run diagnostics instead of launching.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_launch(args: argparse.Namespace) -> int:
    """Load the configuration, build the command line and supervise the server.

    Flow:
    1. Resolve and decode the configuration file.
    2. Build the argument vector from the record.
    3. Resolve the server executable.
    4. Spawn it and wait, relaying SIGINT/SIGTERM.
    """
    from llauncher.cli.display import format_command
    from llauncher.core.arguments import build_args
    from llauncher.core.supervisor import ProcessSupervisor, fixed_exit_code, shell_exit_code
    from llauncher.infra.config_loader import load_config
    from llauncher.infra.config_locator import resolve_config_path
    from llauncher.infra.process import popen_spawner, resolve_server_executable

    config_path = resolve_config_path(args.config)
    logger.info("Loading configuration from: %s", config_path)
    record = load_config(config_path)
    logger.debug(
        "Configured options: %s",
        ", ".join(spec.key for spec, _ in record.specified()) or "(none)",
    )

    server_args = build_args(record)
    executable = resolve_server_executable(args.server)
    logger.debug("Server command line:\n%s", format_command(executable, server_args))

    policy = (
        shell_exit_code
        if args.signal_exit_code is None
        else fixed_exit_code(args.signal_exit_code)
    )
    supervisor = ProcessSupervisor(popen_spawner, signal_exit_policy=policy)
    result = supervisor.run(executable, server_args)
    return result.exit_code


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from llauncher.cli.doctor import run_doctor

    return run_doctor(config=args.config, server=args.server)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the llauncher CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code: the server's own code after a launch.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(debug=args.debug)

    if args.command == "doctor":
        return _handle_doctor(args)

    return _handle_launch(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def exit_code_for(exc: LauncherError) -> int:
    """Map a launcher failure to its reserved exit code."""
    if isinstance(exc, ConfigError):
        return exit_codes.CONFIG_ERROR
    if isinstance(exc, ConfigFieldError):
        return exit_codes.ARGUMENT_BUILD_FAILED
    if isinstance(exc, SpawnError):
        return exit_codes.SPAWN_FAILED
    return exit_codes.GENERAL_ERROR


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LauncherError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_code_for(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
