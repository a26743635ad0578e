"""``llauncher doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can launch ``llama-server``.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  It only collects and displays
diagnostic data; nothing is launched.
"""

from __future__ import annotations

import platform
import sys

from llauncher.cli import exit_codes
from llauncher.cli.log import console
from llauncher.infra.config_locator import resolve_config_path
from llauncher.infra.process import detect_server, resolve_server_executable
from llauncher.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _pyyaml_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the PyYAML row."""
    try:
        import yaml
    except ImportError:
        return "PyYAML", "NOT INSTALLED", "[red]FAIL[/red]"
    return "PyYAML", getattr(yaml, "__version__", "unknown"), "[green]OK[/green]"


def _server_check(executable: str | None = None) -> tuple[str, str, str]:
    """Return (label, value, status) for the server executable row."""
    status_obj = detect_server(resolve_server_executable(executable))
    if status_obj.found:
        return "server", str(status_obj.path), "[green]OK[/green]"
    return "server", f"{status_obj.executable} not found", "[red]FAIL[/red]"


def _config_check(config: str | None = None) -> tuple[str, str, str]:
    """Return (label, value, status) for the configuration file row."""
    path = resolve_config_path(config)
    if path.is_file():
        return "config", str(path), "[green]OK[/green]"
    return "config", f"{path} (missing)", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    if system_raw == "Windows":
        return "OS", value, "[yellow]WARN (no signal relay)[/yellow]"
    return "OS", value, "[green]OK[/green]"


def _llauncher_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the llauncher version row."""
    return "llauncher", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nllauncher doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(*, config: str | None = None, server: str | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Parameters
    ----------
    config:
        Explicit ``--config`` value, if any.
    server:
        Explicit ``--server`` value, if any.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _llauncher_version_check(),
        _python_version_check(),
        _pyyaml_version_check(),
        _server_check(server),
        _config_check(config),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print(
            "Some checks failed." if has_failure else "All checks passed.",
            file=sys.stderr,
        )
        return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS

    table = Table(
        title="llauncher doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
