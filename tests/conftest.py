"""Shared pytest fixtures and configuration for the llauncher test suite.

Guidelines
----------
* No internet access in any test.
* The real ``llama-server`` is never started; child processes are
  either fakes or short-lived ``sys.executable -c`` scripts.
* Core tests must be pure — no side effects.
* Tests must not depend on the user's environment variables.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Hide launcher environment variables and run from an empty directory."""
    monkeypatch.delenv("LLAMA_CONFIG_PATH", raising=False)
    monkeypatch.delenv("LLAMA_SERVER_BIN", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing YAML text to a fresh file under *tmp_path*."""
    counter = {"n": 0}

    def _write(text: str) -> Path:
        counter["n"] += 1
        path = tmp_path / f"config-{counter['n']}.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
