"""Human-readable rendering of the command line for ``--debug``.

Pure string transforms — the caller decides where the text goes.
"""

from __future__ import annotations

from collections.abc import Sequence

_CONTINUATION = " \\\n    "


def contains_space(token: str) -> bool:
    """Return True if *token* holds any whitespace (space, tab, newline, ...)."""
    return any(char.isspace() for char in token)


def _display_token(token: str) -> str:
    return f'"{token}"' if contains_space(token) else token


def format_args_for_display(args: Sequence[str]) -> str:
    """Lay *args* out one flag per line, shell-continuation style.

    Each token starting with ``--`` opens a new line; the values that
    follow it stay on that line.  Tokens containing whitespace are
    wrapped in double quotes; nothing else is escaped.

    ``["--model", "/m.gguf", "--threads", "4"]`` becomes::

        --model /m.gguf \\
            --threads 4
    """
    lines: list[list[str]] = []
    for token in args:
        if token.startswith("--") or not lines:
            lines.append([])
        lines[-1].append(_display_token(token))
    return _CONTINUATION.join(" ".join(line) for line in lines)


def format_command(executable: str, args: Sequence[str]) -> str:
    """Render the full command, executable first."""
    rendered = format_args_for_display(args)
    if not rendered:
        return _display_token(executable)
    return f"{_display_token(executable)}{_CONTINUATION}{rendered}"
