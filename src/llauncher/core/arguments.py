"""Argument builder — turns a :class:`ConfigRecord` into an argument vector.

Guarantees
----------
* Pure: no I/O, no logging, no mutation of the record.
* Deterministic: the output depends only on the record and the option
  table, and follows the table's declaration order.
* Zero values are omitted, so an explicit ``0``, ``""`` or ``False``
  cannot be passed through to the server.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from llauncher.core.models import OptionKind, OptionSpec
from llauncher.core.options import OPTIONS
from llauncher.core.record import ConfigRecord
from llauncher.exceptions import ConfigFieldError

_Renderer = Callable[[str, Any], list[str]]


def _render_flag(flag: str, value: Any) -> list[str]:
    return [flag] if value else []


def _render_string(flag: str, value: Any) -> list[str]:
    return [flag, str(value)]


def _render_integer(flag: str, value: Any) -> list[str]:
    return [flag, str(int(value))]


def _render_float(flag: str, value: Any) -> list[str]:
    # repr() is the shortest string that round-trips to the same float.
    return [flag, repr(float(value))]


def _render_string_list(flag: str, value: Any) -> list[str]:
    tokens: list[str] = []
    for item in value:
        tokens.extend((flag, str(item)))
    return tokens


_RENDERERS: dict[OptionKind, _Renderer] = {
    OptionKind.FLAG: _render_flag,
    OptionKind.STRING: _render_string,
    OptionKind.INTEGER: _render_integer,
    OptionKind.FLOAT: _render_float,
    OptionKind.STRING_LIST: _render_string_list,
}


def build_args(
    record: ConfigRecord,
    options: Sequence[OptionSpec] = OPTIONS,
) -> tuple[str, ...]:
    """Build the ``llama-server`` argument vector for *record*.

    Parameters
    ----------
    record:
        The configuration to render.
    options:
        Option table to walk.  Defaults to the full
        :data:`~llauncher.core.options.OPTIONS` table.

    Returns
    -------
    tuple[str, ...]
        Flag and value tokens in table order, without the executable.

    Raises
    ------
    ConfigFieldError
        If a row of *options* has a kind with no renderer.
    """
    args: list[str] = []
    for spec in options:
        renderer = _RENDERERS.get(spec.kind)
        if renderer is None:
            raise ConfigFieldError(
                f"Unsupported value kind {spec.kind!r} for option '{spec.key}'.",
            )
        value = record.value_of(spec)
        if value == spec.kind.zero:
            continue
        args.extend(renderer(spec.flag, value))
    return tuple(args)
