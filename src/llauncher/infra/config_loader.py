"""YAML-backed decoder producing :class:`~llauncher.core.record.ConfigRecord`.

This module is the **only** place in the codebase that parses YAML.
``yaml.YAMLError`` and ``OSError`` are caught here and re-raised as
:class:`~llauncher.exceptions.ConfigParseError` and
:class:`~llauncher.exceptions.ConfigReadError` respectively.

Decoding rules
--------------
* Keys are the option keys of the table (``model``, ``n-ctx``, ...).
  Unknown keys, including nested sections, are ignored.
* ``null`` values and an empty document mean "not specified".
* Flag, integer and float options take the resolved YAML value.
* String and string-list options take the scalar text exactly as it
  appears in the file: ``0xFF``, ``0123``, ``3.10`` and ``yes`` reach the
  server unchanged.
* Anything that does not fit the option's kind is a
  :class:`ConfigParseError`.  No semantic validation happens here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from llauncher.core.models import OptionKind, OptionSpec
from llauncher.core.options import OPTIONS_BY_KEY
from llauncher.core.record import ConfigRecord
from llauncher.exceptions import ConfigParseError, ConfigReadError, append_help_suggestion

logger = logging.getLogger(__name__)

_NULL_TAG = "tag:yaml.org,2002:null"


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------

class _Mismatch(Exception):
    """Internal signal that a value does not fit the option kind."""


def _coerce_flag(raw: Any, _node: yaml.Node) -> bool:
    if isinstance(raw, bool):
        return raw
    raise _Mismatch("a boolean")


def _coerce_integer(raw: Any, _node: yaml.Node) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    raise _Mismatch("an integer")


def _coerce_float(raw: Any, _node: yaml.Node) -> float:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    raise _Mismatch("a number")


def _scalar_text(node: yaml.Node) -> str:
    if isinstance(node, yaml.ScalarNode) and node.tag != _NULL_TAG:
        return node.value
    raise _Mismatch("a string")


def _coerce_string(_raw: Any, node: yaml.Node) -> str:
    return _scalar_text(node)


def _coerce_string_list(_raw: Any, node: yaml.Node) -> tuple[str, ...]:
    if not isinstance(node, yaml.SequenceNode):
        raise _Mismatch("a list of strings")
    try:
        return tuple(_scalar_text(item) for item in node.value)
    except _Mismatch:
        raise _Mismatch("a list of strings") from None


_COERCERS: dict[OptionKind, Callable[[Any, yaml.Node], Any]] = {
    OptionKind.FLAG: _coerce_flag,
    OptionKind.INTEGER: _coerce_integer,
    OptionKind.FLOAT: _coerce_float,
    OptionKind.STRING: _coerce_string,
    OptionKind.STRING_LIST: _coerce_string_list,
}


def _coerce(spec: OptionSpec, raw: Any, node: yaml.Node, source: str) -> Any:
    try:
        return _COERCERS[spec.kind](raw, node)
    except _Mismatch as exc:
        raise ConfigParseError(
            f"Option '{spec.key}' in {source} must be {exc}, "
            f"got {type(raw).__name__} {raw!r}.",
            hint=append_help_suggestion(f"Fix the value of '{spec.key}'."),
        ) from None


def _load(text: str) -> tuple[Any, dict[str, yaml.Node]]:
    """Return the constructed document and the value node of each top-level key.

    Both come from one composed tree, so a key's typed value and its
    source text always agree.  Merge keys (``<<``) are flattened first;
    the last duplicate key wins, as in the constructed mapping.
    """
    loader = yaml.SafeLoader(text)
    try:
        root = loader.get_single_node()
        if root is None:
            return None, {}
        nodes: dict[str, yaml.Node] = {}
        if isinstance(root, yaml.MappingNode):
            loader.flatten_mapping(root)
            for key_node, value_node in root.value:
                if isinstance(key_node, yaml.ScalarNode):
                    nodes[key_node.value] = value_node
        return loader.construct_document(root), nodes
    finally:
        loader.dispose()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_config(text: str, *, source: str = "<string>") -> ConfigRecord:
    """Decode YAML *text* into a :class:`ConfigRecord`.

    Parameters
    ----------
    text:
        The YAML document.
    source:
        Name used in error messages (usually the file path).

    Raises
    ------
    ConfigParseError
        When the YAML is malformed, the top level is not a mapping, or a
        value does not match its option's kind.
    """
    try:
        document, nodes = _load(text)
    except yaml.YAMLError as exc:
        raise ConfigParseError(
            f"Invalid YAML in {source}: {exc}",
            hint=append_help_suggestion("Check indentation and quoting."),
        ) from exc

    if document is None:
        return ConfigRecord()

    if not isinstance(document, dict):
        raise ConfigParseError(
            f"Configuration in {source} must be a mapping of option keys, "
            f"got {type(document).__name__}.",
            hint=append_help_suggestion("Write one 'key: value' pair per line."),
        )

    values: dict[str, Any] = {}
    for key, raw in document.items():
        spec = OPTIONS_BY_KEY.get(key) if isinstance(key, str) else None
        if spec is None:
            logger.debug("Ignoring unknown configuration key %r", key)
            continue
        if raw is None:
            continue
        values[spec.name] = _coerce(spec, raw, nodes[key], source)

    return ConfigRecord(values)


def load_config(path: Path) -> ConfigRecord:
    """Read and decode the configuration file at *path*.

    Raises
    ------
    ConfigReadError
        When the file cannot be read or is not valid UTF-8.
    ConfigParseError
        See :func:`parse_config`.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(
            f"Could not read configuration file {path}: {exc.strerror or exc}",
            hint=append_help_suggestion(
                "Pass --config FILE or set LLAMA_CONFIG_PATH.",
            ),
        ) from exc
    except UnicodeDecodeError as exc:
        raise ConfigReadError(
            f"Configuration file {path} is not valid UTF-8.",
        ) from exc

    return parse_config(text, source=str(path))
