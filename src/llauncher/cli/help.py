"""Configuration reference appended to ``llauncher --help``.

Rendered from the option table so the help never drifts from what the
argument builder actually accepts.
"""

from __future__ import annotations

from llauncher.core.models import OptionKind, OptionSpec
from llauncher.core.options import OPTION_GROUPS
from llauncher.infra.config_locator import CONFIG_ENV_VAR
from llauncher.infra.process import SERVER_ENV_VAR

_PLACEHOLDERS: dict[OptionKind, str] = {
    OptionKind.FLAG: "true",
    OptionKind.STRING: "<text>",
    OptionKind.INTEGER: "<int>",
    OptionKind.FLOAT: "<float>",
    OptionKind.STRING_LIST: "[<text>, ...]",
}


def _option_line(spec: OptionSpec) -> str:
    placeholder = _PLACEHOLDERS.get(spec.kind, "<value>")
    return f"  {spec.key + ':':<26}{placeholder:<16}# {spec.flag}"


def render_config_reference() -> str:
    """Return the plain-text environment and configuration-file reference."""
    lines = [
        "environment variables:",
        f"  {CONFIG_ENV_VAR:<20}YAML configuration file (overridden by --config)",
        f"  {SERVER_ENV_VAR:<20}server executable (overridden by --server)",
        "",
        "configuration file (YAML), one key per llama-server option:",
    ]
    for title, specs in OPTION_GROUPS:
        lines.append("")
        lines.append(f"  # {title}")
        lines.extend(_option_line(spec) for spec in specs)
    lines.extend(
        (
            "",
            "Unset options, and options set to 0, \"\", false or [], are not passed.",
        )
    )
    return "\n".join(lines)
