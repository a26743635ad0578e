"""Infrastructure: locate the configuration file.

Precedence, highest first: an explicit path (``--config``), the
``LLAMA_CONFIG_PATH`` environment variable, then ``./config.yaml``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

CONFIG_ENV_VAR: str = "LLAMA_CONFIG_PATH"
DEFAULT_CONFIG_PATH: Path = Path("config.yaml")


def resolve_config_path(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Decide which configuration file to load.

    An empty ``LLAMA_CONFIG_PATH`` counts as unset.  The file is not
    opened here; a missing file surfaces later as a
    :class:`~llauncher.exceptions.ConfigReadError`.
    """
    if explicit:
        return Path(explicit)

    env = os.environ if environ is None else environ
    from_env = env.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return DEFAULT_CONFIG_PATH
