"""Infrastructure layer — external system integration.

This layer wraps the configuration file, YAML decoding, the ``PATH``
lookup and ``subprocess``.  Every raw ``OSError`` or ``yaml.YAMLError``
is caught here (or by the supervisor for spawn failures) and re-raised
as a :class:`~llauncher.exceptions.LauncherError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from llauncher.infra.config_loader import load_config, parse_config
from llauncher.infra.config_locator import resolve_config_path
from llauncher.infra.process import (
    ServerStatus,
    detect_server,
    popen_spawner,
    resolve_server_executable,
)

__all__: list[str] = [
    "ServerStatus",
    "detect_server",
    "load_config",
    "parse_config",
    "popen_spawner",
    "resolve_config_path",
    "resolve_server_executable",
]
