"""DDEV and Docker command definitions."""

from wpddev.ddev.catalog import (
    DDEV_VERSION,
    DOCKER_INFO,
    DOCKER_START_COMMANDS,
    LAUNCH,
    SETUP_COMMANDS,
    CommandSpec,
    import_db_command,
)

__all__ = [
    "CommandSpec",
    "DDEV_VERSION",
    "DOCKER_INFO",
    "DOCKER_START_COMMANDS",
    "LAUNCH",
    "SETUP_COMMANDS",
    "import_db_command",
]
