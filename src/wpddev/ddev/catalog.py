"""Fixed command catalog for setting up a WordPress project with DDEV.

The setup sequence is data, not code: an ordered tuple of immutable
records that the workflow walks one entry at a time.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from wpddev.core.platform import OSType


class CommandSpec(BaseModel):
    """One external command the wizard may run."""

    model_config = ConfigDict(frozen=True)

    name: str
    program: str
    args: tuple[str, ...] = ()
    description: str

    @property
    def command_line(self) -> str:
        return " ".join((self.program, *self.args))


SETUP_COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name="config",
        program="ddev",
        args=("config", "--project-type=wordpress"),
        description="Configuring DDEV for WordPress",
    ),
    CommandSpec(
        name="start",
        program="ddev",
        args=("start",),
        description="Starting DDEV containers",
    ),
    CommandSpec(
        name="download",
        program="ddev",
        args=("wp", "core", "download"),
        description="Downloading WordPress core files",
    ),
)

DOCKER_INFO = CommandSpec(
    name="docker-info",
    program="docker",
    args=("info",),
    description="Checking Docker status",
)

DDEV_VERSION = CommandSpec(
    name="ddev-version",
    program="ddev",
    args=("--version",),
    description="Checking DDEV installation",
)

LAUNCH = CommandSpec(
    name="launch",
    program="ddev",
    args=("launch",),
    description="Launching project",
)

# Shell command lines that bring up Docker Desktop. Platforms missing
# here cannot be auto-started.
DOCKER_START_COMMANDS: dict[OSType, str] = {
    OSType.MACOS: "open -a Docker",
    OSType.WINDOWS: (
        'start "" "C:\\Program Files\\Docker\\Docker\\Docker Desktop.exe"'
    ),
}


def import_db_command(path: str) -> CommandSpec:
    """Build the database import command for a dump file path."""
    return CommandSpec(
        name="import-db",
        program="ddev",
        args=("import-db", f"--file={path}"),
        description="Importing database",
    )
