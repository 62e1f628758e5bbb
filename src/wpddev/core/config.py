"""Application configuration and runtime state."""

from __future__ import annotations

from pathlib import Path

import platformdirs
from pydantic import ConfigDict, Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from wpddev.core.base import BaseConfig, BaseState
from wpddev.core.log import Logger
from wpddev.core.platform import OSType
from wpddev.core.runner import ShellMode
from wpddev.core.yaml_settings import YamlWithIncludesSettingsSource

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant for developers setting up WordPress "
    "with DDEV."
)

DEFAULT_DIAGNOSIS_PROMPT = """\
A user running on {os} encountered an error while executing the following command:
Command: {command}

Error output:
{error}

Please analyze this error and provide:
1. A brief explanation of what went wrong
2. Step-by-step instructions to fix the issue
3. Any preventive measures for the future

Keep your response concise and actionable. Format it for terminal output (no markdown)."""


# ============================================================
# CONFIG MODELS (loaded from YAML/env/CLI)
# ============================================================

class DockerConfig(BaseConfig):
    """Docker Desktop readiness checks."""

    poll_interval: float = Field(
        default=2.0,
        description="Seconds between readiness probes after auto-start",
    )
    poll_attempts: int = Field(
        default=60,
        description="Readiness probes before giving up (60 x 2s = 2 min)",
    )


class DdevConfig(BaseConfig):
    """DDEV prerequisite settings."""

    install_url: str = Field(
        default="https://ddev.com/get-started/",
        description="Where to point users who do not have DDEV",
    )


class RunnerConfig(BaseConfig):
    """External command execution."""

    shell: ShellMode = Field(
        default="auto",
        description=(
            "Run commands through the shell: 'auto' (Windows only), "
            "'always', or 'never'"
        ),
    )


class DiagnosisConfig(BaseConfig):
    """AI diagnosis of failed commands."""

    model: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model name",
    )
    api_key_env: str = Field(
        default="GEMINI_API_KEY",
        description=(
            "Environment variable (and dotfile key) holding the API key"
        ),
    )
    dotfile: Path = Field(
        default=Path(".env"),
        description="KEY = value file consulted when the variable is unset",
    )
    max_error_chars: int = Field(
        default=4000,
        description="Trailing characters of error output sent to the model",
    )
    system_prompt: str = Field(default=DEFAULT_SYSTEM_PROMPT)
    prompt: str = Field(
        default=DEFAULT_DIAGNOSIS_PROMPT,
        description="Template with {command}, {os} and {error} fields",
    )


class Config(BaseConfig):
    """Application configuration loaded from YAML/env/CLI."""

    logger: Logger = Field(
        default=None,
        description="Logger configuration and runtime instance",
    )
    docker: DockerConfig = Field(default_factory=DockerConfig)
    ddev: DdevConfig = Field(default_factory=DdevConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    diagnosis: DiagnosisConfig = Field(default_factory=DiagnosisConfig)

    log_level: str = Field(
        default="warn",
        alias="log-level",
        description=(
            "Console log level: 'trace', 'debug', 'info', "
            "'warn', 'error', 'fatal'"
        ),
    )
    log_root: Path = Field(
        default_factory=(
            lambda: Path(platformdirs.user_state_dir("wpddev", appauthor=False))
        ),
        description="Root directory for log files",
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode='after')
    def _setup_logger(self) -> Config:
        """Install the global logger once configuration is known."""
        from wpddev.core.log import setup_logger

        if self.logger is None:
            self.logger = Logger()

        setup_logger(
            log_root=self.log_root,
            run_name="init",
            level=self.logger.level,
            console=self.logger.console.model_copy(
                update={"level": self.log_level}
            ),
            file=self.logger.file,
            logfire=self.logger.logfire,
        )
        return self

    def close(self):
        """Close the global logger as well as owned sections."""
        from wpddev.core.log import logger

        logger.close()
        super().close()


# ============================================================
# RUNTIME STATE (mutated while the setup workflow runs)
# ============================================================

class SetupState(BaseState):
    """Progress of one `init` run."""

    os_type: OSType = Field(
        default=OSType.UNKNOWN,
        description="Detected host OS; written once by DetectEnvironment",
    )
    ai_ready: bool = Field(
        default=False,
        description="Whether the diagnoser has a credential",
    )
    themes: list[str] = Field(default_factory=list)
    completed_steps: list[str] = Field(
        default_factory=list,
        description="Names of setup commands that succeeded, in order",
    )
    failed_step: str | None = None
    database_imported: bool | None = Field(
        default=None,
        description="None when the import was skipped",
    )
    launched: bool = False
    status: str = Field(
        default="pending",
        description="pending, running, complete, failed",
    )


# ============================================================
# STATE (config loaded from all sources)
# ============================================================

class State(BaseSettings):
    """Top-level settings object built by the CLI.

    Sources, highest priority first: constructor/CLI arguments, YAML
    files (with includes), .env, environment variables
    (WPDDEV_CONFIG__DOCKER__POLL_ATTEMPTS=10), file secrets.
    """

    config: Config = Field(
        default_factory=Config,
        description="Application configuration (from YAML/env/CLI)",
    )
    include: list[str] | None = Field(
        default=None,
        description=(
            "Additional YAML files to merge over the defaults. "
            "Use --include on the CLI or include: in YAML files."
        ),
    )

    model_config = SettingsConfigDict(
        yaml_file="wpddev.yaml",
        env_file=".env",
        env_prefix="WPDDEV_",
        env_nested_delimiter="__",
        cli_implicit_flags=True,
        cli_use_class_docs_for_groups=True,
        # .env also holds the API key, which is not a setting
        extra='ignore',
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            YamlWithIncludesSettingsSource(settings_cls),
            dotenv_settings,
            env_settings,
            file_secret_settings,
        )


__all__ = [
    "Config",
    "DdevConfig",
    "DiagnosisConfig",
    "DockerConfig",
    "RunnerConfig",
    "SetupState",
    "State",
]
