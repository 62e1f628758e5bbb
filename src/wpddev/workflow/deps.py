"""Collaborators injected into every workflow node."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from pydantic_graph import End

from wpddev.core.config import Config, SetupState
from wpddev.core.log import logger
from wpddev.core.platform import OSType, display_name
from wpddev.core.result import CommandResult
from wpddev.core.runner import CommandRunner
from wpddev.ddev.catalog import CommandSpec
from wpddev.model.diagnoser import Diagnoser
from wpddev.ui.prompter import Prompter
from wpddev.ui.reporter import Reporter


@dataclass
class SetupDeps:
    """Everything a node touches besides SetupState.

    Swapping these for fakes lets tests drive every branch without a
    terminal, Docker, DDEV or network.
    """

    config: Config
    runner: CommandRunner
    reporter: Reporter
    prompter: Prompter
    diagnoser: Diagnoser
    workdir: Path
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep)

    async def run(
        self, spec: CommandSpec, os_type: OSType, silent: bool = False
    ) -> CommandResult:
        return await self.runner.run(
            spec.program, spec.args, os_type, silent=silent
        )

    async def report_failure(
        self, spec: CommandSpec, result: CommandResult, os_type: OSType
    ) -> None:
        """Show a failed command, its output and the AI's take on it."""
        logger.warn(
            f"Command failed: {spec.command_line}",
            exit_code=result.exit_code,
        )
        self.reporter.command_failed(spec.command_line, result)

        if self.diagnoser.ready:
            self.reporter.note("Analyzing error with AI...")
        analysis = await self.diagnoser.analyze(
            spec.command_line, result.details, display_name(os_type)
        )
        self.reporter.diagnosis(analysis)

    def abort(
        self, state: SetupState, message: str, hint: str | None = None
    ) -> End[int]:
        """Report a fatal condition and end the run with exit code 1."""
        logger.error(message)
        self.reporter.fatal(message, hint)
        state.status = "failed"
        return End(1)
