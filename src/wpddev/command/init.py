"""Init command - set up a local WordPress site with DDEV."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel

from wpddev.core.log import logger

if TYPE_CHECKING:
    from wpddev.core.config import State


class InitCommand(BaseModel):
    """Initialize a DDEV WordPress project in the current directory.

    Checks that Docker and DDEV are available, validates the
    wp-content/themes layout, runs the DDEV setup commands, optionally
    imports a database dump and launches the site. Failed commands are
    explained by Gemini when GEMINI_API_KEY is set.
    """

    async def run_workflow(self, state: State) -> int:
        """Run the setup workflow.

        Args:
            state: State instance with all configuration loaded

        Returns:
            Exit code (0=success)
        """
        from wpddev.core.config import SetupState
        from wpddev.core.runner import CommandRunner
        from wpddev.model.diagnoser import Diagnoser
        from wpddev.ui.prompter import ConsolePrompter
        from wpddev.ui.reporter import ConsoleReporter
        from wpddev.workflow.deps import SetupDeps
        from wpddev.workflow.graph import run_setup

        config = state.config
        workdir = Path.cwd()
        logger.info("Starting init", workdir=str(workdir))

        deps = SetupDeps(
            config=config,
            runner=CommandRunner(shell=config.runner.shell),
            reporter=ConsoleReporter(),
            prompter=ConsolePrompter(),
            diagnoser=Diagnoser(config.diagnosis),
            workdir=workdir,
        )
        setup_state = SetupState()
        exit_code = await run_setup(setup_state, deps)

        logger.info(
            f"Init finished with exit code {exit_code}",
            status=setup_state.status,
            failed_step=setup_state.failed_step,
        )
        return exit_code
