#!/usr/bin/env python3
"""wpddev CLI - local WordPress environments with DDEV."""

import asyncio
import contextlib
import sys

from pydantic_settings import CliApp, CliSubCommand, get_subcommand

from wpddev.command.init import InitCommand
from wpddev.core.config import State
from wpddev.core.log import logger


class CliState(State):
    """Set up a local WordPress development site with DDEV.

    Run `wpddev init` from a folder containing
    wp-content/themes/<your-theme>. Docker and DDEV must be installed.

    Configuration sources (in priority order):
    1. Command-line arguments (--config.docker.poll_attempts 30)
    2. wpddev.yaml in the current directory, the user config
       directory, and any --include files
    3. .env file (GEMINI_API_KEY lives here too)
    4. Environment variables
       (WPDDEV_CONFIG__DOCKER__POLL_ATTEMPTS=30)
    """

    init: CliSubCommand[InitCommand]

    def cli_cmd(self):
        """Dispatch to active subcommand, or show help if none
        provided."""
        subcommand = get_subcommand(self, is_required=False)

        if subcommand is None:
            # argparse exits 0 after printing help
            with contextlib.suppress(SystemExit):
                CliApp.run(CliState, cli_args=['--help'])
            sys.exit(1)

        # Close log sinks even when the workflow raises
        with logger:
            exit_code = asyncio.run(subcommand.run_workflow(self))
            raise SystemExit(exit_code)


def main():
    """Main entry point for CLI."""
    CliApp.run(CliState)


if __name__ == "__main__":
    main()
