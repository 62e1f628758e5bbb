"""CheckDocker node - make sure the Docker daemon is up."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, End, GraphRunContext

from wpddev.core.config import SetupState
from wpddev.core.log import logger
from wpddev.ddev.catalog import DOCKER_INFO, DOCKER_START_COMMANDS
from wpddev.workflow.deps import SetupDeps


@dataclass
class CheckDocker(BaseNode[SetupState, SetupDeps, int]):
    """Probe Docker and offer to start Docker Desktop when it is down.

    After an auto-start the probe is repeated every poll_interval
    seconds, at most poll_attempts times.
    """

    async def run(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> CheckDdev | End[int]:
        deps = ctx.deps
        state = ctx.state

        result = await deps.run(DOCKER_INFO, state.os_type)
        if result.success:
            deps.reporter.status("Docker", "Docker is running", "success")
            return self._next()

        deps.reporter.status("Docker", "Docker is not running", "warning")
        if not deps.prompter.confirm(
            "Would you like to start Docker Desktop now?", default=True
        ):
            return deps.abort(
                state,
                "Docker is required to continue.",
                "Start Docker and run wpddev init again.",
            )

        start_command = DOCKER_START_COMMANDS.get(state.os_type)
        if start_command is None:
            return deps.abort(
                state,
                "Cannot auto-start Docker on this OS",
                "Please start Docker manually and try again.",
            )

        deps.reporter.note("Starting Docker Desktop...")
        try:
            await deps.runner.spawn_detached(start_command)
        except OSError as e:
            return deps.abort(state, "Failed to start Docker", str(e))

        deps.reporter.note("Waiting for Docker to be ready...")
        if not await self._wait_until_ready(ctx):
            return deps.abort(
                state,
                "Timed out waiting for Docker",
                "Please ensure Docker Desktop is running and try again.",
            )

        deps.reporter.status("Docker", "Docker is now running", "success")
        return self._next()

    async def _wait_until_ready(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> bool:
        settings = ctx.deps.config.docker
        with logger.span(
            "Waiting for Docker",
            attempts=settings.poll_attempts,
            interval=settings.poll_interval,
        ):
            for attempt in range(1, settings.poll_attempts + 1):
                await ctx.deps.sleep(settings.poll_interval)
                check = await ctx.deps.run(
                    DOCKER_INFO, ctx.state.os_type, silent=True
                )
                logger.trace(
                    f"Docker readiness probe {attempt}/{settings.poll_attempts}",
                    ready=check.success,
                )
                if check.success:
                    return True
        return False

    @staticmethod
    def _next():
        from wpddev.workflow.nodes.ddev import CheckDdev
        return CheckDdev()
