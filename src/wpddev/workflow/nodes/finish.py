"""Finish node - closing summary."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, End, GraphRunContext

from wpddev.core.config import SetupState
from wpddev.core.log import logger
from wpddev.workflow.deps import SetupDeps


@dataclass
class Finish(BaseNode[SetupState, SetupDeps, int]):
    """Print the summary and end with exit code 0."""

    async def run(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> End[int]:
        reporter = ctx.deps.reporter
        reporter.complete("WordPress Setup Complete!")
        reporter.note("Your WordPress site is now running.")
        reporter.note("Use ddev describe to see your site URL.")

        ctx.state.status = "complete"
        logger.info(
            "Setup complete",
            steps=ctx.state.completed_steps,
            database_imported=ctx.state.database_imported,
            launched=ctx.state.launched,
        )
        return End(0)
