"""CheckDdev node - DDEV must be installed."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, End, GraphRunContext

from wpddev.core.config import SetupState
from wpddev.core.log import logger
from wpddev.ddev.catalog import DDEV_VERSION
from wpddev.workflow.deps import SetupDeps


@dataclass
class CheckDdev(BaseNode[SetupState, SetupDeps, int]):
    """Probe `ddev --version`; no retry."""

    async def run(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> ValidateProject | End[int]:
        result = await ctx.deps.run(
            DDEV_VERSION, ctx.state.os_type, silent=True
        )
        if not result.success:
            return ctx.deps.abort(
                ctx.state,
                "DDEV is required to run this project.",
                "Please install DDEV by following the instructions at: "
                f"{ctx.deps.config.ddev.install_url}",
            )

        version = result.output.strip().splitlines()
        logger.info("DDEV found", version=version[0] if version else "")
        ctx.deps.reporter.status("DDEV", "DDEV is installed", "success")

        from wpddev.workflow.nodes.validate import ValidateProject
        return ValidateProject()
