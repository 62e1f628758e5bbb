"""Launch node - open the site."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from wpddev.core.config import SetupState
from wpddev.ddev.catalog import LAUNCH
from wpddev.workflow.deps import SetupDeps


@dataclass
class Launch(BaseNode[SetupState, SetupDeps, int]):
    """Run `ddev launch`. The outcome is reported only; it does not
    change the exit code."""

    async def run(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> Finish:
        result = await ctx.deps.run(LAUNCH, ctx.state.os_type)
        ctx.state.launched = result.success
        if result.success:
            ctx.deps.reporter.status("Launch", "Project launched", "success")
        else:
            ctx.deps.reporter.status("Launch", "Launch failed", "error")

        from wpddev.workflow.nodes.finish import Finish
        return Finish()
