"""RunSetupStep node - one entry of the DDEV setup catalog."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, End, GraphRunContext

from wpddev.core.config import SetupState
from wpddev.ddev.catalog import SETUP_COMMANDS
from wpddev.workflow.deps import SetupDeps


@dataclass
class RunSetupStep(BaseNode[SetupState, SetupDeps, int]):
    """Run SETUP_COMMANDS[index] and move on, or stop the run.

    The first failing step ends the whole run; later steps, the
    database import and the launch are never attempted.
    """

    index: int = 0

    async def run(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> RunSetupStep | ImportDatabase | End[int]:
        deps = ctx.deps
        spec = SETUP_COMMANDS[self.index]
        total = len(SETUP_COMMANDS)

        if self.index == 0:
            deps.reporter.section("DDEV WordPress Setup")
        deps.reporter.step_start(self.index + 1, total, spec)

        result = await deps.run(spec, ctx.state.os_type)
        deps.reporter.step_result(spec, result)

        if not result.success:
            ctx.state.failed_step = spec.name
            await deps.report_failure(spec, result, ctx.state.os_type)
            return deps.abort(
                ctx.state, f"{spec.description} - Failed"
            )

        ctx.state.completed_steps.append(spec.name)
        if self.index + 1 < total:
            return RunSetupStep(index=self.index + 1)

        from wpddev.workflow.nodes.database import ImportDatabase
        return ImportDatabase()
