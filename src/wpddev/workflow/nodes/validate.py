"""ValidateProject node - check the WordPress folder layout."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, End, GraphRunContext

from wpddev.core.config import SetupState
from wpddev.core.log import logger
from wpddev.project.structure import StructureReadError, validate_structure
from wpddev.workflow.deps import SetupDeps


@dataclass
class ValidateProject(BaseNode[SetupState, SetupDeps, int]):
    """Require wp-content/themes/<theme> under the working directory."""

    async def run(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> RunSetupStep | End[int]:
        reporter = ctx.deps.reporter
        reporter.section("Project Validation")

        try:
            validation = validate_structure(ctx.deps.workdir)
        except StructureReadError as e:
            return ctx.deps.abort(
                ctx.state, "Could not read project structure", str(e)
            )

        if not validation.is_valid:
            logger.error(
                "Invalid project structure", errors=list(validation.errors)
            )
            reporter.structure_invalid(validation)
            ctx.state.status = "failed"
            return End(1)

        reporter.status("Project", "Project structure validated", "success")
        for finding in validation.warnings:
            reporter.status("Themes", finding, "info")
        ctx.state.themes = list(validation.themes)

        from wpddev.workflow.nodes.setup import RunSetupStep
        return RunSetupStep(index=0)
