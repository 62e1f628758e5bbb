"""DetectEnvironment node - OS and AI availability."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from wpddev.core.config import SetupState
from wpddev.core.log import logger
from wpddev.core.platform import OSType, detect_os, display_name
from wpddev.workflow.deps import SetupDeps


@dataclass
class DetectEnvironment(BaseNode[SetupState, SetupDeps, int]):
    """Record the host OS and whether AI diagnosis is available.

    Informational only; there is no failure branch.
    """

    async def run(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> CheckDocker:
        reporter = ctx.deps.reporter
        reporter.banner()
        reporter.section("System Checks")

        os_type = detect_os()
        ctx.state.os_type = os_type
        reporter.status("Operating System", display_name(os_type), "success")
        if os_type == OSType.UNKNOWN:
            reporter.status(
                "Warning", "Unknown OS detected, using defaults", "warning"
            )

        ctx.state.ai_ready = ctx.deps.diagnoser.initialize()
        if ctx.state.ai_ready:
            reporter.status("AI", "Connected", "success")
        else:
            reporter.status(
                "AI",
                f"Not configured (set {ctx.deps.config.diagnosis.api_key_env})",
                "warning",
            )

        logger.info(
            "Environment detected",
            os=os_type.value,
            ai_ready=ctx.state.ai_ready,
        )

        from wpddev.workflow.nodes.docker import CheckDocker
        return CheckDocker()
