"""Graph workflow definition."""

from pydantic_graph import Graph

from wpddev.core.log import logger


def create_workflow() -> Graph:
    """Create the `init` workflow graph.

    DetectEnvironment → CheckDocker → CheckDdev → ValidateProject →
        RunSetupStep(0..n-1) → ImportDatabase → Launch → Finish

    Any fatal branch ends the graph early with exit code 1; Finish
    ends it with 0.
    """
    logger.debug("Building workflow graph")

    # Imported here so pydantic-graph can resolve the nodes' forward
    # references from this namespace
    from wpddev.core.config import SetupState
    from wpddev.workflow.deps import SetupDeps
    from wpddev.workflow.nodes.database import ImportDatabase
    from wpddev.workflow.nodes.ddev import CheckDdev
    from wpddev.workflow.nodes.docker import CheckDocker
    from wpddev.workflow.nodes.environment import DetectEnvironment
    from wpddev.workflow.nodes.finish import Finish
    from wpddev.workflow.nodes.launch import Launch
    from wpddev.workflow.nodes.setup import RunSetupStep
    from wpddev.workflow.nodes.validate import ValidateProject

    return Graph(
        nodes=(
            DetectEnvironment,
            CheckDocker,
            CheckDdev,
            ValidateProject,
            RunSetupStep,
            ImportDatabase,
            Launch,
            Finish,
        ),
        name="init",
        state_type=SetupState,
        run_end_type=int,
    )


async def run_setup(state, deps) -> int:
    """Run the workflow from the start and return the exit code."""
    from wpddev.workflow.nodes.environment import DetectEnvironment

    workflow = create_workflow()
    state.status = "running"
    result = await workflow.run(DetectEnvironment(), state=state, deps=deps)
    return result.output
