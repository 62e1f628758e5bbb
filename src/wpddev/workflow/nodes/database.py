"""ImportDatabase node - optional SQL dump import."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from wpddev.core.config import SetupState
from wpddev.core.log import logger
from wpddev.ddev.catalog import import_db_command
from wpddev.workflow.deps import SetupDeps

_QUOTES = "\"'"


def clean_path(raw: str) -> str:
    """Trim whitespace and one layer of wrapping quote characters
    (drag-and-drop into a terminal often quotes the path)."""
    path = raw.strip()
    if path[:1] in _QUOTES:
        path = path[1:]
    if path[-1:] in _QUOTES:
        path = path[:-1]
    return path


@dataclass
class ImportDatabase(BaseNode[SetupState, SetupDeps, int]):
    """Ask for a dump file and import it.

    Failure here is reported but never stops the run.
    """

    async def run(
        self, ctx: GraphRunContext[SetupState, SetupDeps]
    ) -> Launch:
        deps = ctx.deps
        deps.reporter.section("Database Import")
        deps.reporter.note(
            "To import a database, provide the path to your .sql, "
            ".sql.gz, or .zip file."
        )
        deps.reporter.note(
            "Example Windows: C:\\Users\\name\\Downloads\\db.sql"
        )
        deps.reporter.note("Example macOS/Linux: /Users/name/Downloads/db.sql")
        deps.reporter.note("(Press Enter to skip)")

        path = clean_path(deps.prompter.ask("Database file path"))

        from wpddev.workflow.nodes.launch import Launch

        if not path:
            deps.reporter.note("Skipping database import...")
            return Launch()

        spec = import_db_command(path)
        result = await deps.run(spec, ctx.state.os_type)
        ctx.state.database_imported = result.success

        if result.success:
            deps.reporter.status(
                "Database", "Database imported successfully", "success"
            )
        else:
            logger.warn("Database import failed; continuing", path=path)
            deps.reporter.status("Database", "Database import failed", "error")
            await deps.report_failure(spec, result, ctx.state.os_type)
            deps.reporter.note(
                "Proceeding with launch despite DB import failure..."
            )
        return Launch()
