"""Terminal narration of the setup run."""

from __future__ import annotations

from typing import Literal, Protocol

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text
from rich.tree import Tree

from wpddev.core.result import CommandResult, ValidationResult
from wpddev.ddev.catalog import CommandSpec

Level = Literal["success", "warning", "error", "info"]

CYAN = "#00f5ff"
PURPLE = "#bf00ff"
PINK = "#ff006e"
GREEN = "#00ff88"
ORANGE = "#ff9500"

_STYLES = {
    "success": (GREEN, "✓"),
    "warning": (ORANGE, "⚠"),
    "error": (PINK, "✗"),
    "info": (CYAN, "◆"),
}


class Reporter(Protocol):
    """Everything the workflow tells the user goes through here."""

    def banner(self) -> None: ...

    def section(self, title: str) -> None: ...

    def status(self, label: str, value: str, level: Level = "info") -> None: ...

    def step_start(self, index: int, total: int, spec: CommandSpec) -> None: ...

    def step_result(self, spec: CommandSpec, result: CommandResult) -> None: ...

    def command_failed(self, command_line: str, result: CommandResult) -> None: ...

    def diagnosis(self, text: str) -> None: ...

    def structure_invalid(self, result: ValidationResult) -> None: ...

    def note(self, message: str) -> None: ...

    def fatal(self, message: str, hint: str | None = None) -> None: ...

    def complete(self, message: str) -> None: ...


def required_layout() -> Tree:
    """The project layout `init` expects, as a rich tree."""
    tree = Tree(f"[{CYAN}]your-project/")
    tree.add(f"[{CYAN}]wp-content/").add(f"[{CYAN}]themes/").add(
        f"[{CYAN}]your-theme/"
    )
    return tree


class ConsoleReporter:
    """Reporter that draws to a rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def banner(self) -> None:
        title = Text("WPDDEV", style=f"bold {CYAN}")
        subtitle = Text.assemble(
            ("WordPress DDEV Setup Tool", CYAN),
            (" • ", "grey50"),
            ("local environments in one command", PURPLE),
        )
        self.console.print(
            Panel(Group(title, subtitle), border_style=CYAN, expand=False)
        )

    def section(self, title: str) -> None:
        self.console.print()
        self.console.print(
            Rule(f"[bold {PURPLE}]▸ {title.upper()}", align="left", style="grey23")
        )

    def status(self, label: str, value: str, level: Level = "info") -> None:
        color, icon = _STYLES[level]
        self.console.print(
            f"  [{color}]{icon}[/] [grey62]{escape(label)}:[/] [white]{escape(value)}"
        )

    def step_start(self, index: int, total: int, spec: CommandSpec) -> None:
        self.console.print()
        self.console.print(
            f"  [{PURPLE}][{index}/{total}][/] [{CYAN}]▶[/] "
            f"[white]{escape(spec.description)}"
        )
        self.console.print(f"  [grey50]Executing: {escape(spec.command_line)}")

    def step_result(self, spec: CommandSpec, result: CommandResult) -> None:
        if result.success:
            self.status(spec.description, "done", "success")
        else:
            self.status(spec.description, "failed", "error")

    def command_failed(self, command_line: str, result: CommandResult) -> None:
        body = Text(f"Command failed: {command_line}", style=PINK)
        if result.exit_code is not None:
            body.append(f"\nExit code: {result.exit_code}", style="grey62")
        if result.details:
            body.append("\n\nError output:\n", style="grey62")
            body.append(result.details.rstrip(), style=PINK)
        self.console.print(
            Panel(body, title="✗ ERROR", border_style=PINK, expand=False)
        )

    def diagnosis(self, text: str) -> None:
        self.console.print(
            Panel(
                Text(text, style="white"),
                title="[ AI DIAGNOSTICS ]",
                border_style=PURPLE,
                box=box.DOUBLE,
                padding=1,
            )
        )

    def structure_invalid(self, result: ValidationResult) -> None:
        errors = Text("PROJECT STRUCTURE ERROR\n\n", style=f"bold {PINK}")
        for error in result.errors:
            errors.append(f"  ✗ {error}\n", style="white")
        errors.append("\n Required structure:", style="grey62")
        self.console.print(
            Panel(Group(errors, required_layout()), border_style=PINK, padding=1)
        )
        self.console.print(
            f"\n  [grey62]Create the required folders and run [/]"
            f"[{CYAN}]wpddev init[/][grey62] again.\n"
        )

    def note(self, message: str) -> None:
        self.console.print(f"  [grey62]{escape(message)}")

    def fatal(self, message: str, hint: str | None = None) -> None:
        self.console.print(f"\n  [bold {PINK}]✗ {escape(message)}")
        if hint:
            self.console.print(f"  [grey62]{escape(hint)}\n")

    def complete(self, message: str) -> None:
        self.console.print()
        self.console.print(
            Panel(
                Text(f"✓  {message}", style=f"bold {GREEN}"),
                border_style=GREEN,
                expand=False,
                padding=(1, 4),
            )
        )
