"""Interactive questions asked during a run."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from wpddev.core.log import logger
from wpddev.ui.reporter import CYAN


class Prompter(Protocol):
    """Source of user answers; tests substitute canned responses."""

    def confirm(self, message: str, default: bool = True) -> bool: ...

    def ask(self, message: str) -> str: ...


class ConsolePrompter:
    """Prompter that reads from the terminal through rich."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question. A closed stdin answers no."""
        try:
            return Confirm.ask(
                f"  [{CYAN}]{message}[/]",
                default=default,
                console=self.console,
            )
        except EOFError:
            logger.warn("stdin closed at prompt", prompt=message)
            self.console.print()
            return False

    def ask(self, message: str) -> str:
        """Ask for free text. A closed stdin gives an empty answer."""
        try:
            answer = Prompt.ask(
                f"  [{CYAN}]{message}[/]",
                default="",
                show_default=False,
                console=self.console,
            )
        except EOFError:
            logger.warn("stdin closed at prompt", prompt=message)
            self.console.print()
            return ""
        return answer.strip()
