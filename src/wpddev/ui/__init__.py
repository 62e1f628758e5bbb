"""Terminal presentation: narration and prompts."""

from wpddev.ui.prompter import ConsolePrompter, Prompter
from wpddev.ui.reporter import ConsoleReporter, Reporter, required_layout

__all__ = [
    "ConsolePrompter",
    "ConsoleReporter",
    "Prompter",
    "Reporter",
    "required_layout",
]
