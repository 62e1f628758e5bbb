"""LLM model wrappers."""

from wpddev.model.diagnoser import NOT_CONFIGURED, Diagnoser

__all__ = ["Diagnoser", "NOT_CONFIGURED"]
