"""CLI command modules for wpddev."""

from wpddev.command.init import InitCommand

__all__ = ["InitCommand"]
