"""Checks on the WordPress project being set up."""

from wpddev.project.structure import StructureReadError, validate_structure

__all__ = ["StructureReadError", "validate_structure"]
