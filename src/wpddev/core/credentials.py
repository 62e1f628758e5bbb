"""API credential lookup: environment first, then a local dotfile."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

DEFAULT_KEY_NAME = "GEMINI_API_KEY"


def read_dotfile(path: Path) -> dict[str, str]:
    """Parse a KEY = value dotfile.

    Blank lines and # comments are skipped and wrapping quotes are
    removed from values. A missing file gives an empty mapping.
    """
    if not path.is_file():
        return {}
    return {
        key: value
        for key, value in dotenv_values(path, interpolate=False).items()
        if value is not None
    }


def resolve_credential(
    environ: Mapping[str, str],
    dotfile: Mapping[str, str],
    key: str = DEFAULT_KEY_NAME,
) -> str | None:
    """Return the credential for key, or None.

    The environment takes precedence over the dotfile. Empty or
    whitespace-only values count as absent.
    """
    for source in (environ, dotfile):
        value = (source.get(key) or "").strip()
        if value:
            return value
    return None
