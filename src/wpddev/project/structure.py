"""WordPress project layout validation.

The working directory must look like:

    your-project/
    └── wp-content/
        └── themes/
            └── your-theme/
"""

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path

from wpddev.core.log import logger
from wpddev.core.result import ValidationResult

WP_CONTENT = "wp-content"
THEMES = "themes"

# stat() errors that just mean "nothing usable there"
_MISSING = (errno.ENOENT, errno.ENOTDIR)


class StructureReadError(OSError):
    """The project tree exists but could not be read (e.g. EACCES)."""


def _is_directory(path: Path) -> bool:
    try:
        mode = path.stat().st_mode
    except OSError as e:
        if e.errno in _MISSING:
            return False
        raise StructureReadError(
            e.errno, f"Cannot read {path}: {e.strerror}", str(path)
        ) from e
    return stat.S_ISDIR(mode)


def _theme_directories(themes_path: Path) -> list[str]:
    try:
        with os.scandir(themes_path) as entries:
            return sorted(
                entry.name for entry in entries if entry.is_dir()
            )
    except OSError as e:
        raise StructureReadError(
            e.errno, f"Cannot list {themes_path}: {e.strerror}",
            str(themes_path),
        ) from e


def validate_structure(root: Path) -> ValidationResult:
    """Check root for wp-content/themes/<theme>.

    Checks run in order and stop at the first failure, so a result
    never carries more than one error.

    Raises:
        StructureReadError: On filesystem errors other than a missing
            path. Missing paths are ordinary validation failures.
    """
    wp_content = root / WP_CONTENT
    themes_path = wp_content / THEMES

    if not _is_directory(wp_content):
        return ValidationResult(
            errors=("wp-content folder not found in the current directory",)
        )

    if not _is_directory(themes_path):
        return ValidationResult(errors=("wp-content/themes folder not found",))

    themes = _theme_directories(themes_path)
    if not themes:
        return ValidationResult(
            errors=("No theme found in wp-content/themes folder",)
        )

    logger.debug(f"Found themes in {themes_path}", themes=themes)
    return ValidationResult(
        warnings=(f"Found {len(themes)} theme(s): {', '.join(themes)}",),
        themes=tuple(themes),
    )
