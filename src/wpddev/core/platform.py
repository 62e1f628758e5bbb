"""Host operating system detection."""

from __future__ import annotations

import sys
from enum import Enum


class OSType(str, Enum):
    """Operating systems the wizard knows how to drive."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    UNKNOWN = "unknown"


_DISPLAY_NAMES = {
    OSType.WINDOWS: "Windows",
    OSType.MACOS: "macOS",
    OSType.LINUX: "Linux",
}


def detect_os(platform: str | None = None) -> OSType:
    """Map a platform identifier (default: sys.platform) to an OSType.

    Unrecognised platforms map to OSType.UNKNOWN rather than raising.
    """
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        return OSType.WINDOWS
    if platform == "darwin":
        return OSType.MACOS
    if platform.startswith("linux"):
        return OSType.LINUX
    return OSType.UNKNOWN


def display_name(os_type: OSType) -> str:
    return _DISPLAY_NAMES.get(os_type, "Unknown OS")
