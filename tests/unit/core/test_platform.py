"""Tests for host OS detection."""

import pytest

from wpddev.core.platform import OSType, detect_os, display_name


@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        ("win32", OSType.WINDOWS),
        ("darwin", OSType.MACOS),
        ("linux", OSType.LINUX),
        ("linux2", OSType.LINUX),
        ("freebsd14", OSType.UNKNOWN),
        ("", OSType.UNKNOWN),
    ],
)
def test_detect_os(platform, expected):
    assert detect_os(platform) == expected


def test_detect_os_defaults_to_running_platform(monkeypatch):
    """Without an argument sys.platform is used."""
    monkeypatch.setattr("sys.platform", "darwin")
    assert detect_os() == OSType.MACOS


def test_display_names():
    assert display_name(OSType.WINDOWS) == "Windows"
    assert display_name(OSType.MACOS) == "macOS"
    assert display_name(OSType.LINUX) == "Linux"
    assert display_name(OSType.UNKNOWN) == "Unknown OS"
