"""Layered YAML configuration with include: support."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import yaml
from platformdirs import user_config_dir
from pydantic_settings import BaseSettings, YamlConfigSettingsSource

from wpddev.core.log import logger

DEFAULTS_FILE = Path(__file__).parent.parent / "defaults" / "default.yaml"
CONFIG_NAME = "wpddev.yaml"


def cli_includes(argv: list[str]) -> list[str]:
    """Collect the values of every `--include FILE` pair in argv."""
    includes = []
    i = 1
    while i < len(argv):
        if argv[i] == "--include" and i + 1 < len(argv):
            includes.append(argv[i + 1])
            i += 1
        i += 1
    return includes


def deep_merge(base: dict, override: dict) -> dict:
    """Return base updated by override, merging nested dicts."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class YamlWithIncludesSettingsSource(YamlConfigSettingsSource):
    """YAML source that layers several files.

    Lowest to highest priority:
        package defaults (defaults/default.yaml)
        user config (platformdirs user_config_dir/wpddev.yaml)
        project config (./wpddev.yaml)
        --include files from the command line

    Any file may carry an `include:` key (string or list) naming
    further files, resolved relative to the including file. The
    including file wins over what it includes.
    """

    def __init__(self, settings_cls: type[BaseSettings], yaml_file=None):
        self.includes = cli_includes(sys.argv)
        super().__init__(settings_cls, yaml_file)

    def _read_files(self, files, *args, **kwargs):  # noqa: ARG002
        candidates = [
            DEFAULTS_FILE,
            Path(user_config_dir("wpddev", appauthor=False)) / CONFIG_NAME,
            Path(CONFIG_NAME),
        ]
        if files and files != CONFIG_NAME:
            if isinstance(files, (str, os.PathLike)):
                files = [files]
            candidates.extend(Path(f).expanduser() for f in files)
        candidates.extend(Path(f).expanduser() for f in self.includes)

        result: dict = {}
        for path in candidates:
            if not path.is_file():
                logger.debug("Configuration file not found", file=str(path))
                continue
            logger.debug("Loading configuration", file=str(path))
            result = deep_merge(result, self.load_file(path, set()))
        return result

    def load_file(self, path: Path, visited: set[Path]) -> dict:
        """Load path and everything it includes.

        Raises:
            ValueError: On a circular include
        """
        path = path.resolve()
        if path in visited:
            raise ValueError(f"Circular include: {path}")
        visited = visited | {path}

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        includes = data.pop("include", None) or []
        if isinstance(includes, str):
            includes = [includes]

        merged: dict = {}
        for include in includes:
            include_path = Path(include).expanduser()
            if not include_path.is_absolute():
                include_path = path.parent / include_path
            merged = deep_merge(merged, self.load_file(include_path, visited))
        return deep_merge(merged, data)
