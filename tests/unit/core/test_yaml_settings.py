"""Tests for layered YAML configuration."""

import sys

import pytest

from wpddev.core import yaml_settings
from wpddev.core.config import State
from wpddev.core.yaml_settings import (
    YamlWithIncludesSettingsSource,
    cli_includes,
    deep_merge,
)


@pytest.fixture
def isolated(tmp_path, monkeypatch, mock_argv):
    """Run from an empty directory with an empty user config dir."""
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setattr(
        yaml_settings, "user_config_dir", lambda *a, **k: str(user_dir)
    )
    monkeypatch.chdir(work)
    return work


def load(yaml_file=None):
    return YamlWithIncludesSettingsSource(State, yaml_file=yaml_file)()


def test_deep_merge_nested():
    base = {"config": {"docker": {"poll_interval": 2.0, "poll_attempts": 60}}}
    override = {"config": {"docker": {"poll_attempts": 5}}}

    merged = deep_merge(base, override)

    assert merged["config"]["docker"] == {
        "poll_interval": 2.0,
        "poll_attempts": 5,
    }
    # inputs untouched
    assert base["config"]["docker"]["poll_attempts"] == 60


def test_deep_merge_replaces_non_dicts():
    assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}
    assert deep_merge({"a": {"b": 1}}, {"a": "flat"}) == {"a": "flat"}


def test_cli_includes():
    argv = ["wpddev", "init", "--include", "a.yaml", "--include", "b.yaml"]
    assert cli_includes(argv) == ["a.yaml", "b.yaml"]
    assert cli_includes(["wpddev", "--include"]) == []


def test_defaults_load(isolated):
    data = load()

    assert data["config"]["docker"]["poll_attempts"] == 60
    assert data["config"]["diagnosis"]["model"] == "gemini-2.0-flash"


def test_project_file_overrides_defaults(isolated):
    (isolated / "wpddev.yaml").write_text(
        "config:\n  docker:\n    poll_attempts: 7\n"
    )

    data = load()

    assert data["config"]["docker"]["poll_attempts"] == 7
    assert data["config"]["docker"]["poll_interval"] == 2.0


def test_include_directive_is_relative_to_including_file(isolated, tmp_path):
    conf = tmp_path / "conf"
    conf.mkdir()
    (conf / "base.yaml").write_text(
        "config:\n  docker:\n    poll_attempts: 10\n    poll_interval: 0.5\n"
    )
    (conf / "main.yaml").write_text(
        "include: base.yaml\nconfig:\n  docker:\n    poll_attempts: 20\n"
    )

    data = load(str(conf / "main.yaml"))

    # including file wins over included file
    assert data["config"]["docker"]["poll_attempts"] == 20
    assert data["config"]["docker"]["poll_interval"] == 0.5
    assert "include" not in data


def test_cli_include_has_highest_yaml_priority(isolated, tmp_path):
    override = tmp_path / "override.yaml"
    override.write_text("config:\n  runner:\n    shell: never\n")
    (isolated / "wpddev.yaml").write_text(
        "config:\n  runner:\n    shell: always\n"
    )
    sys.argv = ["wpddev", "init", "--include", str(override)]

    data = load()

    assert data["config"]["runner"]["shell"] == "never"


def test_circular_include_raises(isolated, tmp_path):
    (tmp_path / "a.yaml").write_text("include: b.yaml\n")
    (tmp_path / "b.yaml").write_text("include: a.yaml\n")

    with pytest.raises(ValueError, match="Circular include"):
        load(str(tmp_path / "a.yaml"))


def test_state_builds_typed_config(isolated, monkeypatch):
    monkeypatch.setenv("WPDDEV_CONFIG__DIAGNOSIS__SYSTEM_PROMPT", "Be brief.")
    (isolated / "wpddev.yaml").write_text(
        "config:\n  ddev:\n    install_url: https://example.test/ddev\n"
    )

    state = State()
    try:
        assert state.config.ddev.install_url == "https://example.test/ddev"
        assert state.config.diagnosis.system_prompt == "Be brief."
        assert state.config.docker.poll_attempts == 60
        assert state.config.runner.shell == "auto"
    finally:
        state.config.logger.close()
