"""Tests for AI diagnosis of failed commands."""

import asyncio
from unittest.mock import patch

from pydantic_ai.messages import ModelResponse, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel
from pydantic_ai.models.test import TestModel

from wpddev.core.config import DiagnosisConfig
from wpddev.model.diagnoser import NOT_CONFIGURED, Diagnoser, tail


def config(tmp_path, **kwargs):
    """Diagnosis config whose dotfile is guaranteed absent."""
    return DiagnosisConfig(dotfile=tmp_path / "missing.env", **kwargs)


def test_tail():
    assert tail("abcdef", 3) == "def"
    assert tail("abc", 10) == "abc"
    assert tail("abc", 0) == "abc"


def test_no_credential_is_not_ready(tmp_path):
    diagnoser = Diagnoser(config(tmp_path), environ={})

    assert diagnoser.initialize() is False
    assert diagnoser.ready is False


def test_unready_analyze_returns_static_hint(tmp_path):
    diagnoser = Diagnoser(config(tmp_path), environ={})
    diagnoser.initialize()

    text = asyncio.run(
        diagnoser.analyze("ddev start", "port 80 in use", "Linux")
    )

    assert text == NOT_CONFIGURED


def test_environment_key_builds_gemini_model(tmp_path):
    diagnoser = Diagnoser(config(tmp_path), environ={"GEMINI_API_KEY": "k"})

    with patch.object(
        Diagnoser, "_gemini_model", return_value=TestModel()
    ) as build:
        assert diagnoser.initialize() is True

    build.assert_called_once_with("k")
    assert diagnoser.ready


def test_dotfile_key_is_used(tmp_path):
    dotfile = tmp_path / ".env"
    dotfile.write_text("GEMINI_API_KEY=from-dotfile\n")
    diagnoser = Diagnoser(DiagnosisConfig(dotfile=dotfile), environ={})

    with patch.object(
        Diagnoser, "_gemini_model", return_value=TestModel()
    ) as build:
        assert diagnoser.initialize() is True

    build.assert_called_once_with("from-dotfile")


def test_analyze_returns_model_text(tmp_path):
    diagnoser = Diagnoser(
        config(tmp_path),
        environ={},
        model=TestModel(custom_output_text="Free port 80 and retry."),
    )
    assert diagnoser.initialize() is True

    text = asyncio.run(
        diagnoser.analyze("ddev start", "port 80 in use", "macOS")
    )

    assert text == "Free port 80 and retry."


def test_prompt_carries_command_os_and_error(tmp_path):
    seen = []

    def respond(messages, info: AgentInfo) -> ModelResponse:
        seen.append(messages[-1].parts[-1].content)
        return ModelResponse(parts=[TextPart("ok")])

    diagnoser = Diagnoser(
        config(tmp_path), environ={}, model=FunctionModel(respond)
    )
    diagnoser.initialize()
    asyncio.run(diagnoser.analyze("ddev start", "port 80 in use", "Windows"))

    prompt = seen[0]
    assert "Command: ddev start" in prompt
    assert "running on Windows" in prompt
    assert "port 80 in use" in prompt


def test_error_output_is_truncated_to_tail(tmp_path):
    diagnoser = Diagnoser(config(tmp_path, max_error_chars=10), environ={})

    error = "HEAD" + "x" * 50 + "THE-END"

    prompt = diagnoser.build_prompt("ddev start", error, "Linux")

    assert "THE-END" in prompt
    assert "HEAD" not in prompt


def test_model_failure_becomes_message(tmp_path):
    def explode(messages, info: AgentInfo) -> ModelResponse:
        raise RuntimeError("quota exceeded")

    diagnoser = Diagnoser(
        config(tmp_path), environ={}, model=FunctionModel(explode)
    )
    diagnoser.initialize()

    text = asyncio.run(diagnoser.analyze("ddev start", "boom", "Linux"))

    assert text == "Failed to analyze error with Gemini: quota exceeded"


def test_bad_prompt_template_becomes_message(tmp_path):
    """A template with stray braces is reported, not raised."""
    diagnoser = Diagnoser(
        config(
            tmp_path,
            prompt='Reply as JSON like {"fix": "..."}.\nCommand: {command}',
        ),
        environ={},
        model=TestModel(custom_output_text="unused"),
    )
    diagnoser.initialize()

    text = asyncio.run(diagnoser.analyze("ddev start", "boom", "Linux"))

    assert text.startswith("Failed to analyze error with Gemini: ")
