"""Failed-command diagnosis with a Gemini model via pydantic-ai."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic_ai import Agent
from pydantic_ai.models import Model

from wpddev.core.config import DiagnosisConfig
from wpddev.core.credentials import read_dotfile, resolve_credential
from wpddev.core.log import logger

NOT_CONFIGURED = (
    "Gemini API not initialized. Set GEMINI_API_KEY environment "
    "variable for AI-powered error analysis."
)


def tail(text: str, limit: int) -> str:
    """Keep the last limit characters of text (the end of a log is
    where the failure usually is)."""
    if limit <= 0 or len(text) <= limit:
        return text
    return text[-limit:]


class Diagnoser:
    """Best-effort AI advice for a failed command.

    Nothing here raises into the workflow: without a credential
    analyze() returns a fixed hint, and remote failures come back as
    a descriptive string.
    """

    def __init__(
        self,
        config: DiagnosisConfig,
        environ: Mapping[str, str] | None = None,
        model: Model | None = None,
    ):
        """
        Args:
            config: Diagnosis settings (model, key name, dotfile, prompt)
            environ: Environment snapshot; defaults to os.environ
            model: Ready-made model, used instead of building a Gemini
                client (tests pass pydantic-ai's TestModel here)
        """
        self.config = config
        self.environ = os.environ if environ is None else environ
        self.model = model
        self._agent: Agent | None = None

    @property
    def ready(self) -> bool:
        return self._agent is not None

    def initialize(self) -> bool:
        """Resolve the credential and build the agent.

        Returns:
            True if a credential (or injected model) is available
        """
        model = self.model
        if model is None:
            api_key = resolve_credential(
                self.environ,
                read_dotfile(self.config.dotfile),
                key=self.config.api_key_env,
            )
            if api_key is None:
                logger.info(
                    "No API key found; AI diagnosis disabled",
                    env=self.config.api_key_env,
                    dotfile=str(self.config.dotfile),
                )
                return False
            model = self._gemini_model(api_key)

        self._agent = Agent(model, system_prompt=self.config.system_prompt)
        logger.debug(f"Diagnosis agent ready: {self.config.model}")
        return True

    def _gemini_model(self, api_key: str) -> Model:
        from pydantic_ai.models.google import GoogleModel
        from pydantic_ai.providers.google import GoogleProvider

        return GoogleModel(
            self.config.model,
            provider=GoogleProvider(api_key=api_key),
        )

    def build_prompt(self, command: str, error_output: str, os_label: str) -> str:
        return self.config.prompt.format(
            command=command,
            os=os_label,
            error=tail(error_output, self.config.max_error_chars),
        )

    async def analyze(
        self, command: str, error_output: str, os_label: str
    ) -> str:
        """Ask the model what went wrong.

        Args:
            command: The failing command line
            error_output: Captured stderr (or stdout)
            os_label: Human-readable OS name

        Returns:
            Model advice, the not-configured hint, or a failure message
        """
        if self._agent is None:
            return NOT_CONFIGURED

        try:
            prompt = self.build_prompt(command, error_output, os_label)
            logger.debug(
                "Requesting diagnosis",
                command=command,
                prompt_length=len(prompt),
            )
            result = await self._agent.run(prompt)
        except Exception as e:
            logger.error(f"Diagnosis request failed: {e}", _exc_info=e)
            return f"Failed to analyze error with Gemini: {e}"
        return result.output
