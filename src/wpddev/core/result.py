"""Result types for command execution and project validation."""

from pydantic import BaseModel, ConfigDict


class CommandResult(BaseModel):
    """Outcome of one external command.

    exit_code is None when the process could not be spawned at all;
    error then carries the OS error message.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    output: str = ""
    error: str = ""
    exit_code: int | None = None

    @classmethod
    def from_exit(
        cls, exit_code: int, output: str = "", error: str = ""
    ) -> "CommandResult":
        return cls(
            success=exit_code == 0,
            output=output,
            error=error,
            exit_code=exit_code,
        )

    @classmethod
    def spawn_failure(cls, message: str) -> "CommandResult":
        return cls(success=False, error=message, exit_code=None)

    @property
    def details(self) -> str:
        """Text worth showing for a failure: stderr, else stdout."""
        return self.error or self.output


class ValidationResult(BaseModel):
    """Outcome of a project structure check."""

    model_config = ConfigDict(frozen=True)

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    themes: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors
