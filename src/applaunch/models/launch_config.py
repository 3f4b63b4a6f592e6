"""Launch request model for applaunch."""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class LaunchConfig(BaseModel):
    """One launch request, built by the CLI and consumed by a single launch call."""

    model_config = ConfigDict(frozen=True)

    program: str
    arguments: tuple[str, ...] = ()
    working_directory: str = "."
    log_file: str | None = None
    run_in_terminal: bool = False
    replace_current_process: bool = False

    @field_validator("program")
    @classmethod
    def _program_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("program must not be empty")
        return value

    @field_validator("log_file")
    @classmethod
    def _empty_log_file_is_none(cls, value: str | None) -> str | None:
        return value or None

    @model_validator(mode="after")
    def _single_mode(self) -> "LaunchConfig":
        if self.run_in_terminal and self.replace_current_process:
            raise ValueError("run_in_terminal and replace_current_process cannot be combined")
        return self
