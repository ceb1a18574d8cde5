from typing import Any


class HashForgeError(Exception):
    """Base exception for all hash pipeline errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(HashForgeError):
    """Raised when input validation fails."""

    pass


class EmptyPipelineError(ValidationError):
    """Raised when a pipeline with no steps is evaluated."""

    def __init__(self) -> None:
        super().__init__("Pipeline must contain at least one step")


class InputTooLongError(ValidationError):
    """Raised when a password or salt exceeds the maximum length."""

    def __init__(self, field: str, length: int, max_length: int):
        super().__init__(
            f"{field.capitalize()} length {length} exceeds maximum {max_length}",
            {"field": field, "length": length, "max_length": max_length},
        )


class PipelineTooLongError(ValidationError):
    """Raised when a pipeline has more steps than allowed."""

    def __init__(self, steps: int, max_steps: int):
        super().__init__(
            f"Pipeline has {steps} steps, maximum is {max_steps}",
            {"steps": steps, "max_steps": max_steps},
        )


class StepError(HashForgeError):
    """Base exception for step catalog errors."""

    pass


class UnknownStepError(StepError):
    """Raised when a pipeline references a step that is not in the catalog."""

    def __init__(self, step_id: str):
        self.step_id = step_id
        super().__init__(
            f"Hash step '{step_id}' not found",
            {"step_id": step_id},
        )
