from abc import ABC, abstractmethod
from dataclasses import dataclass

from hashforge.models.schemas import StepFamily, StepInfo, StepType


@dataclass
class HashState:
    """
    Running state threaded through a pipeline.

    A fresh state is built for every run; steps mutate it in place and the
    next step sees the result.
    """

    input_text: str
    accumulator: int
    salt: str
    hex_accumulator: str = ""


@dataclass
class StepResult:
    """Result of a single step invocation."""

    description: str
    value: int
    display: str | None = None


class HashStep(ABC):
    """
    Abstract base class for all hash steps.

    Each step is a deterministic transformation of a HashState:
    - run(): update the accumulator (and possibly the hex output) and
      report what was computed

    Steps never do I/O, never read the clock and never use randomness.
    """

    # Step metadata
    step_type: StepType
    step_family: StepFamily
    label: str
    icon: str
    description: str
    formula: str

    @abstractmethod
    def run(self, state: HashState) -> StepResult:
        """
        Apply this step to the running state.

        Args:
            state: The pipeline state, mutated in place

        Returns:
            StepResult describing the new accumulator value
        """
        pass

    def info(self) -> StepInfo:
        """Display metadata for the catalog."""
        return StepInfo(
            id=self.step_type,
            family=self.step_family,
            label=self.label,
            icon=self.icon,
            description=self.description,
            formula=self.formula,
        )
