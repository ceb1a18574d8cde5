import logging
from typing import Type

from hashforge.core.exceptions import UnknownStepError
from hashforge.models.schemas import StepFamily, StepInfo, StepType
from hashforge.services.steps.base import HashStep

logger = logging.getLogger(__name__)


class StepRegistry:
    """
    Registry for hash steps.

    Holds the closed step catalog and provides lookup by id or family.
    """

    _steps: dict[StepType, Type[HashStep]] = {}
    _instances: dict[StepType, HashStep] = {}

    @classmethod
    def register(cls, step_class: Type[HashStep]) -> Type[HashStep]:
        """
        Register a hash step class.

        Can be used as a decorator:
            @StepRegistry.register
            class CharCodeSumStep(HashStep):
                ...

        Args:
            step_class: The step class to register

        Returns:
            The step class (for decorator usage)
        """
        cls._steps[step_class.step_type] = step_class
        logger.debug("Registered hash step %s", step_class.step_type.value)
        return step_class

    def get_step(self, step_id: StepType | str) -> HashStep:
        """
        Get a step instance by id.

        Args:
            step_id: Catalog id of the step

        Returns:
            Step instance

        Raises:
            UnknownStepError: If the id is not part of the catalog
        """
        try:
            step_type = StepType(step_id)
        except ValueError:
            raise UnknownStepError(str(step_id)) from None

        if step_type not in self._steps:
            raise UnknownStepError(step_type.value)

        # Lazy instantiation with caching
        if step_type not in self._instances:
            self._instances[step_type] = self._steps[step_type]()

        return self._instances[step_type]

    def get_steps_by_family(self, family: StepFamily) -> list[HashStep]:
        """
        Get all steps belonging to a family, in catalog order.

        Args:
            family: The step family

        Returns:
            List of step instances
        """
        return [
            self.get_step(step_type)
            for step_type in self.list_registered()
            if self._steps[step_type].step_family == family
        ]

    def get_all_steps(self) -> list[HashStep]:
        """Get all registered steps, in catalog order."""
        return [self.get_step(step_type) for step_type in self.list_registered()]

    def catalog(self) -> dict[str, StepInfo]:
        """Read-only view of the catalog: step id to display metadata."""
        return {step.step_type.value: step.info() for step in self.get_all_steps()}

    @classmethod
    def list_registered(cls) -> list[StepType]:
        """
        List all registered step types in catalog order.

        Returns:
            List of registered step types
        """
        return [step_type for step_type in StepType if step_type in cls._steps]

    @classmethod
    def is_registered(cls, step_id: StepType | str) -> bool:
        """
        Check if a step id is registered.

        Args:
            step_id: The step id to check

        Returns:
            True if registered
        """
        try:
            return StepType(step_id) in cls._steps
        except ValueError:
            return False


# Import step modules to trigger registration
def _load_steps() -> None:
    """Load all step modules to trigger registration."""
    from hashforge.services.steps import diffusion, encoding, multiplicative, string_folds  # noqa: F401


# Load steps when module is imported
_load_steps()
