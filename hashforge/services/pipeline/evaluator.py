"""
Pipeline evaluator - folds a password/salt pair through an ordered list of
hash steps.

The evaluation:
1. Rejects empty pipelines and resolves every step id up front
2. Seeds the accumulator from the password length
3. Runs the steps strictly in order over one fresh HashState
4. Builds the final digest from the hex output, or synthesizes one
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import ClassVar

from hashforge.core.exceptions import EmptyPipelineError
from hashforge.services.steps.base import HashState, HashStep, StepResult
from hashforge.services.steps.bits import fmix32, hex32, u32
from hashforge.services.steps.registry import StepRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pipeline:
    """
    An ordered sequence of step ids, owned by the caller.

    Duplicates are allowed. An empty pipeline can be built but is rejected
    when evaluated.
    """

    steps: tuple[str, ...] = ()

    @classmethod
    def of(cls, steps: "Pipeline | Iterable[str]") -> "Pipeline":
        """Build a pipeline from any iterable of step ids."""
        if isinstance(steps, Pipeline):
            return steps
        if isinstance(steps, str):
            raise TypeError(
                f"Pipeline steps must be a sequence of step ids, not a bare string: {steps!r}"
            )
        return cls(tuple(str(getattr(step, "value", step)) for step in steps))

    def __iter__(self) -> Iterator[str]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


@dataclass
class TraceEntry:
    """One executed step, as shown in the trace log."""

    step_label: str
    description: str
    value: int
    display: str | None = None


@dataclass
class RunResult:
    """Result of one full pipeline evaluation."""

    final_hash: str
    trace: list[TraceEntry] = field(default_factory=list)
    step_values: list[StepResult] = field(default_factory=list)
    final_accumulator: int = 0

    @property
    def bit_length(self) -> int:
        return len(self.final_hash) * 4


class PipelineEvaluator:
    """
    Runs pipelines against password/salt pairs.

    The evaluator keeps no state between runs; the only shared object is the
    read-only step registry.
    """

    # FNV-1a 32-bit offset basis
    SEED_MULTIPLIER: ClassVar[int] = 2_166_136_261

    def __init__(self, registry: StepRegistry | None = None):
        self.registry = registry or StepRegistry()

    def evaluate(
        self,
        password: str,
        salt: str,
        pipeline: Pipeline | Iterable[str],
    ) -> RunResult:
        """
        Evaluate a pipeline.

        Args:
            password: The password to hash
            salt: Salt appended to the password (and read by salt steps)
            pipeline: Ordered step ids

        Returns:
            RunResult with the final digest and per-step trace

        Raises:
            EmptyPipelineError: If the pipeline has no steps
            UnknownStepError: If any step id is not in the catalog
        """
        pipeline = Pipeline.of(pipeline)
        if not pipeline:
            raise EmptyPipelineError()

        steps = self.resolve(pipeline)
        state = HashState(
            input_text=password + salt,
            accumulator=self.seed(password),
            salt=salt,
        )

        trace: list[TraceEntry] = []
        step_values: list[StepResult] = []
        for step in steps:
            result = step.run(state)
            trace.append(TraceEntry(
                step_label=step.label,
                description=result.description,
                value=result.value,
                display=result.display,
            ))
            step_values.append(result)

        final_hash = self.finalize(state)
        logger.debug(
            "Evaluated %d-step pipeline: accumulator=%d hash=%s",
            len(steps), state.accumulator, final_hash,
        )

        return RunResult(
            final_hash=final_hash,
            trace=trace,
            step_values=step_values,
            final_accumulator=state.accumulator,
        )

    def resolve(self, pipeline: Pipeline) -> list[HashStep]:
        """Look up every step of the pipeline before anything runs."""
        return [self.registry.get_step(step_id) for step_id in pipeline]

    def seed(self, password: str) -> int:
        """Initial accumulator, derived from the password length only."""
        return u32(len(password) * self.SEED_MULTIPLIER)

    @staticmethod
    def finalize(state: HashState) -> str:
        """
        Produce the final digest of a run.

        Pipelines that wrote hex words return them concatenated. Otherwise
        the digest is the accumulator followed by its Murmur3 finalization,
        as two 8-digit hex words.
        """
        if state.hex_accumulator:
            return state.hex_accumulator
        return hex32(state.accumulator) + hex32(fmix32(state.accumulator))
