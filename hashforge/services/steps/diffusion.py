"""Bit-mixing steps: rotation and the Murmur3 finalizer."""

from typing import ClassVar

from hashforge.models.schemas import StepFamily, StepType
from hashforge.services.steps.base import HashState, HashStep, StepResult
from hashforge.services.steps.bits import fmix32, rotl32
from hashforge.services.steps.registry import StepRegistry


@StepRegistry.register
class BitRotateStep(HashStep):
    step_type = StepType.BIT_ROTATE
    step_family = StepFamily.DIFFUSION
    label = "Bit Rotation"
    icon = "↻"
    description = "Rotates bits left by 13 positions, preventing linear collisions."
    formula = r"\text{ROTL}_{13}(h) = (h \ll 13) \mid (h \gg 19)"

    SHIFT: ClassVar[int] = 13

    def run(self, state: HashState) -> StepResult:
        before = state.accumulator
        state.accumulator = rotl32(before, self.SHIFT)
        return StepResult(
            description=f"ROTL₁₃({before}) = {state.accumulator}",
            value=state.accumulator,
        )


@StepRegistry.register
class AvalancheStep(HashStep):
    """
    Murmur3 32-bit finalizer.

    Every output bit depends on every input bit, so a one-bit change in the
    accumulator flips about half of the result.
    """

    step_type = StepType.AVALANCHE
    step_family = StepFamily.DIFFUSION
    label = "Avalanche Diffusion"
    icon = "⚡"
    description = "Murmur3-inspired finalizer that maximally diffuses bits."
    formula = (
        r"h \mathrel{\oplus}= h \gg 16, \; h \mathrel{\times}= \text{0x85ebca6b}, \; "
        r"h \mathrel{\oplus}= h \gg 13, \; h \mathrel{\times}= \text{0xc2b2ae35}, \; "
        r"h \mathrel{\oplus}= h \gg 16"
    )

    def run(self, state: HashState) -> StepResult:
        state.accumulator = fmix32(state.accumulator)
        return StepResult(
            description=f"Murmur3 finalize = {state.accumulator}",
            value=state.accumulator,
        )


@StepRegistry.register
class RoundsStep(HashStep):
    """Applies the avalanche finalizer several times in a row (key stretching)."""

    step_type = StepType.ROUNDS
    step_family = StepFamily.DIFFUSION
    label = "Iteration Rounds"
    icon = "🔄"
    description = "Re-applies the avalanche finalization 8 times for key-stretching."
    formula = r"H^{(k)}(h) = \underbrace{A(A(\cdots A}_{k}(h)\cdots)), \quad k = 8"

    ROUNDS: ClassVar[int] = 8

    def run(self, state: HashState) -> StepResult:
        h = state.accumulator
        for _ in range(self.ROUNDS):
            h = fmix32(h)
        state.accumulator = h
        return StepResult(
            description=f"{self.ROUNDS}× avalanche rounds = {state.accumulator}",
            value=state.accumulator,
        )
