"""Steps that multiply or exponentiate the accumulator."""

from typing import ClassVar

from hashforge.models.schemas import StepFamily, StepType
from hashforge.services.steps.base import HashState, HashStep, StepResult
from hashforge.services.steps.bits import u32
from hashforge.services.steps.registry import StepRegistry


@StepRegistry.register
class ModularExpStep(HashStep):
    """Raises the accumulator to 65537 modulo the Mersenne prime 2^31 - 1."""

    step_type = StepType.MODULAR_EXP
    step_family = StepFamily.MULTIPLICATIVE
    label = "Modular Exponent"
    icon = "xⁿ"
    description = "Raises the current hash value to a power mod a large prime."
    formula = r"H = h^{e} \pmod{M}, \quad e = 65537, M = 2^{31}-1"

    EXPONENT: ClassVar[int] = 65537
    MODULUS: ClassVar[int] = 2_147_483_647

    def run(self, state: HashState) -> StepResult:
        base = state.accumulator % self.MODULUS
        if base == 0:
            base = 1

        result = 1
        exponent = self.EXPONENT
        while exponent > 0:
            if exponent & 1:
                result = (result * base) % self.MODULUS
            base = (base * base) % self.MODULUS
            exponent >>= 1

        state.accumulator = u32(result)
        return StepResult(
            description=f"h^65537 mod (2³¹-1) = {state.accumulator}",
            value=state.accumulator,
        )


@StepRegistry.register
class FibonacciMixStep(HashStep):
    """Fibonacci hashing: multiply by Knuth's constant, about 2^32 / phi."""

    step_type = StepType.FIBONACCI_MIX
    step_family = StepFamily.MULTIPLICATIVE
    label = "Fibonacci Mix"
    icon = "φ"
    description = "Multiplies by the golden ratio approximation in integer arithmetic."
    formula = r"H = h \cdot 2654435769 \pmod{2^{32}}"

    KNUTH: ClassVar[int] = 2_654_435_769

    def run(self, state: HashState) -> StepResult:
        state.accumulator = u32(state.accumulator * self.KNUTH)
        return StepResult(
            description=f"h · 2654435769 mod 2³² = {state.accumulator}",
            value=state.accumulator,
        )


@StepRegistry.register
class PrimeMultiplyStep(HashStep):
    step_type = StepType.PRIME_MULTIPLY
    step_family = StepFamily.MULTIPLICATIVE
    label = "Prime Multiply"
    icon = "π"
    description = "Multiplies by a large prime to spread bit patterns."
    formula = r"H = h \cdot 1000000007 \pmod{2^{32}}"

    PRIME: ClassVar[int] = 1_000_000_007

    def run(self, state: HashState) -> StepResult:
        state.accumulator = u32(state.accumulator * self.PRIME)
        return StepResult(
            description=f"h · 1000000007 mod 2³² = {state.accumulator}",
            value=state.accumulator,
        )
