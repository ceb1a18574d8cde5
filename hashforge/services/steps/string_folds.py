"""
Steps that fold the input text (or the salt) into the accumulator.

Every step here walks the string one Unicode code point at a time, in the
order the string was written.
"""

from typing import ClassVar

from hashforge.models.schemas import StepFamily, StepType
from hashforge.services.steps.base import HashState, HashStep, StepResult
from hashforge.services.steps.bits import MASK32, code_points, u32
from hashforge.services.steps.registry import StepRegistry


@StepRegistry.register
class CharCodeSumStep(HashStep):
    """Adds the sum of all code points to the accumulator."""

    step_type = StepType.CHARCODE_SUM
    step_family = StepFamily.STRING_FOLD
    label = "Char Code Sum"
    icon = "∑"
    description = "Sums the Unicode code points of every character."
    formula = r"H(s) = h + \sum_{i=0}^{n-1} \text{ord}(s_i) \pmod{2^{32}}"

    def run(self, state: HashState) -> StepResult:
        total = sum(code_points(state.input_text))
        state.accumulator = u32(state.accumulator + total)
        return StepResult(
            description=f"∑ ord(chars) = {total}, h = {state.accumulator}",
            value=state.accumulator,
        )


@StepRegistry.register
class PolynomialRollStep(HashStep):
    """
    Polynomial rolling hash of the input text.

    Replaces the accumulator instead of adding to it, so whatever ran before
    this step is discarded.
    """

    step_type = StepType.POLYNOMIAL_ROLL
    step_family = StepFamily.STRING_FOLD
    label = "Polynomial Rolling"
    icon = "P"
    description = "Weights each character by its position using a prime base."
    formula = r"H(s) = \sum_{i=0}^{n-1} s_i \cdot 31^i \pmod{10^9+7}"

    BASE: ClassVar[int] = 31
    MODULUS: ClassVar[int] = 1_000_000_007

    def run(self, state: HashState) -> StepResult:
        h = 0
        power = 1
        for code in code_points(state.input_text):
            h = (h + code * power) % self.MODULUS
            power = (power * self.BASE) % self.MODULUS

        state.accumulator = u32(h)
        return StepResult(
            description=f"∑ cᵢ·31ⁱ mod (10⁹+7) = {state.accumulator}",
            value=state.accumulator,
        )


@StepRegistry.register
class XorFoldStep(HashStep):
    """XORs every code point into the accumulator."""

    step_type = StepType.XOR_FOLD
    step_family = StepFamily.STRING_FOLD
    label = "XOR Fold"
    icon = "⊕"
    description = "XORs every character code into the accumulator for bit mixing."
    formula = r"H(s) = h \oplus c_0 \oplus c_1 \oplus \cdots \oplus c_{n-1}"

    def run(self, state: HashState) -> StepResult:
        h = state.accumulator
        for code in code_points(state.input_text):
            h ^= code
        state.accumulator = u32(h)
        return StepResult(
            description=f"h ⊕ all chars = {state.accumulator}",
            value=state.accumulator,
        )


@StepRegistry.register
class AsciiSquareStep(HashStep):
    """Adds the sum of squared code points to the accumulator."""

    step_type = StepType.ASCII_SQUARE
    step_family = StepFamily.STRING_FOLD
    label = "ASCII Square Sum"
    icon = "x²"
    description = "Sums the squares of each character code for non-linear mixing."
    formula = r"H(s) = h + \sum_{i=0}^{n-1} \text{ord}(s_i)^2 \pmod{2^{32}}"

    def run(self, state: HashState) -> StepResult:
        squares = 0
        for code in code_points(state.input_text):
            squares = (squares + code * code) & MASK32

        state.accumulator = u32(state.accumulator + squares)
        return StepResult(
            description=f"∑ cᵢ² mod 2³² = {squares}, h = {state.accumulator}",
            value=state.accumulator,
        )


@StepRegistry.register
class SaltInjectStep(HashStep):
    """
    Mixes a polynomial hash of the salt alone into the accumulator.

    Both the running sum and the power of 31 are truncated to 32 bits after
    every character. An empty salt is hashed as ``"x"``.
    """

    step_type = StepType.SALT_INJECT
    step_family = StepFamily.STRING_FOLD
    label = "Salt Injection"
    icon = "🧂"
    description = "Mixes the salt into the hash state using XOR and a polynomial blend."
    formula = r"H = h \oplus H_{\text{poly}}(\text{salt})"

    EMPTY_SALT: ClassVar[str] = "x"

    def run(self, state: HashState) -> StepResult:
        salt = state.salt or self.EMPTY_SALT
        salt_value = 0
        power = 1
        for code in code_points(salt):
            salt_value = u32(salt_value + code * power)
            power = u32(power * 31)

        state.accumulator = u32(state.accumulator ^ salt_value)
        return StepResult(
            description=f'h ⊕ H_poly(salt="{state.salt}") = {state.accumulator}',
            value=state.accumulator,
        )
