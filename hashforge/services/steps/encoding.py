"""Output-shaping steps."""

from typing import ClassVar

from hashforge.models.schemas import StepFamily, StepType
from hashforge.services.steps.base import HashState, HashStep, StepResult
from hashforge.services.steps.bits import hex32
from hashforge.services.steps.registry import StepRegistry


@StepRegistry.register
class HexEncodeStep(HashStep):
    """
    Appends the accumulator as an 8-digit hex word to the hex output.

    The accumulator itself is left untouched. Once any hex word has been
    written, the hex output becomes the final digest of the run.
    """

    step_type = StepType.HEX_ENCODE
    step_family = StepFamily.ENCODING
    label = "Hex Encode"
    icon = "0x"
    description = "Converts the 32-bit integer to a zero-padded hex string."
    formula = r"\text{hex}(h) = d_7 d_6 \cdots d_0, \quad h = \sum_{k=0}^{7} d_k \cdot 16^k"

    def run(self, state: HashState) -> StepResult:
        word = hex32(state.accumulator)
        state.hex_accumulator += word
        return StepResult(
            description=f"{state.accumulator} → 0x{word}",
            value=state.accumulator,
            display=f"0x{word}",
        )


@StepRegistry.register
class ModuloTrimStep(HashStep):
    step_type = StepType.MODULO_TRIM
    step_family = StepFamily.ENCODING
    label = "Modulo Trim"
    icon = "%"
    description = "Reduces the hash value to a 16-bit range via modulo."
    formula = r"H_{\text{final}} = H \pmod{2^{16}}"

    MODULUS: ClassVar[int] = 65536

    def run(self, state: HashState) -> StepResult:
        state.accumulator %= self.MODULUS
        return StepResult(
            description=f"h mod 65536 = {state.accumulator}",
            value=state.accumulator,
        )
