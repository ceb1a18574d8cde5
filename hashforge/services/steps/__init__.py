"""Hash step catalog."""

from hashforge.services.steps.base import HashState, HashStep, StepResult
from hashforge.services.steps.registry import StepRegistry
from hashforge.services.steps.diffusion import AvalancheStep, BitRotateStep, RoundsStep
from hashforge.services.steps.encoding import HexEncodeStep, ModuloTrimStep
from hashforge.services.steps.multiplicative import (
    FibonacciMixStep,
    ModularExpStep,
    PrimeMultiplyStep,
)
from hashforge.services.steps.string_folds import (
    AsciiSquareStep,
    CharCodeSumStep,
    PolynomialRollStep,
    SaltInjectStep,
    XorFoldStep,
)

__all__ = [
    "HashState",
    "HashStep",
    "StepResult",
    "StepRegistry",
    "CharCodeSumStep",
    "PolynomialRollStep",
    "XorFoldStep",
    "ModularExpStep",
    "FibonacciMixStep",
    "PrimeMultiplyStep",
    "BitRotateStep",
    "AsciiSquareStep",
    "AvalancheStep",
    "SaltInjectStep",
    "RoundsStep",
    "HexEncodeStep",
    "ModuloTrimStep",
]
