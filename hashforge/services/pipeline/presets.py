"""Ready-made pipelines and the breach-story scenarios built on them."""

import string
import time
from dataclasses import dataclass

from hashforge.services.pipeline.evaluator import Pipeline

PRESETS: dict[str, Pipeline] = {
    "simple": Pipeline(("charcode_sum", "xor_fold", "hex_encode")),
    "djb2": Pipeline(("charcode_sum", "polynomial_roll", "prime_multiply", "hex_encode")),
    "secure": Pipeline((
        "salt_inject",
        "polynomial_roll",
        "avalanche",
        "modular_exp",
        "fibonacci_mix",
        "rounds",
        "avalanche",
        "hex_encode",
    )),
}

RANDOM_SALT_PREFIX = "r4nd0m$alt#"

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def timestamp_salt() -> str:
    """A fresh salt: fixed prefix plus the current time in ms, base 36."""
    return RANDOM_SALT_PREFIX + to_base36(time.time_ns() // 1_000_000)


@dataclass(frozen=True)
class Scenario:
    """
    A demo pairing a pipeline with suggested inputs.

    ``password`` and ``salt`` of None mean "keep whatever the user has".
    """

    name: str
    title: str
    pipeline: Pipeline
    password: str | None = None
    salt: str | None = None
    fresh_salt: bool = False

    def resolved_salt(self) -> str | None:
        if self.fresh_salt:
            return timestamp_salt()
        return self.salt


SCENARIOS: dict[str, Scenario] = {
    "linkedin": Scenario(
        name="linkedin",
        title="Unsalted sum hash (2012 LinkedIn leak)",
        pipeline=PRESETS["simple"],
        password="linkedin_password",
        salt="",
    ),
    "md5": Scenario(
        name="md5",
        title="Fast unsalted polynomial hash (MD5-era storage)",
        pipeline=Pipeline(("charcode_sum", "polynomial_roll", "hex_encode")),
        password="weak_password",
    ),
    "argon2": Scenario(
        name="argon2",
        title="Salted, stretched pipeline (Argon2-style)",
        pipeline=PRESETS["secure"],
        fresh_salt=True,
    ),
}
