"""
Avalanche effect analysis.

Re-runs a pipeline on single-character mutations of the password and
measures how much of the digest changes.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from hashforge.core.exceptions import EmptyPipelineError
from hashforge.services.pipeline.evaluator import Pipeline, PipelineEvaluator

MAX_CODE_POINT = 0x10FFFF


@dataclass
class AvalancheRow:
    """One line of an avalanche report."""

    label: str
    hash: str
    diff_percent: int


def flip_char(text: str, index: int) -> str:
    """
    Increment the code point at ``index`` by one.

    Code points past U+10FFFF wrap to U+0000. An index outside the string
    leaves it unchanged.
    """
    if not 0 <= index < len(text):
        return text
    flipped = chr((ord(text[index]) + 1) % (MAX_CODE_POINT + 1))
    return text[:index] + flipped + text[index + 1:]


def count_different_chars(a: str, b: str) -> int:
    """Positions that differ over the common length, plus the length gap."""
    diff = sum(1 for x, y in zip(a, b) if x != y)
    return diff + abs(len(a) - len(b))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def diff_percent(base: str, other: str) -> int:
    """Share of ``base`` that changed in ``other``, as a whole percentage."""
    if not base:
        return 0
    return round_half_up(100 * count_different_chars(base, other) / len(base))


class AvalancheAnalyzer:
    """Compares a pipeline's digest against digests of mutated passwords."""

    ORIGINAL_LABEL: ClassVar[str] = "Original"

    def __init__(self, evaluator: PipelineEvaluator | None = None):
        self.evaluator = evaluator or PipelineEvaluator()

    def mutations(self, password: str) -> list[tuple[str, str]]:
        """
        The passwords to compare, labelled.

        The unmutated password comes first. One-character passwords produce
        the same first and last flip; both rows are kept.
        """
        length = len(password)
        return [
            (self.ORIGINAL_LABEL, password),
            ("Flip 1st char", flip_char(password, 0)),
            ("Flip mid char", flip_char(password, length // 2)),
            ("Flip last char", flip_char(password, length - 1)),
        ]

    def report(
        self,
        password: str,
        salt: str,
        pipeline: Pipeline | Iterable[str],
    ) -> list[AvalancheRow]:
        """
        Build the avalanche report for a pipeline.

        Args:
            password: The unmutated password
            salt: Salt used for every run
            pipeline: Ordered step ids

        Returns:
            One row per mutation, starting with the original password
        """
        pipeline = Pipeline.of(pipeline)
        if not pipeline:
            raise EmptyPipelineError()

        base_hash = self.evaluator.evaluate(password, salt, pipeline).final_hash

        rows = []
        for label, mutated in self.mutations(password):
            mutated_hash = self.evaluator.evaluate(mutated, salt, pipeline).final_hash
            rows.append(AvalancheRow(
                label=label,
                hash=mutated_hash,
                diff_percent=diff_percent(base_hash, mutated_hash),
            ))

        return rows
