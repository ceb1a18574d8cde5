"""Tests for avalanche effect analysis."""

import random
import string
from statistics import mean

import pytest

from hashforge.core.exceptions import EmptyPipelineError, UnknownStepError
from hashforge.services.pipeline import PRESETS, AvalancheAnalyzer, avalanche_report, evaluate
from hashforge.services.pipeline.avalanche import count_different_chars, diff_percent, flip_char

ALPHABET = string.ascii_letters + string.digits


def random_passwords(count: int, seed: int = 1234) -> list[str]:
    rng = random.Random(seed)
    return [
        "".join(rng.choice(ALPHABET) for _ in range(rng.randint(6, 16)))
        for _ in range(count)
    ]


def mean_flip_diff(pipeline, passwords, salt="salt") -> float:
    """Average diff percent over the three mutated rows of every password."""
    analyzer = AvalancheAnalyzer()
    diffs = []
    for password in passwords:
        rows = analyzer.report(password, salt, pipeline)
        diffs.extend(row.diff_percent for row in rows[1:])
    return mean(diffs)


class TestHelpers:
    """String mutation and comparison helpers."""

    def test_flip_char(self):
        assert flip_char("abc", 0) == "bbc"
        assert flip_char("abc", 1) == "acc"
        assert flip_char("abc", 2) == "abd"

    def test_flip_char_out_of_range(self):
        assert flip_char("", 0) == ""
        assert flip_char("", -1) == ""
        assert flip_char("abc", 3) == "abc"

    def test_flip_char_wraps_at_max_code_point(self):
        assert flip_char("\U0010FFFF", 0) == "\x00"

    def test_count_different_chars(self):
        assert count_different_chars("abc", "abc") == 0
        assert count_different_chars("abc", "abd") == 1
        assert count_different_chars("abc", "ab") == 1
        assert count_different_chars("ab", "xbcd") == 3

    def test_diff_percent_rounds_half_up(self):
        assert diff_percent("aaaaaaaa", "baaaaaaa") == 13  # 12.5
        assert diff_percent("a" * 16, "b" + "a" * 15) == 6  # 6.25
        assert diff_percent("a" * 16, "bbb" + "a" * 13) == 19  # 18.75

    def test_diff_percent_identical(self):
        assert diff_percent("deadbeef", "deadbeef") == 0
        assert diff_percent("", "") == 0


class TestAvalancheAnalyzer:
    """Test suite for avalanche reports."""

    @pytest.fixture
    def analyzer(self):
        return AvalancheAnalyzer()

    def test_report_rows(self, analyzer):
        rows = analyzer.report("password", "salt", PRESETS["secure"])

        assert [row.label for row in rows] == [
            "Original",
            "Flip 1st char",
            "Flip mid char",
            "Flip last char",
        ]

    def test_original_row_matches_evaluate(self, analyzer):
        pipeline = PRESETS["djb2"]
        rows = analyzer.report("password", "salt", pipeline)

        assert rows[0].hash == evaluate("password", "salt", pipeline).final_hash
        assert rows[0].diff_percent == 0

    def test_mutated_rows_use_flipped_passwords(self, analyzer):
        pipeline = PRESETS["secure"]
        rows = analyzer.report("abcd", "s", pipeline)

        assert rows[1].hash == evaluate("bbcd", "s", pipeline).final_hash
        assert rows[2].hash == evaluate("abdd", "s", pipeline).final_hash
        assert rows[3].hash == evaluate("abce", "s", pipeline).final_hash

    def test_single_character_password(self, analyzer):
        """First, middle and last flips all hit the same character; rows are kept."""
        rows = analyzer.report("a", "", ["charcode_sum", "avalanche"])

        assert len(rows) == 4
        assert rows[1].hash == rows[2].hash == rows[3].hash

    def test_empty_password(self, analyzer):
        rows = analyzer.report("", "salt", PRESETS["secure"])

        assert len(rows) == 4
        assert all(row.hash == rows[0].hash for row in rows)
        assert all(row.diff_percent == 0 for row in rows)

    def test_empty_pipeline_rejected(self):
        with pytest.raises(EmptyPipelineError):
            avalanche_report("password", "salt", [])

    def test_unknown_step_rejected(self):
        with pytest.raises(UnknownStepError):
            avalanche_report("password", "salt", ["charcode_sum", "md5"])

    def test_trimmed_output_limits_diff(self, analyzer):
        """Trimming to 16 bits pins the first four hex digits to zero."""
        pipeline = ["charcode_sum", "avalanche", "modulo_trim", "hex_encode"]
        for password in random_passwords(20):
            rows = analyzer.report(password, "", pipeline)
            assert all(row.hash.startswith("0000") for row in rows)
            assert all(row.diff_percent <= 50 for row in rows)


class TestAvalancheStatistics:
    """Soft statistical properties over many random passwords."""

    @pytest.fixture
    def passwords(self):
        return random_passwords(200)

    def test_diffusing_pipelines_change_most_digits(self, passwords):
        for pipeline in (
            PRESETS["secure"],
            ["charcode_sum", "avalanche"],
            ["polynomial_roll", "rounds", "hex_encode"],
        ):
            average = mean_flip_diff(pipeline, passwords)
            assert 85 <= average <= 100

    def test_weak_pipeline_changes_few_digits(self, passwords):
        """Sum and XOR only disturb the low bits of the accumulator."""
        weak = mean_flip_diff(PRESETS["simple"], passwords)
        strong = mean_flip_diff(PRESETS["secure"], passwords)

        assert weak < 40
        assert strong > weak
