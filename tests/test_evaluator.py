"""Tests for the pipeline evaluator."""

import pytest

from hashforge.core.exceptions import EmptyPipelineError, UnknownStepError
from hashforge.models.schemas import StepType
from hashforge.services.pipeline import PRESETS, Pipeline, PipelineEvaluator, evaluate
from hashforge.services.steps.bits import fmix32

# (2 * 2166136261) mod 2^32
SEED_LEN_2 = 37305226


class TestPipelineEvaluator:
    """Test suite for pipeline evaluation."""

    @pytest.fixture
    def evaluator(self):
        return PipelineEvaluator()

    def test_deterministic(self, evaluator):
        """Repeated runs give identical results."""
        pipeline = PRESETS["secure"]
        first = evaluator.evaluate("hunter2", "pepper", pipeline)
        second = evaluator.evaluate("hunter2", "pepper", pipeline)

        assert first.final_hash == second.final_hash
        assert first.final_accumulator == second.final_accumulator
        assert [t.value for t in first.trace] == [t.value for t in second.trace]

    def test_seed_from_password_length(self, evaluator):
        assert evaluator.seed("") == 0
        assert evaluator.seed("a") == 2166136261
        assert evaluator.seed("ab") == SEED_LEN_2

    def test_seed_counts_code_points(self):
        """A single astral character is one character: seed 0x811C9DC5, trimmed."""
        result = evaluate("\U0001F600", "", ["modulo_trim"])
        assert result.final_accumulator == 0x9DC5

    def test_empty_input_seed_is_zero(self):
        result = evaluate("", "", ["xor_fold"])

        assert result.final_accumulator == 0
        assert result.final_hash == "0" * 16

    def test_charcode_sum_example(self):
        """Seed for a 2-character password plus 97 + 98."""
        result = evaluate("ab", "", ["charcode_sum"])

        assert result.final_accumulator == SEED_LEN_2 + 195 == 37305421
        assert len(result.final_hash) == 16
        assert result.final_hash[:8] == "02393c4d"
        assert result.final_hash[8:] == format(fmix32(37305421), "08x")

    def test_two_word_digest_without_hex_step(self):
        """The second word is the Murmur3 finalization of the first."""
        result = evaluate("", "\x01", ["charcode_sum"])
        assert result.final_hash == "00000001514e28b7"

    def test_hex_encode_leaves_accumulator(self):
        plain = evaluate("ab", "", ["charcode_sum"])
        encoded = evaluate("ab", "", ["charcode_sum", "hex_encode"])

        assert encoded.final_accumulator == plain.final_accumulator
        assert encoded.final_hash == "02393c4d"

    def test_hex_encode_twice(self):
        result = evaluate("ab", "", ["charcode_sum", "hex_encode", "hex_encode"])
        assert result.final_hash == "02393c4d02393c4d"

    def test_digest_length_follows_hex_steps(self):
        for count in range(1, 5):
            pipeline = ["charcode_sum"] + ["avalanche", "hex_encode"] * count
            assert len(evaluate("pw", "salt", pipeline).final_hash) == 8 * count

    def test_full_rotation_restores_accumulator(self):
        """32 rotations by 13 bits is 416 bits, a multiple of 32."""
        base = evaluate("ab", "", ["charcode_sum"])
        rotated = evaluate("ab", "", ["charcode_sum"] + ["bit_rotate"] * 32)

        assert rotated.final_accumulator == base.final_accumulator

    def test_partial_rotation_changes_accumulator(self):
        """Four rotations by 13 bits is a rotation by 20."""
        base = evaluate("ab", "", ["charcode_sum"])
        rotated = evaluate("ab", "", ["charcode_sum"] + ["bit_rotate"] * 4)

        assert rotated.final_accumulator != base.final_accumulator
        assert rotated.final_accumulator == 0xC4D02393

    def test_simple_preset(self):
        """(seed + 195) ^ (97 ^ 98) = 37305421 ^ 3."""
        result = evaluate("ab", "", PRESETS["simple"])

        assert result.final_accumulator == 37305422
        assert result.final_hash == "02393c4e"

    def test_djb2_preset(self):
        """3135 * 1000000007 mod 2^32 = 3968863161."""
        result = evaluate("ab", "", PRESETS["djb2"])

        assert result.final_accumulator == 3968863161
        assert result.final_hash == "ec900bb9"

    def test_secure_preset_shape(self):
        result = evaluate("password", "r4nd0m$alt", PRESETS["secure"])

        assert len(result.final_hash) == 8
        assert int(result.final_hash, 16) == result.final_accumulator

    def test_salt_changes_digest(self):
        pipeline = PRESETS["secure"]
        assert (
            evaluate("password", "a", pipeline).final_hash
            != evaluate("password", "b", pipeline).final_hash
        )

    def test_trace_follows_pipeline(self, evaluator):
        pipeline = ["charcode_sum", "xor_fold", "avalanche", "hex_encode"]
        result = evaluator.evaluate("abc", "salt", pipeline)

        assert [t.step_label for t in result.trace] == [
            "Char Code Sum",
            "XOR Fold",
            "Avalanche Diffusion",
            "Hex Encode",
        ]
        assert [t.value for t in result.trace] == [s.value for s in result.step_values]
        assert result.trace[-1].display == f"0x{result.final_hash}"
        assert result.trace[-1].value == result.final_accumulator

    def test_duplicate_steps_allowed(self):
        result = evaluate("ab", "", ["charcode_sum", "charcode_sum"])
        assert result.final_accumulator == SEED_LEN_2 + 2 * 195
        assert len(result.trace) == 2

    def test_pipeline_value_object(self):
        pipeline = Pipeline.of([StepType.CHARCODE_SUM, "hex_encode"])

        assert pipeline.steps == ("charcode_sum", "hex_encode")
        assert len(pipeline) == 2
        assert Pipeline.of(pipeline) is pipeline
        assert evaluate("ab", "", pipeline).final_hash == "02393c4d"

    def test_bare_string_pipeline_rejected(self, evaluator):
        """A single step id must still be wrapped in a list."""
        with pytest.raises(TypeError):
            evaluator.evaluate("p", "s", "hex_encode")

        assert evaluate("p", "s", ["hex_encode"]).bit_length == 32

    def test_empty_pipeline_rejected(self, evaluator):
        with pytest.raises(EmptyPipelineError):
            evaluator.evaluate("anything", "anything", [])

        with pytest.raises(EmptyPipelineError):
            evaluator.evaluate("anything", "anything", Pipeline())

    def test_unknown_step_rejected(self, evaluator):
        with pytest.raises(UnknownStepError) as exc_info:
            evaluator.evaluate("p", "s", ["not_a_real_step"])

        assert exc_info.value.details == {"step_id": "not_a_real_step"}

    def test_unknown_step_after_valid_steps(self, evaluator):
        with pytest.raises(UnknownStepError):
            evaluator.evaluate("p", "s", ["charcode_sum", "hex_encode", "sha256"])

    def test_bit_length(self):
        assert evaluate("ab", "", ["charcode_sum"]).bit_length == 64
        assert evaluate("ab", "", ["hex_encode"]).bit_length == 32
