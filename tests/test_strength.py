"""Tests for the password strength analyzer."""

import pytest

from hashforge.services.strength import PasswordStrengthAnalyzer


class TestPasswordStrengthAnalyzer:
    """Test suite for password strength estimation."""

    @pytest.fixture
    def analyzer(self):
        return PasswordStrengthAnalyzer()

    def test_empty_password(self, analyzer):
        report = analyzer.analyze("")

        assert report.entropy_bits == 0
        assert report.score == 0
        assert report.label is None
        assert report.percent == 0
        assert report.tips == []
        assert report.crack_time is None

    def test_lowercase_password(self, analyzer):
        """8 lowercase letters: 8 * log2(26) = 37.6 bits."""
        report = analyzer.analyze("password")

        assert report.pool_size == 26
        assert report.entropy_bits == 37
        assert report.score == 1
        assert report.label == "Weak"
        assert report.percent == 25
        assert report.tips == [
            "Use 12+ characters",
            "Add uppercase letters",
            "Add numbers",
            "Add symbols (!@#$%^&*)",
        ]
        assert report.crack_time == "7 seconds"

    def test_short_password_is_very_weak(self, analyzer):
        report = analyzer.analyze("abc")

        assert report.score == 0
        assert report.label == "Very Weak"
        assert report.crack_time == "< 1 second"

    def test_all_character_classes(self, analyzer):
        report = analyzer.analyze("Tr0ub4dor&3")

        assert report.pool_size == 94
        assert report.entropy_bits == 72
        assert report.score == 5
        assert report.label == "Very Strong"
        assert report.tips == ["Use 12+ characters"]

    def test_score_caps_at_excellent(self, analyzer):
        report = analyzer.analyze("Correct-Horse-42-Battery")

        assert report.score == 7
        assert report.label == "Excellent"
        assert report.percent == 100
        assert report.tips == []
        assert report.crack_time == "Heat death of universe"

    def test_space_counts_as_symbol(self, analyzer):
        assert analyzer.pool_size("correct horse") == 26 + 32

    @pytest.mark.parametrize(
        "entropy,expected",
        [
            (10, "< 1 second"),
            (40, "55 seconds"),
            (41, "2 minutes"),
            (50, "16 hours"),
            (55, "21 days"),
            (60, "2 years"),
            (70, "1.9K years"),
            (200, "Heat death of universe"),
            (5000, "Heat death of universe"),
        ],
    )
    def test_crack_time_buckets(self, analyzer, entropy, expected):
        assert analyzer.estimate_crack_time(entropy) == expected
