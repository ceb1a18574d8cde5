import math
import re
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class StrengthLevel:
    label: str
    percent: int


@dataclass
class StrengthReport:
    """Entropy estimate and rating for one password."""

    length: int
    pool_size: int
    entropy_bits: int
    score: int
    label: str | None = None
    percent: int = 0
    tips: list[str] = field(default_factory=list)
    crack_time: str | None = None


class PasswordStrengthAnalyzer:
    """
    Heuristic password strength estimator.

    Entropy is estimated from the character pool the password draws on,
    not from the password itself, so "aaaaaaaaaaaa" rates the same as any
    other twelve lowercase letters.
    """

    LOWER: ClassVar[re.Pattern[str]] = re.compile(r"[a-z]")
    UPPER: ClassVar[re.Pattern[str]] = re.compile(r"[A-Z]")
    DIGIT: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]")
    SYMBOL: ClassVar[re.Pattern[str]] = re.compile(r"[^a-zA-Z0-9]")

    # Fast GPU rig, guesses per second
    GUESSES_PER_SECOND: ClassVar[float] = 1e10
    HIGH_ENTROPY_BITS: ClassVar[int] = 60

    LEVELS: ClassVar[list[StrengthLevel]] = [
        StrengthLevel("Very Weak", 10),
        StrengthLevel("Weak", 25),
        StrengthLevel("Fair", 45),
        StrengthLevel("Good", 65),
        StrengthLevel("Strong", 82),
        StrengthLevel("Very Strong", 95),
        StrengthLevel("Excellent", 100),
    ]

    SECONDS_PER_MINUTE: ClassVar[int] = 60
    SECONDS_PER_HOUR: ClassVar[int] = 3_600
    SECONDS_PER_DAY: ClassVar[int] = 86_400
    SECONDS_PER_YEAR: ClassVar[int] = 31_536_000

    def analyze(self, password: str) -> StrengthReport:
        if not password:
            return StrengthReport(length=0, pool_size=0, entropy_bits=0, score=0)

        has_lower = bool(self.LOWER.search(password))
        has_upper = bool(self.UPPER.search(password))
        has_digit = bool(self.DIGIT.search(password))
        has_symbol = bool(self.SYMBOL.search(password))

        pool = self.pool_size(password)
        entropy = self.entropy_bits(password)

        score = sum([
            len(password) >= 8,
            len(password) >= 12,
            len(password) >= 16,
            has_lower and has_upper,
            has_digit,
            has_symbol,
            entropy > self.HIGH_ENTROPY_BITS,
        ])
        level = self.LEVELS[min(score, len(self.LEVELS) - 1)]

        tips = []
        if len(password) < 12:
            tips.append("Use 12+ characters")
        if not has_upper:
            tips.append("Add uppercase letters")
        if not has_digit:
            tips.append("Add numbers")
        if not has_symbol:
            tips.append("Add symbols (!@#$%^&*)")

        return StrengthReport(
            length=len(password),
            pool_size=pool,
            entropy_bits=entropy,
            score=score,
            label=level.label,
            percent=level.percent,
            tips=tips,
            crack_time=self.estimate_crack_time(entropy),
        )

    def pool_size(self, password: str) -> int:
        """Size of the character set the password draws on."""
        pool = 0
        if self.LOWER.search(password):
            pool += 26
        if self.UPPER.search(password):
            pool += 26
        if self.DIGIT.search(password):
            pool += 10
        if self.SYMBOL.search(password):
            pool += 32
        return pool

    def entropy_bits(self, password: str) -> int:
        pool = self.pool_size(password)
        if pool == 0:
            return 0
        return math.floor(len(password) * math.log2(pool))

    def estimate_crack_time(self, entropy_bits: int) -> str:
        """
        Average time to brute-force a password of the given entropy.

        Assumes half the key space is searched at GUESSES_PER_SECOND.
        """
        try:
            seconds = math.pow(2, entropy_bits) / self.GUESSES_PER_SECOND / 2
        except OverflowError:
            return "Heat death of universe"

        if seconds < 1:
            return "< 1 second"
        if seconds < self.SECONDS_PER_MINUTE:
            return f"{_round_half_up(seconds)} seconds"
        if seconds < self.SECONDS_PER_HOUR:
            return f"{_round_half_up(seconds / self.SECONDS_PER_MINUTE)} minutes"
        if seconds < self.SECONDS_PER_DAY:
            return f"{_round_half_up(seconds / self.SECONDS_PER_HOUR)} hours"
        if seconds < self.SECONDS_PER_YEAR:
            return f"{_round_half_up(seconds / self.SECONDS_PER_DAY)} days"

        years = seconds / self.SECONDS_PER_YEAR
        if years < 1e3:
            return f"{_round_half_up(years)} years"
        if years < 1e6:
            return f"{years / 1e3:.1f}K years"
        if years < 1e9:
            return f"{years / 1e6:.1f}M years"
        if years < 1e15:
            return f"{years / 1e9:.1f}B years"
        return "Heat death of universe"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
