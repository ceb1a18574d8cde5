"""Password strength estimation."""

from hashforge.services.strength.analyzer import (
    PasswordStrengthAnalyzer,
    StrengthLevel,
    StrengthReport,
)

__all__ = [
    "PasswordStrengthAnalyzer",
    "StrengthLevel",
    "StrengthReport",
]
