"""
Configuration for evaluation and simplification.

Both configs are frozen and passed explicitly; there is no mutable global
configuration.
"""

from dataclasses import dataclass
from typing import Optional

# Largest digit count that still means something for a float64
MAX_SIGNIFICANT_DIGITS = 17


@dataclass(frozen=True)
class EvaluationConfig:
    """
    Precision contract for evaluation.

    After every Add/Sub/Mul/Div/Pow step the intermediate result is rounded to
    ``significant_digits`` significant decimal digits, which suppresses
    representation noise in chained operations (0.2 * 1.5 * 6 gives 1.8, not
    1.8000000000000003). ``None`` disables rounding and yields raw IEEE-754
    results. Zero and non-finite values are never rounded.
    """

    significant_digits: Optional[int] = 14

    def __post_init__(self):
        digits = self.significant_digits
        if digits is None:
            return
        if isinstance(digits, bool) or not isinstance(digits, int):
            raise ValueError(f"significant_digits must be an int or None, got {digits!r}")
        if not 1 <= digits <= MAX_SIGNIFICANT_DIGITS:
            raise ValueError(
                f"significant_digits must be between 1 and {MAX_SIGNIFICANT_DIGITS}, got {digits}")

    @property
    def rounding_enabled(self) -> bool:
        return self.significant_digits is not None

    @classmethod
    def exact(cls) -> 'EvaluationConfig':
        """Config with rounding disabled"""
        return cls(significant_digits=None)


@dataclass(frozen=True)
class SimplifyConfig:
    """Limits for repeated simplification (see Node.simplify_fully)"""

    max_passes: int = 32

    def __post_init__(self):
        if isinstance(self.max_passes, bool) or not isinstance(self.max_passes, int):
            raise ValueError(f"max_passes must be an int, got {self.max_passes!r}")
        if self.max_passes < 1:
            raise ValueError(f"max_passes must be at least 1, got {self.max_passes}")


DEFAULT_EVALUATION_CONFIG = EvaluationConfig()
DEFAULT_SIMPLIFY_CONFIG = SimplifyConfig()
