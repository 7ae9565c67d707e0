"""
Module: grading.config

Purpose:
    Scoring profile configuration. Immutable dataclasses with validation on
    construction.

Key Classes:
    - ShortAnswerRules: Normalisation, typo tolerance and regex acceptance
    - McqScoring: Points and wrong-answer penalty for MCQ questions
    - ScoringProfile: Named bundle of the above

Used By:
    - grading.short_answer
    - grading.scorer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

MAX_TYPO_TOLERANCE = 3


@dataclass(frozen=True)
class ShortAnswerRules:
    """
    How short-answer responses are compared with the answer key.

    Attributes:
        ignore_whitespace: Strip leading/trailing whitespace before comparing
        ignore_case: Compare case-insensitively (also applies to regexes)
        typo_tolerance: Maximum edit distance still accepted (0-3)
        regex_patterns: Extra patterns that accept a response when found in it

    Example:
        >>> rules = ShortAnswerRules(ignore_case=True, typo_tolerance=1)
    """

    ignore_whitespace: bool = True
    ignore_case: bool = False
    typo_tolerance: int = 0
    regex_patterns: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate rules on construction."""
        if not 0 <= self.typo_tolerance <= MAX_TYPO_TOLERANCE:
            raise ValueError(
                f"typo_tolerance must be 0-{MAX_TYPO_TOLERANCE}: {self.typo_tolerance}"
            )
        object.__setattr__(self, "regex_patterns", tuple(self.regex_patterns))


@dataclass(frozen=True)
class McqScoring:
    """
    MCQ scoring settings.

    Attributes:
        default_points: Points for MCQ questions authored with 0 points
        wrong_penalty: Points deducted for a wrong (non-blank) response
    """

    default_points: float = 1
    wrong_penalty: float = 0

    def __post_init__(self) -> None:
        """Validate settings on construction."""
        if self.default_points < 0:
            raise ValueError(f"default_points must be non-negative: {self.default_points}")
        if self.wrong_penalty < 0:
            raise ValueError(f"wrong_penalty must be non-negative: {self.wrong_penalty}")


@dataclass(frozen=True)
class ScoringProfile:
    """
    Named scoring profile.

    Attributes:
        id: Profile identifier
        name: Display name
        mcq: MCQ scoring settings
        short: Short-answer comparison rules
    """

    id: str
    name: str
    mcq: McqScoring = field(default_factory=McqScoring)
    short: ShortAnswerRules = field(default_factory=ShortAnswerRules)


DEFAULT_SCORING_PROFILE = ScoringProfile(id="default", name="Default scoring profile")
