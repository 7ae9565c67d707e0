"""
Module: grading

Purpose:
    Auto-scoring of submitted attempts: MCQ (layout-aware) and short answer
    (normalisation, Levenshtein typo tolerance, regex acceptance).

Key Functions:
    - score_attempt(): Score an attempt
    - check_answer(): Short-answer acceptance check
    - levenshtein_distance(): Edit distance

Key Classes:
    - ScoringProfile, McqScoring, ShortAnswerRules: Configuration
    - AttemptScore, QuestionResult: Results
"""

from .config import (
    DEFAULT_SCORING_PROFILE,
    McqScoring,
    ScoringProfile,
    ShortAnswerRules,
)
from .short_answer import add_to_answer_key, check_answer, levenshtein_distance, process_answer
from .scorer import AttemptScore, QuestionResult, score_attempt

__all__ = [
    # Config
    "DEFAULT_SCORING_PROFILE",
    "McqScoring",
    "ScoringProfile",
    "ShortAnswerRules",
    # Short answer
    "add_to_answer_key",
    "check_answer",
    "levenshtein_distance",
    "process_answer",
    # Scoring
    "AttemptScore",
    "QuestionResult",
    "score_attempt",
]
