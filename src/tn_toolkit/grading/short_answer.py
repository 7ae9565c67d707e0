"""
Module: grading.short_answer

Purpose:
    Short-answer grading: normalisation, Levenshtein typo tolerance and
    regex acceptance, plus answer-key maintenance.

Key Functions:
    - process_answer(): Normalise a response per the rules
    - levenshtein_distance(): Edit distance between two strings
    - check_answer(): Whether a response is accepted
    - add_to_answer_key(): Add an accepted answer unless already present

Dependencies:
    - rapidfuzz: Levenshtein edit distance
"""

from __future__ import annotations

import logging
import re
from typing import List, Sequence, Union

from rapidfuzz.distance import Levenshtein

from .config import ShortAnswerRules

logger = logging.getLogger(__name__)


def process_answer(answer: str, rules: ShortAnswerRules) -> str:
    """Apply whitespace and case normalisation."""
    processed = answer
    if rules.ignore_whitespace:
        processed = processed.strip()
    if rules.ignore_case:
        processed = processed.lower()
    return processed


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning `a` into `b`.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    return Levenshtein.distance(a, b)


def check_answer(
    user_answer: str,
    correct_answers: Union[str, Sequence[str]],
    rules: ShortAnswerRules,
) -> bool:
    """
    Decide whether a short-answer response is accepted.

    Checked in order: exact match after normalisation, edit distance within
    the typo tolerance, then regex patterns searched in the raw response.

    Args:
        user_answer: Response as submitted
        correct_answers: Accepted answer or answers
        rules: Comparison rules

    Returns:
        True if any check accepts the response
    """
    processed_user = process_answer(user_answer, rules)
    if isinstance(correct_answers, str):
        correct_answers = [correct_answers]

    for correct in correct_answers:
        processed_correct = process_answer(correct, rules)
        if processed_user == processed_correct:
            return True
        if rules.typo_tolerance > 0:
            if levenshtein_distance(processed_user, processed_correct) <= rules.typo_tolerance:
                return True

    flags = re.IGNORECASE if rules.ignore_case else 0
    for pattern in rules.regex_patterns:
        try:
            if re.search(pattern, user_answer, flags):
                return True
        except re.error as e:
            logger.warning(f"Skipping invalid regex pattern {pattern!r}: {e}")

    return False


def add_to_answer_key(
    current_answers: Sequence[str],
    new_answer: str,
    rules: ShortAnswerRules,
) -> List[str]:
    """
    Add an answer to the key unless an equivalent one is already there.

    The new answer is stored as typed, not normalised.

    Args:
        current_answers: Existing accepted answers
        new_answer: Answer to add
        rules: Rules deciding equivalence

    Returns:
        New list of accepted answers
    """
    processed_new = process_answer(new_answer, rules)
    if any(process_answer(existing, rules) == processed_new for existing in current_answers):
        return list(current_answers)
    return [*current_answers, new_answer]
