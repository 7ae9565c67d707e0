"""
Module: grading.scorer

Purpose:
    Auto-score a submitted attempt. Responses arrive in display order (as the
    student saw the shuffled exam); they are mapped back to canonical order
    with the attempt's Layout and compared with the canonical answer key.

Key Functions:
    - score_attempt(): Score every question of a version

Key Classes:
    - QuestionResult: Outcome for one question
    - AttemptScore: Totals plus per-question results

Scoring:
    - MCQ: response as choice text or displayed position; correct earns the
      question's points, wrong deducts the profile's wrong_penalty
    - Short: grading.short_answer.check_answer with the profile's rules
    - Speaking/Writing/Instruction/Passage: not auto-graded, still counted
      toward the maximum
    - The auto total never drops below zero

Used By:
    - Attempt submission (external)
    - placement.recommender (via final totals)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from tn_toolkit.core.models import Layout, Question, QuestionType, Version
from tn_toolkit.core.models.questions import is_choice_index
from tn_toolkit.layout.answers import restore_answers

from .config import DEFAULT_SCORING_PROFILE, ScoringProfile
from .short_answer import check_answer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionResult:
    """
    Auto-scoring outcome of one question.

    Attributes:
        question_id: Question identifier
        type: Question type
        graded: Whether the question was auto-graded
        correct: True/False when graded and answered, None otherwise
        earned: Points earned (negative when a penalty applied)
        max_points: Points available
    """

    question_id: str
    type: QuestionType
    graded: bool
    correct: Optional[bool]
    earned: float
    max_points: float


@dataclass(frozen=True)
class AttemptScore:
    """
    Auto-scoring result of an attempt.

    Attributes:
        auto_total: Sum of earned points, floored at zero
        max_total: Sum of available points over all questions
        results: Per-question results in canonical order
    """

    auto_total: float
    max_total: float
    results: Tuple[QuestionResult, ...]

    @property
    def percentage(self) -> float:
        """Auto total as a percentage of the maximum (0 when nothing to score)."""
        if self.max_total <= 0:
            return 0.0
        return self.auto_total / self.max_total * 100

    @property
    def pending_manual_review(self) -> Tuple[str, ...]:
        """Ids of questions that need a human score."""
        return tuple(r.question_id for r in self.results if not r.graded)


def score_attempt(
    version: Version,
    answers: Mapping[str, Any],
    layout: Optional[Layout] = None,
    profile: ScoringProfile = DEFAULT_SCORING_PROFILE,
) -> AttemptScore:
    """
    Score an attempt's responses.

    Args:
        version: Version in canonical order
        answers: Question id -> response, as submitted in display order
        layout: Layout of the attempt, or None when it was not shuffled
        profile: Scoring profile

    Returns:
        AttemptScore

    Example:
        >>> score = score_attempt(version, {"q1": "Paris"}, layout)
        >>> score.auto_total, score.max_total
        (2, 5)
    """
    canonical = restore_answers(version, layout, answers)

    results = tuple(
        _score_question(question, canonical.get(question.id), profile)
        for question in version.iter_questions()
    )
    earned = sum(r.earned for r in results)
    max_total = sum(r.max_points for r in results)
    auto_total = max(0, earned)

    logger.debug(
        f"Scored version {version.id!r}: {auto_total}/{max_total} "
        f"({len(results)} questions, {sum(1 for r in results if not r.graded)} ungraded)"
    )
    return AttemptScore(auto_total=auto_total, max_total=max_total, results=results)


def _score_question(question: Question, response: Any, profile: ScoringProfile) -> QuestionResult:
    if question.type == QuestionType.MCQ:
        return _score_mcq(question, response, profile)
    if question.type == QuestionType.SHORT:
        return _score_short(question, response, profile)
    return QuestionResult(question.id, question.type, False, None, 0, question.points)


def _score_mcq(question: Question, response: Any, profile: ScoringProfile) -> QuestionResult:
    points = question.points or profile.mcq.default_points
    correct_index = question.numeric_answer
    if correct_index is None:
        return QuestionResult(question.id, question.type, False, None, 0, points)

    selected = _selected_choice(question, response)
    if selected is None:
        return QuestionResult(question.id, question.type, True, None, 0, points)
    if selected == correct_index:
        return QuestionResult(question.id, question.type, True, True, points, points)
    return QuestionResult(question.id, question.type, True, False, -profile.mcq.wrong_penalty, points)


def _selected_choice(question: Question, response: Any) -> Optional[int]:
    """Canonical choice index of a response, or None if blank."""
    if is_choice_index(response):
        return response
    if not isinstance(response, str) or not response.strip():
        return None
    if response in question.choices:
        return question.choices.index(response)
    if response.strip().isdecimal():
        return int(response)
    return -1


def _score_short(question: Question, response: Any, profile: ScoringProfile) -> QuestionResult:
    accepted = question.accepted_answers
    if not accepted:
        return QuestionResult(question.id, question.type, False, None, 0, question.points)
    if not isinstance(response, str) or not response.strip():
        return QuestionResult(question.id, question.type, True, None, 0, question.points)
    correct = check_answer(response, accepted, profile.short)
    earned = question.points if correct else 0
    return QuestionResult(question.id, question.type, True, correct, earned, question.points)
