"""
Module: layout.answers

Purpose:
    Map display-order positions and responses back to canonical order using
    an attempt's stored Layout. This is the inverse of layout.applier and is
    what grading and attempt resume rely on.

Key Functions:
    - canonical_choice_index(): Displayed choice position -> original index
    - canonical_question_index(): Displayed question position -> original index
    - restore_answers(): Display-order responses -> canonical responses

Used By:
    - grading.scorer
    - Attempt resume (external)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from tn_toolkit.core.models import Layout, Version
from tn_toolkit.core.models.questions import is_choice_index

logger = logging.getLogger(__name__)


def canonical_choice_index(layout: Optional[Layout], question_id: str, displayed_index: int) -> int:
    """
    Get the original choice index shown at a display position.

    Args:
        layout: Layout of the attempt, or None
        question_id: MCQ question identifier
        displayed_index: Position the student selected

    Returns:
        Original choice index; displayed_index itself when the question's
        choices were not shuffled or the position is out of range
    """
    if layout is None:
        return displayed_index
    perm = layout.choice_permutation(question_id)
    if perm is None or not 0 <= displayed_index < len(perm):
        return displayed_index
    return perm[displayed_index]


def canonical_question_index(layout: Optional[Layout], section_id: str, displayed_index: int) -> int:
    """
    Get the original position of the question shown at a display position.

    Args:
        layout: Layout of the attempt, or None
        section_id: Section identifier
        displayed_index: Display position within the section

    Returns:
        Original question index; displayed_index itself when the section
        was not shuffled or no placement targets that position
    """
    if layout is None:
        return displayed_index
    for placement in layout.placements_for(section_id):
        if placement.shuffled_index == displayed_index:
            return placement.original_index
    return displayed_index


def restore_answers(
    version: Version,
    layout: Optional[Layout],
    answers: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Convert a student's display-order responses to canonical form.

    MCQ responses given as a displayed position (int or decimal string) are
    mapped to the original choice index, keeping their type. Responses given
    as choice text need no mapping. Responses to other question types, and
    to question ids not in the version, pass through unchanged.

    Args:
        version: Version in canonical order
        layout: Layout of the attempt, or None
        answers: Question id -> response as submitted

    Returns:
        New dict of question id -> canonical response

    Example:
        >>> layout.choice_permutation("q1")
        (2, 0, 1)
        >>> restore_answers(version, layout, {"q1": 0})
        {'q1': 2}
    """
    restored: Dict[str, Any] = dict(answers)
    if layout is None or not layout.shuffled_choices:
        return restored

    for question_id, response in answers.items():
        question = version.find_question(question_id)
        if question is None or not question.is_mcq:
            continue
        if is_choice_index(response):
            restored[question_id] = canonical_choice_index(layout, question_id, response)
        elif isinstance(response, str) and response.strip().isdecimal() and response not in question.choices:
            index = canonical_choice_index(layout, question_id, int(response))
            restored[question_id] = str(index)
    return restored
