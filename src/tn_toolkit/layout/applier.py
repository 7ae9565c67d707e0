"""
Module: layout.applier

Purpose:
    Apply a stored Layout to a Version, producing the display-order view an
    attempt is rendered from: questions reordered per section, MCQ choices
    reordered, and numeric MCQ answers remapped to the new choice order.

Key Functions:
    - apply_layout(): Canonical order -> display order
    - reorder_questions(): Place questions by recorded placements
    - permute_choices(): Reorder one question's choices and remap its answer

Invariants:
    - Pure: the input Version is never modified and repeated calls with the
      same inputs return equal results
    - Degenerate layout data degrades to unshuffled order, never an error

Used By:
    - Exam rendering (external)
    - layout.preview
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from tn_toolkit.core.models import Layout, Question, QuestionPlacement, Section, Version

logger = logging.getLogger(__name__)


def apply_layout(version: Version, layout: Optional[Layout]) -> Version:
    """
    Produce the display-order view of a version.

    Args:
        version: Version in canonical order
        layout: Layout of the attempt, or None

    Returns:
        New Version in display order (the input itself when layout is None)

    Example:
        >>> shown = apply_layout(version, attempt_layout)
        >>> [q.id for q in shown.sections[0].questions]
        ['q2', 'q3', 'q1', 'q0']
    """
    if layout is None:
        return version
    return version.with_sections(
        tuple(_apply_to_section(section, layout) for section in version.sections)
    )


def _apply_to_section(section: Section, layout: Layout) -> Section:
    placements = layout.placements_for(section.id)
    questions = reorder_questions(section, placements) if placements else section.questions

    displayed = []
    for question in questions:
        perm = layout.choice_permutation(question.id) if question.is_mcq else None
        displayed.append(permute_choices(question, perm) if perm is not None else question)
    return section.with_questions(tuple(displayed))


def reorder_questions(
    section: Section,
    placements: Sequence[QuestionPlacement],
) -> Tuple[Question, ...]:
    """
    Place each question at its recorded display position.

    Positions left unfilled, and placements pointing outside the section,
    are dropped rather than left as gaps.

    Args:
        section: Section in canonical order
        placements: Placements recorded for this section

    Returns:
        Questions in display order
    """
    count = section.question_count
    slots: List[Optional[Question]] = [None] * count
    for placement in placements:
        if placement.original_index >= count or placement.shuffled_index >= count:
            logger.warning(
                f"Ignoring out-of-range placement {placement.original_index} -> "
                f"{placement.shuffled_index} in section {section.id!r} ({count} questions)"
            )
            continue
        slots[placement.shuffled_index] = section.questions[placement.original_index]
    return tuple(q for q in slots if q is not None)


def permute_choices(question: Question, perm: Sequence[int]) -> Question:
    """
    Reorder an MCQ question's choices and remap its answer.

    Position k of the result shows original choice perm[k]. A numeric
    answer becomes the position its original choice landed on; an answer
    that does not occur in the permutation is kept as it was.

    Args:
        question: MCQ question in canonical order
        perm: Choice permutation

    Returns:
        New Question, or the input unchanged when perm is not a
        permutation of its choice indices
    """
    if sorted(perm) != list(range(len(question.choices))):
        logger.warning(
            f"Choice permutation {list(perm)} does not match the "
            f"{len(question.choices)} choices of {question.id!r}; leaving unshuffled"
        )
        return question

    choices = tuple(question.choices[index] for index in perm)
    answer = question.answer
    original = question.numeric_answer
    if original is not None and original in perm:
        answer = list(perm).index(original)
    return question.replace_choices(choices, answer)
