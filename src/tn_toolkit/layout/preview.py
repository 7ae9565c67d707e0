"""
Module: layout.preview

Purpose:
    Authoring-time preview of a shuffled exam. Uses a fixed, well-known seed
    instead of one derived from an attempt, and transforms the version
    directly without creating a Layout. Preview output is for display only
    and must never be stored as an attempt's layout.

Key Functions:
    - generate_preview(): Version in preview display order

Draw order matches layout.generator (all question shuffles, then all choice
shuffles in canonical question order), so the preview equals applying
build_layout(version, preview_seed).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from tn_toolkit.core.models import Question, Version

from .applier import permute_choices
from .config import DEFAULT_LAYOUT_CONFIG, LayoutConfig
from .random_source import SeededRandom

logger = logging.getLogger(__name__)


def generate_preview(version: Version, config: LayoutConfig = DEFAULT_LAYOUT_CONFIG) -> Version:
    """
    Shuffle a version for preview with the fixed preview seed.

    Args:
        version: Version in canonical order
        config: Layout configuration holding the preview seed

    Returns:
        New Version in preview order (the input itself when shuffling is
        disabled)
    """
    options = version.exam_options
    if not options.shuffle_enabled:
        return version

    rng = SeededRandom(config.preview_seed)

    orders: List[Optional[List[int]]] = []
    for section in version.sections:
        if options.shuffle_questions and section.questions:
            orders.append(rng.shuffle(range(section.question_count)))
        else:
            orders.append(None)

    choice_sections: List[Tuple[Question, ...]] = []
    for section in version.sections:
        questions = section.questions
        if options.shuffle_choices:
            questions = tuple(_preview_choices(q, rng) for q in questions)
        choice_sections.append(questions)

    sections = tuple(
        section.with_questions(_place(questions, order))
        for section, questions, order in zip(version.sections, choice_sections, orders)
    )
    logger.debug(f"Generated preview of version {version.id!r} with seed {config.preview_seed}")
    return version.with_sections(sections)


def _preview_choices(question: Question, rng: SeededRandom) -> Question:
    if not (question.is_mcq and question.choices):
        return question
    return permute_choices(question, rng.shuffle(range(len(question.choices))))


def _place(questions: Tuple[Question, ...], order: Optional[List[int]]) -> Tuple[Question, ...]:
    """Question at index i goes to display position order[i]."""
    if order is None:
        return questions
    slots: List[Optional[Question]] = [None] * len(questions)
    for original_index, shuffled_index in enumerate(order):
        slots[shuffled_index] = questions[original_index]
    return tuple(q for q in slots if q is not None)

