"""
Module: layout.generator

Purpose:
    Derive the per-attempt Layout: a permutation of question order for each
    section and a permutation of choice order for each MCQ question.

Key Functions:
    - generate_layout(): Layout for an attempt/participant pair
    - build_layout(): Layout for an explicit seed

Algorithm:
    1. No layout when neither shuffle option is enabled
    2. One SeededRandom shared by every draw, never reset
    3. Question order: sections in stored order, one shuffle per non-empty
       section
    4. Choice order: afterwards, sections in stored order and questions in
       original order, one shuffle per MCQ with at least one choice

    The draw order is what makes stored layouts reproducible. Reordering
    these loops changes every permutation of already-issued attempts.

Used By:
    - Attempt start (external): layout stored with the attempt record
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from tn_toolkit.core.models import Layout, QuestionPlacement, Version

from .config import DEFAULT_LAYOUT_CONFIG
from .random_source import SeededRandom
from .seed import derive_seed

logger = logging.getLogger(__name__)


def generate_layout(
    version: Version,
    attempt_id: str,
    participant_id: str = DEFAULT_LAYOUT_CONFIG.anonymous_participant,
) -> Optional[Layout]:
    """
    Generate the layout for an attempt.

    Calling this again with the same inputs returns an equal Layout, so a
    resumed attempt keeps its order.

    Args:
        version: Test version being attempted
        attempt_id: Attempt identifier
        participant_id: Participant identifier

    Returns:
        Layout, or None when shuffling is disabled

    Example:
        >>> layout = generate_layout(version, "attempt-1", "student-7")
        >>> layout.seed
        1781
    """
    if not version.exam_options.shuffle_enabled:
        return None
    seed = derive_seed(attempt_id, participant_id)
    logger.debug(f"Derived seed {seed} for attempt {attempt_id!r}")
    return build_layout(version, seed)


def build_layout(version: Version, seed: int) -> Optional[Layout]:
    """
    Build a layout from an explicit seed.

    Args:
        version: Test version
        seed: Seed for the shared random source

    Returns:
        Layout, or None when shuffling is disabled
    """
    options = version.exam_options
    if not options.shuffle_enabled:
        return None

    rng = SeededRandom(seed)
    shuffled_questions: Optional[Tuple[QuestionPlacement, ...]] = None
    shuffled_choices: Optional[Dict[str, Tuple[int, ...]]] = None

    if options.shuffle_questions:
        placements = _shuffle_question_order(version, rng)
        if placements:
            shuffled_questions = tuple(placements)

    if options.shuffle_choices:
        permutations = _shuffle_choice_order(version, rng)
        if permutations:
            shuffled_choices = permutations

    layout = Layout(
        seed=seed,
        shuffled_questions=shuffled_questions,
        shuffled_choices=shuffled_choices,
    )
    logger.debug(f"Built {layout!r} for version {version.id!r}")
    return layout


def _shuffle_question_order(version: Version, rng: SeededRandom) -> List[QuestionPlacement]:
    placements: List[QuestionPlacement] = []
    for section in version.sections:
        count = section.question_count
        if count == 0:
            continue
        shuffled = rng.shuffle(range(count))
        placements.extend(
            QuestionPlacement(section.id, original_index, shuffled_index)
            for original_index, shuffled_index in enumerate(shuffled)
        )
    return placements


def _shuffle_choice_order(version: Version, rng: SeededRandom) -> Dict[str, Tuple[int, ...]]:
    permutations: Dict[str, Tuple[int, ...]] = {}
    for question in version.iter_questions():
        if question.is_mcq and question.choices:
            permutations[question.id] = tuple(rng.shuffle(range(len(question.choices))))
    return permutations
