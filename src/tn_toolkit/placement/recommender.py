"""
Module: placement.recommender

Purpose:
    Rule-based placement recommendation from an attempt's final scores.

Key Functions:
    - calculate_placement(): Recommend a level with a confidence rating

Algorithm:
    1. Normalise the final total to 0-100 (rounded half up)
    2. Speaking score = mean of speaking review scores, one decimal
    3. Check criteria from the highest min_total_score down; the first
       whose total (and speaking, if required) minimum is met wins
    4. Confidence from the margin above the winning criteria:
       total >= 15 and speaking >= 0.5 -> high, total >= 5 and
       speaking >= 0 -> medium, otherwise low
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .config import (
    DEFAULT_PLACEMENT_CONFIG,
    MAX_SPEAKING_SCORE,
    PlacementConfig,
    PlacementCriteria,
    PlacementLevel,
)

logger = logging.getLogger(__name__)


class Confidence(str, Enum):
    """How clearly the scores clear the winning criteria."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlacementRecommendation:
    """
    Recommended placement (immutable).

    Attributes:
        level: Recommended level
        total_score: Total on a 0-100 scale
        speaking_score: Mean speaking score, None without speaking reviews
        reason: Figures that decided the level
        confidence: Confidence rating
    """

    level: PlacementLevel
    total_score: int
    speaking_score: Optional[float]
    reason: str
    confidence: Confidence
    max_total_score: int = 100

    @property
    def max_speaking_score(self) -> Optional[int]:
        return MAX_SPEAKING_SCORE if self.speaking_score is not None else None


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def calculate_placement(
    final_total: Optional[float],
    max_total: float,
    speaking_scores: Sequence[float] = (),
    config: PlacementConfig = DEFAULT_PLACEMENT_CONFIG,
) -> Optional[PlacementRecommendation]:
    """
    Recommend a placement level.

    Args:
        final_total: Final attempt total, None if not finalised
        max_total: Maximum attainable total
        speaking_scores: Manual speaking review scores (0-4 each)
        config: Placement criteria

    Returns:
        PlacementRecommendation, or None when there is no usable total

    Example:
        >>> rec = calculate_placement(78, 100, [3, 4])
        >>> rec.level, rec.confidence
        (<PlacementLevel.INTERMEDIATE: 'Intermediate'>, <Confidence.MEDIUM: 'medium'>)
    """
    if final_total is None or max_total <= 0:
        return None

    total_score = int(_round_half_up(final_total / max_total * 100))
    speaking_score: Optional[float] = None
    if speaking_scores:
        speaking_score = _round_half_up(sum(speaking_scores) / len(speaking_scores), 1)

    level = PlacementLevel.STARTER
    reason = ""
    confidence = Confidence.HIGH
    for criteria in sorted(config.criteria, key=lambda c: c.min_total_score, reverse=True):
        meets_total = total_score >= criteria.min_total_score
        meets_speaking = not criteria.requires_speaking or (
            speaking_score is not None and speaking_score >= criteria.min_speaking_score
        )
        if meets_total and meets_speaking:
            level = criteria.level
            reason = _reason(criteria, total_score, speaking_score)
            confidence = _confidence(criteria, total_score, speaking_score)
            break

    logger.debug(f"Placement {level} ({confidence}) for total {total_score}, speaking {speaking_score}")
    return PlacementRecommendation(
        level=level,
        total_score=total_score,
        speaking_score=speaking_score,
        reason=reason,
        confidence=confidence,
    )


def _reason(criteria: PlacementCriteria, total_score: int, speaking_score: Optional[float]) -> str:
    parts = [f"Total {total_score} (required {criteria.min_total_score}+)"]
    if criteria.requires_speaking and speaking_score is not None:
        parts.append(f"speaking average {speaking_score} (required {criteria.min_speaking_score}+)")
    return ", ".join(parts)


def _confidence(
    criteria: PlacementCriteria,
    total_score: int,
    speaking_score: Optional[float],
) -> Confidence:
    total_margin = total_score - criteria.min_total_score
    speaking_margin = 0.0
    if speaking_score and criteria.requires_speaking:
        speaking_margin = speaking_score - criteria.min_speaking_score

    if total_margin >= 15 and speaking_margin >= 0.5:
        return Confidence.HIGH
    if total_margin >= 5 and speaking_margin >= 0:
        return Confidence.MEDIUM
    return Confidence.LOW
