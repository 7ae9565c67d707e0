"""
Module: placement.config

Purpose:
    Placement criteria configuration. Immutable with validation on
    construction.

Key Classes:
    - PlacementLevel: Course levels a student can be placed into
    - PlacementCriteria: Minimum scores for one level
    - PlacementConfig: Named set of criteria

Used By:
    - placement.recommender
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

MAX_SPEAKING_SCORE = 4


class PlacementLevel(str, Enum):
    """Course level."""
    STARTER = "Starter"
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlacementCriteria:
    """
    Minimum scores required for a level.

    Attributes:
        level: Level these criteria grant
        min_total_score: Minimum total on a 0-100 scale
        min_speaking_score: Minimum mean speaking score (0-4); None or 0
            means no speaking requirement
        description: Human-readable description of the level
    """

    level: PlacementLevel
    min_total_score: float
    min_speaking_score: Optional[float] = None
    description: str = ""

    def __post_init__(self) -> None:
        """Validate criteria on construction."""
        if not 0 <= self.min_total_score <= 100:
            raise ValueError(f"min_total_score must be 0-100: {self.min_total_score}")
        if self.min_speaking_score is not None and not 0 <= self.min_speaking_score <= MAX_SPEAKING_SCORE:
            raise ValueError(
                f"min_speaking_score must be 0-{MAX_SPEAKING_SCORE}: {self.min_speaking_score}"
            )

    @property
    def requires_speaking(self) -> bool:
        return bool(self.min_speaking_score)


@dataclass(frozen=True)
class PlacementConfig:
    """
    Named set of placement criteria.

    Attributes:
        id: Config identifier
        name: Display name
        criteria: Criteria, any order
    """

    id: str
    name: str
    criteria: Tuple[PlacementCriteria, ...]

    def __post_init__(self) -> None:
        """Validate config on construction."""
        object.__setattr__(self, "criteria", tuple(self.criteria))
        if not self.criteria:
            raise ValueError("PlacementConfig needs at least one criteria entry")


DEFAULT_PLACEMENT_CONFIG = PlacementConfig(
    id="default",
    name="Default placement criteria",
    criteria=(
        PlacementCriteria(PlacementLevel.STARTER, 0, 0, "Beginning English study"),
        PlacementCriteria(PlacementLevel.BASIC, 40, 2, "Basic communication"),
        PlacementCriteria(PlacementLevel.INTERMEDIATE, 70, 3, "Everyday conversation"),
        PlacementCriteria(PlacementLevel.ADVANCED, 85, 3.5, "Fluent communication"),
    ),
)
