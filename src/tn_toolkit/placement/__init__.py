"""
Module: placement

Purpose:
    Placement recommendation from final attempt scores.
"""

from .config import (
    DEFAULT_PLACEMENT_CONFIG,
    PlacementConfig,
    PlacementCriteria,
    PlacementLevel,
)
from .recommender import Confidence, PlacementRecommendation, calculate_placement

__all__ = [
    "DEFAULT_PLACEMENT_CONFIG",
    "PlacementConfig",
    "PlacementCriteria",
    "PlacementLevel",
    "Confidence",
    "PlacementRecommendation",
    "calculate_placement",
]
