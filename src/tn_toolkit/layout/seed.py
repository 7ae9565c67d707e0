"""
Module: layout.seed

Purpose:
    Derive the deterministic layout seed of an attempt from its attempt id
    and participant id.
"""

from __future__ import annotations

from .config import DEFAULT_LAYOUT_CONFIG


def derive_seed(attempt_id: str, participant_id: str = DEFAULT_LAYOUT_CONFIG.anonymous_participant) -> int:
    """
    Fold an attempt/participant pair into an integer seed.

    The seed is the sum of the code points of "<attempt_id>-<participant_id>".
    It is not collision resistant; two pairs with the same seed simply share
    a shuffle.

    Args:
        attempt_id: Attempt identifier
        participant_id: Participant identifier

    Returns:
        Non-negative integer seed
    """
    return sum(ord(char) for char in f"{attempt_id}-{participant_id}")
