"""
Module: layout.config

Purpose:
    Configuration for the layout engine. Immutable with validation on
    construction.

Key Classes:
    - LayoutConfig: Preview seed and default participant id

Dependencies:
    - dataclasses (std)

Used By:
    - layout.generator: Default participant id
    - layout.preview: Fixed preview seed
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """
    Layout engine configuration (immutable).

    Attributes:
        preview_seed: Fixed seed for authoring-time previews. Not derived
            from any attempt, so a preview never predicts a real shuffle.
        anonymous_participant: Participant id used when an attempt has no
            signed-in participant

    Example:
        >>> LayoutConfig().preview_seed
        12345
    """

    preview_seed: int = 12345
    anonymous_participant: str = "anonymous"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.preview_seed < 0:
            raise ValueError(f"preview_seed must be non-negative: {self.preview_seed}")
        if not self.anonymous_participant:
            raise ValueError("anonymous_participant must be non-empty")


DEFAULT_LAYOUT_CONFIG = LayoutConfig()
