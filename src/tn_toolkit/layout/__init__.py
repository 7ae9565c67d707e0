"""
Module: layout

Purpose:
    Deterministic exam-layout randomization and replay. Derives a per-attempt
    shuffle of question and choice order, applies it for display, maps
    responses back to canonical order, and renders fixed-seed previews.

Key Functions:
    - generate_layout(): Layout for an attempt (None when shuffling is off)
    - build_layout(): Layout for an explicit seed
    - apply_layout(): Canonical -> display order
    - generate_preview(): Fixed-seed preview, no Layout
    - restore_answers(): Display-order responses -> canonical responses
    - derive_seed(): Attempt/participant pair -> seed

Key Classes:
    - SeededRandom: Reproducible random source
    - LayoutConfig: Preview seed and defaults

Dependencies:
    - tn_toolkit.core.models: Version, Layout

Used By:
    - grading.scorer
    - Attempt storage and exam rendering (external)
"""

from .config import LayoutConfig, DEFAULT_LAYOUT_CONFIG
from .random_source import SeededRandom
from .seed import derive_seed
from .generator import generate_layout, build_layout
from .applier import apply_layout
from .preview import generate_preview
from .answers import canonical_choice_index, canonical_question_index, restore_answers

__all__ = [
    # Config
    "LayoutConfig",
    "DEFAULT_LAYOUT_CONFIG",
    # Engine
    "SeededRandom",
    "derive_seed",
    "generate_layout",
    "build_layout",
    "apply_layout",
    "generate_preview",
    # Inverse mapping
    "canonical_choice_index",
    "canonical_question_index",
    "restore_answers",
]
