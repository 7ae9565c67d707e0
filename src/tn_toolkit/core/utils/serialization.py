"""
Serialization Utilities

Provides to/from JSON utilities for the layout and version models.

The layout's persisted shape is the attempt-record shape already used by the
platform (`seed`, `shuffledQuestions`, `shuffledChoices`), so layouts written
by earlier attempts load without migration.

- `serialize_*` / `deserialize_*` convert between models and dicts
- `load_*_json` / `save_*_json` are thin file wrappers
- Validation runs before deserialization unless disabled
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..models.layout import Layout
from ..models.versions import Version
from ..schemas.validator import validate_layout, validate_version, ValidationError

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Layout Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_layout(layout: Optional[Layout]) -> Optional[dict[str, Any]]:
    """
    Serialize a Layout to a dictionary.

    Args:
        layout: Layout instance, or None for an unshuffled attempt

    Returns:
        Dictionary suitable for JSON serialization, or None
    """
    if layout is None:
        return None
    return layout.to_dict()


def deserialize_layout(
    data: Optional[dict[str, Any]],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Optional[Layout]:
    """
    Deserialize a Layout from a dictionary.

    Args:
        data: Dictionary from JSON, or None for an unshuffled attempt
        validate: Whether to validate first
        strict: Whether validation includes the JSON Schema check

    Returns:
        Layout instance, or None

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if data is None:
        return None
    if validate:
        validate_layout(data, strict=strict)
    return Layout.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Version Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_version(version: Version) -> dict[str, Any]:
    """Serialize a Version to the platform's JSON shape."""
    return version.to_dict()


def deserialize_version(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Version:
    """
    Deserialize a Version from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate first
        strict: Whether validation includes the JSON Schema check

    Returns:
        Version instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_version(data, strict=strict)
    return Version.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", path=str(path), errors=[str(e)]) from e


def load_layout_json(path: Path, *, validate: bool = True) -> Optional[Layout]:
    """
    Load a layout from a JSON file.

    A file holding `null` is an attempt without a layout.

    Args:
        path: Path to layout JSON
        validate: Whether to validate

    Returns:
        Layout instance or None

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the content is invalid
    """
    return deserialize_layout(_read_json(path), validate=validate)


def save_layout_json(layout: Optional[Layout], path: Path) -> None:
    """
    Save a layout to a JSON file.

    Args:
        layout: Layout to save (None writes `null`)
        path: Output path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_layout(layout), f, indent=2, ensure_ascii=False)
    logger.debug(f"Wrote layout to {path}")


def load_version_json(path: Path, *, validate: bool = True) -> Version:
    """
    Load a test version from a JSON file.

    Args:
        path: Path to version JSON
        validate: Whether to validate

    Returns:
        Version instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the content is invalid
    """
    return deserialize_version(_read_json(path), validate=validate)
