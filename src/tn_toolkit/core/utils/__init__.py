"""
Utils Package

Serialization and file helpers for layouts and versions.
"""

from .serialization import (
    serialize_layout,
    deserialize_layout,
    serialize_version,
    deserialize_version,
    load_layout_json,
    save_layout_json,
    load_version_json,
)

__all__ = [
    "serialize_layout",
    "deserialize_layout",
    "serialize_version",
    "deserialize_version",
    "load_layout_json",
    "save_layout_json",
    "load_version_json",
]
