"""
Schemas Package

JSON schema definitions and validation utilities for stored layouts and
test versions.
"""

from .validator import (
    validate_layout,
    validate_version,
    ValidationError,
)

__all__ = [
    "validate_layout",
    "validate_version",
    "ValidationError",
]
