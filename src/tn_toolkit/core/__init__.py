"""
TN Toolkit Core Package

Shared data models, schema validation and serialization. These models are
the single source of truth for every other subpackage.
"""

from .models import (
    ExamOptions,
    Layout,
    Question,
    QuestionPlacement,
    QuestionType,
    Section,
    SectionType,
    Version,
)

__all__ = [
    "ExamOptions",
    "Layout",
    "Question",
    "QuestionPlacement",
    "QuestionType",
    "Section",
    "SectionType",
    "Version",
]
