"""
Core Models Package

Immutable data models shared by the layout engine, grading and placement.

All models in this package are frozen dataclasses. Any change to a
question, section or version produces a new instance, which is what lets
layout application be a pure function of its inputs.

| Model | Role |
|-------|------|
| `Question` | Single exam item; numeric `answer` indexes `choices` |
| `Section` | Ordered questions, defines natural order |
| `Version` | Ordered sections plus `ExamOptions` |
| `Layout` | Per-attempt shuffle record |
"""

from .questions import Answer, Question, QuestionType
from .sections import Section, SectionType
from .versions import ExamOptions, Version
from .layout import Layout, QuestionPlacement

__all__ = [
    "Answer",
    "Question",
    "QuestionType",
    "Section",
    "SectionType",
    "ExamOptions",
    "Version",
    "Layout",
    "QuestionPlacement",
]
