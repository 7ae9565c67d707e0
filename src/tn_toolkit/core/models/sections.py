"""
Module: sections

Purpose:
    Provides the Section dataclass - an ordered group of questions with a
    type tag and a time limit. The stored order defines the natural
    question order before any shuffling.

Dependencies:
    - dataclasses (std)
    - .questions.Question

Used By:
    - core.models.versions.Version
    - layout.generator, layout.applier, layout.preview
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from .questions import Question


class SectionType(str, Enum):
    """Kind of exam section."""
    LISTENING = "Listening"
    READING = "Reading"
    SPEAKING = "Speaking"
    WRITING = "Writing"
    INSTRUCTION = "Instruction"
    PASSAGE = "Passage"
    CUSTOM = "Custom"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Section:
    """
    Exam section (immutable).

    Attributes:
        id: Section identifier, used to key question placements in a Layout
        label: Display label
        type: Section type
        time_limit: Time limit in minutes
        questions: Questions in natural order

    Invariants:
        - time_limit >= 0
    """

    id: str
    label: str = ""
    type: SectionType = SectionType.CUSTOM
    time_limit: int = 0
    questions: Tuple[Question, ...] = ()

    def __post_init__(self) -> None:
        """Validate section on construction."""
        if self.time_limit < 0:
            raise ValueError(f"time_limit must be non-negative: {self.time_limit}")

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def total_points(self) -> float:
        return sum(q.points for q in self.questions)

    def with_questions(self, questions: Tuple[Question, ...]) -> Section:
        """Return a copy holding `questions` in the given order."""
        return replace(self, questions=tuple(questions))

    def to_dict(self) -> dict:
        """Serialize to the platform's section JSON shape."""
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type.value,
            "timeLimit": self.time_limit,
            "questions": [q.to_dict() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Section:
        """Deserialize from the platform's section JSON shape."""
        return cls(
            id=data["id"],
            label=data.get("label", ""),
            type=SectionType(data.get("type", SectionType.CUSTOM.value)),
            time_limit=data.get("timeLimit", 0),
            questions=tuple(Question.from_dict(q) for q in data.get("questions") or ()),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Section({self.id!r}, {len(self.questions)} questions)"
