"""
Module: versions

Purpose:
    Provides the Version dataclass - the unit the layout engine consumes -
    and the ExamOptions that decide whether an attempt gets a shuffled
    layout at all.

Key Functions:
    - ExamOptions.shuffle_enabled: Whether any shuffling is requested
    - Version.iter_questions(): Flat iteration over all questions in order
    - Version.find_question(id): Look up a question by id
    - Version.to_dict() / Version.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .sections.Section

Used By:
    - layout (all modules)
    - grading.scorer
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, Optional, Tuple

from .questions import Question
from .sections import Section


@dataclass(frozen=True, slots=True)
class ExamOptions:
    """
    Attempt-time exam options (immutable).

    Only the two shuffle flags affect the layout engine; the rest are
    carried so a Version round-trips without loss.

    Attributes:
        shuffle_questions: Shuffle question order within each section
        shuffle_choices: Shuffle choice order of MCQ questions
        allow_backtrack: Student may return to earlier questions
        one_question_per_page: Show one question at a time
        lockdown_mode: Browser lockdown during the attempt
    """

    shuffle_questions: bool = False
    shuffle_choices: bool = False
    allow_backtrack: bool = False
    one_question_per_page: bool = False
    lockdown_mode: bool = False

    @property
    def shuffle_enabled(self) -> bool:
        return self.shuffle_questions or self.shuffle_choices

    def to_dict(self) -> dict:
        return {
            "shuffleQuestions": self.shuffle_questions,
            "shuffleChoices": self.shuffle_choices,
            "allowBacktrack": self.allow_backtrack,
            "oneQuestionPerPage": self.one_question_per_page,
            "lockdownMode": self.lockdown_mode,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> ExamOptions:
        """Deserialize; missing or null options mean everything disabled."""
        data = data or {}
        return cls(
            shuffle_questions=bool(data.get("shuffleQuestions", False)),
            shuffle_choices=bool(data.get("shuffleChoices", False)),
            allow_backtrack=bool(data.get("allowBacktrack", False)),
            one_question_per_page=bool(data.get("oneQuestionPerPage", False)),
            lockdown_mode=bool(data.get("lockdownMode", False)),
        )


@dataclass(frozen=True, slots=True)
class Version:
    """
    Test version (immutable).

    A Version is what a student actually sits: an ordered list of sections
    plus the exam options for the attempt.

    Attributes:
        id: Version identifier
        sections: Sections in stored order
        exam_options: Attempt-time options

    Example:
        >>> v = Version(id="v1", sections=(section,),
        ...             exam_options=ExamOptions(shuffle_questions=True))
        >>> v.exam_options.shuffle_enabled
        True
    """

    id: str
    sections: Tuple[Section, ...] = ()
    exam_options: ExamOptions = field(default_factory=ExamOptions)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    def iter_questions(self) -> Iterator[Question]:
        """Iterate over all questions, sections in order."""
        for section in self.sections:
            yield from section.questions

    @property
    def total_points(self) -> float:
        return sum(s.total_points for s in self.sections)

    @property
    def total_time_minutes(self) -> int:
        return sum(s.time_limit for s in self.sections)

    def find_question(self, question_id: str) -> Optional[Question]:
        """
        Find a question by id.

        Args:
            question_id: Question identifier

        Returns:
            Matching Question or None
        """
        for question in self.iter_questions():
            if question.id == question_id:
                return question
        return None

    def with_sections(self, sections: Tuple[Section, ...]) -> Version:
        """Return a copy holding `sections`."""
        return replace(self, sections=tuple(sections))

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to the platform's version JSON shape."""
        return {
            "id": self.id,
            "sections": [s.to_dict() for s in self.sections],
            "examOptions": self.exam_options.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Version:
        """Deserialize from the platform's version JSON shape."""
        return cls(
            id=data["id"],
            sections=tuple(Section.from_dict(s) for s in data.get("sections") or ()),
            exam_options=ExamOptions.from_dict(data.get("examOptions")),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Version({self.id!r}, {len(self.sections)} sections)"
