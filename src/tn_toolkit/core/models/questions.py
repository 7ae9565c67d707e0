"""
Module: questions

Purpose:
    Provides the Question dataclass - a single exam item as authored in a
    test version. Immutable once a test is published. For MCQ questions the
    order of `choices` is significant because a numeric `answer` indexes it.

Key Functions:
    - Question.is_mcq: Whether the question takes part in choice shuffling
    - Question.numeric_answer: The answer as a choice index, if it is one
    - Question.replace_choices(): New instance with reordered choices
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.sections.Section
    - layout.applier, layout.preview, layout.answers
    - grading.scorer
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union


class QuestionType(str, Enum):
    """Kind of exam item."""
    MCQ = "MCQ"
    SHORT = "Short"
    SPEAKING = "Speaking"
    WRITING = "Writing"
    INSTRUCTION = "Instruction"
    PASSAGE = "Passage"

    def __str__(self) -> str:
        return self.value


# int: choice index (MCQ), str: single accepted answer, tuple: accepted answers
Answer = Union[int, str, Tuple[str, ...], None]


def is_choice_index(answer: object) -> bool:
    """True if `answer` is a numeric choice index (bools excluded)."""
    return isinstance(answer, int) and not isinstance(answer, bool)


@dataclass(frozen=True, slots=True)
class Question:
    """
    Exam question (immutable).

    Attributes:
        id: Unique question identifier
        type: Question type
        choices: Ordered answer choices (MCQ only, may be empty)
        answer: Choice index, accepted text, or tuple of accepted texts
        points: Points awarded for a correct response
        prompt: Question text shown to the student
        passage_id: Reading passage this question belongs to

    Invariants:
        - points >= 0
        - choices is a tuple (order is significant)

    Example:
        >>> q = Question(id="q1", type=QuestionType.MCQ,
        ...              choices=("Paris", "London"), answer=0, points=2)
        >>> q.numeric_answer
        0
    """

    id: str
    type: QuestionType
    choices: Tuple[str, ...] = ()
    answer: Answer = None
    points: float = 1
    prompt: str = ""
    passage_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.id:
            raise ValueError("Question id must be non-empty")
        if self.points < 0:
            raise ValueError(f"points must be non-negative: {self.points}")

    @property
    def is_mcq(self) -> bool:
        return self.type == QuestionType.MCQ

    @property
    def numeric_answer(self) -> Optional[int]:
        """The answer as a choice index, or None if it is not numeric."""
        return self.answer if is_choice_index(self.answer) else None

    @property
    def accepted_answers(self) -> Tuple[str, ...]:
        """Accepted text answers (Short questions)."""
        if isinstance(self.answer, str):
            return (self.answer,)
        if isinstance(self.answer, tuple):
            return self.answer
        return ()

    def replace_choices(self, choices: Tuple[str, ...], answer: Answer) -> Question:
        """
        Return a copy with new choices and answer.

        Args:
            choices: Choices in their new order
            answer: Answer matching the new order

        Returns:
            New Question instance
        """
        return replace(self, choices=tuple(choices), answer=answer)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to the platform's question JSON shape."""
        d: dict = {
            "id": self.id,
            "type": self.type.value,
            "points": self.points,
        }
        if self.prompt:
            d["prompt"] = self.prompt
        if self.choices:
            d["choices"] = list(self.choices)
        if self.answer is not None:
            d["answer"] = list(self.answer) if isinstance(self.answer, tuple) else self.answer
        if self.passage_id is not None:
            d["passageId"] = self.passage_id
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from the platform's question JSON shape.

        Args:
            data: Dict representation

        Returns:
            Question instance
        """
        answer = data.get("answer")
        if isinstance(answer, list):
            answer = tuple(answer)
        return cls(
            id=data["id"],
            type=QuestionType(data["type"]),
            choices=tuple(data.get("choices") or ()),
            answer=answer,
            points=data.get("points", 1),
            prompt=data.get("prompt", ""),
            passage_id=data.get("passageId"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Question({self.id!r}, {self.type.value})"
