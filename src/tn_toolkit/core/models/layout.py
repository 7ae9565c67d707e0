"""
Module: layout

Purpose:
    Provides the Layout dataclass - the record of how questions and choices
    were shuffled for one attempt. Created once when the attempt begins,
    stored with the attempt record and never mutated afterwards.

Key Functions:
    - Layout.placements_for(section_id): Question placements of a section
    - Layout.choice_permutation(question_id): Choice permutation of a question
    - Layout.to_dict() / Layout.from_dict(): Attempt-record JSON shape

Dependencies:
    - dataclasses (std)

Used By:
    - layout.generator (creates)
    - layout.applier, layout.answers (reads)
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True, slots=True)
class QuestionPlacement:
    """
    Where one question of a section is displayed.

    Attributes:
        section_id: Section the question belongs to
        original_index: Position in the section's stored order
        shuffled_index: Position in display order
    """

    section_id: str
    original_index: int
    shuffled_index: int

    def __post_init__(self) -> None:
        """Validate placement on construction."""
        if self.original_index < 0 or self.shuffled_index < 0:
            raise ValueError(
                f"Placement indices must be non-negative: "
                f"{self.original_index} -> {self.shuffled_index}"
            )

    def to_dict(self) -> dict:
        return {
            "sectionId": self.section_id,
            "originalIndex": self.original_index,
            "shuffledIndex": self.shuffled_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> QuestionPlacement:
        return cls(
            section_id=data["sectionId"],
            original_index=data["originalIndex"],
            shuffled_index=data["shuffledIndex"],
        )


@dataclass(frozen=True)
class Layout:
    """
    Shuffle record for one attempt (immutable).

    A Layout is a pure function of the version structure and the seed:
    deriving it again from the same inputs yields an equal Layout, so a
    resumed attempt is never reshuffled.

    Attributes:
        seed: Seed the permutations were drawn from
        shuffled_questions: Placements for every shuffled section, or None
            when question shuffling was disabled or produced nothing
        shuffled_choices: Question id -> choice permutation, where position
            k of the display shows original choice perm[k]; None when choice
            shuffling was disabled or produced nothing

    Invariants:
        - Placements of one section form a bijection over [0, n)
        - Every choice permutation is a bijection over [0, k)

    Example:
        >>> layout = Layout(seed=1234, shuffled_choices={"q1": (2, 0, 1)})
        >>> layout.choice_permutation("q1")
        (2, 0, 1)
    """

    seed: int
    shuffled_questions: Optional[Tuple[QuestionPlacement, ...]] = None
    shuffled_choices: Optional[Mapping[str, Tuple[int, ...]]] = None

    def __post_init__(self) -> None:
        """Normalise containers to tuples."""
        if self.shuffled_questions is not None:
            object.__setattr__(self, "shuffled_questions", tuple(self.shuffled_questions))
        if self.shuffled_choices is not None:
            normalised = {qid: tuple(perm) for qid, perm in self.shuffled_choices.items()}
            object.__setattr__(self, "shuffled_choices", normalised)

    def __hash__(self) -> int:
        choices = tuple(sorted(self.shuffled_choices.items())) if self.shuffled_choices else None
        return hash((self.seed, self.shuffled_questions, choices))

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def placements_for(self, section_id: str) -> Tuple[QuestionPlacement, ...]:
        """
        Get the question placements recorded for a section.

        Args:
            section_id: Section identifier

        Returns:
            Placements in recorded order (empty if the section was not shuffled)
        """
        if not self.shuffled_questions:
            return ()
        return tuple(p for p in self.shuffled_questions if p.section_id == section_id)

    def choice_permutation(self, question_id: str) -> Optional[Tuple[int, ...]]:
        """
        Get the choice permutation recorded for a question.

        Args:
            question_id: Question identifier

        Returns:
            Permutation tuple, or None if the question's choices were not shuffled
        """
        if not self.shuffled_choices:
            return None
        return self.shuffled_choices.get(question_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to the attempt-record JSON shape.

        Optional keys are omitted when absent.

        Returns:
            Dict representation
        """
        d: dict = {"seed": self.seed}
        if self.shuffled_questions is not None:
            d["shuffledQuestions"] = [p.to_dict() for p in self.shuffled_questions]
        if self.shuffled_choices is not None:
            d["shuffledChoices"] = {
                qid: list(perm) for qid, perm in self.shuffled_choices.items()
            }
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Layout:
        """
        Deserialize from the attempt-record JSON shape.

        Args:
            data: Dict representation

        Returns:
            Layout instance
        """
        questions = data.get("shuffledQuestions")
        choices = data.get("shuffledChoices")
        return cls(
            seed=data["seed"],
            shuffled_questions=(
                tuple(QuestionPlacement.from_dict(p) for p in questions)
                if questions is not None else None
            ),
            shuffled_choices=(
                {qid: tuple(perm) for qid, perm in choices.items()}
                if choices is not None else None
            ),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        placements = len(self.shuffled_questions) if self.shuffled_questions else 0
        choices = len(self.shuffled_choices) if self.shuffled_choices else 0
        return f"Layout(seed={self.seed}, {placements} placements, {choices} choice sets)"
