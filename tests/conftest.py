import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import tn_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from tn_toolkit.core.models import (  # noqa: E402
    ExamOptions,
    Question,
    QuestionType,
    Section,
    SectionType,
    Version,
)


def make_version(shuffle_questions: bool = False, shuffle_choices: bool = False) -> Version:
    """Two populated sections around an empty one, mixing question types."""
    reading = Section(
        id="s-reading",
        label="Reading",
        type=SectionType.READING,
        time_limit=20,
        questions=(
            Question("q0", QuestionType.MCQ, choices=("A", "B", "C"), answer=1, points=2),
            Question("q1", QuestionType.SHORT, answer="cat", points=1),
            Question("q2", QuestionType.MCQ, choices=("w", "x", "y", "z"), answer=3, points=2),
            Question("q3", QuestionType.SPEAKING, points=4),
        ),
    )
    empty = Section(id="s-empty", label="Empty", type=SectionType.CUSTOM)
    listening = Section(
        id="s-listening",
        label="Listening",
        type=SectionType.LISTENING,
        time_limit=15,
        questions=(
            Question("q4", QuestionType.MCQ, choices=("Paris", "London", "Berlin"), answer=0, points=1),
            Question("q5", QuestionType.WRITING, points=5),
            Question("q6", QuestionType.MCQ, choices=(), points=1),
        ),
    )
    return Version(
        id="v1",
        sections=(reading, empty, listening),
        exam_options=ExamOptions(
            shuffle_questions=shuffle_questions,
            shuffle_choices=shuffle_choices,
        ),
    )


def make_single_section_version(shuffle_questions: bool = True, shuffle_choices: bool = False) -> Version:
    """One section of four questions; q0 is an MCQ with three choices."""
    section = Section(
        id="s1",
        questions=(
            Question("q0", QuestionType.MCQ, choices=("A", "B", "C"), answer=1),
            Question("q1", QuestionType.SHORT, answer="dog"),
            Question("q2", QuestionType.WRITING),
            Question("q3", QuestionType.SPEAKING),
        ),
    )
    return Version(
        id="v-single",
        sections=(section,),
        exam_options=ExamOptions(shuffle_questions=shuffle_questions, shuffle_choices=shuffle_choices),
    )


@pytest.fixture
def version_factory():
    """Factory for the mixed two-section version."""
    return make_version


@pytest.fixture
def single_section_factory():
    """Factory for the four-question single-section version."""
    return make_single_section_version


@pytest.fixture
def version() -> Version:
    """Version with both shuffle options enabled."""
    return make_version(shuffle_questions=True, shuffle_choices=True)


@pytest.fixture
def unshuffled_version() -> Version:
    """Version with shuffling disabled."""
    return make_version()
