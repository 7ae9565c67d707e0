"""
Unit Tests for Schema Validation.
"""

import pytest

from tn_toolkit.core.schemas import ValidationError, validate_layout, validate_version


def _layout(**overrides):
    data = {
        "seed": 42,
        "shuffledQuestions": [
            {"sectionId": "s1", "originalIndex": 0, "shuffledIndex": 1},
            {"sectionId": "s1", "originalIndex": 1, "shuffledIndex": 0},
        ],
        "shuffledChoices": {"q0": [2, 0, 1]},
    }
    data.update(overrides)
    return data


class TestValidateLayout:
    """Tests for validate_layout."""

    def test_validate_when_valid_then_passes(self):
        validate_layout(_layout())
        validate_layout(_layout(), strict=True)

    def test_validate_when_seed_only_then_passes(self):
        validate_layout({"seed": 0}, strict=True)

    @pytest.mark.parametrize("seed", [None, "12", 1.5, True])
    def test_validate_when_seed_not_integer_then_raises(self, seed):
        with pytest.raises(ValidationError) as exc:
            validate_layout(_layout(seed=seed))

        assert exc.value.path == "seed"

    def test_validate_when_shuffled_indices_repeat_then_raises(self):
        """Two questions at one display position is not a bijection."""
        placements = [
            {"sectionId": "s1", "originalIndex": 0, "shuffledIndex": 0},
            {"sectionId": "s1", "originalIndex": 1, "shuffledIndex": 0},
        ]

        with pytest.raises(ValidationError, match="shuffled indices"):
            validate_layout(_layout(shuffledQuestions=placements))

    def test_validate_when_original_indices_skip_then_raises(self):
        placements = [
            {"sectionId": "s1", "originalIndex": 0, "shuffledIndex": 0},
            {"sectionId": "s1", "originalIndex": 2, "shuffledIndex": 1},
        ]

        with pytest.raises(ValidationError, match="original indices"):
            validate_layout(_layout(shuffledQuestions=placements))

    def test_validate_when_placement_field_missing_then_reports_it(self):
        placements = [{"sectionId": "s1", "originalIndex": 0}]

        with pytest.raises(ValidationError) as exc:
            validate_layout(_layout(shuffledQuestions=placements))

        assert exc.value.errors == ["Missing field: shuffledIndex"]
        assert exc.value.path == "shuffledQuestions[0]"

    def test_validate_when_negative_index_then_raises(self):
        placements = [{"sectionId": "s1", "originalIndex": -1, "shuffledIndex": 0}]

        with pytest.raises(ValidationError, match="Invalid placement"):
            validate_layout(_layout(shuffledQuestions=placements))

    def test_validate_when_choice_permutation_not_bijection_then_raises(self):
        with pytest.raises(ValidationError) as exc:
            validate_layout(_layout(shuffledChoices={"q0": [0, 0, 2]}))

        assert exc.value.path == "shuffledChoices.q0"

    def test_validate_when_strict_and_unknown_key_then_raises(self):
        """Only strict mode rejects keys outside the stored shape."""
        data = _layout(extra="nope")

        validate_layout(data)
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_layout(data, strict=True)


class TestValidateVersion:
    """Tests for validate_version."""

    def test_validate_when_fixture_version_then_passes(self, version):
        validate_version(version.to_dict(), strict=True)

    def test_validate_when_sections_missing_then_passes(self):
        validate_version({"id": "v"})

    def test_validate_when_id_missing_then_raises(self):
        with pytest.raises(ValidationError, match="id"):
            validate_version({"sections": []})

    def test_validate_when_question_type_unknown_then_raises(self):
        data = {"id": "v", "sections": [{"id": "s", "questions": [{"id": "q", "type": "Essay"}]}]}

        with pytest.raises(ValidationError) as exc:
            validate_version(data)

        assert exc.value.path == "sections[0].questions[0].type"

    def test_validate_when_points_negative_then_raises(self):
        data = {"id": "v", "sections": [{"id": "s", "questions": [{"id": "q", "type": "MCQ", "points": -2}]}]}

        with pytest.raises(ValidationError, match="points"):
            validate_version(data)

    def test_validate_when_section_has_no_id_then_raises(self):
        with pytest.raises(ValidationError, match="Section must have an id"):
            validate_version({"id": "v", "sections": [{"label": "x"}]})

    def test_validate_when_section_ids_repeat_then_raises(self):
        """Placements are keyed by section id, so ids must be unique."""
        data = {
            "id": "v",
            "sections": [
                {"id": "s", "questions": [{"id": f"q{i}", "type": "Short"} for i in range(3)]},
                {"id": "s", "questions": [{"id": f"q{i}", "type": "Short"} for i in range(3, 5)]},
            ],
        }

        with pytest.raises(ValidationError, match="Duplicate section id") as exc:
            validate_version(data)

        assert exc.value.path == "sections[1].id"

    def test_validate_when_question_ids_repeat_across_sections_then_raises(self):
        """Choice permutations are keyed by question id, so ids must be unique."""
        data = {
            "id": "v",
            "sections": [
                {"id": "s1", "questions": [{"id": "q0", "type": "MCQ", "choices": ["a", "b"]}]},
                {"id": "s2", "questions": [{"id": "q0", "type": "MCQ", "choices": ["c", "d"]}]},
            ],
        }

        with pytest.raises(ValidationError, match="Duplicate question id") as exc:
            validate_version(data)

        assert exc.value.path == "sections[1].questions[0].id"

    def test_deserialize_when_section_ids_repeat_then_rejected_before_layout(self):
        """A version with clashing section ids never reaches the layout engine."""
        from tn_toolkit.core.utils.serialization import deserialize_version

        data = {
            "id": "v",
            "examOptions": {"shuffleQuestions": True},
            "sections": [
                {"id": "s", "questions": [{"id": "a", "type": "Short"}]},
                {"id": "s", "questions": [{"id": "b", "type": "Short"}]},
            ],
        }

        with pytest.raises(ValidationError):
            deserialize_version(data)
