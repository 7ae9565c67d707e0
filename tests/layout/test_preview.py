"""
Unit tests for authoring-time preview.
"""

import pytest

from tn_toolkit.layout import LayoutConfig, apply_layout, build_layout, generate_layout, generate_preview


class TestGeneratePreview:
    """Tests for generate_preview."""

    def test_preview_when_shuffling_disabled_then_returns_input(self, unshuffled_version):
        """Nothing to preview without a shuffle option."""
        assert generate_preview(unshuffled_version) is unshuffled_version

    def test_preview_when_called_twice_then_stable(self, version):
        """The preview seed is fixed, so authors see the same order every time."""
        assert generate_preview(version) == generate_preview(version)

    def test_preview_when_single_section_then_default_seed_order(self, single_section_factory):
        """Default preview seed 12345 puts q2 first."""
        preview = generate_preview(single_section_factory())

        assert [q.id for q in preview.sections[0].questions] == ["q2", "q3", "q1", "q0"]

    def test_preview_when_both_options_then_equals_applied_layout(self, version):
        """Preview matches applying the layout built from the preview seed."""
        expected = apply_layout(version, build_layout(version, 12345))

        assert generate_preview(version) == expected

    def test_preview_when_custom_seed_then_equals_applied_layout(self, version_factory):
        """A configured preview seed is honoured."""
        version = version_factory(shuffle_choices=True)
        config = LayoutConfig(preview_seed=777)

        assert generate_preview(version, config) == apply_layout(version, build_layout(version, 777))

    def test_preview_when_called_then_answers_follow_choices(self, version):
        """Preview keeps each MCQ answer on its correct choice."""
        preview = generate_preview(version)

        for original in version.iter_questions():
            if original.numeric_answer is None:
                continue
            shown = preview.find_question(original.id)
            assert shown.choices[shown.answer] == original.choices[original.answer]

    def test_preview_when_attempt_seed_differs_then_not_attempt_order(self, version):
        """A real attempt (seed 1781) is not predicted by the preview (seed 12345)."""
        # Arrange
        attempt_view = apply_layout(version, generate_layout(version, "attempt-1", "student-7"))

        # Act
        preview = generate_preview(version)

        # Assert
        assert preview != attempt_view


class TestLayoutConfig:
    """Tests for LayoutConfig validation."""

    def test_config_when_defaults_then_well_known_seed(self):
        assert LayoutConfig().preview_seed == 12345
        assert LayoutConfig().anonymous_participant == "anonymous"

    def test_config_when_negative_seed_then_raises(self):
        with pytest.raises(ValueError, match="preview_seed"):
            LayoutConfig(preview_seed=-1)

    def test_config_when_participant_empty_then_raises(self):
        with pytest.raises(ValueError, match="anonymous_participant"):
            LayoutConfig(anonymous_participant="")
