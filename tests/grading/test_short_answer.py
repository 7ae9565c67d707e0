"""
Unit tests for short-answer grading.
"""

import logging

import pytest

from tn_toolkit.grading import (
    ShortAnswerRules,
    add_to_answer_key,
    check_answer,
    levenshtein_distance,
    process_answer,
)


class TestProcessAnswer:
    """Tests for process_answer."""

    def test_process_when_defaults_then_strips_only(self):
        assert process_answer("  Cat ", ShortAnswerRules()) == "Cat"

    def test_process_when_ignore_case_then_lowercases(self):
        rules = ShortAnswerRules(ignore_whitespace=False, ignore_case=True)

        assert process_answer(" Cat ", rules) == " cat "


class TestLevenshteinDistance:
    """Tests for levenshtein_distance."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("kitten", "sitting", 3),
            ("", "abc", 3),
            ("abc", "", 3),
            ("same", "same", 0),
            ("cat", "cta", 2),
            ("colour", "color", 1),
        ],
    )
    def test_distance_when_pairs_then_expected(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected

    def test_distance_when_swapped_then_symmetric(self):
        assert levenshtein_distance("flaw", "lawn") == levenshtein_distance("lawn", "flaw") == 2


class TestCheckAnswer:
    """Tests for check_answer."""

    def test_check_when_exact_after_strip_then_accepted(self):
        assert check_answer("  cat  ", "cat", ShortAnswerRules())

    def test_check_when_case_differs_then_depends_on_rule(self):
        assert not check_answer("Cat", "cat", ShortAnswerRules())
        assert check_answer("Cat", "cat", ShortAnswerRules(ignore_case=True))

    def test_check_when_any_accepted_answer_matches_then_accepted(self):
        assert check_answer("kitten", ["cat", "kitten"], ShortAnswerRules())

    def test_check_when_within_typo_tolerance_then_accepted(self):
        rules = ShortAnswerRules(typo_tolerance=1)

        assert check_answer("colr", "color", rules)
        assert not check_answer("clr", "color", rules)

    def test_check_when_tolerance_zero_then_typos_rejected(self):
        assert not check_answer("colr", "color", ShortAnswerRules())

    def test_check_when_regex_matches_raw_answer_then_accepted(self):
        rules = ShortAnswerRules(regex_patterns=(r"^\d{4}$",))

        assert check_answer("1989", "nineteen eighty-nine", rules)
        assert not check_answer(" 1989", "nineteen eighty-nine", rules)

    def test_check_when_ignore_case_then_regex_case_insensitive(self):
        rules = ShortAnswerRules(ignore_case=True, regex_patterns=("paris",))

        assert check_answer("It is PARIS", "Paris", rules)

    def test_check_when_regex_invalid_then_skipped_with_warning(self, caplog):
        rules = ShortAnswerRules(regex_patterns=("([", "dog"))

        with caplog.at_level(logging.WARNING):
            result = check_answer("hotdog", "cat", rules)

        assert result is True
        assert "invalid regex" in caplog.text


class TestAddToAnswerKey:
    """Tests for add_to_answer_key."""

    def test_add_when_new_then_appended_as_typed(self):
        key = ["cat"]

        result = add_to_answer_key(key, " Kitty ", ShortAnswerRules())

        assert result == ["cat", " Kitty "]
        assert key == ["cat"]

    def test_add_when_equivalent_exists_then_unchanged(self):
        rules = ShortAnswerRules(ignore_case=True)

        assert add_to_answer_key(["Cat"], "cat ", rules) == ["Cat"]


class TestShortAnswerRules:
    """Tests for ShortAnswerRules validation."""

    @pytest.mark.parametrize("tolerance", [-1, 4])
    def test_create_when_tolerance_out_of_range_then_raises(self, tolerance):
        with pytest.raises(ValueError, match="typo_tolerance"):
            ShortAnswerRules(typo_tolerance=tolerance)

    def test_create_when_patterns_list_then_tuple(self):
        assert ShortAnswerRules(regex_patterns=["a"]).regex_patterns == ("a",)
