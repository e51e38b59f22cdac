"""Tests for the password scoring heuristic."""

import pytest

from gauge.analyzers.matching import SubstringMatcher
from gauge.analyzers.scorer import (
    SUGGEST_DIGIT,
    SUGGEST_LENGTH,
    SUGGEST_LOWERCASE,
    SUGGEST_REPETITION,
    SUGGEST_SYMBOL,
    SUGGEST_UPPERCASE,
    SUGGEST_WEAK_TOKEN,
    PasswordScorer,
)
from gauge.core.models import CheckName


@pytest.fixture
def scorer(default_index):
    return PasswordScorer(default_index)


def _points(result):
    return {check.name: check.points for check in result.checks}


class TestWorkedExamples:
    def test_dictionary_word(self, scorer):
        result = scorer.analyze("password")

        assert result.score == 3
        assert result.suggestions == (
            SUGGEST_UPPERCASE,
            SUGGEST_DIGIT,
            SUGGEST_SYMBOL,
            SUGGEST_WEAK_TOKEN,
        )
        assert result.weak_tokens == ("password",)
        assert _points(result)[CheckName.LENGTH] == 1

    def test_strong_password(self, scorer):
        result = scorer.analyze("Str0ng!Passw0rd2024")

        assert result.score == 8
        assert result.suggestions == ()
        assert result.suggestion_text == ""
        assert result.weak_tokens == ()

    def test_short_repeated(self, scorer):
        result = scorer.analyze("aaa111")

        assert result.score == 3
        assert result.suggestions == (
            SUGGEST_LENGTH,
            SUGGEST_UPPERCASE,
            SUGGEST_SYMBOL,
            SUGGEST_REPETITION,
        )
        assert result.suggestion_text == (
            "Use at least 8 characters. Add uppercase letters. "
            "Add symbols. Avoid repeated characters. "
        )


class TestLengthCheck:
    @pytest.mark.parametrize(
        ("password", "points"),
        [("Ab1!", 0), ("Ab1!xyz", 0), ("Ab1!xyzw", 1), ("Ab1!xyzwvut", 1), ("Ab1!xyzwvuts", 2)],
    )
    def test_length_points(self, scorer, password, points):
        result = scorer.analyze(password)
        assert _points(result)[CheckName.LENGTH] == points
        assert (SUGGEST_LENGTH in result.suggestions) is (points == 0)

    def test_short_but_otherwise_clean(self, scorer):
        result = scorer.analyze("Ab1!xy")
        assert result.suggestions == (SUGGEST_LENGTH,)
        assert result.score == 6


class TestCharacterClasses:
    def test_missing_lowercase(self, scorer):
        result = scorer.analyze("ABCDEFGH1!")
        assert SUGGEST_LOWERCASE in result.suggestions
        assert _points(result)[CheckName.LOWERCASE] == 0

    def test_non_ascii_letters_count_as_symbols(self, scorer):
        result = scorer.analyze("Ébcdefg1")
        assert _points(result)[CheckName.SYMBOL] == 1
        assert _points(result)[CheckName.UPPERCASE] == 0

    def test_space_is_a_symbol(self, scorer):
        assert _points(scorer.analyze("ab cd"))[CheckName.SYMBOL] == 1


class TestRepetitionCheck:
    @pytest.mark.parametrize(
        ("password", "has_run"),
        [
            ("aab", False),
            ("aaab", True),
            ("xx!!!yy", True),
            ("abcabc", False),
            ("ab\n\n\ncd", True),
            ("", False),
        ],
    )
    def test_runs(self, scorer, password, has_run):
        result = scorer.analyze(password)
        assert (SUGGEST_REPETITION in result.suggestions) is has_run


class TestWeakTokenCheck:
    def test_case_insensitive(self, scorer):
        result = scorer.analyze("MyAdMiN!9x")
        assert result.weak_tokens == ("admin",)
        assert SUGGEST_WEAK_TOKEN in result.suggestions

    def test_all_found_tokens_reported_in_dictionary_order(self, scorer):
        result = scorer.analyze("qwerty1234")
        assert result.weak_tokens == ("1234", "qwerty")
        assert result.suggestions.count(SUGGEST_WEAK_TOKEN) == 1

    def test_near_miss_is_not_weak(self, scorer):
        result = scorer.analyze("passw0rd")
        assert result.weak_tokens == ()

    def test_naive_matcher_gives_same_result(self, default_index):
        kmp = PasswordScorer(default_index, SubstringMatcher("kmp"))
        naive = PasswordScorer(default_index, SubstringMatcher("naive"))
        for password in ("password", "Str0ng!Passw0rd2024", "aaa111", "x1234y", "ADMIN"):
            assert kmp.analyze(password) == naive.analyze(password)


class TestInvariants:
    @pytest.mark.parametrize(
        "password",
        ["", "a", "password", "Str0ng!Passw0rd2024", "aaaaaaaaaaaa", "Zz9$" * 10, "日本語"],
    )
    def test_score_in_range(self, scorer, password):
        result = scorer.analyze(password)
        assert 0 <= result.score <= 8
        assert result.score == sum(c.points for c in result.checks)
        assert [c.name for c in result.checks] == list(CheckName)

    def test_empty_password_collects_every_class_suggestion(self, scorer):
        result = scorer.analyze("")
        assert result.score == 2
        assert result.suggestions == (
            SUGGEST_LENGTH,
            SUGGEST_UPPERCASE,
            SUGGEST_LOWERCASE,
            SUGGEST_DIGIT,
            SUGGEST_SYMBOL,
        )

    def test_idempotent(self, scorer):
        assert scorer.analyze("Tr1cky!aaa") == scorer.analyze("Tr1cky!aaa")
