"""Tests for the weak-token trie."""

import pytest

from gauge.analyzers.weak_tokens import WeakTokenIndex


class TestContains:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("1234", True),
            ("password", True),
            ("admin", True),
            ("qwerty", True),
            ("aaaa", True),
            ("12345", False),
            ("123", False),
            ("pass", False),
            ("passwords", False),
            ("Password", False),
            ("", False),
        ],
    )
    def test_exact_membership(self, default_index, token, expected):
        assert default_index.contains(token) is expected

    def test_prefix_of_stored_token_is_not_member(self):
        index = WeakTokenIndex(["admin"])
        assert not index.contains("adm")
        assert index.contains("admin")

    def test_longer_token_sharing_prefix(self):
        index = WeakTokenIndex(["pass", "password"])
        assert index.contains("pass")
        assert index.contains("password")
        assert not index.contains("passw")

    def test_empty_index(self):
        index = WeakTokenIndex()
        assert not index.contains("1234")
        assert not index.contains("")
        assert len(index) == 0

    def test_arbitrary_alphabet(self):
        index = WeakTokenIndex(["пароль", "p@ss", "日本"])
        assert index.contains("пароль")
        assert index.contains("p@ss")
        assert index.contains("日本")
        assert not index.contains("日")


class TestInsert:
    def test_rejects_empty_token(self):
        index = WeakTokenIndex()
        with pytest.raises(ValueError):
            index.insert("")

    def test_duplicate_insert_is_stored_once(self):
        index = WeakTokenIndex(["1234", "1234"])
        assert index.tokens == ("1234",)
        assert len(index) == 1

    def test_tokens_keep_insertion_order(self, default_index):
        assert default_index.tokens == ("1234", "password", "admin", "qwerty", "aaaa")
        assert list(default_index) == list(default_index.tokens)

    def test_in_operator(self, default_index):
        assert "qwerty" in default_index
        assert "qwert" not in default_index
        assert 1234 not in default_index
