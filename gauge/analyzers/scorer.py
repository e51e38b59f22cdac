"""
Password Scorer
================

Rule-based password scoring. Seven independent checks run in a fixed
order; each contributes points and, when it fails, exactly one
improvement suggestion:

====  ==========================  ======  ==============================
 #    Check                       Points  Suggestion on failure
====  ==========================  ======  ==============================
 1    Length (>= 12 / >= 8)       2 / 1   Use at least 8 characters.
 2    Uppercase A-Z present       1       Add uppercase letters.
 3    Lowercase a-z present       1       Add lowercase letters.
 4    Digit 0-9 present           1       Add digits.
 5    Symbol present              1       Add symbols.
 6    No run of 3+ same chars     1       Avoid repeated characters.
 7    No weak dictionary token    1       Remove common weak patterns.
====  ==========================  ======  ==============================

Every check always runs, so the score ranges from 0 to 8.

Character classes are ASCII: a symbol is anything that is not an ASCII
letter or digit, which includes whitespace and non-ASCII characters.
"""

from __future__ import annotations

import re
import string
from typing import Optional

from gauge.analyzers.matching import SubstringMatcher
from gauge.analyzers.weak_tokens import WeakTokenIndex
from gauge.core.models import CheckName, CheckOutcome, PasswordScore


SUGGEST_LENGTH = "Use at least 8 characters."
SUGGEST_UPPERCASE = "Add uppercase letters."
SUGGEST_LOWERCASE = "Add lowercase letters."
SUGGEST_DIGIT = "Add digits."
SUGGEST_SYMBOL = "Add symbols."
SUGGEST_REPETITION = "Avoid repeated characters."
SUGGEST_WEAK_TOKEN = "Remove common weak patterns."

MIN_LENGTH = 8
LONG_LENGTH = 12

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)

# Any character followed by at least two copies of itself.
_REPEAT_RUN = re.compile(r"(.)\1{2,}", re.DOTALL)


class PasswordScorer:
    """Scores a password against the fixed heuristic checks.

    The weak-token index is built once by the caller and injected; the
    scorer holds no per-call state, so one instance may serve concurrent
    analyses.

    Usage::

        scorer = PasswordScorer(WeakTokenIndex(["1234", "password"]))
        result = scorer.analyze("password")
        result.score          # 3
        result.suggestions    # ("Add uppercase letters.", ...)
    """

    def __init__(
        self,
        index: WeakTokenIndex,
        matcher: Optional[SubstringMatcher] = None,
    ) -> None:
        self._index = index
        self._matcher = matcher or SubstringMatcher()

    @property
    def index(self) -> WeakTokenIndex:
        return self._index

    @property
    def matcher(self) -> SubstringMatcher:
        return self._matcher

    def analyze(self, password: str) -> PasswordScore:
        """Run every check on *password* and aggregate the outcomes.

        Args:
            password: Raw candidate password; any string is accepted.

        Returns:
            PasswordScore with the total, ordered suggestions and the
            per-check breakdown.
        """
        found = self._find_weak_tokens(password)
        checks = (
            self._check_length(password),
            self._check_presence(
                CheckName.UPPERCASE, password, string.ascii_uppercase, SUGGEST_UPPERCASE
            ),
            self._check_presence(
                CheckName.LOWERCASE, password, string.ascii_lowercase, SUGGEST_LOWERCASE
            ),
            self._check_presence(
                CheckName.DIGIT, password, string.digits, SUGGEST_DIGIT
            ),
            self._check_symbol(password),
            self._check_repetition(password),
            self._outcome(CheckName.WEAK_TOKEN, not found, 1, SUGGEST_WEAK_TOKEN),
        )

        return PasswordScore(
            score=sum(check.points for check in checks),
            suggestions=tuple(c.suggestion for c in checks if c.suggestion),
            checks=checks,
            weak_tokens=found,
        )

    # ------------------------------------------------------------------ #
    #  Individual checks
    # ------------------------------------------------------------------ #

    @staticmethod
    def _outcome(
        name: CheckName, passed: bool, points: int, suggestion: str
    ) -> CheckOutcome:
        if passed:
            return CheckOutcome(name=name, points=points, passed=True)
        return CheckOutcome(name=name, points=0, passed=False, suggestion=suggestion)

    def _check_length(self, password: str) -> CheckOutcome:
        length = len(password)
        if length >= LONG_LENGTH:
            return self._outcome(CheckName.LENGTH, True, 2, SUGGEST_LENGTH)
        return self._outcome(CheckName.LENGTH, length >= MIN_LENGTH, 1, SUGGEST_LENGTH)

    def _check_presence(
        self, name: CheckName, password: str, alphabet: str, suggestion: str
    ) -> CheckOutcome:
        return self._outcome(name, any(c in alphabet for c in password), 1, suggestion)

    def _check_symbol(self, password: str) -> CheckOutcome:
        has_symbol = any(c not in _ALPHANUMERIC for c in password)
        return self._outcome(CheckName.SYMBOL, has_symbol, 1, SUGGEST_SYMBOL)

    def _check_repetition(self, password: str) -> CheckOutcome:
        has_run = _REPEAT_RUN.search(password) is not None
        return self._outcome(CheckName.REPETITION, not has_run, 1, SUGGEST_REPETITION)

    def _find_weak_tokens(self, password: str) -> tuple[str, ...]:
        """Dictionary tokens occurring in the lower-cased password."""
        lowered = password.lower()
        return tuple(
            token
            for token in self._index
            if self._index.contains(token) and self._matcher.matches(lowered, token)
        )
