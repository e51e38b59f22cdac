"""
Substring Matching
===================

Exact substring search used to detect weak tokens inside a candidate
password. Two interchangeable algorithms are provided:

1. Knuth-Morris-Pratt: a failure table over the pattern lets the scan
   visit every text character exactly once -- O(n + m).
2. Naive: every start offset is compared character by character --
   O(n * m) worst case.

Both return identical verdicts for every input. The naive variant is
kept as a selectable fallback, a runtime cross-check and a test oracle.

Case handling is the caller's job: the weak-token dictionary is stored
lower-case, so the password must be lower-cased before matching.

References:
    - Knuth, D. E., Morris, J. H., & Pratt, V. R. (1977). Fast Pattern
      Matching in Strings. SIAM Journal on Computing, 6(2), 323-350.
    - Cormen, T. H. et al. (2009). Introduction to Algorithms, 3rd ed.,
      Chapter 32: String Matching.
"""

from __future__ import annotations

from typing import Callable, Optional

from shared.config import SUPPORTED_MATCHERS
from shared.logger import GaugeLogger

from gauge.core.models import MatchReport


MatchFunction = Callable[[str, str], bool]


# ===================================================================== #
#  Knuth-Morris-Pratt
# ===================================================================== #


def build_failure_table(pattern: str) -> list[int]:
    """Compute the KMP failure (longest proper prefix-suffix) table.

    ``table[i]`` is the length of the longest proper prefix of
    ``pattern[:i + 1]`` that is also a suffix of it.

    Args:
        pattern: The pattern to preprocess.

    Returns:
        A list with one entry per pattern character.
    """
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_matches(text: str, pattern: str) -> bool:
    """Return ``True`` if *pattern* occurs in *text* (linear time).

    The text pointer always advances; on a mismatch the pattern pointer
    falls back through the failure table instead of rewinding the text.
    """
    if not pattern:
        return True
    if len(pattern) > len(text):
        return False

    table = build_failure_table(pattern)
    j = 0
    for ch in text:
        while j and ch != pattern[j]:
            j = table[j - 1]
        if ch == pattern[j]:
            j += 1
            if j == len(pattern):
                return True
    return False


# ===================================================================== #
#  Naive
# ===================================================================== #


def naive_matches(text: str, pattern: str) -> bool:
    """Return ``True`` if *pattern* occurs in *text* (quadratic fallback)."""
    if len(pattern) > len(text):
        return False

    for start in range(len(text) - len(pattern) + 1):
        offset = 0
        while offset < len(pattern) and text[start + offset] == pattern[offset]:
            offset += 1
        if offset == len(pattern):
            return True
    return False


_ALGORITHMS: dict[str, MatchFunction] = {
    "kmp": kmp_matches,
    "naive": naive_matches,
}


# ===================================================================== #
#  Dispatcher
# ===================================================================== #


class SubstringMatcher:
    """Selects the operative matching algorithm.

    With *cross_check* enabled both algorithms run on every call; any
    disagreement is logged and the linear-time verdict wins.

    Usage::

        matcher = SubstringMatcher()
        matcher.matches("hunter1234", "1234")      # True
        matcher.compare("aaaa", "aa").agree        # True
    """

    def __init__(
        self,
        algorithm: str = "kmp",
        *,
        cross_check: bool = False,
        logger: Optional[GaugeLogger] = None,
    ) -> None:
        if algorithm not in SUPPORTED_MATCHERS:
            raise ValueError(
                f"Unknown matcher {algorithm!r}; expected one of "
                f"{', '.join(SUPPORTED_MATCHERS)}"
            )
        self.algorithm = algorithm
        self.cross_check = cross_check
        self._match = _ALGORITHMS[algorithm]
        self._logger = logger

    def matches(self, text: str, pattern: str) -> bool:
        """Return ``True`` if *pattern* occurs in *text*."""
        if not self.cross_check:
            return self._match(text, pattern)

        report = self.compare(text, pattern)
        if not report.agree and self._logger is not None:
            self._logger.error(
                "Matcher disagreement",
                length=len(pattern),
                kmp=report.kmp,
                naive=report.naive,
            )
        return report.kmp

    @staticmethod
    def compare(text: str, pattern: str) -> MatchReport:
        """Run both algorithms and report their verdicts side by side."""
        return MatchReport(
            text=text,
            pattern=pattern,
            failure_table=tuple(build_failure_table(pattern)),
            kmp=kmp_matches(text, pattern),
            naive=naive_matches(text, pattern),
        )
