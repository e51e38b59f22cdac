"""
Gauge Analyzers
================

The scoring core: weak-token trie, substring matchers, the heuristic
scorer and the strength classifier.
"""

from gauge.analyzers.classifier import StrengthClassifier, classify
from gauge.analyzers.matching import (
    SubstringMatcher,
    build_failure_table,
    kmp_matches,
    naive_matches,
)
from gauge.analyzers.scorer import PasswordScorer
from gauge.analyzers.weak_tokens import WeakTokenIndex

__all__ = [
    "PasswordScorer",
    "StrengthClassifier",
    "SubstringMatcher",
    "WeakTokenIndex",
    "build_failure_table",
    "classify",
    "kmp_matches",
    "naive_matches",
]
