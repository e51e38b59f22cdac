"""
Strength Classifier
====================

Maps a heuristic score (0-8) onto a qualitative label:

* score <= 3       -> Weak
* 4 <= score <= 6  -> Moderate
* score >= 7       -> Strong
"""

from __future__ import annotations

from gauge.core.models import StrengthLabel

WEAK_MAX_SCORE = 3
MODERATE_MAX_SCORE = 6


class StrengthClassifier:
    """Pure, stateless score-to-label mapping."""

    weak_max: int = WEAK_MAX_SCORE
    moderate_max: int = MODERATE_MAX_SCORE

    def classify(self, score: int) -> StrengthLabel:
        """Return the label for *score*; total over all integers."""
        if score <= self.weak_max:
            return StrengthLabel.WEAK
        if score <= self.moderate_max:
            return StrengthLabel.MODERATE
        return StrengthLabel.STRONG


def classify(score: int) -> StrengthLabel:
    """Module-level shortcut for :meth:`StrengthClassifier.classify`."""
    return StrengthClassifier().classify(score)
