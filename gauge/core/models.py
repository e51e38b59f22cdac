"""
Gauge Core Data Models
=======================

Pydantic models for the PassGauge analysis core. These models carry the
per-check outcomes of the scoring heuristic, the aggregated score, the
final labelled analysis and the wire format of the HTTP endpoint.

All result models are frozen: once an analysis is produced nothing can
alter it, and no state survives between two analysis calls.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthLabel(str, enum.Enum):
    """Qualitative password strength, ordered Weak < Moderate < Strong."""

    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"

    @property
    def rank(self) -> int:
        """Position of the label in the Weak < Moderate < Strong ordering."""
        return list(StrengthLabel).index(self)


class CheckName(str, enum.Enum):
    """Identifiers of the scoring checks, in evaluation order."""

    LENGTH = "length"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SYMBOL = "symbol"
    REPETITION = "repetition"
    WEAK_TOKEN = "weak_token"


# ===================================================================== #
#  Scoring Models
# ===================================================================== #


class CheckOutcome(BaseModel):
    """Result of one heuristic check.

    Attributes:
        name: Which check produced this outcome.
        points: Points contributed to the total score.
        passed: Whether the check was satisfied.
        suggestion: Improvement hint, present only when the check failed.
    """

    model_config = ConfigDict(frozen=True)

    name: CheckName
    points: int = Field(default=0, ge=0, le=2)
    passed: bool = False
    suggestion: Optional[str] = None


class PasswordScore(BaseModel):
    """Aggregated output of :class:`~gauge.analyzers.scorer.PasswordScorer`.

    Attributes:
        score: Sum of all check contributions, in [0, 8].
        suggestions: Suggestions of failed checks, in check order.
        checks: Every check outcome, in evaluation order.
        weak_tokens: Dictionary tokens found inside the password.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(default=0, ge=0, le=8)
    suggestions: tuple[str, ...] = ()
    checks: tuple[CheckOutcome, ...] = ()
    weak_tokens: tuple[str, ...] = ()

    @property
    def suggestion_text(self) -> str:
        """Suggestions joined into one string, each followed by a space."""
        return "".join(f"{suggestion} " for suggestion in self.suggestions)


class AnalysisResult(BaseModel):
    """Final labelled analysis of a single password.

    Attributes:
        strength: Qualitative label derived from the score.
        suggestion: Concatenated suggestion text.
        score: Numeric score in [0, 8].
        checks: Per-check breakdown.
        weak_tokens: Dictionary tokens found inside the password.
    """

    model_config = ConfigDict(frozen=True)

    strength: StrengthLabel
    suggestion: str = ""
    score: int = Field(default=0, ge=0, le=8)
    checks: tuple[CheckOutcome, ...] = ()
    weak_tokens: tuple[str, ...] = ()


class MatchReport(BaseModel):
    """Side-by-side verdicts of both substring matchers for one input pair."""

    model_config = ConfigDict(frozen=True)

    text: str
    pattern: str
    failure_table: tuple[int, ...] = ()
    kmp: bool = False
    naive: bool = False

    @property
    def agree(self) -> bool:
        """Whether both algorithms returned the same verdict."""
        return self.kmp == self.naive


# ===================================================================== #
#  Wire Models
# ===================================================================== #


class AnalyzeResponse(BaseModel):
    """JSON body returned by ``POST /analyze``."""

    strength: str
    suggestion: str
