"""
Gauge Core Module
==================

Data models for the PassGauge analysis core. The engine lives in
:mod:`gauge.core.engine`.
"""

from gauge.core.models import (
    AnalysisResult,
    AnalyzeResponse,
    CheckName,
    CheckOutcome,
    MatchReport,
    PasswordScore,
    StrengthLabel,
)

__all__ = [
    "AnalysisResult",
    "AnalyzeResponse",
    "CheckName",
    "CheckOutcome",
    "MatchReport",
    "PasswordScore",
    "StrengthLabel",
]
