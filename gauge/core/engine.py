"""
Gauge Analysis Engine
======================

Central orchestrator for PassGauge. The GaugeEngine builds the weak-token
index once from the configured dictionary, injects it into the scorer
and exposes a single synchronous ``analyze`` call that returns a
labelled :class:`~gauge.core.models.AnalysisResult`.

Architecture follows the Facade pattern (Gamma et al., 1994): callers
such as the HTTP handler and the CLI never touch the individual
analyzers directly.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from typing import Optional

from shared.config import GaugeConfig
from shared.logger import GaugeLogger

from gauge.analyzers.classifier import StrengthClassifier
from gauge.analyzers.matching import SubstringMatcher
from gauge.analyzers.scorer import PasswordScorer
from gauge.analyzers.weak_tokens import WeakTokenIndex
from gauge.core.models import AnalysisResult, MatchReport


class GaugeEngine:
    """Orchestrates password scoring and classification.

    Usage::

        engine = GaugeEngine()
        result = engine.analyze("Str0ng!Passw0rd2024")
        result.strength      # StrengthLabel.STRONG
        result.suggestion    # ""

    Attributes:
        config: PassGauge configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[GaugeConfig] = None,
        index: Optional[WeakTokenIndex] = None,
    ) -> None:
        self.config = config or GaugeConfig()
        self.logger = GaugeLogger.from_config(
            "engine", self.config.global_settings
        )

        scorer_config = self.config.gauge
        self._index = index if index is not None else WeakTokenIndex(
            scorer_config.dictionary()
        )
        self._matcher = SubstringMatcher(
            scorer_config.matcher,
            cross_check=scorer_config.cross_check,
            logger=self.logger,
        )
        self._scorer = PasswordScorer(self._index, self._matcher)
        self._classifier = StrengthClassifier()

        self.logger.debug(
            "Engine ready",
            tokens=len(self._index),
            matcher=self._matcher.algorithm,
            cross_check=self._matcher.cross_check,
        )

    @property
    def index(self) -> WeakTokenIndex:
        """The shared, read-only weak-token index."""
        return self._index

    # ------------------------------------------------------------------ #
    #  Password Analysis
    # ------------------------------------------------------------------ #

    def analyze(self, password: str) -> AnalysisResult:
        """Score and classify *password*.

        Deterministic and free of side effects besides logging; the
        password itself is never logged.

        Args:
            password: Raw candidate password.

        Returns:
            AnalysisResult with label, suggestion text and breakdown.
        """
        with self.logger.operation("analyze"), self.logger.timed("password analysis"):
            scored = self._scorer.analyze(password)
            strength = self._classifier.classify(scored.score)

            self.logger.debug(
                "Scored password",
                length=len(password),
                score=scored.score,
                strength=strength.value,
            )

        return AnalysisResult(
            strength=strength,
            suggestion=scored.suggestion_text,
            score=scored.score,
            checks=scored.checks,
            weak_tokens=scored.weak_tokens,
        )

    # ------------------------------------------------------------------ #
    #  Matcher diagnostics
    # ------------------------------------------------------------------ #

    def compare_matchers(self, text: str, pattern: str) -> MatchReport:
        """Run both substring matchers on *text* / *pattern*."""
        report = self._matcher.compare(text, pattern)
        if not report.agree:
            self.logger.error("Matchers disagree", kmp=report.kmp, naive=report.naive)
        return report
