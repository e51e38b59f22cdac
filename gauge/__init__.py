"""
PassGauge -- Password Strength Heuristics
==========================================

Scores candidate passwords with a fixed set of heuristic checks and
returns a qualitative strength label plus improvement suggestions.

Modules:
    - gauge.analyzers: Weak-token trie, substring matchers, scorer, classifier
    - gauge.core.engine: Analysis orchestrator
    - gauge.core.models: Pydantic data models
    - gauge.server: FastAPI HTTP endpoint
    - gauge.output: Console output
    - gauge.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
