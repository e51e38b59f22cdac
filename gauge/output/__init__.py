"""
Gauge Output Module
====================

Console output formatting for PassGauge results.
"""

from gauge.output.console import GaugeConsoleOutput

__all__ = ["GaugeConsoleOutput"]
