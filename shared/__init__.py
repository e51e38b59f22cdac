"""
PassGauge Shared Module
=======================

Configuration, logging and console utilities shared by the PassGauge
analysis core, HTTP service and CLI.
"""

from shared.config import GaugeConfig

__all__ = ["GaugeConfig"]
