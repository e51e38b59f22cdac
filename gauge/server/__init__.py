"""
Gauge Server
=============

HTTP transport for the PassGauge analysis engine.
"""

from gauge.server.app import create_app

__all__ = ["create_app"]
