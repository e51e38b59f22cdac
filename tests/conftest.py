"""Shared fixtures for PassGauge tests."""

import pytest

from shared.config import GaugeConfig, GlobalConfig
from gauge.analyzers.weak_tokens import WeakTokenIndex
from gauge.core.engine import GaugeEngine


@pytest.fixture
def quiet_config():
    """Default configuration with console logging switched off."""
    return GaugeConfig(global_settings=GlobalConfig(console_logging=False))


@pytest.fixture
def default_index():
    return WeakTokenIndex(["1234", "password", "admin", "qwerty", "aaaa"])


@pytest.fixture
def engine(quiet_config):
    return GaugeEngine(quiet_config)
