"""Tests for the structured component logger."""

import json
import logging
import threading

import pytest

from shared.config import GlobalConfig
from shared.logger import GaugeLogger, current_operation


def _flush(log):
    for handler in log.logger.handlers:
        handler.flush()


def test_json_lines_carry_component_operation_and_fields(tmp_path):
    log_file = tmp_path / "logs" / "gauge.jsonl"
    log = GaugeLogger("test.json", log_file=log_file, json_logs=True, console_output=False)

    with log.operation("analyze"):
        log.info("Scored password", length=8, score=3, strength="Weak")
    log.info("Idle")
    _flush(log)

    scored, idle = (json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines())
    assert scored["level"] == "INFO"
    assert scored["component"] == "test.json"
    assert scored["message"] == "Scored password"
    assert scored["operation"] == "analyze"
    assert scored["fields"] == {"length": 8, "score": 3, "strength": "Weak"}
    assert "operation" not in idle
    assert "fields" not in idle


def test_plain_file_appends_fields(tmp_path):
    log_file = tmp_path / "gauge.log"
    log = GaugeLogger("test.plain", log_file=log_file, console_output=False)

    log.warning("Matcher disagreement", kmp=True, naive=False)
    _flush(log)

    line = log_file.read_text(encoding="utf-8").strip()
    assert "| test.plain | Matcher disagreement [kmp=True naive=False]" in line


def test_unknown_field_is_rejected():
    log = GaugeLogger("test.fields", console_output=False)
    with pytest.raises(TypeError, match="password"):
        log.info("Scored password", password="hunter2")


def test_operation_is_scoped_to_each_thread():
    log = GaugeLogger("test.threads", console_output=False)
    barrier = threading.Barrier(2)
    seen = []

    def work(name):
        with log.operation(name):
            barrier.wait(timeout=5)
            seen.append((name, current_operation()))
            barrier.wait(timeout=5)

    threads = [threading.Thread(target=work, args=(n,)) for n in ("first", "second")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(seen) == [("first", "first"), ("second", "second")]
    assert current_operation() is None


def test_timed_logs_elapsed_at_debug(caplog):
    log = GaugeLogger("test.timed", log_level="DEBUG", console_output=False)
    log.logger.propagate = True

    with caplog.at_level(logging.DEBUG, logger="passgauge.test.timed"):
        with log.timed("password analysis"):
            pass

    record = caplog.records[-1]
    assert record.getMessage() == "Completed: password analysis"
    assert record.elapsed >= 0


def test_from_config_debug_overrides_level():
    log = GaugeLogger.from_config(
        "test.debug", GlobalConfig(log_level="WARNING", debug=True, console_logging=False)
    )
    assert log.logger.level == logging.DEBUG
    assert log.logger.handlers == []


def test_rebuilding_does_not_duplicate_handlers(tmp_path):
    GaugeLogger("test.dup", log_file=tmp_path / "a.log", console_output=False)
    log = GaugeLogger("test.dup", log_file=tmp_path / "a.log", console_output=False)
    assert len(log.logger.handlers) == 1
