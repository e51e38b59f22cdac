"""Tests for TOML configuration loading."""

import pytest

from shared.config import DEFAULT_WEAK_TOKENS, GaugeConfig, ScorerConfig


def test_defaults():
    config = GaugeConfig()
    assert config.server.host == "0.0.0.0"
    assert config.server.port == 5000
    assert config.server.cors_origins == ["*"]
    assert config.gauge.matcher == "kmp"
    assert config.gauge.cross_check is False
    assert config.gauge.dictionary() == DEFAULT_WEAK_TOKENS


def test_load_from_file(tmp_path):
    path = tmp_path / "gauge.toml"
    path.write_text(
        '[global]\nlog_level = "DEBUG"\nunknown_key = 1\n'
        '[server]\nport = 8080\n'
        '[gauge]\nweak_tokens = ["Hunter2", "1234"]\nmatcher = "naive"\n',
        encoding="utf-8",
    )

    config = GaugeConfig.load(path)

    assert config.global_settings.log_level == "DEBUG"
    assert config.server.port == 8080
    assert config.server.host == "0.0.0.0"
    assert config.gauge.matcher == "naive"
    assert config.gauge.dictionary() == ("hunter2", "1234")


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        GaugeConfig.load(tmp_path / "missing.toml")


def test_dictionary_normalisation():
    scorer = ScorerConfig(weak_tokens=["ADMIN", "", " admin ", "Qwerty"])
    assert scorer.dictionary() == ("admin", "qwerty")


def test_to_dict_round_trips_sections():
    raw = GaugeConfig().to_dict()
    assert set(raw) == {"global_settings", "server", "gauge"}



@pytest.mark.parametrize(
    ("source", "message"),
    [
        ('[server]\nport = "5000"\n', r"\[server\] port must be of type int"),
        ("[server]\nport = true\n", r"\[server\] port must be of type int"),
        ('[gauge]\nweak_tokens = "1234"\n', r"\[gauge\] weak_tokens must be of type list"),
        ("[global]\nlog_file = 3\n", r"\[global\] log_file must be of type str"),
        ("global = 1\n", r"\[global\] must be a table"),
    ],
)
def test_wrongly_typed_values_are_rejected(tmp_path, source, message):
    path = tmp_path / "gauge.toml"
    path.write_text(source, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        GaugeConfig.load(path)


def test_malformed_toml_raises_value_error(tmp_path):
    path = tmp_path / "gauge.toml"
    path.write_text("[server\nport = 1\n", encoding="utf-8")

    with pytest.raises(ValueError):
        GaugeConfig.load(path)
