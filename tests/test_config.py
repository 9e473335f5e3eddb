"""Tests for environment driven configuration."""

import pytest
from pydantic import ValidationError

from junctions.config import GraphConfig, get_config, reset_config
from junctions.domain.errors import ConfigurationError
from junctions.pipeline import load_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = get_config()

    assert config.graph.node_alphabet == "ABCDE"
    assert config.graph.arc_separator == ","
    assert config.observability.level == "WARNING"


def test_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JUNCTIONS_GRAPH_NODE_ALPHABET", "XYZ")
    monkeypatch.setenv("JUNCTIONS_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.graph.node_alphabet == "XYZ"
    assert config.observability.level == "DEBUG"


@pytest.mark.parametrize("alphabet", ["", "A1", "A-C"])
def test_invalid_alphabet_is_rejected(alphabet):
    with pytest.raises(ValidationError):
        GraphConfig(node_alphabet=alphabet)


def test_empty_separator_is_rejected():
    with pytest.raises(ValidationError):
        GraphConfig(arc_separator="")


def test_load_config_reports_configuration_error(monkeypatch):
    monkeypatch.setenv("JUNCTIONS_GRAPH_NODE_ALPHABET", "A1")

    with pytest.raises(ConfigurationError) as excinfo:
        load_config()

    assert "node_alphabet" in excinfo.value.setting_name


@pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), (" Info ", "INFO"), ("ERROR", "ERROR")])
def test_log_level_is_normalized(monkeypatch, raw, expected):
    monkeypatch.setenv("JUNCTIONS_LOG_LEVEL", raw)

    assert get_config().observability.level == expected


def test_unknown_log_level_reports_configuration_error(monkeypatch):
    monkeypatch.setenv("JUNCTIONS_LOG_LEVEL", "verbose")

    with pytest.raises(ConfigurationError) as excinfo:
        load_config()

    assert "level" in excinfo.value.setting_name
