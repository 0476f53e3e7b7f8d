"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from flowscribe.config import DEFAULT_PALETTE, StyleConfig, load_config


def test_defaults_without_config_file(tmp_path, monkeypatch):
    monkeypatch.setenv("FLOWSCRIBE_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("FLOWSCRIBE_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("FLOWSCRIBE_LOG_LEVEL", raising=False)

    config = load_config()
    assert config.styles.palette == DEFAULT_PALETTE
    assert len(config.styles.palette) == 5
    assert config.output.default_formats == ["prompt"]
    assert config.output.directory is None
    assert config.log_level == "WARNING"


def test_load_config_from_env(tmp_path, monkeypatch):
    config_path = tmp_path / "flowscribe.yaml"
    config_path.write_text(
        """
styles:
  palette: ["#000000", "#FFFFFF"]
  decision_color: "#FFFF00"
output:
  default_formats: [sequence, matrix]
log_level: INFO
"""
    )
    monkeypatch.setenv("FLOWSCRIBE_CONFIG", str(config_path))
    monkeypatch.delenv("FLOWSCRIBE_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("FLOWSCRIBE_LOG_LEVEL", raising=False)

    config = load_config()
    assert config.styles.palette == ["#000000", "#FFFFFF"]
    assert config.styles.decision_color == "#FFFF00"
    assert config.styles.error_border_color == "#F44336"
    assert config.output.default_formats == ["sequence", "matrix"]
    assert config.log_level == "INFO"


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("FLOWSCRIBE_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("FLOWSCRIBE_LOG_LEVEL", "debug")

    config = load_config(str(tmp_path / "missing.yaml"))
    assert config.output.directory == str(tmp_path / "out")
    assert config.log_level == "DEBUG"


def test_empty_palette_is_rejected():
    with pytest.raises(ValidationError):
        StyleConfig(palette=[])
