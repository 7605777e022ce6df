"""Tests for the configuration loading functions."""

import pytest

from tauhybrid.config import (
    ConfigError,
    ConfigParseError,
    ConfigPathError,
    ConfigTypeError,
    default_config,
    load_config,
    load_config_string,
)


class TestConfigLoader:
    """Test suite for the YAML config loader."""

    def test_basic_load(self, tmp_path):
        """Test basic YAML loading from a file."""
        config_file = tmp_path / "basic.yaml"
        config_file.write_text(
            """
base:
  verbosity: debug
producer:
  dr_max: 0.3
  jet_pt_min: 25.
  jet_eta_max: 2.3
  pnet_label: pnet
  pnet_score_names:
    - pnet:probtaup1h0p
    - pnet:probele
"""
        )

        cfg = load_config(str(config_file))

        assert cfg["base"]["verbosity"] == "debug"
        assert cfg["producer"]["dr_max"] == 0.3
        assert cfg["producer"]["jet_pt_min"] == 25.0
        assert cfg["producer"]["pnet_score_names"] == [
            "pnet:probtaup1h0p",
            "pnet:probele",
        ]

    def test_string_load(self):
        """Test loading from a YAML string."""
        cfg = load_config_string("producer:\n  dr_max: 0.4\n")
        assert cfg == {"producer": {"dr_max": 0.4}}

    def test_empty(self, tmp_path):
        """Test that an empty configuration yields an empty dictionary."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_config(str(config_file)) == {}
        assert load_config_string("") == {}

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises a path error."""
        with pytest.raises(ConfigPathError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        """Test that an invalid YAML document raises a parse error."""
        config_file = tmp_path / "invalid.yaml"
        config_file.write_text("producer: [dr_max: 0.4\n")
        with pytest.raises(ConfigParseError):
            load_config(str(config_file))
        with pytest.raises(ConfigError):
            load_config_string("producer: {dr_max: 0.4\n")

    def test_not_a_mapping(self):
        """Test that a top-level list is refused."""
        with pytest.raises(ConfigTypeError):
            load_config_string("- producer\n- base\n")


class TestDefaultConfig:
    """Test the default configuration."""

    def test_independent_copies(self):
        """Test that editing the default configuration does not leak."""
        cfg = default_config()
        cfg["producer"]["pnet_score_names"].clear()
        assert len(default_config()["producer"]["pnet_score_names"]) > 0

    def test_labels(self):
        """Test that every default score carries the default label."""
        producer = default_config()["producer"]
        label = producer["pnet_label"]
        for name in producer["pnet_score_names"]:
            assert name.startswith(f"{label}:")
