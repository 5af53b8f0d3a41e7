"""Tests for config loading and API key lookup."""

import pytest

from meta_optimizer.config import AppConfig, LLMConfig, load_api_key, load_config
from meta_optimizer.errors import ConfigurationError


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.model == "claude-haiku-4-5-20251001"
        assert config.llm.timeout == 30
        assert config.ui.preview_url.startswith("https://")

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == AppConfig()

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("llm:\n  model: test-model\n  timeout: 10\nui:\n  log_level: debug\n")
        config = load_config(yaml_path)
        assert config.llm.model == "test-model"
        assert config.llm.timeout == 10
        assert config.ui.log_level == "debug"
        # Defaults for unspecified
        assert config.llm.max_tokens == 1024

    def test_empty_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.model = "changed"


class TestConfigValidation:
    def test_invalid_timeout(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  timeout: 0\n")
        with pytest.raises(ValueError, match="timeout"):
            load_config(yaml)

    def test_invalid_max_tokens(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  max_tokens: 100000\n")
        with pytest.raises(ValueError, match="max_tokens"):
            load_config(yaml)

    def test_invalid_temperature(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  temperature: 1.5\n")
        with pytest.raises(ValueError, match="temperature"):
            load_config(yaml)

    def test_invalid_log_level(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("ui:\n  log_level: LOUD\n")
        with pytest.raises(ValueError, match="log_level"):
            load_config(yaml)


class TestLoadApiKey:
    def test_returns_key(self):
        assert load_api_key({"ANTHROPIC_API_KEY": "sk-test"}) == "sk-test"

    def test_missing_key_raises(self):
        with pytest.raises(ConfigurationError, match="ANTHROPIC_API_KEY"):
            load_api_key({})

    def test_blank_key_raises(self):
        with pytest.raises(ConfigurationError):
            load_api_key({"ANTHROPIC_API_KEY": "   "})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-env")
        assert load_api_key() == "sk-env"
