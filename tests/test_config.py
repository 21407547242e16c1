"""Tests for configuration loading and saving."""

import json
import os
import stat

import pytest

from novaroute.config.loader import load_config, save_config
from novaroute.config.schema import ClassifierConfig, Config, ProviderConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host NOVAROUTE_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("NOVAROUTE_"):
            monkeypatch.delenv(key)


class TestDefaults:
    """Default configuration values."""

    def test_classifier_defaults(self):
        """Test classifier defaults."""
        config = Config()
        assert config.classifier.ai_enabled is True
        assert config.classifier.temperature == 0.1
        assert config.classifier.max_tokens == 10
        assert config.classifier.timeout_ms is None

    def test_ai_unavailable_without_provider(self):
        """Test that AI is unavailable without a provider."""
        assert Config().ai_available is False

    def test_ai_available_with_key(self):
        """Test that an API key makes AI available."""
        config = Config(provider=ProviderConfig(api_key="sk-test"))
        assert config.ai_available is True

    def test_ai_disabled_wins(self):
        """Test that ai_enabled=False wins over a configured provider."""
        config = Config(
            provider=ProviderConfig(api_key="sk-test"),
            classifier=ClassifierConfig(ai_enabled=False),
        )
        assert config.ai_available is False

    def test_camel_case_keys(self):
        """Test that camelCase keys are accepted."""
        classifier = ClassifierConfig.model_validate({"aiEnabled": False, "maxTokens": 5})
        assert classifier.ai_enabled is False
        assert classifier.max_tokens == 5


class TestEnvironment:
    """Environment overrides."""

    def test_nested_env_override(self, monkeypatch):
        """Test nested environment variables."""
        monkeypatch.setenv("NOVAROUTE_CLASSIFIER__AI_ENABLED", "false")
        monkeypatch.setenv("NOVAROUTE_PROVIDER__API_KEY", "sk-env")

        config = Config()

        assert config.classifier.ai_enabled is False
        assert config.provider.api_key == "sk-env"


class TestLoadSave:
    """Round trip through the JSON file."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test loading when the file does not exist."""
        config = load_config(tmp_path / "missing.json")
        assert config.classifier.model == "gpt-4o-mini"

    def test_save_then_load(self, tmp_path):
        """Test that saved values are loaded back."""
        path = tmp_path / "config.json"
        config = Config(
            provider=ProviderConfig(api_key="sk-test"),
            classifier=ClassifierConfig(model="ollama/llama3", timeout_ms=750),
        )

        save_config(config, path)
        loaded = load_config(path)

        assert loaded.provider.api_key == "sk-test"
        assert loaded.classifier.model == "ollama/llama3"
        assert loaded.classifier.timeout_ms == 750

    def test_saved_file_uses_camel_case(self, tmp_path):
        """Test that the file is written with camelCase keys."""
        path = tmp_path / "config.json"
        save_config(Config(), path)

        data = json.loads(path.read_text())
        assert "aiEnabled" in data["classifier"]
        assert "maxTokens" in data["classifier"]

    def test_saved_file_is_private(self, tmp_path):
        """Test that the saved file is owner read/write only."""
        path = tmp_path / "nested" / "config.json"
        save_config(Config(), path)
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_insecure_permissions_are_fixed(self, tmp_path):
        """Test that loose permissions are tightened on load."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"classifier": {"aiEnabled": False}}))
        os.chmod(path, 0o644)

        config = load_config(path)

        assert config.classifier.ai_enabled is False
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_invalid_json_gives_defaults(self, tmp_path):
        """Test that invalid JSON falls back to defaults."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        config = load_config(path)

        assert config.classifier.ai_enabled is True

    def test_invalid_values_give_defaults(self, tmp_path):
        """Test that invalid values fall back to defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"classifier": {"maxTokens": "lots"}}))

        config = load_config(path)

        assert config.classifier.max_tokens == 10

    def test_undecodable_file_gives_defaults(self, tmp_path):
        """A file that is not UTF-8 is treated like any other malformed file."""
        path = tmp_path / "config.json"
        path.write_bytes(b"\xff\xfe{bad")
        os.chmod(path, 0o600)

        config = load_config(path)

        assert config.classifier.ai_enabled is True
        assert config.classifier.max_tokens == 10

    def test_unreadable_path_gives_defaults(self, tmp_path):
        """A directory where the file should be does not crash loading."""
        path = tmp_path / "config.json"
        path.mkdir()

        config = load_config(path)

        assert config.classifier.model == "gpt-4o-mini"
