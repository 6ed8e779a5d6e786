"""
Unit tests for configuration loading and validation.

Tests strict validation and error handling for translator configs.
"""

import os
import tempfile

import pytest
import yaml

from word_translator.config.loader import (
    TranslatorConfig,
    default_config,
    load_translator_config,
)


class TestConfigLoading:
    """Test configuration loading and validation."""

    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()

    def teardown_method(self):
        """Clean up test environment."""
        import shutil
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write_config(self, config_data, filename: str = "config.yaml") -> str:
        """Write configuration data to temporary file."""
        config_path = os.path.join(self.temp_dir, filename)
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_data, f)
        return config_path

    def test_valid_config_loads_correctly(self):
        """Test that a valid configuration loads correctly."""
        config_path = self._write_config({
            "model": "gpt-4o-mini",
            "source_language": "fr",
            "target_language": "ar",
            "domain": "legal",
            "style": "strict",
            "max_tokens": 1200,
            "db_path": "stats.db",
        })

        config = load_translator_config(config_path)

        assert config.model == "gpt-4o-mini"
        assert config.source_language == "fr"
        assert config.target_language == "ar"
        assert config.domain == "legal"
        assert config.style == "strict"
        assert config.max_tokens == 1200
        assert config.db_path == "stats.db"

    def test_partial_config_uses_defaults(self):
        config = load_translator_config(self._write_config({"target_language": "de"}))

        assert config.target_language == "de"
        assert config.model == "gpt-4.1"
        assert config.source_language == "auto"
        assert config.domain == "general"
        assert config.style == "balanced"
        assert config.max_tokens == 3000

    def test_default_config(self):
        assert default_config() == TranslatorConfig()

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError, match="Translator config file not found"):
            load_translator_config(os.path.join(self.temp_dir, "missing.yaml"))

    def test_empty_file_raises(self):
        config_path = os.path.join(self.temp_dir, "empty.yaml")
        open(config_path, 'w').close()

        with pytest.raises(ValueError, match="Configuration file is empty"):
            load_translator_config(config_path)

    def test_invalid_yaml_raises(self):
        config_path = os.path.join(self.temp_dir, "bad.yaml")
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write("model: [unclosed\n")

        with pytest.raises(yaml.YAMLError, match="Invalid YAML"):
            load_translator_config(config_path)

    def test_non_mapping_raises(self):
        with pytest.raises(ValueError, match="must be a dictionary"):
            load_translator_config(self._write_config(["model", "gpt-4.1"]))

    def test_unknown_keys_raise(self):
        with pytest.raises(ValueError, match="Unknown configuration keys"):
            load_translator_config(self._write_config({"temperature": 0.9}))

    def test_unknown_domain_raises(self):
        with pytest.raises(ValueError, match="domain must be one of"):
            load_translator_config(self._write_config({"domain": "poetry"}))

    def test_unknown_style_raises(self):
        with pytest.raises(ValueError, match="style must be one of"):
            load_translator_config(self._write_config({"style": "loose"}))

    def test_auto_target_raises(self):
        with pytest.raises(ValueError, match="Unsupported target_language"):
            load_translator_config(self._write_config({"target_language": "auto"}))

    def test_unknown_source_raises(self):
        with pytest.raises(ValueError, match="Unsupported source_language"):
            load_translator_config(self._write_config({"source_language": "xx"}))

    def test_max_tokens_type_checked(self):
        with pytest.raises(ValueError, match="'max_tokens' must be an integer"):
            load_translator_config(self._write_config({"max_tokens": "many"}))

    def test_max_tokens_must_be_positive(self):
        with pytest.raises(ValueError, match="max_tokens must be > 0"):
            load_translator_config(self._write_config({"max_tokens": 0}))

    def test_string_values_type_checked(self):
        with pytest.raises(ValueError, match="'model' must be a string"):
            load_translator_config(self._write_config({"model": 4}))
