"""
Configuration management and loading.

Handles translator defaults read from a YAML file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from ..core.languages import AUTO_DETECT, LANGUAGE_MAP
from ..core.prompts import DOMAINS, STYLES
from ..storage.db import DEFAULT_DB_PATH

ALLOWED_KEYS = {
    'model', 'source_language', 'target_language', 'domain', 'style', 'max_tokens', 'db_path'
}


@dataclass(frozen=True)
class TranslatorConfig:
    """Default options for translate and chat actions."""
    model: str = "gpt-4.1"
    source_language: str = AUTO_DETECT
    target_language: str = "en"
    domain: str = "general"
    style: str = "balanced"
    max_tokens: int = 3000
    db_path: str = DEFAULT_DB_PATH

    def __post_init__(self):
        """Validate option values."""
        if not self.model or not self.model.strip():
            raise ValueError("model cannot be empty")
        if self.source_language not in LANGUAGE_MAP:
            raise ValueError(f"Unsupported source_language: {self.source_language}")
        if self.target_language not in LANGUAGE_MAP or self.target_language == AUTO_DETECT:
            raise ValueError(f"Unsupported target_language: {self.target_language}")
        if self.domain not in DOMAINS:
            raise ValueError(f"domain must be one of: {list(DOMAINS)}")
        if self.style not in STYLES:
            raise ValueError(f"style must be one of: {list(STYLES)}")
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be > 0")


def default_config() -> TranslatorConfig:
    return TranslatorConfig()


def load_translator_config(path: str) -> TranslatorConfig:
    """Load and validate translator configuration from YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated TranslatorConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Translator config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if not raw_config:
        raise ValueError("Configuration file is empty")

    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a dictionary")

    unknown_keys = set(raw_config.keys()) - ALLOWED_KEYS
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    return TranslatorConfig(**_validate_types(raw_config))


def _validate_types(data: Dict[str, Any]) -> Dict[str, Any]:
    """Check value types before building the config.

    Raises:
        ValueError: If a value has the wrong type
    """
    values = {}
    for key, value in data.items():
        if key == 'max_tokens':
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("'max_tokens' must be an integer")
        elif not isinstance(value, str):
            raise ValueError(f"'{key}' must be a string")
        values[key] = value
    return values
