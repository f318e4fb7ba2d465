# src/campusqa/config.py
"""Configuration loading utilities for campus-qa.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using campus-qa as a library

It handles:
- Finding and loading campusqa.yaml config files
- Loading .env files for API keys
- Building Settings objects from multiple sources
- Creating CampusQA instances from configuration
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from campusqa.providers.litellm.models import ChatModels, EmbeddingModels
from campusqa.settings import Settings

if TYPE_CHECKING:
    from campusqa.campusqa import CampusQA
    from campusqa.stores import SQLiteChunkStore

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = "./campusqa_data"
CONFIG_FILES = ["campusqa.yaml", "campusqa.yml", ".campusqarc"]
ENV_FILE = ".env"


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from a .env file if it exists.

    Existing environment variables are never overridden.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("\"'")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# Valid configuration keys for validation
VALID_ROOT_KEYS = {
    "provider",
    "llm_model",
    "embedding_model",
    "data_dir",
    "source_base_url",
    "settings",
}

VALID_SETTINGS_KEYS = set(Settings.model_fields)


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)

    Raises:
        yaml.YAMLError: If the file is not valid YAML
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise yaml.YAMLError(f"{config_path} must contain a mapping at the top level")

    for warning in validate_config(config, config_path):
        logger.warning(warning)
    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    """Parse float from string, returning None on empty or invalid value."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        return None


_INT_ENV_SETTINGS = {
    "CAMPUSQA_MIN_CHARS": "min_chars",
    "CAMPUSQA_MAX_CHARS": "max_chars",
    "CAMPUSQA_TOP_K": "top_k",
    "CAMPUSQA_MAX_CONTEXT_CHARS": "max_context_chars",
    "CAMPUSQA_EMBEDDING_BATCH_SIZE": "embedding_batch_size",
    "CAMPUSQA_MAX_CONCURRENT_INGEST": "max_concurrent_ingest",
    "CAMPUSQA_NUM_RETRIES": "num_retries",
}


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from CAMPUSQA_* environment variables.

    Returns only values that were explicitly set, so that YAML settings are
    used unless overridden by env vars.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    for env_name, setting in _INT_ENV_SETTINGS.items():
        if (val := _safe_int(os.environ.get(env_name))) is not None:
            result[setting] = val
    if "CAMPUSQA_GENERATION_TEMPERATURE" in os.environ:
        result["generation_temperature"] = _safe_float(
            os.environ["CAMPUSQA_GENERATION_TEMPERATURE"]
        )
    if "CAMPUSQA_PROMPT_HEADER" in os.environ:
        result["prompt_header"] = os.environ["CAMPUSQA_PROMPT_HEADER"] or None

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the known keys of the ``settings:`` section of a YAML config."""
    yaml_settings = config.get("settings", {}) or {}
    return {key: value for key, value in yaml_settings.items() if key in VALID_SETTINGS_KEYS}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables (for CI/CD override)
    2. YAML settings: section
    3. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance

    Raises:
        pydantic.ValidationError: If the merged values are invalid
    """
    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    merged = {**yaml_settings, **env_settings}
    return Settings(**merged)


def get_chunk_store(data_dir: str | Path) -> SQLiteChunkStore:
    """Get the chunk store for read-only operations (status).

    This doesn't require provider configuration since it only accesses the store.
    """
    from campusqa.stores import SQLiteChunkStore

    return SQLiteChunkStore(os.path.join(str(data_dir), "chunks.db"))


def _first_set(*values: Any) -> Any:
    for value in values:
        if value:
            return value
    return None


@dataclass
class CampusQAConfig:
    """Configuration for creating a CampusQA instance."""

    llm_model: str
    embedding_model: str
    data_dir: str
    settings: Settings
    llm_api_key: str | None = None
    embedding_api_key: str | None = None
    source_base_url: str | None = None


def get_campusqa_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> CampusQAConfig | ConfigError:
    """Get configuration for creating a CampusQA instance.

    This extracts configuration without creating the instance, allowing
    the caller to handle errors and missing values appropriately.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        CampusQAConfig with all settings, or ConfigError if invalid
    """
    load_env_file()
    try:
        config = load_config(config_path)
    except (OSError, yaml.YAMLError) as e:
        return ConfigError(
            message=f"Could not read configuration: {e}",
            suggestion="Check that campusqa.yaml is valid YAML",
        )

    provider = config.get("provider", "litellm")
    if provider != "litellm":
        return ConfigError(
            message=f"Unknown provider '{provider}'",
            suggestion="Supported providers: litellm",
        )

    try:
        settings = build_settings(config)
    except ValidationError as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Fix the settings: section of campusqa.yaml or CAMPUSQA_* variables",
        )

    return CampusQAConfig(
        llm_model=_first_set(
            os.environ.get("CAMPUSQA_LLM_MODEL"),
            config.get("llm_model"),
            ChatModels.VERTEX_GEMINI_15_PRO,
        ),
        embedding_model=_first_set(
            os.environ.get("CAMPUSQA_EMBEDDING_MODEL"),
            config.get("embedding_model"),
            EmbeddingModels.VERTEX_TEXT_EMBEDDING_004,
        ),
        data_dir=_first_set(
            data_dir,
            os.environ.get("CAMPUSQA_DATA_DIR"),
            config.get("data_dir"),
            DEFAULT_DATA_DIR,
        ),
        settings=settings,
        llm_api_key=os.environ.get("CAMPUSQA_LLM_API_KEY"),
        embedding_api_key=os.environ.get("CAMPUSQA_EMBEDDING_API_KEY"),
        source_base_url=_first_set(
            os.environ.get("CAMPUSQA_SOURCE_BASE_URL"),
            config.get("source_base_url"),
        ),
    )


def create_campusqa(config: CampusQAConfig) -> CampusQA:
    """Create a CampusQA instance from configuration."""
    from campusqa.campusqa import CampusQA
    from campusqa.configuration import LiteLLMProvider, LocalStorage

    return CampusQA(
        provider=LiteLLMProvider(
            llm=config.llm_model,
            embedding=config.embedding_model,
            llm_api_key=config.llm_api_key,
            embedding_api_key=config.embedding_api_key,
        ),
        storage=LocalStorage(config.data_dir),
        settings=config.settings,
    )


def get_campusqa(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> CampusQA | ConfigError:
    """Create a CampusQA instance based on configuration.

    This is a convenience function that combines get_campusqa_config and
    create_campusqa. For more control, use those functions separately.
    """
    config = get_campusqa_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_campusqa(config)
