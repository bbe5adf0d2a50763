"""Configuration loader with YAML and environment variable support.

This module reads ~/.config/speechcards/config.yaml when it exists and
allows environment variable overrides using the SPEECHCARDS_* prefix.
Every setting has a default, so a missing file is not an error.

Environment variables:
- SPEECHCARDS_NEW_ITEM_TITLE: Override editor.new_item_title
- SPEECHCARDS_INDENT_WIDTH: Override outline.indent_width
- SPEECHCARDS_MAX_STRUCTURAL_DEPTH: Override cards.max_structural_depth
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from speechcards.models.config import Config
from speechcards.utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "speechcards" / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. If None, uses ~/.config/speechcards/config.yaml

    Returns:
        Validated Config object

    Raises:
        ValueError: If the config file or an override is invalid
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error("config_yaml_invalid", path=str(config_path), error=str(e))
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
    else:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {config_path} must be a mapping")

    data = _apply_env_overrides(data)

    try:
        config = Config(**data)
    except ValidationError as e:
        logger.error("config_validation_error", path=str(config_path), error=str(e))
        raise ValueError(f"Configuration validation failed: {e}") from e

    logger.debug("config_loaded", path=str(config_path))
    return config


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data.

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        Configuration dictionary with environment overrides applied
    """
    for section in ("editor", "outline", "cards"):
        if data.get(section) is None:
            data[section] = {}
        elif not isinstance(data[section], dict):
            raise ValueError(f"Configuration section '{section}' must be a mapping")

    if env_title := os.getenv("SPEECHCARDS_NEW_ITEM_TITLE"):
        data["editor"]["new_item_title"] = env_title

    if env_indent := os.getenv("SPEECHCARDS_INDENT_WIDTH"):
        try:
            data["outline"]["indent_width"] = int(env_indent)
        except ValueError:
            logger.warning("config_env_ignored", variable="SPEECHCARDS_INDENT_WIDTH", value=env_indent)

    if env_depth := os.getenv("SPEECHCARDS_MAX_STRUCTURAL_DEPTH"):
        try:
            data["cards"]["max_structural_depth"] = int(env_depth)
        except ValueError:
            logger.warning("config_env_ignored", variable="SPEECHCARDS_MAX_STRUCTURAL_DEPTH", value=env_depth)

    return data
