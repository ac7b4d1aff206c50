"""
Cached YAML configuration loader.

Config files live under <repo>/configs/ unless WORDGRADE_CONFIGS_DIR points
elsewhere (useful when the package is installed without the repo checkout).

Usage:
    from wordgrade.config._loader import load_yaml_section

    # Whole file
    config = load_yaml_section("features/readability.yaml")

    # One top-level section
    readability = load_yaml_section("features/readability.yaml", "readability")
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIGS_DIR_ENV = "WORDGRADE_CONFIGS_DIR"


def get_configs_dir() -> Path:
    """
    Resolve the configs directory.

    Priority:
    1. WORDGRADE_CONFIGS_DIR environment variable
    2. configs/ next to the wordgrade package
    """
    env_dir = os.environ.get(CONFIGS_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path(__file__).resolve().parent.parent.parent / "configs"


@lru_cache(maxsize=16)
def load_yaml_section(config_file: str, section: str | None = None) -> dict[str, Any]:
    """
    Load and cache one YAML config file, or one section of it.

    Args:
        config_file: Path relative to the configs directory
        section: Optional top-level key to extract

    Returns:
        Mapping of settings. Empty when the file, or the section, is missing
        or is not a mapping; field defaults then apply.
    """
    config_path = get_configs_dir() / config_file

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}; using defaults")
        return {}

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if section:
        data = data.get(section, {}) if isinstance(data, dict) else {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {config_path}: expected a mapping, got {type(data).__name__}")
        return {}

    logger.debug(f"Loaded {config_path}" + (f" [{section}]" if section else ""))
    return data


def clear_config_cache() -> None:
    """Forget cached files so the next load rereads disk and the environment."""
    load_yaml_section.cache_clear()
