"""
WordGrade Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/features/*.yaml
3. Automatically override with environment variables from .env or the shell

Usage:
    from wordgrade.config import settings

    # Output precision for scores
    precision = settings.readability.output.precision

    # Reading speed used for the reading-time estimate
    wps = settings.readability.formulas.words_per_second
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordgrade.config.features import (
    ReadabilityConfig,
    ReadabilityFormulasConfig,
    ReadabilityOutputConfig,
    ReadabilityProcessingConfig,
    ReadabilityTextProcessingConfig,
)


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from wordgrade.config import settings

        settings.readability.formulas.linsear_word_limit
        settings.readability.processing.cache_enabled
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    readability: ReadabilityConfig = Field(default_factory=ReadabilityConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


# ===========================
# Public API
# ===========================

__all__ = [
    "settings",
    "Settings",
    "ReadabilityConfig",
    "ReadabilityFormulasConfig",
    "ReadabilityOutputConfig",
    "ReadabilityProcessingConfig",
    "ReadabilityTextProcessingConfig",
]
