"""Readability analysis configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordgrade.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/readability.yaml", "readability")


class ReadabilityFormulasConfig(BaseSettings):
    """Tunable constants used by the readability formulas."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_FORMULAS_',
        case_sensitive=False
    )

    words_per_second: float = Field(
        default_factory=lambda: _get_config().get('formulas', {}).get('words_per_second', 4.17),
        gt=0.0
    )
    linsear_word_limit: int = Field(
        default_factory=lambda: _get_config().get('formulas', {}).get('linsear_word_limit', 100),
        gt=0
    )
    long_word_length: int = Field(
        default_factory=lambda: _get_config().get('formulas', {}).get('long_word_length', 6),
        ge=0
    )
    smog_min_sentences: int = Field(
        default_factory=lambda: _get_config().get('formulas', {}).get('smog_min_sentences', 3),
        ge=1
    )
    fragment_max_words: int = Field(
        default_factory=lambda: _get_config().get('formulas', {}).get('fragment_max_words', 2),
        ge=0
    )


class ReadabilityTextProcessingConfig(BaseSettings):
    """Thresholds below which an analysis is flagged as unreliable."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_TEXT_',
        case_sensitive=False
    )

    min_word_count: int = Field(
        default_factory=lambda: _get_config().get('text_processing', {}).get('min_word_count', 30)
    )
    min_sentence_count: int = Field(
        default_factory=lambda: _get_config().get('text_processing', {}).get('min_sentence_count', 3)
    )


class ReadabilityOutputConfig(BaseSettings):
    """Output format settings for readability scores."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_OUT_',
        case_sensitive=False
    )

    precision: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('precision', 2),
        ge=0
    )
    include_metadata: bool = Field(
        default_factory=lambda: _get_config().get('output', {}).get('include_metadata', False)
    )
    include_classification: bool = Field(
        default_factory=lambda: _get_config().get('output', {}).get('include_classification', True)
    )
    indent: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('indent', 2)
    )


class ReadabilityProcessingConfig(BaseSettings):
    """Processing settings for readability."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_PROC_',
        case_sensitive=False
    )

    cache_enabled: bool = Field(
        default_factory=lambda: _get_config().get('processing', {}).get('cache_enabled', True)
    )


class ReadabilityConfig(BaseSettings):
    """
    Readability analysis configuration.
    Loads from configs/features/readability.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    formulas: ReadabilityFormulasConfig = Field(
        default_factory=ReadabilityFormulasConfig
    )
    text_processing: ReadabilityTextProcessingConfig = Field(
        default_factory=ReadabilityTextProcessingConfig
    )
    output: ReadabilityOutputConfig = Field(
        default_factory=ReadabilityOutputConfig
    )
    processing: ReadabilityProcessingConfig = Field(
        default_factory=ReadabilityProcessingConfig
    )
