"""Feature extraction configuration modules."""

from wordgrade.config.features.readability import (
    ReadabilityConfig,
    ReadabilityFormulasConfig,
    ReadabilityOutputConfig,
    ReadabilityProcessingConfig,
    ReadabilityTextProcessingConfig,
)

__all__ = [
    "ReadabilityConfig",
    "ReadabilityFormulasConfig",
    "ReadabilityOutputConfig",
    "ReadabilityProcessingConfig",
    "ReadabilityTextProcessingConfig",
]
