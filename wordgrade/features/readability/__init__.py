"""
Readability Analysis Module

This package computes standard readability metrics for prose and maps them
to severity bands for display.

Key Components:
- ReadabilityAnalyzer: Main score extractor
- analyze: Plain function returning the nine-key score set
- LexicalStatistics / AnalysisCache: Primitive counts with a per-run cache
- classify: Severity band for one score
- ReadabilityScores: Pydantic model for the score set

Usage:
    from wordgrade.features.readability import ReadabilityAnalyzer, classify

    analyzer = ReadabilityAnalyzer()
    scores = analyzer.extract_features(post_html)
    band = classify(scores.flesch_reading_ease, "fleschReadingEase")
    print(f"{band.band}: {band.description}")
"""

from .analyzer import ReadabilityAnalyzer, analyze
from .classifier import classify, classify_scores, meter_percent, summarize
from .statistics import AnalysisCache, LexicalStatistics, round_half_away
from .schemas import (
    LexicalSnapshot,
    ReadabilityScores,
    ReadabilityAnalysisMetadata,
    ReadabilityAnalysisResult,
    ReadabilitySummary,
    ScoreClassification,
)
from .constants import (
    METRIC_LABELS,
    READABILITY_MODULE_VERSION,
    SCORE_SET_KEYS,
)

__all__ = [
    # Main entry points
    "ReadabilityAnalyzer",
    "analyze",
    # Engine
    "AnalysisCache",
    "LexicalStatistics",
    "round_half_away",
    # Classification
    "classify",
    "classify_scores",
    "meter_percent",
    "summarize",
    # Schemas
    "LexicalSnapshot",
    "ReadabilityScores",
    "ReadabilityAnalysisMetadata",
    "ReadabilityAnalysisResult",
    "ReadabilitySummary",
    "ScoreClassification",
    # Constants
    "METRIC_LABELS",
    "READABILITY_MODULE_VERSION",
    "SCORE_SET_KEYS",
]
