"""
Score classification for presentation layers.

Maps a numeric score and a metric identifier to a severity band (name,
rank, color, description). The formulas never depend on this module; it only
exists so that a UI can render meters without embedding thresholds.

Usage:
    from wordgrade.features.readability.classifier import classify

    band = classify(72.4, "fleschReadingEase")
    print(band.band, band.color)  # fairly_easy #B5DE6A
"""

from typing import Dict, Optional, Union

from .constants import (
    FLESCH_READING_EASE,
    GRADE_LEVEL_BANDS,
    GRADE_LEVEL_DESCRIPTIONS,
    GRADE_METER_SCALE,
    INFORMATIONAL_METRICS,
    READING_EASE_BANDS,
    SUMMARY_LEVELS,
)
from .schemas import ReadabilityScores, ReadabilitySummary, ScoreClassification


def classify(score: float, metric: str) -> Optional[ScoreClassification]:
    """
    Classify one score into its severity band.

    Flesch Reading Ease uses descending thresholds (higher is easier). Every
    other metric uses the ascending grade-level thresholds; an unknown metric
    gets the grade-level band with an empty description. Reading time and
    word count are informational and have no band.

    Args:
        score: Numeric score
        metric: Metric identifier (e.g. "fleschReadingEase", "smogIndex")

    Returns:
        ScoreClassification, or None for informational metrics
    """
    if metric in INFORMATIONAL_METRICS:
        return None

    if metric == FLESCH_READING_EASE:
        for rank, (minimum, band, color, description) in enumerate(READING_EASE_BANDS):
            if score >= minimum:
                break
        # NaN compares False everywhere and lands in the last band
        return ScoreClassification(
            metric=metric, score=score, band=band, rank=rank, color=color, description=description
        )

    for rank, (maximum, band, color) in enumerate(GRADE_LEVEL_BANDS):
        if score <= maximum:
            break
    return ScoreClassification(
        metric=metric,
        score=score,
        band=band,
        rank=rank,
        color=color,
        description=describe(score, metric),
    )


def describe(score: float, metric: str) -> str:
    """Static description of a grade-level metric ("" if unknown)."""
    template = GRADE_LEVEL_DESCRIPTIONS.get(metric, "")
    return template.format(score=score)


def classify_scores(scores: ReadabilityScores) -> Dict[str, ScoreClassification]:
    """Classify every banded metric of a score set."""
    classifications = {}
    for metric, value in scores.to_score_set().items():
        classification = classify(value, metric)
        if classification is not None:
            classifications[metric] = classification
    return classifications


def meter_percent(score: float, metric: str) -> Optional[float]:
    """
    Fill level (0-100) of a score meter.

    Flesch Reading Ease maps directly to a percentage; grade-level scores are
    scaled by five so that grade 20 fills the meter.
    """
    if metric in INFORMATIONAL_METRICS:
        return None
    percent = score if metric == FLESCH_READING_EASE else score * GRADE_METER_SCALE
    return max(0.0, min(float(percent), 100.0))


def summarize(scores: Union[ReadabilityScores, Dict]) -> ReadabilitySummary:
    """
    Overall verdict for a text.

    Args:
        scores: ReadabilityScores or a score set mapping

    Returns:
        ReadabilitySummary with level, color, reading time and word count
    """
    if not isinstance(scores, ReadabilityScores):
        scores = ReadabilityScores(**scores)

    for minimum, level, color in SUMMARY_LEVELS:
        if scores.flesch_reading_ease >= minimum:
            break

    return ReadabilitySummary(
        level=level,
        color=color,
        flesch_reading_ease=scores.flesch_reading_ease,
        reading_time=scores.reading_time,
        word_count=scores.word_count,
    )
