"""
Readability Analyzer

Normalizes raw editor content, derives lexical statistics and computes the
readability score set in one synchronous call.

Usage:
    from wordgrade.features.readability import ReadabilityAnalyzer

    analyzer = ReadabilityAnalyzer()
    scores = analyzer.extract_features(post_html)
    print(f"Flesch Reading Ease: {scores.flesch_reading_ease}")

    # Plain mapping with the nine public keys
    from wordgrade.features.readability import analyze
    analyze("The cat sat on the mat. It was a sunny day.")
"""

import logging
from typing import Dict, List, Optional, Union

from wordgrade.config import settings
from wordgrade.config.features.readability import ReadabilityConfig
from wordgrade.preprocessing.cleaning import TextNormalizer
from .classifier import classify_scores, summarize
from .formulas import compute_scores, format_reading_time
from .schemas import (
    LexicalSnapshot,
    ReadabilityAnalysisMetadata,
    ReadabilityAnalysisResult,
    ReadabilityScores,
)
from .statistics import AnalysisCache, LexicalStatistics

logger = logging.getLogger(__name__)


class ReadabilityAnalyzer:
    """
    Readability score extractor.

    This class:
    1. Loads configuration from settings
    2. Normalizes raw text (shortcodes, markup, blank lines)
    3. Builds lexical statistics with a fresh cache for every call
    4. Computes the seven formulas plus reading time and word count
    5. Optionally attaches metadata, band classifications and a summary

    The analyzer holds no per-text state, so one instance can serve any
    number of calls, including concurrent ones.

    Usage:
        analyzer = ReadabilityAnalyzer()
        scores = analyzer.extract_features(text)
    """

    def __init__(
        self,
        config: Optional[ReadabilityConfig] = None,
        normalizer: Optional[TextNormalizer] = None
    ):
        """
        Initialize readability analyzer.

        Args:
            config: Optional ReadabilityConfig object. If None, loads from settings.
            normalizer: Optional TextNormalizer. Defaults to a plain TextNormalizer.
        """
        self.config = config or settings.readability
        self.normalizer = normalizer or TextNormalizer()

        logger.info(
            f"Initialized ReadabilityAnalyzer (precision={self.config.output.precision}, "
            f"cache_enabled={self.config.processing.cache_enabled})"
        )

    def extract_features(
        self,
        text: str,
        return_metadata: bool = False
    ) -> ReadabilityScores | ReadabilityAnalysisResult:
        """
        Compute readability scores for raw text.

        Args:
            text: Raw text; may contain HTML tags and shortcodes
            return_metadata: If True, return ReadabilityAnalysisResult with metadata.
                           If False (default), return only ReadabilityScores.

        Returns:
            ReadabilityScores or ReadabilityAnalysisResult
        """
        text = text or ""
        normalized = self.normalizer.normalize(text)

        # Markup-only content leaves bare newlines, which the space split
        # would count as a word
        measured = normalized if normalized.strip() else ""

        stats = LexicalStatistics(
            measured,
            cache=AnalysisCache(),
            caching=self.config.processing.cache_enabled,
            fragment_max_words=self.config.formulas.fragment_max_words
        )

        warnings = []
        word_count = stats.lexicon_count()

        if word_count == 0:
            warnings.append("No words found after normalization; returning empty scores.")
            scores = self._empty_scores()
        else:
            scores = ReadabilityScores(
                **compute_scores(stats, self.config.formulas, self.config.output.precision)
            )
            warnings.extend(self._collect_warnings(word_count, stats.sentence_count()))

        for warning in warnings:
            logger.warning(warning)

        logger.debug(
            f"Analyzed {len(text)} chars ({len(normalized)} normalized): "
            f"{word_count} words, FRE={scores.flesch_reading_ease}"
        )

        # Return scores only, or with metadata
        if not return_metadata:
            return scores

        metadata = ReadabilityAnalysisMetadata(
            text_length=len(text),
            normalized_length=len(normalized),
            statistics=self._snapshot(stats),
            warnings=warnings,
            config_used=self._get_config_dict()
        )

        classifications = {}
        if self.config.output.include_classification and word_count:
            classifications = classify_scores(scores)

        return ReadabilityAnalysisResult(
            scores=scores,
            metadata=metadata,
            classifications=classifications,
            summary=summarize(scores) if word_count else None
        )

    def extract_features_batch(
        self,
        texts: List[str],
        return_metadata: bool = False
    ) -> List[ReadabilityScores] | List[ReadabilityAnalysisResult]:
        """
        Compute scores for multiple texts.

        Args:
            texts: List of raw text strings
            return_metadata: If True, return results with metadata

        Returns:
            List of ReadabilityScores or ReadabilityAnalysisResult objects
        """
        return [self.extract_features(text, return_metadata=return_metadata) for text in texts]

    # ===========================
    # Private Helper Methods
    # ===========================

    def _collect_warnings(self, word_count: int, sentence_count: int) -> List[str]:
        """Flag texts too short for the formulas to be reliable."""
        warnings = []
        thresholds = self.config.text_processing
        if word_count < thresholds.min_word_count:
            warnings.append(
                f"Word count ({word_count}) below minimum ({thresholds.min_word_count}). "
                f"Results may be unreliable."
            )
        if sentence_count < thresholds.min_sentence_count:
            warnings.append(
                f"Sentence count ({sentence_count}) below minimum ({thresholds.min_sentence_count}). "
                f"Results may be unreliable."
            )
        return warnings

    def _snapshot(self, stats: LexicalStatistics) -> LexicalSnapshot:
        """Primitive counts of the run, read through the run's cache."""
        return LexicalSnapshot(
            char_count=stats.char_count(),
            letter_count=stats.letter_count(),
            word_count=stats.lexicon_count(),
            sentence_count=stats.sentence_count(),
            syllable_count=stats.syllable_count(),
            poly_syllable_count=stats.poly_syllable_count(),
        )

    def _get_config_dict(self) -> dict:
        """Get configuration as dictionary for metadata."""
        try:
            return self.config.model_dump()
        except AttributeError:
            return {"source": "config object (not serializable)"}

    def _empty_scores(self) -> ReadabilityScores:
        """Return zero scores for text without words."""
        return ReadabilityScores(
            flesch_reading_ease=0.0,
            flesch_kincaid_grade=0.0,
            smog_index=0.0,
            coleman_liau_index=0.0,
            automated_readability_index=0.0,
            linsear_write_formula=0.0,
            rix=0.0,
            reading_time=format_reading_time(0, 0),
            word_count=0,
        )


_default_analyzer: Optional[ReadabilityAnalyzer] = None


def analyze(text: str) -> Dict[str, Union[float, int, str]]:
    """
    Compute the score set for raw text.

    Plain synchronous entry point for hosts: no timers, no shared state
    between calls. Debouncing and discarding stale results are up to the
    caller.

    Args:
        text: Raw text; may contain HTML tags and shortcodes

    Returns:
        Mapping with the keys fleschReadingEase, fleschKincaidGrade,
        smogIndex, colemanLiauIndex, ari, linsearWriteFormula, rix,
        readingTime and wordCount
    """
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = ReadabilityAnalyzer()
    return _default_analyzer.extract_features(text).to_score_set()
