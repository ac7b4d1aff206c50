"""
Readability Analysis Validation Tests.

These tests validate readability scores against prose at known reading
levels and against the independent textstat implementation.

Tests gracefully skip if textstat is not installed.
"""

from typing import Dict, List

import numpy as np
import pytest

from wordgrade.features.readability import ReadabilityAnalyzer


@pytest.fixture(scope="module")
def analyzer() -> ReadabilityAnalyzer:
    return ReadabilityAnalyzer()


@pytest.fixture(scope="module")
def graded_scores(analyzer: ReadabilityAnalyzer, graded_samples: List[str]) -> List[Dict]:
    return [analyzer.extract_features(text).to_score_set() for text in graded_samples]


class TestScorePlausibility:
    """Tests validating score direction across reading levels."""

    def test_reading_ease_falls_with_difficulty(self, graded_scores: List[Dict]):
        """
        Metric: Flesch Reading Ease, easiest sample vs hardest.
        Target: Easiest > 80, hardest < 30.
        """
        assert graded_scores[0]["fleschReadingEase"] > 80
        assert graded_scores[-1]["fleschReadingEase"] < 30

    def test_grade_levels_rise_with_difficulty(self, graded_scores: List[Dict]):
        """Every grade-level index ranks the hardest sample above the easiest."""
        for metric in ("fleschKincaidGrade", "colemanLiauIndex", "ari", "rix"):
            assert graded_scores[-1][metric] > graded_scores[0][metric], metric

    def test_readability_metric_correlation(self, graded_scores: List[Dict]):
        """
        Metric: Pearson correlation between readability indices.
        Target: All pairs > 0.7
        Why: All indices should move in same direction.
        """
        indices = {
            'fk': [s["fleschKincaidGrade"] for s in graded_scores],
            'fre': [-s["fleschReadingEase"] for s in graded_scores],  # Invert
            'ari': [s["ari"] for s in graded_scores],
            'cli': [s["colemanLiauIndex"] for s in graded_scores],
        }

        names = list(indices)
        for i, first in enumerate(names):
            for second in names[i + 1:]:
                corr = np.corrcoef(indices[first], indices[second])[0, 1]
                assert corr > 0.7, f"{first} vs {second} correlation {corr:.2f} below 0.7"


class TestTextstatAgreement:
    """Scores should track textstat's implementation of the same formulas."""

    @pytest.fixture(scope="class")
    def textstat(self):
        return pytest.importorskip("textstat")

    @pytest.mark.parametrize("metric,textstat_fn", [
        ("fleschReadingEase", "flesch_reading_ease"),
        ("fleschKincaidGrade", "flesch_kincaid_grade"),
        ("colemanLiauIndex", "coleman_liau_index"),
        ("ari", "automated_readability_index"),
    ])
    def test_correlation_with_textstat(self, textstat, graded_samples: List[str],
                                       graded_scores: List[Dict], metric: str, textstat_fn: str):
        """
        Metric: Pearson correlation with textstat over the graded samples.
        Target: > 0.85 (syllable heuristics differ, ranking should not)
        """
        ours = [s[metric] for s in graded_scores]
        theirs = [getattr(textstat, textstat_fn)(text) for text in graded_samples]

        corr = np.corrcoef(ours, theirs)[0, 1]
        assert corr > 0.85, f"{metric} correlation with textstat {corr:.2f} below 0.85"

    def test_word_count_matches_textstat(self, textstat, graded_samples: List[str],
                                         graded_scores: List[Dict]):
        """Plain prose without hyphens or markup yields the same word count."""
        for text, scores in zip(graded_samples, graded_scores):
            assert scores["wordCount"] == textstat.lexicon_count(text)
