"""
Unit tests for wordgrade/features/readability/schemas.py

Tests aliasing, validation and JSON persistence of the result models.
No real data dependencies - runs in <1 second.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from wordgrade.features.readability import ReadabilityAnalyzer
from wordgrade.features.readability.schemas import (
    LexicalSnapshot,
    ReadabilityAnalysisResult,
    ReadabilityScores,
)


@pytest.fixture
def score_set() -> dict:
    return {
        "fleschReadingEase": 109.04,
        "fleschKincaidGrade": -0.58,
        "smogIndex": 0.0,
        "colemanLiauIndex": -4.55,
        "ari": -4.55,
        "linsearWriteFormula": 1.75,
        "rix": 0.0,
        "readingTime": "0 min 3 sec",
        "wordCount": 11,
    }


class TestReadabilityScores:
    """Tests for ReadabilityScores."""

    def test_populate_by_alias(self, score_set: dict):
        scores = ReadabilityScores(**score_set)
        assert scores.automated_readability_index == -4.55
        assert scores.word_count == 11

    def test_populate_by_name(self, score_set: dict):
        by_alias = ReadabilityScores(**score_set)
        by_name = ReadabilityScores(**by_alias.model_dump())
        assert by_name == by_alias

    def test_score_set_uses_public_keys(self, score_set: dict):
        assert ReadabilityScores(**score_set).to_score_set() == score_set

    def test_grade_levels(self, score_set: dict):
        grades = ReadabilityScores(**score_set).get_grade_levels()
        assert "fleschReadingEase" not in grades
        assert "readingTime" not in grades
        assert grades["smogIndex"] == 0.0

    def test_frozen(self, score_set: dict):
        scores = ReadabilityScores(**score_set)
        with pytest.raises(ValidationError):
            scores.word_count = 3

    def test_negative_word_count_rejected(self, score_set: dict):
        score_set["wordCount"] = -1
        with pytest.raises(ValidationError):
            ReadabilityScores(**score_set)

    @pytest.mark.parametrize("reading_time", ["0 min 60 sec", "3 sec", "1 min 5 secs", ""])
    def test_malformed_reading_time_rejected(self, score_set: dict, reading_time: str):
        score_set["readingTime"] = reading_time
        with pytest.raises(ValidationError):
            ReadabilityScores(**score_set)

    def test_summary_text(self, score_set: dict):
        summary = ReadabilityScores(**score_set).get_summary()
        assert "Flesch Reading Ease: 109.04" in summary
        assert "Reading time: 0 min 3 sec" in summary

    def test_json_file_round_trip(self, score_set: dict, tmp_path: Path):
        scores = ReadabilityScores(**score_set)
        output_path = tmp_path / "nested" / "scores.json"
        scores.model_dump_to_json_file(output_path)

        assert json.loads(output_path.read_text(encoding="utf-8")) == score_set
        assert ReadabilityScores.model_load_from_json_file(output_path) == scores


class TestLexicalSnapshot:
    """Tests for LexicalSnapshot."""

    def test_sentence_count_at_least_one(self):
        with pytest.raises(ValidationError):
            LexicalSnapshot(
                char_count=0, letter_count=0, word_count=0,
                sentence_count=0, syllable_count=0, poly_syllable_count=0,
            )


class TestReadabilityAnalysisResult:
    """Tests for ReadabilityAnalysisResult persistence."""

    @pytest.fixture
    def result(self, simple_text: str) -> ReadabilityAnalysisResult:
        return ReadabilityAnalyzer().extract_features(simple_text, return_metadata=True)

    def test_to_dict_uses_public_keys(self, result: ReadabilityAnalysisResult):
        data = result.to_dict()
        assert data["scores"]["fleschReadingEase"] == 109.04
        assert data["classifications"]["smogIndex"]["band"] == "elementary_school"
        assert isinstance(data["metadata"]["analyzed_at"], str)
        json.dumps(data)

    def test_json_file_round_trip(self, result: ReadabilityAnalysisResult, tmp_path: Path):
        output_path = tmp_path / "result.json"
        result.model_dump_to_json_file(output_path)
        loaded = ReadabilityAnalysisResult.model_load_from_json_file(output_path)

        assert loaded.scores == result.scores
        assert loaded.metadata.statistics == result.metadata.statistics
        assert loaded.classifications == result.classifications
        assert loaded.summary == result.summary

    def test_metadata_summary(self, result: ReadabilityAnalysisResult):
        summary = result.metadata.get_summary()
        assert "11 words, 2 sentences" in summary
