"""
Data structures for readability analysis.

This module defines Pydantic v2 models for readability scores.
These schemas enforce type safety and validation throughout the pipeline.

Following the project's Pydantic v2 enforcement standards:
- Use BaseModel (not dataclass)
- Use @field_validator (not @validator)
- Use model_config = (not class Config:)
- Use .model_dump() (not .dict())
- Use .model_dump_json() (not .json())
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional, Union
from datetime import datetime
from pathlib import Path
import json

from .constants import (
    GRADE_LEVEL_METRICS,
    READABILITY_MODULE_VERSION,
    READING_TIME_PATTERN,
)


class ReadabilityScores(BaseModel):
    """
    The score set produced by one analysis run.

    Fields use snake_case in Python and the camelCase metric identifiers as
    aliases, so ``to_score_set()`` yields exactly the nine public keys:
    fleschReadingEase, fleschKincaidGrade, smogIndex, colemanLiauIndex, ari,
    linsearWriteFormula, rix, readingTime, wordCount.

    Numeric scores are rounded half away from zero. On degenerate input
    computed outside ReadabilityAnalyzer they may be NaN or infinite.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    flesch_reading_ease: float = Field(
        ...,
        alias="fleschReadingEase",
        description="Flesch Reading Ease (typically 0-100, can exceed either end). "
                    "Formula: 206.835 - 1.015 × (words/sentences) - 84.6 × (syllables/words). "
                    "Higher = easier to read."
    )
    flesch_kincaid_grade: float = Field(
        ...,
        alias="fleschKincaidGrade",
        description="Flesch-Kincaid Grade Level (U.S. school grade). "
                    "Formula: 0.39 × (words/sentences) + 11.8 × (syllables/words) - 15.59."
    )
    smog_index: float = Field(
        ...,
        alias="smogIndex",
        description="SMOG (Simple Measure of Gobbledygook) grade. "
                    "0.0 for texts with fewer than three sentences."
    )
    coleman_liau_index: float = Field(
        ...,
        alias="colemanLiauIndex",
        description="Coleman-Liau Index. Based on letters and sentences per 100 words."
    )
    automated_readability_index: float = Field(
        ...,
        alias="ari",
        description="Automated Readability Index. Based on characters per word "
                    "and words per sentence."
    )
    linsear_write_formula: float = Field(
        ...,
        alias="linsearWriteFormula",
        description="Linsear Write grade computed on the first 100 words."
    )
    rix: float = Field(
        ...,
        alias="rix",
        description="RIX: words longer than six letters per sentence."
    )
    reading_time: str = Field(
        ...,
        alias="readingTime",
        description='Estimated reading time at ~250 words per minute, e.g. "1 min 12 sec".'
    )
    word_count: int = Field(
        ...,
        ge=0,
        alias="wordCount",
        description="Number of lexical words."
    )

    # ===========================
    # Validators
    # ===========================

    @field_validator('reading_time')
    @classmethod
    def validate_reading_time(cls, v: str) -> str:
        """Reading time must read "M min S sec" with S below 60."""
        if not READING_TIME_PATTERN.match(v):
            raise ValueError(f"reading_time must look like 'M min S sec', got {v!r}")
        return v

    # ===========================
    # Methods
    # ===========================

    def to_score_set(self) -> Dict[str, Union[float, int, str]]:
        """Return the scores keyed by metric identifier."""
        return self.model_dump(by_alias=True)

    def get_grade_levels(self) -> Dict[str, float]:
        """Get dictionary of the grade-level metrics keyed by metric identifier."""
        score_set = self.to_score_set()
        return {metric: score_set[metric] for metric in GRADE_LEVEL_METRICS}

    def model_dump_to_json_file(self, output_path: Path) -> None:
        """
        Save scores to JSON file.

        Args:
            output_path: Path to output JSON file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_score_set(), f, indent=2)

    @classmethod
    def model_load_from_json_file(cls, input_path: Path) -> 'ReadabilityScores':
        """
        Load scores from JSON file.

        Args:
            input_path: Path to input JSON file

        Returns:
            ReadabilityScores object
        """
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls(**data)

    def get_summary(self) -> str:
        """Return human-readable summary of the scores."""
        return (
            f"Readability Analysis Summary\n"
            f"{'='*50}\n"
            f"Words: {self.word_count:,} | Reading time: {self.reading_time}\n"
            f"\nReading Ease:\n"
            f"  Flesch Reading Ease: {self.flesch_reading_ease:.2f}\n"
            f"\nGrade Levels:\n"
            f"  Flesch-Kincaid Grade: {self.flesch_kincaid_grade:.2f}\n"
            f"  SMOG Index: {self.smog_index:.2f}\n"
            f"  Coleman-Liau Index: {self.coleman_liau_index:.2f}\n"
            f"  Automated Readability Index: {self.automated_readability_index:.2f}\n"
            f"  Linsear Write Formula: {self.linsear_write_formula:.2f}\n"
            f"  RIX: {self.rix:.2f}"
        )


class LexicalSnapshot(BaseModel):
    """Primitive counts behind one score set."""
    char_count: int = Field(..., ge=0, description="Characters excluding whitespace")
    letter_count: int = Field(..., ge=0, description="Characters excluding whitespace and punctuation")
    word_count: int = Field(..., ge=0, description="Lexical word count")
    sentence_count: int = Field(..., ge=1, description="Sentence count (never below one)")
    syllable_count: int = Field(..., ge=0, description="Total syllables")
    poly_syllable_count: int = Field(..., ge=0, description="Words with 3+ syllables")


class ScoreClassification(BaseModel):
    """
    Severity band of one score, for presentation layers.

    Rank 0 is the most favorable band and 6 the least favorable.
    """
    model_config = ConfigDict(frozen=True)

    metric: str
    score: float
    band: str
    rank: int = Field(..., ge=0)
    color: str
    description: str = ""


class ReadabilitySummary(BaseModel):
    """Overall verdict for a text, based on Flesch Reading Ease."""
    model_config = ConfigDict(frozen=True)

    level: str
    color: str
    flesch_reading_ease: float
    reading_time: str
    word_count: int = Field(..., ge=0)


class ReadabilityAnalysisMetadata(BaseModel):
    """
    Metadata about a readability analysis run.

    Tracks configuration, execution details, and warnings for auditability.
    """
    version: str = Field(default=READABILITY_MODULE_VERSION)
    analyzed_at: datetime = Field(default_factory=datetime.now)
    text_length: int = Field(..., ge=0, description="Length of the raw input")
    normalized_length: int = Field(..., ge=0, description="Length after normalization")
    statistics: LexicalSnapshot
    warnings: list[str] = Field(
        default_factory=list,
        description="Analysis warnings (e.g., text too short)"
    )
    config_used: Dict = Field(
        default_factory=dict,
        description="Configuration settings used for this analysis"
    )

    def get_summary(self) -> str:
        """Return human-readable summary of metadata."""
        warnings_str = "\n    ".join(self.warnings) if self.warnings else "None"
        return (
            f"Analysis Metadata\n"
            f"{'='*50}\n"
            f"Version: {self.version}\n"
            f"Analyzed: {self.analyzed_at.strftime('%Y-%m-%d %H:%M:%S')}\n"
            f"Text: {self.statistics.word_count:,} words, "
            f"{self.statistics.sentence_count} sentences, "
            f"{self.statistics.syllable_count:,} syllables\n"
            f"Warnings:\n    {warnings_str}"
        )


class ReadabilityAnalysisResult(BaseModel):
    """
    Complete readability analysis result with scores and metadata.

    This is the top-level structure that combines:
    - ReadabilityScores (the actual metrics)
    - ReadabilityAnalysisMetadata (audit trail)
    - Optional per-metric classifications and overall summary

    Use this for saving complete analysis results to disk.
    """
    scores: ReadabilityScores = Field(
        ...,
        description="Computed readability scores"
    )
    metadata: ReadabilityAnalysisMetadata = Field(
        ...,
        description="Analysis metadata and configuration"
    )
    classifications: Dict[str, ScoreClassification] = Field(
        default_factory=dict,
        description="Severity band per banded metric"
    )
    summary: Optional[ReadabilitySummary] = Field(
        default=None,
        description="Overall verdict"
    )

    def to_dict(self) -> Dict:
        """Plain dictionary with the score set under its public keys."""
        data = self.model_dump(mode='json')
        data['scores'] = self.scores.to_score_set()
        return data

    def model_dump_to_json_file(self, output_path: Path) -> None:
        """
        Save complete result to JSON file.

        Args:
            output_path: Path to output JSON file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def model_load_from_json_file(cls, input_path: Path) -> 'ReadabilityAnalysisResult':
        """
        Load complete result from JSON file.

        Args:
            input_path: Path to input JSON file

        Returns:
            ReadabilityAnalysisResult object
        """
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls(**data)
