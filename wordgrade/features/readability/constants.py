"""
Immutable constants for readability analysis.

This module contains version-controlled metadata and reference data.
These values should NEVER change at runtime - they define WHAT readability analysis IS.

Constants include:
- Metric identifiers and labels
- Lexical patterns (punctuation set, sentence boundaries, syllable heuristic)
- Formula coefficients
- Severity band thresholds, colors and descriptions

For runtime configuration (HOW to use readability), see configs/features/readability.yaml
"""

import re
from typing import Final

# ===========================
# Module Metadata
# ===========================

READABILITY_MODULE_VERSION: Final[str] = "0.1.0"
"""Version of the readability analysis module."""

# ===========================
# Metric Identifiers
# ===========================

FLESCH_READING_EASE: Final[str] = "fleschReadingEase"
FLESCH_KINCAID_GRADE: Final[str] = "fleschKincaidGrade"
SMOG_INDEX: Final[str] = "smogIndex"
COLEMAN_LIAU_INDEX: Final[str] = "colemanLiauIndex"
AUTOMATED_READABILITY_INDEX: Final[str] = "ari"
LINSEAR_WRITE_FORMULA: Final[str] = "linsearWriteFormula"
RIX: Final[str] = "rix"
READING_TIME: Final[str] = "readingTime"
WORD_COUNT: Final[str] = "wordCount"

SCORE_SET_KEYS: Final[tuple[str, ...]] = (
    FLESCH_READING_EASE,
    FLESCH_KINCAID_GRADE,
    SMOG_INDEX,
    COLEMAN_LIAU_INDEX,
    AUTOMATED_READABILITY_INDEX,
    LINSEAR_WRITE_FORMULA,
    RIX,
    READING_TIME,
    WORD_COUNT,
)
"""Keys of a score set, in display order."""

GRADE_LEVEL_METRICS: Final[tuple[str, ...]] = (
    FLESCH_KINCAID_GRADE,
    SMOG_INDEX,
    COLEMAN_LIAU_INDEX,
    AUTOMATED_READABILITY_INDEX,
    LINSEAR_WRITE_FORMULA,
    RIX,
)
"""Metrics where a lower score means more accessible text."""

INFORMATIONAL_METRICS: Final[frozenset[str]] = frozenset({READING_TIME, WORD_COUNT})
"""Metrics shown for information only; they have no severity band."""

METRIC_LABELS: Final[dict[str, str]] = {
    FLESCH_READING_EASE: "Flesch Reading Ease",
    FLESCH_KINCAID_GRADE: "Flesch-Kincaid Grade",
    SMOG_INDEX: "SMOG Index",
    COLEMAN_LIAU_INDEX: "Coleman-Liau Index",
    AUTOMATED_READABILITY_INDEX: "Auto. Readability Index",
    LINSEAR_WRITE_FORMULA: "Linsear Write Formula",
    RIX: "RIX",
    READING_TIME: "Reading Time",
    WORD_COUNT: "Word Count",
}
"""Human-facing label for each metric."""

# ===========================
# Lexical Patterns
# ===========================

PUNCTUATION_CHARACTERS: Final[frozenset[str]] = frozenset('!"#$%&\'()*+,-./:;<=>?@[]^_`{|}~')
"""ASCII punctuation removed before splitting words. Backslash is not included."""

SENTENCE_BOUNDARY_PATTERN: Final[re.Pattern] = re.compile(r'[.?!\n]')
"""Every single occurrence is a boundary; runs produce empty segments."""

SYLLABLE_PATTERN: Final[re.Pattern] = re.compile(r'[aiouy]+e*|e(?!d\Z|ly).|[td]ed|le\Z')
"""
Approximate English syllable heuristic, applied to lowercase words.

Matches vowel clusters, an "e" followed by another letter (except a final
"ed" or an "ly" ending), "ted"/"ded" endings and a final "le". A word with
no match still counts as one syllable.
"""

WORD_SEPARATOR: Final[str] = " "
"""Words are split on a single space only."""

POLYSYLLABLE_THRESHOLD: Final[int] = 3
"""Words with at least this many syllables are polysyllabic (difficult)."""

DEFAULT_PRECISION: Final[int] = 2
"""Decimal places used when finalizing a score."""

# ===========================
# Formula Coefficients
# ===========================

FLESCH_READING_EASE_BASE: Final[float] = 206.835
FLESCH_READING_EASE_SENTENCE_WEIGHT: Final[float] = 1.015
FLESCH_READING_EASE_SYLLABLE_WEIGHT: Final[float] = 84.6

FLESCH_KINCAID_SENTENCE_WEIGHT: Final[float] = 0.39
FLESCH_KINCAID_SYLLABLE_WEIGHT: Final[float] = 11.8
FLESCH_KINCAID_OFFSET: Final[float] = 15.59

SMOG_WEIGHT: Final[float] = 1.043
SMOG_SAMPLE_SENTENCES: Final[int] = 30
SMOG_OFFSET: Final[float] = 3.1291

COLEMAN_LIAU_LETTER_WEIGHT: Final[float] = 0.0588
COLEMAN_LIAU_SENTENCE_WEIGHT: Final[float] = 0.296
COLEMAN_LIAU_OFFSET: Final[float] = 15.8

ARI_CHARACTER_WEIGHT: Final[float] = 4.71
ARI_SENTENCE_WEIGHT: Final[float] = 0.5
ARI_OFFSET: Final[float] = 21.43

LINSEAR_DIFFICULT_WEIGHT: Final[int] = 3
LINSEAR_ADJUSTMENT_THRESHOLD: Final[float] = 20.0
LINSEAR_ADJUSTMENT: Final[float] = 2.0

SECONDS_PER_MINUTE: Final[int] = 60

# ===========================
# Severity Bands
# ===========================
# Seven bands per direction, most favorable first. A band's rank is its
# position in the tuple (0 = most accessible).

READING_EASE_BANDS: Final[tuple[tuple[float, str, str, str], ...]] = (
    # (minimum score, band, color, description)
    (90.0, "very_easy", "#20B054",
     "Very easy to read. Easily understood by an average 11-year-old student."),
    (80.0, "easy", "#6BBF59",
     "Easy to read. Conversational English for consumers."),
    (70.0, "fairly_easy", "#B5DE6A",
     "Fairly easy to read."),
    (60.0, "standard", "#EFEF5F",
     "Plain English. Easily understood by 13- to 15-year-old students."),
    (50.0, "fairly_difficult", "#F5C244",
     "Fairly difficult to read."),
    (30.0, "difficult", "#F0833A",
     "Difficult to read."),
    (float("-inf"), "very_difficult", "#E05D44",
     "Very difficult to read. Best understood by university graduates."),
)
"""Flesch Reading Ease bands: higher score = easier text."""

GRADE_LEVEL_BANDS: Final[tuple[tuple[float, str, str], ...]] = (
    # (maximum score, band, color)
    (6.0, "elementary_school", "#20B054"),
    (8.0, "middle_school", "#6BBF59"),
    (10.0, "early_high_school", "#B5DE6A"),
    (12.0, "high_school", "#EFEF5F"),
    (14.0, "college", "#F5C244"),
    (16.0, "graduate", "#F0833A"),
    (float("inf"), "professional", "#E05D44"),
)
"""Grade-level bands: lower score = more accessible text."""

GRADE_LEVEL_DESCRIPTIONS: Final[dict[str, str]] = {
    FLESCH_KINCAID_GRADE: (
        "Indicates that the text is understandable by someone with "
        "{score} years of education."
    ),
    SMOG_INDEX: (
        "Years of education needed to understand the text. "
        "SMOG is often used for healthcare materials."
    ),
    COLEMAN_LIAU_INDEX: (
        "Grade level required to understand the text. "
        "Based on character and sentence counts."
    ),
    AUTOMATED_READABILITY_INDEX: (
        "Automated Readability Index. "
        "Represents US grade level needed to comprehend the text."
    ),
    LINSEAR_WRITE_FORMULA: (
        "Grade level based on easy vs. difficult words and sentence length."
    ),
    RIX: "RIX index. Higher values indicate more difficult text.",
}
"""Per-metric description; "{score}" is replaced with the score."""

# Overall verdict shown above the individual meters
SUMMARY_LEVELS: Final[tuple[tuple[float, str, str], ...]] = (
    # (minimum Flesch Reading Ease, verdict, color)
    (80.0, "Easy to read", "#20B054"),
    (60.0, "Moderately readable", "#B5DE6A"),
    (40.0, "Somewhat difficult", "#F5C244"),
    (float("-inf"), "Difficult to read", "#E05D44"),
)

GRADE_METER_SCALE: Final[float] = 5.0
"""Grade-level scores are scaled by this factor to fill a 0-100 meter."""

# ===========================
# Validation Constants
# ===========================

READING_TIME_PATTERN: Final[re.Pattern] = re.compile(r'^\d+ min [1-5]?\d sec$')
"""Shape of a formatted reading time; seconds stay below 60."""
