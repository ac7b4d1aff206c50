"""
Readability formulas.

Seven closed-form readability formulas plus a reading-time estimate. Each
formula only reads LexicalStatistics, so sharing one statistics object (and
its cache) across the whole set computes every primitive once per run.

Usage:
    from wordgrade.features.readability.statistics import LexicalStatistics
    from wordgrade.features.readability.formulas import compute_scores

    stats = LexicalStatistics(normalized_text)
    scores = compute_scores(stats)
    print(scores["fleschReadingEase"])
"""

import math
from typing import Dict, Optional, Union

from wordgrade.config.features.readability import ReadabilityFormulasConfig
from .constants import (
    ARI_CHARACTER_WEIGHT,
    ARI_OFFSET,
    ARI_SENTENCE_WEIGHT,
    AUTOMATED_READABILITY_INDEX,
    COLEMAN_LIAU_INDEX,
    COLEMAN_LIAU_LETTER_WEIGHT,
    COLEMAN_LIAU_OFFSET,
    COLEMAN_LIAU_SENTENCE_WEIGHT,
    DEFAULT_PRECISION,
    FLESCH_KINCAID_GRADE,
    FLESCH_KINCAID_OFFSET,
    FLESCH_KINCAID_SENTENCE_WEIGHT,
    FLESCH_KINCAID_SYLLABLE_WEIGHT,
    FLESCH_READING_EASE,
    FLESCH_READING_EASE_BASE,
    FLESCH_READING_EASE_SENTENCE_WEIGHT,
    FLESCH_READING_EASE_SYLLABLE_WEIGHT,
    LINSEAR_ADJUSTMENT,
    LINSEAR_ADJUSTMENT_THRESHOLD,
    LINSEAR_DIFFICULT_WEIGHT,
    LINSEAR_WRITE_FORMULA,
    POLYSYLLABLE_THRESHOLD,
    READING_TIME,
    RIX,
    SECONDS_PER_MINUTE,
    SMOG_INDEX,
    SMOG_OFFSET,
    SMOG_SAMPLE_SENTENCES,
    SMOG_WEIGHT,
    WORD_COUNT,
    WORD_SEPARATOR,
)
from .statistics import (
    LexicalStatistics,
    count_sentences,
    count_syllables,
    round_half_away,
    safe_divide,
)

DEFAULT_WORDS_PER_SECOND = 4.17
DEFAULT_LINSEAR_WORD_LIMIT = 100
DEFAULT_LONG_WORD_LENGTH = 6
DEFAULT_SMOG_MIN_SENTENCES = 3

ScoreValue = Union[float, int, str]


def flesch_reading_ease(stats: LexicalStatistics, precision: int = DEFAULT_PRECISION) -> float:
    """
    Flesch Reading Ease. Higher = easier.

    Formula: 206.835 - 1.015 × ASL - 84.6 × ASW
    """
    sentence_length = stats.avg_sentence_length()
    syllables_per_word = stats.avg_syllables_per_word()
    return round_half_away(
        FLESCH_READING_EASE_BASE
        - FLESCH_READING_EASE_SENTENCE_WEIGHT * sentence_length
        - FLESCH_READING_EASE_SYLLABLE_WEIGHT * syllables_per_word,
        precision
    )


def flesch_kincaid_grade(stats: LexicalStatistics, precision: int = DEFAULT_PRECISION) -> float:
    """
    Flesch-Kincaid Grade Level (U.S. school grade).

    Formula: 0.39 × ASL + 11.8 × ASW - 15.59
    """
    sentence_length = stats.avg_sentence_length()
    syllables_per_word = stats.avg_syllables_per_word()
    return round_half_away(
        FLESCH_KINCAID_SENTENCE_WEIGHT * sentence_length
        + FLESCH_KINCAID_SYLLABLE_WEIGHT * syllables_per_word
        - FLESCH_KINCAID_OFFSET,
        precision
    )


def smog_index(
    stats: LexicalStatistics,
    min_sentences: int = DEFAULT_SMOG_MIN_SENTENCES,
    precision: int = DEFAULT_PRECISION
) -> float:
    """
    SMOG grade.

    Formula: 1.043 × sqrt(polysyllables × 30 / sentences) + 3.1291

    Texts with fewer than min_sentences sentences score 0.0; the square
    root term is too unstable on very short text.
    """
    sentences = stats.sentence_count()
    if sentences < min_sentences:
        return 0.0
    poly_syllables = stats.poly_syllable_count()
    smog = SMOG_WEIGHT * math.sqrt(poly_syllables * (SMOG_SAMPLE_SENTENCES / sentences)) + SMOG_OFFSET
    return round_half_away(smog, precision)


def coleman_liau_index(stats: LexicalStatistics, precision: int = DEFAULT_PRECISION) -> float:
    """
    Coleman-Liau Index.

    Formula: 0.0588 × L - 0.296 × S - 15.8, where L is letters per 100 words
    and S is sentences per 100 words (both rounded to 2 dp first).
    """
    letters = round_half_away(stats.avg_letters_per_word() * 100)
    sentences = round_half_away(stats.avg_sentences_per_word() * 100)
    coleman = (
        COLEMAN_LIAU_LETTER_WEIGHT * letters
        - COLEMAN_LIAU_SENTENCE_WEIGHT * sentences
        - COLEMAN_LIAU_OFFSET
    )
    return round_half_away(coleman, precision)


def automated_readability_index(stats: LexicalStatistics, precision: int = DEFAULT_PRECISION) -> float:
    """
    Automated Readability Index.

    Formula: 4.71 × (chars / words) + 0.5 × (words / sentences) - 21.43
    """
    chars = stats.char_count()
    words = stats.lexicon_count()
    sentences = stats.sentence_count()
    readability = (
        ARI_CHARACTER_WEIGHT * safe_divide(chars, words)
        + ARI_SENTENCE_WEIGHT * safe_divide(words, sentences)
        - ARI_OFFSET
    )
    return round_half_away(readability, precision)


def linsear_write_formula(
    stats: LexicalStatistics,
    word_limit: int = DEFAULT_LINSEAR_WORD_LIMIT,
    precision: int = DEFAULT_PRECISION
) -> float:
    """
    Linsear Write grade, computed on the first word_limit words only.

    Easy words (fewer than 3 syllables) count once and difficult words three
    times; the total is divided by the sentence count of the raw excerpt
    (the first word_limit space-separated tokens). Results of 20 or less are
    reduced by 2 before halving.
    """
    rough_excerpt = WORD_SEPARATOR.join(stats.text.split(WORD_SEPARATOR)[:word_limit])
    excerpt_words = stats.get_words()[:word_limit]

    easy_words = 0
    difficult_words = 0
    for word in excerpt_words:
        if count_syllables(word) < POLYSYLLABLE_THRESHOLD:
            easy_words += 1
        else:
            difficult_words += 1

    number = safe_divide(
        easy_words + difficult_words * LINSEAR_DIFFICULT_WEIGHT,
        count_sentences(rough_excerpt, stats.fragment_max_words)
    )
    if number <= LINSEAR_ADJUSTMENT_THRESHOLD:
        number -= LINSEAR_ADJUSTMENT
    return round_half_away(number / 2, precision)


def rix(
    stats: LexicalStatistics,
    long_word_length: int = DEFAULT_LONG_WORD_LENGTH,
    precision: int = DEFAULT_PRECISION
) -> float:
    """RIX: long words (more than long_word_length letters) per sentence, over the full text."""
    long_words = stats.long_word_count(long_word_length)
    return round_half_away(safe_divide(long_words, stats.sentence_count()), precision)


def reading_time_seconds(
    stats: LexicalStatistics,
    words_per_second: float = DEFAULT_WORDS_PER_SECOND
) -> int:
    """Estimated reading time in whole seconds."""
    seconds = safe_divide(stats.lexicon_count(use_cache=False), words_per_second)
    return int(round_half_away(seconds, 0))


def reading_time(
    stats: LexicalStatistics,
    words_per_second: float = DEFAULT_WORDS_PER_SECOND
) -> str:
    """Estimated reading time formatted as "M min S sec"."""
    minutes, seconds = divmod(reading_time_seconds(stats, words_per_second), SECONDS_PER_MINUTE)
    return format_reading_time(minutes, seconds)


def format_reading_time(minutes: int, seconds: int) -> str:
    return f"{minutes} min {seconds} sec"


def word_count(stats: LexicalStatistics) -> int:
    """Raw word count."""
    return stats.lexicon_count(use_cache=False)


def compute_scores(
    stats: LexicalStatistics,
    config: Optional[ReadabilityFormulasConfig] = None,
    precision: int = DEFAULT_PRECISION
) -> Dict[str, ScoreValue]:
    """
    Compute the full score set over one statistics object.

    Args:
        stats: Statistics over normalized text
        config: Formula constants. If None, the defaults are used.
        precision: Decimal places of the numeric scores

    Returns:
        Mapping of metric identifier to score, in display order
    """
    words_per_second = config.words_per_second if config else DEFAULT_WORDS_PER_SECOND
    word_limit = config.linsear_word_limit if config else DEFAULT_LINSEAR_WORD_LIMIT
    long_word_length = config.long_word_length if config else DEFAULT_LONG_WORD_LENGTH
    min_sentences = config.smog_min_sentences if config else DEFAULT_SMOG_MIN_SENTENCES

    return {
        FLESCH_READING_EASE: flesch_reading_ease(stats, precision),
        FLESCH_KINCAID_GRADE: flesch_kincaid_grade(stats, precision),
        SMOG_INDEX: smog_index(stats, min_sentences, precision),
        COLEMAN_LIAU_INDEX: coleman_liau_index(stats, precision),
        AUTOMATED_READABILITY_INDEX: automated_readability_index(stats, precision),
        LINSEAR_WRITE_FORMULA: linsear_write_formula(stats, word_limit, precision),
        RIX: rix(stats, long_word_length, precision),
        READING_TIME: reading_time(stats, words_per_second),
        WORD_COUNT: word_count(stats),
    }
