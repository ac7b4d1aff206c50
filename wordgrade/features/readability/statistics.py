"""
Lexical statistics for readability formulas.

Derives the primitive counts every formula depends on (characters, letters,
words, sentences, syllables) from normalized text. Each analysis run owns one
AnalysisCache, so a primitive requested by several formulas is computed once.

Usage:
    from wordgrade.features.readability.statistics import LexicalStatistics

    stats = LexicalStatistics(normalized_text)
    stats.lexicon_count()          # computed
    stats.lexicon_count()          # served from the run's cache
    stats.avg_sentence_length()
"""

import math
import re
from dataclasses import dataclass, fields
from typing import List, Optional

from .constants import (
    DEFAULT_PRECISION,
    POLYSYLLABLE_THRESHOLD,
    PUNCTUATION_CHARACTERS,
    SENTENCE_BOUNDARY_PATTERN,
    SYLLABLE_PATTERN,
    WORD_SEPARATOR,
)

WHITESPACE_PATTERN = re.compile(r'\s')

_PUNCTUATION_TABLE = str.maketrans('', '', ''.join(sorted(PUNCTUATION_CHARACTERS)))

DEFAULT_FRAGMENT_MAX_WORDS = 2


# ===========================
# Numeric Helpers
# ===========================

def round_half_away(number: float, precision: int = DEFAULT_PRECISION) -> float:
    """
    Round half away from zero.

    round_half_away(2.345) == 2.35 and round_half_away(-2.345) == -2.35,
    unlike the built-in round() which rounds half to even.
    Non-finite values are returned unchanged.

    Args:
        number: Value to round
        precision: Number of decimal places

    Returns:
        Rounded value
    """
    if not math.isfinite(number):
        return number
    factor = 10 ** precision
    rounded = math.floor(abs(number) * factor + 0.5) / factor
    return -rounded if number < 0 and rounded else rounded


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do: x/0 is +-inf and 0/0 is NaN, never an exception."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


# ===========================
# Pure Text Helpers
# ===========================

def remove_punctuation(text: str) -> str:
    """Delete ASCII punctuation characters from text."""
    return text.translate(_PUNCTUATION_TABLE)


def remove_whitespace(text: str) -> str:
    """Delete every Unicode whitespace character from text."""
    return WHITESPACE_PATTERN.sub('', text)


def split_words(text: str) -> List[str]:
    """Remove punctuation, split on single spaces and drop empty tokens."""
    return [word for word in remove_punctuation(text).split(WORD_SEPARATOR) if word]


def count_lexicon(text: str) -> int:
    """Count word tokens in text (uncached)."""
    return len(split_words(text))


def count_syllables(word: str) -> int:
    """
    Approximate the syllables in one word.

    A word the heuristic finds no syllable in still counts as one.
    """
    return len(SYLLABLE_PATTERN.findall(word.lower())) or 1


def count_sentences(text: str, fragment_max_words: int = DEFAULT_FRAGMENT_MAX_WORDS) -> int:
    """
    Count sentences in text (uncached).

    Text is split on every ".", "?", "!" and newline. Segments with
    fragment_max_words words or fewer (stray punctuation, abbreviations,
    list bullets, empty segments) are not sentences. The result is never
    below one.

    Args:
        text: Normalized text
        fragment_max_words: Largest word count of a discarded segment

    Returns:
        Sentence count (>= 1)
    """
    segments = SENTENCE_BOUNDARY_PATTERN.split(text)
    ignored = sum(1 for segment in segments if count_lexicon(segment) <= fragment_max_words)
    return max(1, len(segments) - ignored)


# ===========================
# Per-run Cache
# ===========================

@dataclass
class AnalysisCache:
    """
    Primitive statistics computed during one analysis run.

    A field left as None has not been computed yet. One instance belongs to
    exactly one analysis call and is dropped when the call returns.

    Attributes:
        char_count: Characters excluding whitespace
        lexicon_count: Number of word tokens
        words: Lowercase word tokens
        syllable_count: Total syllables over all words
        sentence_count: Number of sentences
    """
    char_count: Optional[int] = None
    lexicon_count: Optional[int] = None
    words: Optional[List[str]] = None
    syllable_count: Optional[int] = None
    sentence_count: Optional[int] = None

    def clear(self) -> None:
        """Forget every cached value."""
        for f in fields(self):
            setattr(self, f.name, None)

    def is_empty(self) -> bool:
        """True when nothing has been computed yet."""
        return all(getattr(self, f.name) is None for f in fields(self))


# ===========================
# Lexical Statistics Engine
# ===========================

class LexicalStatistics:
    """
    Primitive counts and averages over one normalized text.

    Every accessor accepts use_cache. When True the value is read from (or
    stored in) the run's AnalysisCache; when False it is always recomputed
    and the cache is left untouched. When omitted, the instance default
    (``caching``) applies.

    Attributes:
        text: Normalized text being measured
        cache: Per-run cache, created if not supplied
        caching: Default for use_cache
        fragment_max_words: Segments this short are not counted as sentences
    """

    def __init__(
        self,
        text: str,
        cache: Optional[AnalysisCache] = None,
        caching: bool = True,
        fragment_max_words: int = DEFAULT_FRAGMENT_MAX_WORDS
    ):
        self.text = text
        self.cache = cache if cache is not None else AnalysisCache()
        self.caching = caching
        self.fragment_max_words = fragment_max_words

    def _use_cache(self, use_cache: Optional[bool]) -> bool:
        return self.caching if use_cache is None else use_cache

    # ---------------------------
    # Primitive counts
    # ---------------------------

    def char_count(self, use_cache: Optional[bool] = None) -> int:
        """Length of the text with all whitespace removed."""
        use_cache = self._use_cache(use_cache)
        if use_cache and self.cache.char_count is not None:
            return self.cache.char_count
        count = len(remove_whitespace(self.text))
        if use_cache:
            self.cache.char_count = count
        return count

    def letter_count(self) -> int:
        """Length of the text with whitespace and punctuation removed."""
        return len(remove_punctuation(remove_whitespace(self.text)))

    def lexicon_count(self, use_cache: Optional[bool] = None) -> int:
        """Number of word tokens."""
        use_cache = self._use_cache(use_cache)
        if use_cache and self.cache.lexicon_count is not None:
            return self.cache.lexicon_count
        count = count_lexicon(self.text)
        if use_cache:
            self.cache.lexicon_count = count
        return count

    def get_words(self, use_cache: Optional[bool] = None) -> List[str]:
        """Lowercase word tokens, in text order."""
        use_cache = self._use_cache(use_cache)
        if use_cache and self.cache.words is not None:
            return self.cache.words
        words = split_words(self.text.lower())
        if use_cache:
            self.cache.words = words
        return words

    def syllable_count(self, use_cache: Optional[bool] = None) -> int:
        """Total syllables over all words."""
        use_cache = self._use_cache(use_cache)
        if use_cache and self.cache.syllable_count is not None:
            return self.cache.syllable_count
        count = sum(count_syllables(word) for word in self.get_words(use_cache))
        if use_cache:
            self.cache.syllable_count = count
        return count

    def poly_syllable_count(self, use_cache: Optional[bool] = None) -> int:
        """Number of words with three or more syllables. Never cached."""
        return sum(
            1 for word in self.get_words(use_cache)
            if count_syllables(word) >= POLYSYLLABLE_THRESHOLD
        )

    def long_word_count(self, min_length: int, use_cache: Optional[bool] = None) -> int:
        """Number of words longer than min_length characters."""
        return sum(1 for word in self.get_words(use_cache) if len(word) > min_length)

    def sentence_count(self, use_cache: Optional[bool] = None) -> int:
        """Number of sentences (>= 1)."""
        use_cache = self._use_cache(use_cache)
        if use_cache and self.cache.sentence_count is not None:
            return self.cache.sentence_count
        count = count_sentences(self.text, self.fragment_max_words)
        if use_cache:
            self.cache.sentence_count = count
        return count

    # ---------------------------
    # Averages (rounded to 2 dp)
    # ---------------------------

    def avg_sentence_length(self) -> float:
        """Words per sentence."""
        return round_half_away(safe_divide(self.lexicon_count(), self.sentence_count()))

    def avg_syllables_per_word(self) -> float:
        """Syllables per word."""
        return round_half_away(safe_divide(self.syllable_count(), self.lexicon_count()))

    def avg_characters_per_word(self) -> float:
        """Non-whitespace characters per word."""
        return round_half_away(safe_divide(self.char_count(), self.lexicon_count()))

    def avg_letters_per_word(self) -> float:
        """Letters (no whitespace, no punctuation) per word."""
        return round_half_away(safe_divide(self.letter_count(), self.lexicon_count()))

    def avg_sentences_per_word(self) -> float:
        """Sentences per word."""
        return round_half_away(safe_divide(self.sentence_count(), self.lexicon_count()))
