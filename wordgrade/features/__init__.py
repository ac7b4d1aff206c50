"""
Feature Engineering Module

This package contains the text metrics computed by WordGrade.

Available features:
- Readability scores (Flesch, Flesch-Kincaid, SMOG, Coleman-Liau, ARI,
  Linsear Write, RIX) with reading time and word count

Usage:
    from wordgrade.features import ReadabilityAnalyzer

    readability_analyzer = ReadabilityAnalyzer()
    scores = readability_analyzer.extract_features(text)
"""

# Lazy imports keep "import wordgrade.features" free of settings loading
# Use explicit imports: from wordgrade.features.readability import ReadabilityAnalyzer

__all__ = [
    "ReadabilityAnalyzer",
    "ReadabilityScores",
    "ReadabilityAnalysisResult",
]


def __getattr__(name):
    """Lazy import of readability classes."""
    if name == "ReadabilityAnalyzer":
        from .readability import ReadabilityAnalyzer
        return ReadabilityAnalyzer
    elif name == "ReadabilityScores":
        from .readability import ReadabilityScores
        return ReadabilityScores
    elif name == "ReadabilityAnalysisResult":
        from .readability import ReadabilityAnalysisResult
        return ReadabilityAnalysisResult
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
