"""
WordGrade - readability metrics for prose.

Usage:
    from wordgrade import analyze

    scores = analyze("<p>The cat sat on the mat. It was a sunny day.</p>")
"""

__version__ = "0.1.0"


def analyze(text: str) -> dict:
    """Compute the readability score set for raw text. See wordgrade.features.readability.analyze."""
    from wordgrade.features.readability import analyze as _analyze
    return _analyze(text)


__all__ = ["analyze", "__version__"]
