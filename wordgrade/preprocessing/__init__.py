"""
Preprocessing Module

Turns raw editor content into plain prose before lexical analysis.

Usage:
    from wordgrade.preprocessing import normalize_text

    prose = normalize_text("<h2>Intro</h2><p>Hello world.</p>")
"""

from .cleaning import TextNormalizer, normalize_text

__all__ = [
    "TextNormalizer",
    "normalize_text",
]
