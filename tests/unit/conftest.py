"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures use synthetic text that runs in <1 second.
"""

import pytest


# =============================================================================
# Plain Text Fixtures
# =============================================================================

@pytest.fixture
def simple_text() -> str:
    """Two short sentences, 11 words, no polysyllables."""
    return "The cat sat on the mat. It was a sunny day."


@pytest.fixture
def three_sentence_text() -> str:
    """Three sentences, 10 words, five of them polysyllabic."""
    return "Readability is important. Education matters greatly. Computers are wonderful tools."


@pytest.fixture
def make_words():
    """Factory for space-separated text with exactly n words."""
    def _make(n: int, word: str = "word") -> str:
        return " ".join([word] * n)
    return _make


# =============================================================================
# HTML Fixtures
# =============================================================================

@pytest.fixture
def sample_post_html() -> str:
    """Editor content with a heading, two paragraphs and a shortcode."""
    return (
        "<h2>Welcome</h2>"
        "<p>The cat sat on the mat.</p>"
        "<p>It was a sunny day.</p>"
        "[gallery ids=1,2]"
    )


@pytest.fixture
def sample_nested_html() -> str:
    """Nested block markup."""
    return "<div><div><p>Content</p></div></div>"


@pytest.fixture
def markup_only_html() -> str:
    """Markup and shortcodes without any words."""
    return "<p></p><div>[embed]</div><br/>"
