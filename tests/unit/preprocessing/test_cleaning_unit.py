"""
Unit tests for wordgrade/preprocessing/cleaning.py

Tests TextNormalizer methods for shortcode removal, block newlines,
markup stripping and newline collapsing.
No real data dependencies - runs in <1 second.
"""

import pytest

from wordgrade.preprocessing.cleaning import TextNormalizer, normalize_text


@pytest.fixture
def normalizer() -> TextNormalizer:
    """Create basic TextNormalizer."""
    return TextNormalizer()


class TestRemoveShortcodes:
    """Tests for _remove_shortcodes method."""

    def test_removes_shortcode_with_attributes(self, normalizer: TextNormalizer):
        """Bracketed shortcode removed, surrounding spaces kept."""
        result = normalizer.normalize("Hello [gallery ids=1,2,3] world")
        assert result == "Hello  world"

    def test_non_greedy_match(self, normalizer: TextNormalizer):
        """Each bracket pair removed separately, text between kept."""
        result = normalizer._remove_shortcodes("[a] keep [b]")
        assert result == " keep "

    def test_unclosed_bracket_untouched(self, normalizer: TextNormalizer):
        """An opening bracket without a closing one is plain text."""
        assert normalizer._remove_shortcodes("Hello [gallery") == "Hello [gallery"


class TestAddBlockNewlines:
    """Tests for _add_block_newlines method."""

    def test_newline_after_paragraph(self, normalizer: TextNormalizer):
        """Closing paragraph tag followed by a newline."""
        result = normalizer._add_block_newlines("<p>One.</p><p>Two.</p>")
        assert result == "<p>One.</p>\n<p>Two.</p>\n"

    def test_newline_after_heading(self, normalizer: TextNormalizer):
        """Heading element followed by a newline."""
        result = normalizer._add_block_newlines("<h2>Title</h2>Body")
        assert result == "<h2>Title</h2>\nBody"


class TestStripMarkup:
    """Tests for _strip_markup method."""

    def test_strips_nested_tags(self, normalizer: TextNormalizer, sample_nested_html: str):
        """Nested block markup reduced to its text."""
        assert normalizer.normalize(sample_nested_html) == "Content\n"

    def test_unterminated_tag_kept(self, normalizer: TextNormalizer):
        """A '<' without a closing '>' is not markup."""
        assert normalizer._strip_markup("Hello <world") == "Hello <world"

    def test_heading_text_separated_from_body(self, normalizer: TextNormalizer):
        """Heading text ends up on its own line."""
        assert normalizer.normalize("<h2>Title</h2>Body") == "Title\nBody"


class TestCollapseNewlines:
    """Tests for _collapse_newlines method."""

    def test_collapses_runs(self, normalizer: TextNormalizer):
        """Any run of newlines becomes a single newline."""
        assert normalizer._collapse_newlines("a\n\n\n\nb") == "a\nb"

    def test_paragraphs_separated_by_single_newline(self, normalizer: TextNormalizer):
        """Source newline plus inserted newline collapse to one."""
        result = normalizer.normalize("<p>One.</p>\n<p>Two.</p>")
        assert result == "One.\nTwo.\n"

    def test_other_whitespace_untouched(self, normalizer: TextNormalizer):
        """Carriage returns and spaced blank lines are not collapsed."""
        assert normalizer._collapse_newlines("a\r\n\r\nb") == "a\r\n\r\nb"
        assert normalizer._collapse_newlines("a \n \nb") == "a \n \nb"


class TestNormalize:
    """Tests for the full normalize pipeline."""

    def test_empty_input(self, normalizer: TextNormalizer):
        """Empty text stays empty."""
        assert normalizer.normalize("") == ""

    def test_paragraph(self, normalizer: TextNormalizer):
        """Single paragraph keeps its trailing newline."""
        assert normalizer.normalize("<p>Hello world.</p>") == "Hello world.\n"

    def test_plain_text_unchanged(self, normalizer: TextNormalizer):
        """Text without markup passes through."""
        text = "The cat sat on the mat. It was a sunny day."
        assert normalizer.normalize(text) == text

    def test_post_html(self, normalizer: TextNormalizer, sample_post_html: str):
        """Heading, paragraphs and shortcode normalized together."""
        result = normalizer.normalize(sample_post_html)
        assert result == "Welcome\nThe cat sat on the mat.\nIt was a sunny day.\n"

    def test_markup_only(self, normalizer: TextNormalizer, markup_only_html: str):
        """Markup without words leaves only the paragraph newline behind."""
        assert normalizer.normalize(markup_only_html) == "\n"

    @pytest.mark.parametrize("text", [
        "a\n\n\nb",
        "<p>x</p><p>y</p>",
        "[a]<b>c</b>",
        "<h1>T</h1>\n\n<p>Body.</p>\n\n\n",
        "plain",
        "",
        "[a<x\n>b]",
        "x[a<p>b]y</p>z",
    ])
    def test_idempotent(self, normalizer: TextNormalizer, text: str):
        """Normalizing twice gives the same result as once."""
        once = normalizer.normalize(text)
        assert normalizer.normalize(once) == once

    def test_shortcode_joined_by_tag_removal(self, normalizer: TextNormalizer):
        """A shortcode split by a multi-line tag is removed once the tag is gone."""
        assert normalizer.normalize("[a<x\n>b]") == ""

    def test_module_function_matches_class(self, sample_post_html: str):
        """normalize_text uses the default normalizer."""
        assert normalize_text(sample_post_html) == TextNormalizer().normalize(sample_post_html)
