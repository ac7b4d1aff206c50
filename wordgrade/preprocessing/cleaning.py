"""
Cleaning module for editor content
Normalizes raw (possibly HTML-laden) text into plain prose for readability analysis
"""

from .constants import (
    DOUBLE_NEWLINE,
    HEADING_PATTERN,
    MARKUP_TAG_PATTERN,
    PARAGRAPH_CLOSE_TAG,
    SHORTCODE_PATTERN,
)


class TextNormalizer:
    """Strips markup and shortcodes from raw text and collapses structural noise"""

    def normalize(self, text: str) -> str:
        """
        Normalize raw text

        The steps run in a fixed order; each one relies on the shape
        produced by the previous step. Stripping a tag can join the halves
        of a shortcode (e.g. "[a<x\\n>b]"), so the passes repeat until the
        text stops changing. Every pass that changes the text shortens it.

        Args:
            text: Raw text, possibly containing HTML and shortcodes

        Returns:
            str: Plain prose with block boundaries turned into newlines
        """
        if not text:
            return ""

        previous = None
        while text != previous:
            previous = text
            text = self._normalize_pass(text)

        return text

    def _normalize_pass(self, text: str) -> str:
        """Run each normalization step once."""
        text = self._remove_shortcodes(text)
        text = self._add_block_newlines(text)
        text = self._strip_markup(text)
        return self._collapse_newlines(text)

    def _remove_shortcodes(self, text: str) -> str:
        """
        Remove bracketed shortcode tokens

        Args:
            text: Input text

        Returns:
            str: Text without "[...]" tokens
        """
        return SHORTCODE_PATTERN.sub('', text)

    def _add_block_newlines(self, text: str) -> str:
        """
        Terminate headings and paragraphs with a newline

        Stripping tags would otherwise glue the last word of a heading or
        paragraph to the first word of the next block.

        Args:
            text: Input text

        Returns:
            str: Text with a newline after each heading and closing </p>
        """
        text = HEADING_PATTERN.sub(r'\1\n', text)
        return text.replace(PARAGRAPH_CLOSE_TAG, PARAGRAPH_CLOSE_TAG + '\n')

    def _strip_markup(self, text: str) -> str:
        """
        Remove markup tags, keeping their content

        Args:
            text: Input text

        Returns:
            str: Text without tags
        """
        return MARKUP_TAG_PATTERN.sub('', text)

    def _collapse_newlines(self, text: str) -> str:
        """
        Replace adjacent newline pairs with a single newline

        Only literal "\\n\\n" pairs are touched. Runs are collapsed until
        none remain so that normalizing twice gives the same text.

        Args:
            text: Input text

        Returns:
            str: Text without blank lines
        """
        while DOUBLE_NEWLINE in text:
            text = text.replace(DOUBLE_NEWLINE, '\n')
        return text


_default_normalizer = TextNormalizer()


def normalize_text(text: str) -> str:
    """
    Convenience function to normalize raw editor content

    Args:
        text: Raw text

    Returns:
        str: Normalized text
    """
    return _default_normalizer.normalize(text)
