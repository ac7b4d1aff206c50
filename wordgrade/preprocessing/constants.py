"""
Constants for text normalization

Regex patterns used to turn raw editor content (HTML plus bracketed
shortcodes) into plain prose for lexical analysis.
"""

import re


# ===========================
# Shortcodes
# ===========================

# Bracketed shortcode tokens, e.g. "[gallery ids=1,2,3]". Non-greedy, no nesting.
SHORTCODE_PATTERN = re.compile(r'\[.*?\]')


# ===========================
# Block Markup
# ===========================

# Heading pairs without nested tags, e.g. "<h2>Getting started</h2>"
HEADING_PATTERN = re.compile(r'(<h[1-6]>[^<]*</h[1-6]>)')

PARAGRAPH_CLOSE_TAG = '</p>'

# Any remaining tag. Content between tags is kept.
MARKUP_TAG_PATTERN = re.compile(r'<[^>]+>')


# ===========================
# Line Breaks
# ===========================

DOUBLE_NEWLINE = '\n\n'
