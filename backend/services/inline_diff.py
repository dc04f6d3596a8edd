"""
Inline Diff - Sub-line highlighting for a replaced pair of units

The pair is re-tokenized and run through the same array diff as whole
units, then rendered as HTML where removed spans are struck through and
added spans highlighted.
"""

from __future__ import annotations

import html
import re

from models.diff import DiffType, InlineGranularity, InlineSegment

from .alignment import align

WORD_TOKEN = re.compile(r"\w+|\s+|[^\w\s]", re.UNICODE)
# Capturing group keeps the separating whitespace as its own token
SENTENCE_TOKEN = re.compile(r"(?<=[.!?])(\s+)")

MARKUP_TAGS = {
    DiffType.REMOVED: ('<del class="diff-inline-removed">', "</del>"),
    DiffType.ADDED: ('<ins class="diff-inline-added">', "</ins>"),
}


def tokenize(text: str, granularity: InlineGranularity = InlineGranularity.WORDS) -> list[str]:
    """Split text into tokens that concatenate back to the original text"""
    if granularity == InlineGranularity.SENTENCES:
        return [token for token in SENTENCE_TOKEN.split(text) if token]
    return WORD_TOKEN.findall(text)


def diff_segments(
    old: str,
    new: str,
    granularity: InlineGranularity = InlineGranularity.WORDS,
) -> list[InlineSegment]:
    """Align the two strings token-wise and return merged spans"""
    groups = align(tokenize(old, granularity), tokenize(new, granularity))
    return [InlineSegment(type=group.type, value="".join(group.units)) for group in groups]


def render_markup(segments: list[InlineSegment]) -> str:
    """Render spans as HTML with escaped text"""
    parts = []
    for segment in segments:
        text = html.escape(segment.value)
        if segment.type in MARKUP_TAGS:
            opening, closing = MARKUP_TAGS[segment.type]
            parts.append(f"{opening}{text}{closing}")
        else:
            parts.append(text)
    return "".join(parts)


def inline_diff(
    old: str,
    new: str,
    granularity: InlineGranularity = InlineGranularity.WORDS,
) -> tuple[str, list[InlineSegment]]:
    """Return (markup, segments) for a replaced pair"""
    segments = diff_segments(old, new, granularity)
    return render_markup(segments), segments
