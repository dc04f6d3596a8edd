"""
Sequence Segmenter - Split raw text into comparable units
"""

from __future__ import annotations

import re

from models.diff import DiffMode

# Split point sits after the punctuation and swallows the whitespace run
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_lines(text: str) -> list[str]:
    """Split on newlines, keeping empty segments so numbering matches the input"""
    return text.split("\n")


def split_sentences(text: str) -> list[str]:
    """Split after sentence punctuation, trimming and dropping empty pieces"""
    sentences = []
    for piece in SENTENCE_BOUNDARY.split(text):
        piece = piece.strip()
        if piece:
            sentences.append(piece)
    return sentences


def segment(text: str, mode: DiffMode = DiffMode.LINES) -> list[str]:
    """Split text into units for the given mode"""
    if mode == DiffMode.SENTENCES:
        return split_sentences(text)
    return split_lines(text)
