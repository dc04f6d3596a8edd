"""
Similarity - Normalized Levenshtein closeness between two strings
"""

from __future__ import annotations


def levenshtein_distance(s1: str, s2: str) -> int:
    """Unit-cost insert/delete/substitute edit distance"""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(s1: str, s2: str) -> float:
    """
    Levenshtein ratio in [0.0, 1.0].
    Equal strings (both empty included) score 1.0; one empty side scores 0.0.
    """
    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    longer = max(len(s1), len(s2))
    return 1.0 - levenshtein_distance(s1, s2) / longer
