"""String similarity utilities for ranking candidates."""

from __future__ import annotations

__all__ = ["levenshtein_distance"]


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform s1 into s2.
    Characters are compared as code points, so "é" and "e" differ.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        The edit distance between the strings.
    """
    # Keep the shorter string on the inner loop so rows stay small
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if not s2:
        return len(s1)

    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1, start=1):
        current_row = [i]
        for j, c2 in enumerate(s2, start=1):
            if c1 == c2:
                current_row.append(previous_row[j - 1])
            else:
                current_row.append(
                    1 + min(previous_row[j], current_row[j - 1], previous_row[j - 1])
                )
        previous_row = current_row

    return previous_row[-1]
