"""Substring search: brute force and Knuth-Morris-Pratt."""

from __future__ import annotations


def bf_search(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of pattern in text, or -1.

    Brute force: on a mismatch the text position falls back to one past
    the start of the failed attempt.
    """
    i = j = 0
    while i < len(text) and j < len(pattern):
        if text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            i = i - j + 1
            j = 0
    return i - j if j == len(pattern) else -1


def kmp_next(pattern: str) -> list[int]:
    """Return the optimised KMP failure table for pattern.

    Entry 0 is -1. Where the character after a shared prefix equals the
    current character, the entry borrows the earlier entry instead.
    """
    if not pattern:
        return []
    table = [-1] * len(pattern)
    j, k = 0, -1
    while j < len(pattern) - 1:
        if k == -1 or pattern[k] == pattern[j]:
            j += 1
            k += 1
            table[j] = table[k] if pattern[k] == pattern[j] else k
        else:
            k = table[k]
    return table


def kmp_search(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of pattern in text, or -1.

    The text position never moves backwards; only the pattern position
    falls back along the failure table.
    """
    if not pattern:
        return 0
    table = kmp_next(pattern)
    i = j = 0
    while i < len(text) and j < len(pattern):
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - j if j == len(pattern) else -1