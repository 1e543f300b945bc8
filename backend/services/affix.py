"""
Common Affix Trimmer - Shared prefix/suffix lengths of two token sequences
"""

from __future__ import annotations

from collections.abc import Sequence


def common_prefix_length(a: Sequence[str], b: Sequence[str]) -> int:
    """Length of the longest shared leading run"""
    limit = min(len(a), len(b))
    i = 0
    while i < limit and a[i] == b[i]:
        i += 1
    return i


def common_suffix_length(a: Sequence[str], b: Sequence[str]) -> int:
    """Length of the longest shared trailing run.

    Callers pass the prefix-trimmed ranges so the two windows never overlap.
    """
    limit = min(len(a), len(b))
    len_a, len_b = len(a), len(b)
    i = 0
    while i < limit and a[len_a - i - 1] == b[len_b - i - 1]:
        i += 1
    return i
