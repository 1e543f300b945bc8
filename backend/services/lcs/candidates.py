"""Candidate / equivalence-class LCS approximation.

Every token of *b* is grouped into an equivalence class holding the
ascending positions where it occurs.  *a* is then scanned left to right and
each token contributes **one** candidate position from its class: the
smallest position beyond the tail of the longest chain found so far, or the
class's first position when the chain cannot be extended.

Candidates are threaded into chains patience-sorting style: ``tails[k]`` is
the smallest *b*-position that ends a chain of length ``k + 1``.  Back links
recover the aligned ``(i, j)`` pairs of the longest chain.

With distinct tokens each class has a single position and the result is a
longest increasing subsequence, i.e. an exact LCS.  With repeated tokens
only one candidate per *a*-token is considered, so the result is a lower
bound on the LCS length.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import NamedTuple, Optional

from .base import LCSAlgorithm


class _Candidate(NamedTuple):
    i: int
    j: int
    prev: Optional["_Candidate"]


def equivalence_classes(b: Sequence[str]) -> dict[str, list[int]]:
    """Map each token of *b* to the ascending list of its positions."""

    classes: dict[str, list[int]] = {}
    for j, token in enumerate(b):
        classes.setdefault(token, []).append(j)
    return classes


class CandidateLCS(LCSAlgorithm):
    """Fast common-subsequence approximation (exact for distinct tokens)."""

    name = "candidates"

    def align(self, a: Sequence[str], b: Sequence[str]) -> list[tuple[int, int]]:
        """Return aligned index pairs ``(i, j)`` with ``a[i] == b[j]``.

        Both indices are strictly increasing along the returned list.
        """

        if not a or not b:
            return []

        classes = equivalence_classes(b)
        tails: list[int] = []
        tops: list[_Candidate] = []

        for i, token in enumerate(a):
            positions = classes.get(token)
            if not positions:
                continue

            # Greedy extension of the longest chain.
            last = tails[-1] if tails else -1
            pick = bisect_right(positions, last)
            j = positions[pick] if pick < len(positions) else positions[0]

            k = bisect_left(tails, j)
            candidate = _Candidate(i, j, tops[k - 1] if k > 0 else None)
            if k == len(tails):
                tails.append(j)
                tops.append(candidate)
            else:
                tails[k] = j
                tops[k] = candidate

        pairs: list[tuple[int, int]] = []
        node = tops[-1] if tops else None
        while node is not None:
            pairs.append((node.i, node.j))
            node = node.prev
        pairs.reverse()
        return pairs

    # ------------------------------------------------------------------ LCSAlgorithm
    def compute(self, a: Sequence[str], b: Sequence[str]) -> list[str]:
        return [a[i] for i, _ in self.align(a, b)]
