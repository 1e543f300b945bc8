"""Hirschberg linear-space LCS.

The classic quadratic DP table is never materialised.  Instead the first
half of *a* is scored forward against *b* and the second half backward
(forward over both reversed sequences); the split point of *b* that
maximises the sum of the two score rows is where an optimal alignment
crosses the middle of *a*.  Both halves are then solved recursively.

Auxiliary memory per length computation is two rows of ``len(b) + 1`` ints.

The two score rows are independent and may be computed as a fork-join pair
on a bounded thread pool.  Only the row computations are forked (they never
fork again), so a small pool cannot deadlock on nested waits.  Forking is
limited to sub-problems of at least ``parallel_threshold`` cells and to the
top ``max_fork_depth`` levels of the recursion.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional

from .base import LCSAlgorithm

logger = logging.getLogger(__name__)

DEFAULT_PARALLEL_THRESHOLD = 250_000
DEFAULT_MAX_FORK_DEPTH = 2
DEFAULT_MAX_WORKERS = 2


def lcs_lengths(a: Sequence[str], b: Sequence[str]) -> list[int]:
    """Return the last row of the LCS length table of *a* against *b*.

    ``row[j]`` is the LCS length of ``a`` and ``b[:j]``.
    """

    n = len(b)
    # Two owned buffers, swapped by reference after each row.
    current = [0] * (n + 1)
    previous = [0] * (n + 1)

    for token in a:
        for j in range(1, n + 1):
            if token == b[j - 1]:
                current[j] = previous[j - 1] + 1
            elif previous[j] >= current[j - 1]:
                current[j] = previous[j]
            else:
                current[j] = current[j - 1]
        previous, current = current, previous

    return previous


def find_partition(l1: Sequence[int], l2: Sequence[int]) -> int:
    """Index ``p`` maximising ``l1[p] + reversed(l2)[p]``; first maximum wins."""

    l2_reversed = l2[::-1]
    best = -1
    index = 0
    for p, (left, right) in enumerate(zip(l1, l2_reversed)):
        if left + right > best:
            best = left + right
            index = p
    return index


class HirschbergLCS(LCSAlgorithm):
    """Exact LCS in linear auxiliary space (divide and conquer)."""

    name = "hirschberg"

    def __init__(
        self,
        *,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
        max_fork_depth: int = DEFAULT_MAX_FORK_DEPTH,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        if parallel_threshold < 0:
            raise ValueError("parallel_threshold must be >= 0")
        if max_fork_depth < 0:
            raise ValueError("max_fork_depth must be >= 0")
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")

        self.parallel_threshold = parallel_threshold
        self.max_fork_depth = max_fork_depth
        self.max_workers = max_workers

    def __repr__(self) -> str:
        return (
            f"HirschbergLCS(parallel_threshold={self.parallel_threshold}, "
            f"max_fork_depth={self.max_fork_depth}, max_workers={self.max_workers})"
        )

    # ------------------------------------------------------------------ LCSAlgorithm
    def compute(self, a: Sequence[str], b: Sequence[str]) -> list[str]:
        if not a or not b:
            return []

        if self.max_fork_depth == 0 or len(a) * len(b) < self.parallel_threshold:
            return self._solve(a, b, 0, None)

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="hirschberg"
        ) as executor:
            return self._solve(a, b, 0, executor)

    # ------------------------------------------------------------------ internals
    def _solve(
        self,
        a: Sequence[str],
        b: Sequence[str],
        depth: int,
        executor: Optional[Executor],
    ) -> list[str]:
        if len(a) == 0 or len(b) == 0:
            return []
        # Containment only: a one-token side matches iff it occurs at all.
        if len(a) == 1:
            return [a[0]] if a[0] in b else []
        if len(b) == 1:
            return [b[0]] if b[0] in a else []

        mid = len(a) // 2
        head, tail = a[:mid], a[mid:]

        l1, l2 = self._score_halves(head, tail, b, depth, executor)
        partition = find_partition(l1, l2)

        left = self._solve(head, b[:partition], depth + 1, executor)
        right = self._solve(tail, b[partition:], depth + 1, executor)
        return left + right

    def _score_halves(
        self,
        head: Sequence[str],
        tail: Sequence[str],
        b: Sequence[str],
        depth: int,
        executor: Optional[Executor],
    ) -> tuple[list[int], list[int]]:
        reversed_tail = tail[::-1]
        reversed_b = b[::-1]

        fork = (
            executor is not None
            and depth < self.max_fork_depth
            and (len(head) + len(tail)) * len(b) >= self.parallel_threshold
        )
        if not fork:
            return lcs_lengths(head, b), lcs_lengths(reversed_tail, reversed_b)

        logger.debug(
            "Forking length rows at depth %d (%d x %d)", depth, len(head) + len(tail), len(b)
        )
        forward = executor.submit(lcs_lengths, head, b)
        backward = executor.submit(lcs_lengths, reversed_tail, reversed_b)
        # Join point: both rows are needed before partitioning.
        return forward.result(), backward.result()
