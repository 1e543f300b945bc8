"""
Diff Generator Service - Token-level diffs of two texts
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from models.diff import (
    DiffOperation,
    DiffOpType,
    DiffResult,
    DiffStats,
    EngineSettings,
    LCSAlgorithmName,
)
from services.affix import common_prefix_length, common_suffix_length
from services.edit_script import build_script
from services.lcs import DEFAULT_ALGORITHM, LCSAlgorithm, get_lcs_algorithm
from services.lcs.hirschberg import (
    DEFAULT_MAX_FORK_DEPTH,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PARALLEL_THRESHOLD,
)
from services.tokenizer import tokenize

logger = logging.getLogger(__name__)


class DiffGenerator:
    """Generate token-level edit scripts"""

    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        *,
        trim_affixes: bool = True,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
        max_fork_depth: int = DEFAULT_MAX_FORK_DEPTH,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self.trim_affixes = trim_affixes
        self.lcs: LCSAlgorithm = get_lcs_algorithm(
            algorithm,
            parallel_threshold=parallel_threshold,
            max_fork_depth=max_fork_depth,
            max_workers=max_workers,
        )

    @classmethod
    def from_config(cls, config: dict[str, Any], algorithm: str | None = None) -> "DiffGenerator":
        """Build a generator from the ``engine`` section of the backend config"""
        try:
            settings = EngineSettings.model_validate(config.get("engine", {}))
        except ValidationError as e:
            raise ValueError(f"Invalid engine configuration: {e}") from e

        return cls(
            algorithm or settings.algorithm.value,
            trim_affixes=settings.trim_affixes,
            parallel_threshold=settings.parallel_threshold,
            max_fork_depth=settings.max_fork_depth,
            max_workers=settings.max_workers,
        )

    @property
    def algorithm(self) -> str:
        return self.lcs.name

    def generate_diff(self, text1: str, text2: str) -> DiffResult:
        """Tokenize both texts and compute their edit script with timing"""
        start = time.perf_counter()

        tokens1 = tokenize(text1)
        tokens2 = tokenize(text2)
        operations, lcs_length = self._diff(tokens1, tokens2)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "Diffed %d x %d tokens with %s in %.2f ms (lcs=%d)",
            len(tokens1),
            len(tokens2),
            self.algorithm,
            elapsed_ms,
            lcs_length,
        )

        return DiffResult(
            operations=operations,
            elapsed_ms=elapsed_ms,
            algorithm=LCSAlgorithmName(self.algorithm),
            identical=text1 == text2,
            stats=self._stats(operations, len(tokens1), len(tokens2), lcs_length),
        )

    def diff_tokens(self, a: Sequence[str], b: Sequence[str]) -> list[DiffOperation]:
        """Edit script for two token sequences"""
        operations, _ = self._diff(a, b)
        return operations

    def _diff(self, a: Sequence[str], b: Sequence[str]) -> tuple[list[DiffOperation], int]:
        prefix_length = suffix_length = 0
        if self.trim_affixes:
            prefix_length = common_prefix_length(a, b)
            # Suffix only over what the prefix left, so the windows never overlap.
            suffix_length = common_suffix_length(a[prefix_length:], b[prefix_length:])

        prefix = a[:prefix_length]
        suffix = a[len(a) - suffix_length:]
        interior_a = a[prefix_length:len(a) - suffix_length]
        interior_b = b[prefix_length:len(b) - suffix_length]
        logger.debug("Trimmed affixes: prefix=%d suffix=%d", prefix_length, suffix_length)

        lcs = self.lcs.compute(interior_a, interior_b)
        operations = build_script(interior_a, interior_b, prefix, lcs, suffix)
        return operations, prefix_length + len(lcs) + suffix_length

    @staticmethod
    def _stats(
        operations: list[DiffOperation], tokens_a: int, tokens_b: int, lcs_length: int
    ) -> DiffStats:
        deleted = sum(1 for op in operations if op.operation == DiffOpType.DELETE)
        inserted = sum(1 for op in operations if op.operation == DiffOpType.INSERT)
        return DiffStats(
            tokens_a=tokens_a,
            tokens_b=tokens_b,
            lcs_length=lcs_length,
            equal=lcs_length,
            deleted=deleted,
            inserted=inserted,
        )
