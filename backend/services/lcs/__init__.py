"""LCS engine - interchangeable longest-common-subsequence strategies"""

from __future__ import annotations

from typing import Any

from .base import LCSAlgorithm
from .candidates import CandidateLCS
from .hirschberg import HirschbergLCS, find_partition, lcs_lengths

# ---------------------------------------------------------------------------
# Registry of available algorithms
# ---------------------------------------------------------------------------

LCS_REGISTRY: dict[str, type[LCSAlgorithm]] = {
    HirschbergLCS.name: HirschbergLCS,
    CandidateLCS.name: CandidateLCS,
}

DEFAULT_ALGORITHM = HirschbergLCS.name


def get_lcs_algorithm(name: str = DEFAULT_ALGORITHM, **options: Any) -> LCSAlgorithm:
    """Instantiate the algorithm registered under *name*.

    Only :class:`HirschbergLCS` takes options (its fork-join limits); they are
    ignored for the other variants.
    """

    try:
        cls = LCS_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(LCS_REGISTRY))
        raise ValueError(f"Unknown LCS algorithm {name!r} (expected one of: {known})") from None

    if cls is HirschbergLCS:
        return HirschbergLCS(**options)
    return cls()


__all__ = [
    "LCSAlgorithm",
    "HirschbergLCS",
    "CandidateLCS",
    "LCS_REGISTRY",
    "DEFAULT_ALGORITHM",
    "get_lcs_algorithm",
    "find_partition",
    "lcs_lengths",
]
