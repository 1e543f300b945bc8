"""
Edit Script Builder - Turn an LCS into equal/delete/insert operations
"""

from __future__ import annotations

from collections.abc import Sequence

from models.diff import DiffOperation


def build_script(
    a: Sequence[str],
    b: Sequence[str],
    prefix: Sequence[str] = (),
    lcs: Sequence[str] = (),
    suffix: Sequence[str] = (),
) -> list[DiffOperation]:
    """Build the edit script for the interiors *a*, *b* and their LCS.

    *prefix* and *suffix* are the trimmed common affix tokens; each becomes a
    single ``equal`` operation.  Replaying ``equal`` + ``delete`` texts gives
    ``prefix + a + suffix``, replaying ``equal`` + ``insert`` texts gives
    ``prefix + b + suffix``.
    """
    script: list[DiffOperation] = []

    if prefix:
        script.append(DiffOperation.equal("".join(prefix)))

    len_a, len_b, len_lcs = len(a), len(b), len(lcs)
    i = j = k = 0

    while i < len_a or j < len_b:
        if k < len_lcs and i < len_a and j < len_b and a[i] == lcs[k] and b[j] == lcs[k]:
            script.append(DiffOperation.equal(lcs[k]))
            i += 1
            j += 1
            k += 1
            continue

        progressed = False
        if i < len_a and (k >= len_lcs or a[i] != lcs[k]):
            script.append(DiffOperation.delete(a[i]))
            i += 1
            progressed = True
        # Not exclusive with the delete above.
        if j < len_b and (k >= len_lcs or b[j] != lcs[k]):
            script.append(DiffOperation.insert(b[j]))
            j += 1
            progressed = True

        if not progressed:
            raise ValueError(f"LCS is not a common subsequence of the inputs (stuck at k={k})")

    if k < len_lcs:
        raise ValueError(f"LCS is not a common subsequence of the inputs ({len_lcs - k} unmatched)")

    if suffix:
        script.append(DiffOperation.equal("".join(suffix)))

    return script
