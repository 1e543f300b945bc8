from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class LCSAlgorithm(ABC):
    """Abstract base class for longest-common-subsequence strategies.

    An algorithm receives two token sequences and returns *one* common
    subsequence of them as a list of tokens.  Exact variants return a
    longest one; approximate variants may return a shorter one but must
    still return a subsequence of **both** inputs, otherwise the edit script
    builder cannot walk it.

    Implementations are stateless between calls: configuration lives on the
    instance, per-call buffers live on the stack.
    """

    #: Registry key, also reported back in ``DiffResult.algorithm``.
    name: str = ""

    @abstractmethod
    def compute(self, a: Sequence[str], b: Sequence[str]) -> list[str]:
        """Return a common subsequence of *a* and *b*.

        Both variants return ``[]`` when either input is empty.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
