"""Property-based tests for the diff engine.

Hypothesis generates token lists from a small alphabet (so tokens repeat and
alignments are ambiguous) and raw text built from word, space and
punctuation characters.

Properties:
- Replaying equal + delete texts gives the first input, equal + insert the second
- Diffing a text against itself yields only equal operations
- Hirschberg finds an LCS as long as the quadratic DP
- The candidate method yields a common subsequence no longer than Hirschberg's
- With distinct tokens both methods find the same length
"""

from hypothesis import HealthCheck, given, settings, strategies as st

from models.diff import DiffOpType
from services.diff_generator import DiffGenerator
from services.lcs import CandidateLCS, HirschbergLCS

TOKENS = st.lists(st.sampled_from(["a", "b", "c", " ", ",", "xy"]), max_size=14)
DISTINCT_TOKENS = st.lists(st.sampled_from(list("abcdefghijkl")), unique=True, max_size=12)
TEXT = st.text(alphabet="ab_ \n,.<'", max_size=40)
ALGORITHMS = st.sampled_from(["hirschberg", "candidates"])

# The autouse config fixture is function scoped; these tests never read config.
PROPERTY_SETTINGS = settings(
    max_examples=150, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture]
)


def _reference_lcs_length(a, b):
    previous = [0] * (len(b) + 1)
    for token in a:
        current = [0]
        for j, other in enumerate(b, start=1):
            if token == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(token in it for token in sub)


def _replay(operations, *kinds):
    return "".join(op.text for op in operations if op.operation in kinds)


@PROPERTY_SETTINGS
@given(text1=TEXT, text2=TEXT, algorithm=ALGORITHMS, trim_affixes=st.booleans())
def test_script_reconstructs_both_texts(text1, text2, algorithm, trim_affixes):
    result = DiffGenerator(algorithm, trim_affixes=trim_affixes).generate_diff(text1, text2)

    assert _replay(result.operations, DiffOpType.EQUAL, DiffOpType.DELETE) == text1
    assert _replay(result.operations, DiffOpType.EQUAL, DiffOpType.INSERT) == text2


@PROPERTY_SETTINGS
@given(a=TOKENS, b=TOKENS, algorithm=ALGORITHMS, trim_affixes=st.booleans())
def test_token_script_reconstructs_both_sequences(a, b, algorithm, trim_affixes):
    ops = DiffGenerator(algorithm, trim_affixes=trim_affixes).diff_tokens(a, b)

    assert _replay(ops, DiffOpType.EQUAL, DiffOpType.DELETE) == "".join(a)
    assert _replay(ops, DiffOpType.EQUAL, DiffOpType.INSERT) == "".join(b)


@PROPERTY_SETTINGS
@given(a=TOKENS, algorithm=ALGORITHMS, trim_affixes=st.booleans())
def test_self_diff_is_all_equal(a, algorithm, trim_affixes):
    ops = DiffGenerator(algorithm, trim_affixes=trim_affixes).diff_tokens(a, a)

    assert all(op.operation == DiffOpType.EQUAL for op in ops)
    assert _replay(ops, DiffOpType.EQUAL) == "".join(a)


@PROPERTY_SETTINGS
@given(a=TOKENS, b=TOKENS)
def test_hirschberg_matches_reference_length(a, b):
    lcs = HirschbergLCS().compute(a, b)

    assert _is_subsequence(lcs, a)
    assert _is_subsequence(lcs, b)
    assert len(lcs) == _reference_lcs_length(a, b)


@PROPERTY_SETTINGS
@given(a=TOKENS, b=TOKENS)
def test_candidates_is_bounded_common_subsequence(a, b):
    lcs = CandidateLCS().compute(a, b)

    assert _is_subsequence(lcs, a)
    assert _is_subsequence(lcs, b)
    assert len(lcs) <= len(HirschbergLCS().compute(a, b))


@PROPERTY_SETTINGS
@given(a=DISTINCT_TOKENS, b=DISTINCT_TOKENS)
def test_candidates_exact_for_distinct_tokens(a, b):
    assert len(CandidateLCS().compute(a, b)) == len(HirschbergLCS().compute(a, b))


@PROPERTY_SETTINGS
@given(a=TOKENS, b=TOKENS)
def test_forked_hirschberg_matches_sequential(a, b):
    forked = HirschbergLCS(parallel_threshold=0, max_fork_depth=2, max_workers=2)

    assert forked.compute(a, b) == HirschbergLCS(max_fork_depth=0).compute(a, b)
