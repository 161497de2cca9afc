import random
import pytest
from kmptrace.failure import build_failure_function

def _longest_border(s: str) -> int:
    for k in range(len(s) - 1, 0, -1):
        if s[:k] == s[-k:]:
            return k
    return 0

@pytest.mark.e2e
@pytest.mark.parametrize("pattern, expected", [
    ("ABABCABAB", (0, 0, 1, 2, 0, 1, 2, 3, 4)),
    ("aa", (0, 1)),
    ("aabaaab", (0, 1, 0, 1, 2, 2, 3)),
    ("abcd", (0, 0, 0, 0)),
    ("x", (0,)),
])
def test_known_tables(pattern, expected):
    assert build_failure_function(pattern) == expected

@pytest.mark.e2e
def test_bounds_and_border_definition_random_patterns():
    rng = random.Random(1234)
    for _ in range(300):
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 12)))
        table = build_failure_function(pattern)
        assert len(table) == len(pattern)
        assert table[0] == 0
        for i, v in enumerate(table):
            assert 0 <= v <= i
            assert v == _longest_border(pattern[: i + 1])

@pytest.mark.e2e
def test_empty_pattern_is_rejected():
    with pytest.raises(ValueError):
        build_failure_function("")
