import random
import pytest
from kmptrace import match

def _brute_force(text: str, pattern: str) -> list[int]:
    m = len(pattern)
    return [p for p in range(len(text) - m + 1) if text[p:p + m] == pattern]

@pytest.mark.e2e
@pytest.mark.parametrize("alphabet", ["ab", "abc", "aab"])
def test_positions_agree_with_brute_force(alphabet):
    rng = random.Random(f"oracle-{alphabet}")
    for _ in range(200):
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 30)))
        pattern = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 5)))
        r = match(text, pattern)
        assert list(r.positions) == _brute_force(text, pattern)
        assert r.found == bool(r.positions)
        for p in r.positions:
            assert text[p:p + len(pattern)] == pattern

@pytest.mark.e2e
def test_comparisons_stay_linear():
    text = "a" * 200 + "b"
    pattern = "a" * 20 + "b"
    r = match(text, pattern)
    assert r.positions == (180,)
    assert r.comparisons <= 2 * len(text)
