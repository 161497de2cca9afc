import pytest
from kmptrace import match
from kmptrace.narration import describe_step

@pytest.mark.e2e
def test_narration_strings_for_each_kind():
    r = match("aab", "ab")
    statuses = [s.status for s in r.steps]
    assert statuses[0] == ("Comparing text[0]='a' with pattern[0]='a': match found. "
                           "Advancing to text[1] and pattern[1].")
    assert statuses[1] == ("Mismatch at text[1]='a' and pattern[1]='b'. "
                           "Using failure function value 0 to shift pattern to pattern[0].")
    assert statuses[2] == "Pattern shifted to align at pattern[0] with text[1]='a' based on failure function."
    assert statuses[-1] == ("Full pattern match found at text index 1! "
                            "Using failure function value 0 to shift pattern to pattern[0].")

@pytest.mark.e2e
def test_advance_narration():
    r = match("z", "a")
    assert r.steps[0].status == ("Mismatch at text[0]='z' and pattern[0]='a'. "
                                 "No prefix to use, advancing to text[1].")

@pytest.mark.e2e
def test_narration_derives_from_structured_fields():
    text, pattern = "ABABDABACDABABCABAB", "ABABCABAB"
    r = match(text, pattern)
    for step in r.steps:
        assert describe_step(step, text, pattern) == step.status
