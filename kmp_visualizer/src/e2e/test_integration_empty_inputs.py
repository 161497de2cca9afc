import pytest
from kmptrace import match, TraceableMatcher, EmptyPatternError, EmptyTextError

@pytest.mark.e2e
def test_empty_text_is_reported_in_result():
    r = match("", "a")
    assert r.error is not None
    assert r.error.kind == "EmptyTextError"
    assert r.error.message == "Text cannot be empty"
    assert r.steps == () and r.failure_function == () and r.positions == ()
    assert r.found is False and r.comparisons == 0

@pytest.mark.e2e
def test_empty_pattern_is_reported_in_result():
    r = match("a", "")
    assert r.error is not None
    assert r.error.kind == "EmptyPatternError"
    assert r.error.message == "Pattern cannot be empty"
    assert r.steps == ()

@pytest.mark.e2e
def test_pattern_is_validated_before_text():
    r = match("", "")
    assert r.error.kind == "EmptyPatternError"

@pytest.mark.e2e
def test_matcher_raises_internally():
    with pytest.raises(EmptyPatternError):
        TraceableMatcher("abc", "").run()
    with pytest.raises(EmptyTextError):
        TraceableMatcher("", "abc").run()

@pytest.mark.e2e
def test_error_result_serialises_error_only():
    d = match("", "a").to_dict()
    assert d == {"failureFunction": [], "steps": [], "found": False,
                 "positions": [], "comparisons": 0, "error": "Text cannot be empty"}
