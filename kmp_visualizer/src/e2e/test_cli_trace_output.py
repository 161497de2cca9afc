import json
import pytest
from kmpweb.__main__ import main
from kmpweb.textview import render_frame
from kmptrace import match

@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")

@pytest.mark.e2e
def test_cli_summary(capsys):
    assert main(["aaaa", "aa"]) == 0
    out = capsys.readouterr().out
    assert "Failure :  0  1" in out
    assert "Found at: 0, 1, 2" in out
    assert "Comparisons: 4  Steps: 7" in out

@pytest.mark.e2e
def test_cli_no_match(capsys):
    assert main(["abc", "xyz"]) == 0
    assert "(no matches)" in capsys.readouterr().out

@pytest.mark.e2e
def test_cli_json_matches_wire_format(capsys):
    assert main(["ABABDABACDABABCABAB", "ABABCABAB", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["positions"] == [10]
    assert data == match("ABABDABACDABABCABAB", "ABABCABAB").to_dict()

@pytest.mark.e2e
def test_cli_reports_input_error(capsys):
    assert main(["abc", ""]) == 2
    assert "Pattern cannot be empty" in capsys.readouterr().err

@pytest.mark.e2e
def test_cli_steps_prints_every_frame(capsys):
    assert main(["aab", "ab", "--steps"]) == 0
    out = capsys.readouterr().out
    assert out.count("step ") == 6
    assert "[realign]" in out and "failure=0" in out

@pytest.mark.e2e
def test_render_frame_aligns_pattern_under_text():
    r = match("aab", "ab")
    frame = render_frame("aab", "ab", r.steps[3]).splitlines()
    assert frame[1] == "text       a  a  b"
    assert frame[2] == "pattern       a  b"
    assert frame[3] == "compare       ^"
    assert frame[4] == "prefix     1  1  0"

@pytest.mark.e2e
def test_render_frame_marks_full_match_span():
    r = match("xab", "ab")
    frame = render_frame("xab", "ab", r.steps[-1]).splitlines()
    assert frame[3] == "compare       =  ="
