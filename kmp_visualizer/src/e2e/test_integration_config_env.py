import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1]

@pytest.mark.e2e
def test_core_imports_and_runs_with_malformed_port_env():
    env = dict(os.environ, KMP_TRACE_PORT="http", PYTHONPATH=str(SRC))
    proc = subprocess.run(
        [sys.executable, "-c", "from kmptrace import match; print(match('aab', 'ab').positions)"],
        env=env, capture_output=True, text=True, timeout=60,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "(1,)"

@pytest.mark.e2e
def test_web_port_falls_back_to_default_on_bad_env(monkeypatch):
    import kmpweb.web as webmod
    monkeypatch.setenv("KMP_TRACE_PORT", "http")
    assert webmod._env_port() == webmod.DEFAULT_PORT
    monkeypatch.setenv("KMP_TRACE_PORT", "9090")
    assert webmod._env_port() == 9090
    monkeypatch.delenv("KMP_TRACE_PORT")
    assert webmod._env_port() == webmod.DEFAULT_PORT

@pytest.mark.e2e
def test_web_host_from_env(monkeypatch):
    import kmpweb.web as webmod
    monkeypatch.setenv("KMP_TRACE_HOST", "0.0.0.0")
    assert webmod._env_host() == "0.0.0.0"
    monkeypatch.delenv("KMP_TRACE_HOST")
    assert webmod._env_host() == webmod.DEFAULT_HOST
