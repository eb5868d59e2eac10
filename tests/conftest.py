import pytest

from theta.interpreter import Interpreter

# Every test runs against a clean configuration: THETA_* variables set in the
# developer's shell must not change recursion limits or logging under test.


@pytest.fixture(autouse=True)
def _clean_theta_env(monkeypatch):
    monkeypatch.delenv("THETA_RECURSION_LIMIT", raising=False)
    monkeypatch.delenv("THETA_LOG_LEVEL", raising=False)


@pytest.fixture
def interp():
    """Fresh interpreter with the default checker and evaluator."""
    return Interpreter()
