"""Shared pytest fixtures for the calculator tests."""

import sys
from pathlib import Path

import pytest

# Flat layout: make the project modules importable without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from calculator_engine import CalculatorEngine  # noqa: E402
from calculator_session import CalculatorSession  # noqa: E402
from calculator_state import initial_state  # noqa: E402
from input_reducer import reduce  # noqa: E402


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture
def session():
    return CalculatorSession()


@pytest.fixture
def run_tokens():
    """Apply a token sequence to a fresh state and return the final state."""

    def _run(tokens, state=None):
        state = state if state is not None else initial_state()
        for token in tokens:
            state = reduce(state, token)
        return state

    return _run
