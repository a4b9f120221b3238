"""Shared test fixtures and configuration for lexbench tests."""

import pytest
from rich.console import Console

from lexbench.analyzers import TimingAnalyzer
from lexbench.config import AnalyzerConfig
from lexbench.core.lexemes import LexemeCategory


class FakeRandom:
    """Deterministic stand-in for random.Random.

    ``shuffle`` leaves the order alone and ``randint`` returns ``count``
    clamped to the requested range.
    """

    def __init__(self, count: int = 1):
        self.count = count
        self.randint_calls = []

    def shuffle(self, items):
        pass

    def randint(self, a, b):
        self.randint_calls.append((a, b))
        return max(a, min(self.count, b))


class StubLexemeSource:
    """Lexeme source returning a fixed mapping."""

    def __init__(self, lexemes_by_category):
        self.lexemes_by_category = lexemes_by_category
        self.calls = []

    def analyze(self, code, category=None):
        self.calls.append((code, category))
        return {k: set(v) for k, v in self.lexemes_by_category.items()}


@pytest.fixture
def code_sample():
    """Sample Python code."""
    return '''
def fibonacci(n):
    """Calculate fibonacci number."""
    if n <= 1:
        return n
    return fibonacci(n-1) + fibonacci(n-2)

result = fibonacci(10)
print(f"Result: {result}")
'''


@pytest.fixture
def console():
    """Console that records output for export_text()."""
    return Console(record=True, width=120)


@pytest.fixture
def quiet_config():
    return AnalyzerConfig(show_chart=False)


@pytest.fixture
def make_analyzer(console, quiet_config):
    """Factory for analyzers with a recording console and no chart."""

    def _make(**kwargs):
        kwargs.setdefault("console", console)
        config = kwargs.pop("config", quiet_config)
        return TimingAnalyzer(config, **kwargs)

    return _make


@pytest.fixture
def foo_bar_baz():
    return StubLexemeSource({LexemeCategory.IDENTIFIER: {"foo", "bar", "baz"}})


# Test configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
