"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quizcli.questions import new_multiple_choice, new_short_answer, new_true_false  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (scripted menu sessions)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def console():
    """Console that records to memory instead of the terminal."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def output(console):
    """Callable returning everything printed to the test console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def scripted_input(monkeypatch):
    """
    Feed lines to input() in order.

    Once the script runs out, input() raises EOFError like a closed stdin.
    """
    def feed(*lines):
        remaining = iter(lines)

        def fake_input(*args, **kwargs):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return feed


@pytest.fixture
def capital_question():
    """Multiple choice question with 'a' correct, worth 10."""
    return new_multiple_choice(
        "What is the capital of France?",
        ["Paris", "Rome", "Berlin", "Madrid"],
        "a",
        10,
    )


@pytest.fixture
def sky_question():
    """True/false question that is true, worth 5."""
    return new_true_false("The sky is blue on a clear day.", True, 5)


@pytest.fixture
def cat_question():
    """Short answer question with alternates, worth 3."""
    return new_short_answer("Name a common house pet that purrs.", "Cat", 3, acceptable=["feline", "kitty"])
