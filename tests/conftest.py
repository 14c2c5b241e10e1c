"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers."""

    def _feed(*answers):
        replies = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(replies)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
