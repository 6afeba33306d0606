"""Pytest configuration to make the project root importable.

This ensures that ``import linebalance`` works when tests are run from the
repository root without installing the package.
"""

import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def textbook_tasks():
    """Acyclic ten-task line where every task fits within a 12s cycle."""
    return [
        {"id": "a", "time": 5, "preds": []},
        {"id": "b", "time": 3, "preds": ["a"]},
        {"id": "c", "time": 4, "preds": ["a"]},
        {"id": "d", "time": 3, "preds": ["a"]},
        {"id": "e", "time": 6, "preds": ["b", "c"]},
        {"id": "f", "time": 5, "preds": ["c", "d"]},
        {"id": "g", "time": 2, "preds": ["e"]},
        {"id": "h", "time": 4, "preds": ["e", "f"]},
        {"id": "i", "time": 7, "preds": ["g", "h"]},
        {"id": "j", "time": 1, "preds": ["i"]},
    ]
