"""
Pytest Configuration and Fixtures.

Shared catalog/progress fixtures for the analyzer tests and a fixed seed for
the question engine tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: HTTP adapter tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "api" in str(item.fspath):
            item.add_marker(pytest.mark.api)


@pytest.fixture
def catalog():
    """Grade 1 catalog across three categories, ordered by order_index."""
    return [
        {"id": 1, "grade": 1, "category": "Number Sense", "learning_outcome": "Count numbers up to 100",
         "order_index": 1, "topic_code": "G1-NS-01", "topic_title": "Counting to 100"},
        {"id": 2, "grade": 1, "category": "Number Sense", "learning_outcome": "Identify ordinal numbers up to 10th",
         "order_index": 2, "topic_code": "G1-NS-02", "topic_title": "Ordinal Numbers"},
        {"id": 3, "grade": 1, "category": "Operations", "learning_outcome": "Add numbers with sums up to 100",
         "order_index": 3, "topic_code": "G1-OP-01", "topic_title": "Addition to 100"},
        {"id": 4, "grade": 1, "category": "Operations", "learning_outcome": "Subtract numbers up to 100",
         "order_index": 4, "topic_code": "G1-OP-02", "topic_title": "Subtraction to 100"},
        {"id": 5, "grade": 1, "category": "Geometry", "learning_outcome": "Identify 2-dimensional shapes",
         "order_index": 5, "topic_code": "G1-GE-01", "topic_title": "Shapes"},
    ]


@pytest.fixture
def mixed_progress():
    return [
        {"topic_id": 1, "progress_percentage": 100, "completed": True, "best_score": 95, "attempts": 2,
         "topic_title": "Counting to 100"},
        {"topic_id": 2, "progress_percentage": 100, "completed": True, "best_score": 80, "attempts": 1,
         "topic_title": "Ordinal Numbers"},
        {"topic_id": 3, "progress_percentage": 40, "completed": False, "best_score": 45, "attempts": 3,
         "topic_title": "Addition to 100"},
    ]


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
