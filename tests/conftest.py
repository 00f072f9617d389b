"""
Shared pytest fixtures and configuration for Lecture Master tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Make the package importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from lecture_master.models.question import Question
from lecture_master.store import QuizStore
from lecture_master.utils.storage import InMemoryStore


def make_question(question_id: str, lesson: str = "Lesson A", answer: int = 0) -> Question:
    """Build a small valid question for tests."""
    return Question(
        id=question_id,
        lesson=lesson,
        question=f"Question {question_id}?",
        options=("first", "second", "third"),
        correct_answer_index=answer,
        explanation=f"Explanation for {question_id}",
    )


class FakeClock:
    """Deterministic millisecond clock that advances on every call."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def question_factory():
    """Fixture exposing make_question to test modules."""
    return make_question


@pytest.fixture
def memory_storage():
    """
    Fixture providing an empty in-memory key-value store.

    Returns:
        InMemoryStore: Store with no keys
    """
    return InMemoryStore()


@pytest.fixture
def clock():
    """Fixture providing a deterministic clock."""
    return FakeClock()


@pytest.fixture
def store(memory_storage, clock):
    """
    Fixture providing a QuizStore over an empty in-memory store.

    Returns:
        QuizStore: Store with a seeded RNG and a fake clock
    """
    return QuizStore(memory_storage, rng=random.Random(1234), clock=clock)


@pytest.fixture
def sample_questions():
    """
    Fixture providing questions across three lessons.

    Returns:
        list[Question]: Six questions (three in Lesson A, two in Lesson B,
        one in Lesson C)
    """
    return [
        make_question("a1", "Lesson A"),
        make_question("a2", "Lesson A", answer=1),
        make_question("a3", "Lesson A", answer=2),
        make_question("b1", "Lesson B"),
        make_question("b2", "Lesson B", answer=1),
        make_question("c1", "Lesson C"),
    ]


@pytest.fixture
def populated_store(store, sample_questions):
    """Fixture providing a QuizStore whose bank holds sample_questions."""
    store.save_questions(sample_questions)
    return store


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
