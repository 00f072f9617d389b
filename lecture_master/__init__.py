"""
Lecture Master - quiz bank and attempt history manager.

Stores multiple-choice questions grouped by lesson, tracks the latest
attempt per question, and derives practice, master quiz and review views.
"""

from .models import Attempt, AttemptHistory, Question
from .store import LessonStats, QuizStore
from .utils.storage import InMemoryStore, JsonFileStore, KeyValueStore

__version__ = "0.1.0"

__all__ = [
    "Question",
    "Attempt",
    "AttemptHistory",
    "QuizStore",
    "LessonStats",
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
]
