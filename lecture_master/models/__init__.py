"""
Data models for the quiz store.

This module contains core data models:
- Question: Immutable multiple-choice question record
- Attempt: Latest recorded outcome for a question
- AttemptHistory: Mapping from question id to Attempt
"""

from .question import (
    Attempt,
    AttemptHistory,
    Question,
    attempt_priority,
    history_from_dict,
    history_to_dict,
    questions_from_list,
    questions_to_list,
)

__all__ = [
    "Question",
    "Attempt",
    "AttemptHistory",
    "attempt_priority",
    "questions_to_list",
    "questions_from_list",
    "history_to_dict",
    "history_from_dict",
]
