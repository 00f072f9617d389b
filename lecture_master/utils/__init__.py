"""
Utility modules for Lecture Master.

This module contains utility functions:
- storage: Key-value persistence backends
- validation: JSON Schema validation for bank and history
- question_io: Load and save question files
- logging_setup: Package logger configuration
"""

from .storage import (
    KeyValueStore,
    InMemoryStore,
    JsonFileStore,
)
from .validation import (
    ValidationResult,
    SchemaValidator,
    QuestionBankValidator,
    AttemptHistoryValidator,
    validate_question_bank,
    validate_attempt_history,
)
from .question_io import (
    load_questions_json,
    save_questions_json,
)
from .logging_setup import configure_logging

__all__ = [
    # Storage
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
    # Validation
    "ValidationResult",
    "SchemaValidator",
    "QuestionBankValidator",
    "AttemptHistoryValidator",
    "validate_question_bank",
    "validate_attempt_history",
    # Question files
    "load_questions_json",
    "save_questions_json",
    # Logging
    "configure_logging",
]
