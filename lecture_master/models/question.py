"""
Question bank records and attempt history.

Questions are immutable content records. Attempts keep only the most recent
outcome per question; a new attempt overwrites the previous one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Question:
    """
    Multiple-choice question.

    Attributes:
        id: Unique identifier across the bank
        lesson: Lesson label used for grouping
        question: Prompt text
        options: Answer choices, in display order
        correct_answer_index: Index of the correct choice in options
        explanation: Text shown after answering

    Raises:
        ValueError: If the id is empty, options is empty, or
            correct_answer_index is not a valid index into options
    """
    id: str
    lesson: str
    question: str
    options: Tuple[str, ...]
    correct_answer_index: int
    explanation: str = ""

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Question id must be a non-empty string, got {self.id!r}")

        for name in ("lesson", "question", "explanation"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"Question {self.id}: {name} must be a string, got {value!r}")

        # A bare string would otherwise be split into one option per character
        if isinstance(self.options, (str, bytes)) or not hasattr(self.options, "__iter__"):
            raise ValueError(
                f"Question {self.id}: options must be a sequence of strings, got {self.options!r}"
            )

        # Freeze options so the record cannot be mutated through a shared list
        object.__setattr__(self, "options", tuple(self.options))

        if not self.options:
            raise ValueError(f"Question {self.id} must have at least one option")

        for i, option in enumerate(self.options):
            if not isinstance(option, str):
                raise ValueError(f"Question {self.id}: option {i} must be a string, got {option!r}")

        index = self.correct_answer_index
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(
                f"Question {self.id}: correct_answer_index must be an int, got {index!r}"
            )
        if not 0 <= index < len(self.options):
            raise ValueError(
                f"Question {self.id}: correct_answer_index {index} out of range "
                f"for {len(self.options)} option(s)"
            )

    @property
    def correct_option(self) -> str:
        """Text of the correct answer."""
        return self.options[self.correct_answer_index]

    def is_correct(self, selected_index: int) -> bool:
        """Check a selected option index against the answer key."""
        return selected_index == self.correct_answer_index

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted (camelCase) representation."""
        return {
            "id": self.id,
            "lesson": self.lesson,
            "question": self.question,
            "options": list(self.options),
            "correctAnswerIndex": self.correct_answer_index,
            "explanation": self.explanation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        """
        Build a Question from its persisted representation.

        Raises:
            ValueError: If a required field is missing or invalid
        """
        try:
            return cls(
                id=data["id"],
                lesson=data["lesson"],
                question=data["question"],
                options=data["options"],
                correct_answer_index=data["correctAnswerIndex"],
                explanation=data.get("explanation", ""),
            )
        except KeyError as e:
            raise ValueError(f"Question record missing field {e}") from e


@dataclass(frozen=True)
class Attempt:
    """
    Most recent attempt at a question.

    Attributes:
        correct: Result of the latest attempt
        timestamp: Time of the latest attempt, milliseconds since epoch
    """
    correct: bool
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"correct": self.correct, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Attempt:
        """
        Build an Attempt from its persisted representation.

        Raises:
            ValueError: If a required field is missing
        """
        try:
            return cls(correct=bool(data["correct"]), timestamp=int(data["timestamp"]))
        except KeyError as e:
            raise ValueError(f"Attempt record missing field {e}") from e


# Question id -> latest attempt. Ids of deleted questions may linger.
AttemptHistory = Dict[str, Attempt]


def questions_to_list(questions: List[Question]) -> List[Dict[str, Any]]:
    """Serialize a question bank to plain dicts."""
    return [q.to_dict() for q in questions]


def questions_from_list(data: List[Dict[str, Any]]) -> List[Question]:
    """Parse a question bank from plain dicts."""
    return [Question.from_dict(item) for item in data]


def history_to_dict(history: AttemptHistory) -> Dict[str, Dict[str, Any]]:
    """Serialize attempt history to plain dicts."""
    return {question_id: attempt.to_dict() for question_id, attempt in history.items()}


def history_from_dict(data: Dict[str, Dict[str, Any]]) -> AttemptHistory:
    """Parse attempt history from plain dicts."""
    return {question_id: Attempt.from_dict(item) for question_id, item in data.items()}


def attempt_priority(attempt: Optional[Attempt]) -> int:
    """
    Practice priority of a question given its latest attempt.

    Wrong answers come first (0), then unattempted questions (1),
    then correct answers (2).
    """
    if attempt is None:
        return 1
    return 2 if attempt.correct else 0
