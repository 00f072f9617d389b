"""
Quiz Store - Question bank and attempt history persistence.

Owns the two persisted collections and derives every study view from them
on demand:
- Lesson listing and per-lesson statistics
- Practice ordering (wrong first, then unattempted, then correct)
- Master quiz (random capped subset of not-yet-correct questions)
- Review set (questions whose latest attempt was wrong)
- Lesson-scoped and id-based imports

Every operation is a synchronous read, an in-memory transform and, for
mutations, a write-back of the whole collection. Concurrent writers to the
same store can lose updates.
"""

from __future__ import annotations

import json
import logging
import random
import time
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from .config import config
from .demo import DEMO_QUESTIONS
from .models.question import (
    Attempt,
    AttemptHistory,
    Question,
    attempt_priority,
    history_from_dict,
    history_to_dict,
    questions_from_list,
    questions_to_list,
)
from .utils.storage import JsonFileStore, KeyValueStore
from .utils.validation import validate_attempt_history, validate_question_bank

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    """Current wall-clock time in milliseconds since epoch."""
    return int(time.time() * 1000)


@dataclass
class LessonStats:
    """
    Attempt counts for a group of questions.

    Attributes:
        total: Number of questions
        completed: Questions with any recorded attempt
        correct: Completed questions whose latest attempt was correct
        wrong: Completed questions whose latest attempt was wrong
    """
    total: int = 0
    completed: int = 0
    correct: int = 0
    wrong: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "completed": self.completed,
            "correct": self.correct,
            "wrong": self.wrong,
        }


class QuizStore:
    """
    Sole owner of the persisted question bank and attempt history.

    Usage:
        store = QuizStore(InMemoryStore())
        store.record_attempt("demo-1", True)
        stats = store.get_lesson_stats("Lecture 1: Introduction")
    """

    def __init__(
        self,
        storage: Optional[KeyValueStore] = None,
        *,
        data_key: Optional[str] = None,
        history_key: Optional[str] = None,
        master_quiz_size: Optional[int] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize the store.

        Args:
            storage: Key-value backend (defaults to a JsonFileStore in config.paths.store_dir)
            data_key: Key of the question bank (defaults to config.storage.data_key)
            history_key: Key of the attempt history (defaults to config.storage.history_key)
            master_quiz_size: Master quiz cap (defaults to config.quiz.master_quiz_size)
            rng: Random source for the master quiz (seeded from config.quiz.random_seed if None)
            clock: Returns the current time in ms since epoch
        """
        self.storage = storage if storage is not None else JsonFileStore(config.paths.store_dir)
        self.data_key = data_key or config.storage.data_key
        self.history_key = history_key or config.storage.history_key
        self.master_quiz_size = (
            master_quiz_size if master_quiz_size is not None else config.quiz.master_quiz_size
        )
        if self.master_quiz_size < 1:
            raise ValueError(f"master_quiz_size must be >= 1, got {self.master_quiz_size}")
        self.rng = rng or random.Random(config.quiz.random_seed)
        self.clock = clock or _now_ms

    # ==================== Persisted collections ====================

    def get_questions(self) -> List[Question]:
        """
        Load the question bank, seeding the demo bank on first access.

        A stored bank that cannot be decoded or parsed is logged and read as
        empty. One invalid record makes the whole bank read as empty.

        Returns:
            Questions in bank order
        """
        try:
            stored = self.storage.get(self.data_key)
        except UnicodeDecodeError as e:
            logger.error("Failed to decode questions under '%s': %s", self.data_key, e)
            return []

        if not stored:
            logger.info("No question bank under '%s', seeding demo data", self.data_key)
            self.save_questions(DEMO_QUESTIONS)
            return list(DEMO_QUESTIONS)

        try:
            data = json.loads(stored)
            result = validate_question_bank(data, check_unique_ids=False)
            if not result:
                raise ValueError("; ".join(result.errors))
            return questions_from_list(data)
        except (ValueError, RecursionError) as e:
            logger.error("Failed to parse questions under '%s': %s", self.data_key, e)
            return []

    def save_questions(self, questions: Iterable[Question]) -> None:
        """Overwrite the persisted question bank."""
        self.storage.set(self.data_key, json.dumps(questions_to_list(list(questions))))

    def get_history(self) -> AttemptHistory:
        """
        Load the attempt history.

        A missing key reads as an empty history. So does a stored history
        that cannot be decoded or parsed, which is also logged.
        """
        try:
            stored = self.storage.get(self.history_key)
        except UnicodeDecodeError as e:
            logger.error("Failed to decode history under '%s': %s", self.history_key, e)
            return {}

        if not stored:
            return {}

        try:
            data = json.loads(stored)
            result = validate_attempt_history(data)
            if not result:
                raise ValueError("; ".join(result.errors))
            return history_from_dict(data)
        except (ValueError, RecursionError) as e:
            logger.error("Failed to parse history under '%s': %s", self.history_key, e)
            return {}

    def save_history(self, history: AttemptHistory) -> None:
        """Overwrite the persisted attempt history."""
        self.storage.set(self.history_key, json.dumps(history_to_dict(history)))

    def record_attempt(self, question_id: str, is_correct: bool) -> Attempt:
        """
        Record the latest outcome for a question.

        Any previous attempt for the same question is overwritten, so a
        wrong answer puts an already-correct question back into review.

        Returns:
            The stored attempt
        """
        history = self.get_history()
        attempt = Attempt(correct=bool(is_correct), timestamp=self.clock())
        history[question_id] = attempt
        self.save_history(history)
        logger.debug("Recorded attempt for %s: correct=%s", question_id, attempt.correct)
        return attempt

    # ==================== Derived views ====================

    def get_question(self, question_id: str) -> Optional[Question]:
        """Find a question by id."""
        return next((q for q in self.get_questions() if q.id == question_id), None)

    def get_lessons(self) -> List[str]:
        """Distinct lesson labels, sorted."""
        return sorted({q.lesson for q in self.get_questions()})

    def get_lesson_stats(self, lesson: str) -> LessonStats:
        """Attempt counts for one lesson (all zeros for an unknown lesson)."""
        questions = [q for q in self.get_questions() if q.lesson == lesson]
        return self._compute_stats(questions, self.get_history())

    def get_overall_stats(self) -> LessonStats:
        """Attempt counts across the whole bank."""
        return self._compute_stats(self.get_questions(), self.get_history())

    def get_all_lesson_stats(self) -> Dict[str, LessonStats]:
        """Attempt counts per lesson, in get_lessons() order."""
        questions = self.get_questions()
        history = self.get_history()
        return {
            lesson: self._compute_stats([q for q in questions if q.lesson == lesson], history)
            for lesson in sorted({q.lesson for q in questions})
        }

    def get_questions_for_practice(self, lesson: str) -> List[Question]:
        """
        Questions of a lesson ordered for practice.

        Wrong answers first, then unattempted questions, then correct ones.
        The sort is stable, so ties keep bank order.
        """
        questions = [q for q in self.get_questions() if q.lesson == lesson]
        history = self.get_history()
        return sorted(questions, key=lambda q: attempt_priority(history.get(q.id)))

    def get_questions_for_master_quiz(self) -> List[Question]:
        """
        Random subset of questions not currently answered correctly.

        Returns:
            Up to master_quiz_size distinct questions in random order
        """
        history = self.get_history()
        pool = [
            q for q in self.get_questions()
            if q.id not in history or not history[q.id].correct
        ]
        return self.rng.sample(pool, min(len(pool), self.master_quiz_size))

    def get_questions_for_review(self, lesson: Optional[str] = None) -> List[Question]:
        """
        Questions whose latest attempt was wrong, in bank order.

        Args:
            lesson: Optional lesson to restrict to (empty string means all)
        """
        history = self.get_history()
        return [
            q for q in self.get_questions()
            if (not lesson or q.lesson == lesson)
            and q.id in history
            and not history[q.id].correct
        ]

    # ==================== Bulk mutations ====================

    def import_questions(
        self,
        new_questions: Iterable[Question],
        replace_lesson: Optional[str] = None,
    ) -> List[Question]:
        """
        Merge new questions into the bank.

        With replace_lesson, every existing question of that lesson is
        removed before the new batch is appended. Otherwise existing
        questions sharing an id with the batch are removed first. Attempt
        history is left untouched in both modes.

        Args:
            new_questions: Questions to add
            replace_lesson: Lesson to replace wholesale

        Returns:
            The merged bank as persisted

        Raises:
            ValueError: If the batch contains duplicate ids
        """
        new_questions = list(new_questions)
        duplicates = sorted(
            question_id
            for question_id, n in Counter(q.id for q in new_questions).items()
            if n > 1
        )
        if duplicates:
            raise ValueError(f"Duplicate question IDs in import: {', '.join(duplicates)}")

        current = self.get_questions()
        if replace_lesson:
            kept = [q for q in current if q.lesson != replace_lesson]
        else:
            new_ids = {q.id for q in new_questions}
            kept = [q for q in current if q.id not in new_ids]

        merged = kept + new_questions
        self.save_questions(merged)
        logger.info(
            "Imported %d question(s) (%s), removed %d, bank now has %d",
            len(new_questions),
            f"replacing lesson '{replace_lesson}'" if replace_lesson else "upsert by id",
            len(current) - len(kept),
            len(merged),
        )
        return merged

    def reset_data(self) -> None:
        """Delete the question bank and the attempt history."""
        self.storage.delete(self.data_key)
        self.storage.delete(self.history_key)
        logger.info("Reset question bank and attempt history")

    # ==================== Helpers ====================

    @staticmethod
    def _compute_stats(questions: List[Question], history: AttemptHistory) -> LessonStats:
        stats = LessonStats(total=len(questions))
        for q in questions:
            attempt = history.get(q.id)
            if attempt is None:
                continue
            stats.completed += 1
            if attempt.correct:
                stats.correct += 1
            else:
                stats.wrong += 1
        return stats
