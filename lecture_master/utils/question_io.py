"""
Question file import/export.

Question files are UTF-8 JSON holding either a list of question objects or
an object with a "questions" list, in the same camelCase form the store
persists.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from ..models.question import Question, questions_from_list, questions_to_list
from .validation import validate_question_bank

logger = logging.getLogger(__name__)


def load_questions_json(path: Path | str) -> List[Question]:
    """
    Load and validate questions from a JSON file.

    Args:
        path: File to read

    Returns:
        Parsed questions, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or fails validation
    """
    filepath = Path(path)
    with open(filepath, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{filepath} is not valid JSON: {e}") from e

    if isinstance(data, dict) and "questions" in data:
        data = data["questions"]

    result = validate_question_bank(data)
    if not result:
        raise ValueError(f"Invalid question file {filepath}:\n" + "\n".join(result.errors))

    questions = questions_from_list(data)
    logger.info("Loaded %d question(s) from %s", len(questions), filepath)
    return questions


def save_questions_json(questions: List[Question], path: Path | str) -> Path:
    """
    Write questions to a JSON file.

    Args:
        questions: Questions to write
        path: Destination file (parent directories are created)

    Returns:
        Path written
    """
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(questions_to_list(questions), f, indent=2, ensure_ascii=False)
    return filepath
