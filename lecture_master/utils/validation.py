"""
Schema validation utilities for Lecture Master.

Provides JSON Schema validation for the persisted question bank and attempt
history, with clear error messages and domain checks that JSON Schema cannot
express on its own:
- correctAnswerIndex must point into options
- Question ids must be unique within a bank
"""

import json
from collections import Counter
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator, ValidationError

from ..config import config


class ValidationResult:
    """
    Result of a validation attempt.

    Attributes:
        valid: Whether data passed validation
        errors: List of error messages
        data: The validated data
    """

    def __init__(self, valid: bool, errors: list[str], data: Any = None):
        self.valid = valid
        self.errors = errors
        self.data = data

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.valid

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.valid:
            return "✓ Validation passed"
        return f"✗ Validation failed with {len(self.errors)} error(s):\n" + "\n".join(
            f"  - {error}" for error in self.errors
        )


class SchemaValidator:
    """
    JSON Schema validator.

    Usage:
        validator = SchemaValidator("path/to/schema.json")
        result = validator.validate(data)
        if not result:
            print(result.errors)
    """

    def __init__(self, schema_path: Path | str):
        """
        Initialize validator with a schema file.

        Args:
            schema_path: Path to JSON Schema file
        """
        self.schema_path = Path(schema_path)
        with open(self.schema_path, "r", encoding="utf-8") as f:
            self.schema = json.load(f)
        self.validator = Draft7Validator(self.schema)

    def validate(self, data: Any) -> ValidationResult:
        """
        Validate data against schema.

        Args:
            data: Data to validate

        Returns:
            ValidationResult with validation status and any errors
        """
        errors = [self._format_error(error) for error in self.validator.iter_errors(data)]
        if errors:
            return ValidationResult(valid=False, errors=errors, data=data)
        return ValidationResult(valid=True, errors=[], data=data)

    def _format_error(self, error: ValidationError) -> str:
        """
        Convert ValidationError to human-readable message with details.

        Args:
            error: jsonschema ValidationError

        Returns:
            Formatted error message with validator and schema path
        """
        path = " -> ".join(str(p) for p in error.path) if error.path else "root"
        validator_name = getattr(error, "validator", "unknown")
        schema_path = "/".join(str(p) for p in error.schema_path)
        return (
            f"At '{path}': {error.message} "
            f"[validator={validator_name}, schema_path=/{schema_path}]"
        )


class QuestionBankValidator(SchemaValidator):
    """
    Validator for question bank documents.

    Adds domain-specific validation beyond JSON Schema:
    - Answer index bounds
    - Question id uniqueness
    """

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.question_bank_schema)

    def validate(self, data: Any, check_unique_ids: bool = True) -> ValidationResult:
        """
        Validate a question bank with domain-specific checks.

        Args:
            data: List of question dicts in persisted form
            check_unique_ids: Whether duplicate ids count as errors

        Returns:
            ValidationResult
        """
        result = super().validate(data)
        if not result.valid:
            return result

        errors = []

        for i, item in enumerate(data):
            index = item["correctAnswerIndex"]
            if index >= len(item["options"]):
                errors.append(
                    f"At '{i} -> correctAnswerIndex': {index} is out of range "
                    f"for {len(item['options'])} option(s)"
                )

        duplicate_ids = self._find_duplicate_ids(data) if check_unique_ids else set()
        if duplicate_ids:
            dups_str = ", ".join(sorted(duplicate_ids))
            errors.append(f"Duplicate question IDs found: {dups_str} (IDs must be unique)")

        if errors:
            return ValidationResult(valid=False, errors=errors, data=data)
        return result

    def _find_duplicate_ids(self, questions: list[dict]) -> set[str]:
        counts = Counter(q["id"] for q in questions)
        return {question_id for question_id, n in counts.items() if n > 1}


class AttemptHistoryValidator(SchemaValidator):
    """Validator for attempt history documents (schema checks only)."""

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.attempt_history_schema)


_question_bank_validator: Optional[QuestionBankValidator] = None
_attempt_history_validator: Optional[AttemptHistoryValidator] = None


def validate_question_bank(data: Any, check_unique_ids: bool = True) -> ValidationResult:
    """
    Convenience function to validate a question bank.

    Args:
        data: List of question dicts in persisted form
        check_unique_ids: Whether duplicate ids count as errors

    Example:
        >>> result = validate_question_bank([{"id": "q1", ...}])
        >>> if not result:
        ...     print(result)
    """
    global _question_bank_validator
    if _question_bank_validator is None:
        _question_bank_validator = QuestionBankValidator()
    return _question_bank_validator.validate(data, check_unique_ids=check_unique_ids)


def validate_attempt_history(data: Any) -> ValidationResult:
    """Convenience function to validate attempt history."""
    global _attempt_history_validator
    if _attempt_history_validator is None:
        _attempt_history_validator = AttemptHistoryValidator()
    return _attempt_history_validator.validate(data)
