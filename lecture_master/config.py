"""
Configuration management for Lecture Master.

This module centralizes all configuration settings:
- Storage keys and directories loaded from environment variables
- Sensible defaults for local use
- Single source of truth for schema locations
- Validation that reports problems instead of raising
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class StorageConfig:
    """Key names of the two persisted collections."""

    data_key: str = field(
        default_factory=lambda: os.getenv("LECTURE_MASTER_DATA_KEY", "lecture_master_data")
    )
    history_key: str = field(
        default_factory=lambda: os.getenv(
            "LECTURE_MASTER_HISTORY_KEY", "lecture_master_history"
        )
    )


@dataclass
class QuizConfig:
    """Study view configuration."""

    master_quiz_size: int = field(
        default_factory=lambda: int(os.getenv("MASTER_QUIZ_SIZE", "60"))
    )

    # Reproducibility
    random_seed: Optional[int] = field(
        default_factory=lambda: _optional_int("QUIZ_RANDOM_SEED")
    )


@dataclass
class PathConfig:
    """File system paths - single source of truth for all directories."""

    project_root: Path = field(default_factory=lambda: Path(__file__).parent.parent)
    data_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv(
                "LECTURE_MASTER_DATA_DIR",
                str(Path(__file__).parent.parent / "data"),
            )
        ).resolve()
    )

    # Computed from data_dir
    store_dir: Path = field(init=False)
    logs_dir: Path = field(init=False)

    # Schemas ship inside the package
    schemas_dir: Path = field(init=False)
    question_bank_schema: Path = field(init=False)
    attempt_history_schema: Path = field(init=False)

    def __post_init__(self):
        """Initialize computed paths."""
        self.store_dir = self.data_dir / "store"
        self.logs_dir = self.data_dir / "logs"
        self.schemas_dir = Path(__file__).parent / "schemas"
        self.question_bank_schema = self.schemas_dir / "question_bank.schema.json"
        self.attempt_history_schema = self.schemas_dir / "attempt_history.schema.json"

    def prepare_filesystem(self):
        """
        Create directories if they don't exist.

        Separated from __post_init__ to avoid side-effects on import.
        Call this explicitly from your app entrypoint.
        """
        for directory in [self.data_dir, self.store_dir, self.logs_dir]:
            directory.mkdir(parents=True, exist_ok=True)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from lecture_master.config import config

        # Access settings
        key = config.storage.data_key
        size = config.quiz.master_quiz_size

        # Prepare filesystem (call once at startup)
        config.prepare_fs()
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.storage = StorageConfig()
            cls._instance.quiz = QuizConfig()
            cls._instance.logging = LoggingConfig()

        return cls._instance

    def prepare_fs(self):
        """Prepare filesystem (create directories). Call once at startup."""
        self.paths.prepare_filesystem()

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        # Storage validation
        if not self.storage.data_key:
            errors.append("Storage data_key must not be empty")

        if not self.storage.history_key:
            errors.append("Storage history_key must not be empty")

        if self.storage.data_key == self.storage.history_key:
            errors.append(
                f"Storage data_key and history_key must differ, both are '{self.storage.data_key}'"
            )

        # Quiz validation
        if self.quiz.master_quiz_size < 1:
            errors.append(
                f"Quiz master_quiz_size must be >= 1, got {self.quiz.master_quiz_size}"
            )

        # Logging validation
        if not isinstance(logging.getLevelName(self.logging.log_level.upper()), int):
            errors.append(f"Unknown log_level '{self.logging.log_level}'")

        # Path validation
        for schema_path in [
            self.paths.question_bank_schema,
            self.paths.attempt_history_schema,
        ]:
            if not schema_path.exists():
                errors.append(f"Schema not found: {schema_path}")

        return errors


# Global config instance
config = Config()
