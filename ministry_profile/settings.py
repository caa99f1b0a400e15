"""Engine settings loaded from the environment.

Reads an optional ``.env`` file first, then the MINISTRY_PROFILE_* variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)

DEFAULT_QUESTION_BANK_PATH = Path(__file__).parent / "data" / "questions.json"
DEFAULT_TIE_THRESHOLD = 0.10
DEFAULT_COMPLEMENTARY_THRESHOLD = 0.4


class EngineSettings(BaseModel):
    """Tunable engine settings."""

    model_config = ConfigDict(frozen=True)

    question_bank_path: Path = DEFAULT_QUESTION_BANK_PATH
    tie_threshold: float = Field(default=DEFAULT_TIE_THRESHOLD, ge=0.0, le=1.0)
    complementary_threshold: float = Field(default=DEFAULT_COMPLEMENTARY_THRESHOLD, ge=0.0, le=1.0)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_settings(dotenv_path: str | None = None) -> EngineSettings:
    """Build settings from ``.env`` and the process environment.

    Raises:
        ValueError: If a variable is set to an unusable value.
    """
    load_dotenv(dotenv_path)

    bank_path = os.getenv("MINISTRY_PROFILE_QUESTION_BANK", "")
    tie = _float_env("MINISTRY_PROFILE_TIE_THRESHOLD", DEFAULT_TIE_THRESHOLD)
    complementary = _float_env("MINISTRY_PROFILE_COMPLEMENTARY_THRESHOLD", DEFAULT_COMPLEMENTARY_THRESHOLD)

    try:
        settings = EngineSettings(
            question_bank_path=Path(bank_path) if bank_path else DEFAULT_QUESTION_BANK_PATH,
            tie_threshold=tie,
            complementary_threshold=complementary,
        )
    except ValueError as e:
        raise ValueError(f"Invalid engine settings: {e}") from e

    logger.info(
        "Engine settings: question_bank=%s tie_threshold=%.2f complementary_threshold=%.2f",
        settings.question_bank_path,
        settings.tie_threshold,
        settings.complementary_threshold,
    )
    return settings
