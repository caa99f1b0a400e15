"""Read-only loader for the question bank (JSON file)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import threading

from ministry_profile.question_models import QuestionBank
from ministry_profile.settings import DEFAULT_QUESTION_BANK_PATH, load_settings


logger = logging.getLogger(__name__)


class QuestionBankRepository:
    """Thread-safe, load-once access to a question bank file."""

    def __init__(self, bank_path: str | Path = DEFAULT_QUESTION_BANK_PATH) -> None:
        self._path = Path(bank_path)
        self._lock = threading.Lock()
        self._bank: QuestionBank | None = None

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load(self) -> QuestionBank:
        """Return the bank, reading and validating the file on first use."""
        with self._lock:
            if self._bank is None:
                self._bank = self._read()
            return self._bank

    def reload(self) -> QuestionBank:
        """Discard the cached bank and read the file again."""
        with self._lock:
            self._bank = self._read()
            return self._bank

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read(self) -> QuestionBank:
        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
            bank = QuestionBank(**data)
        except Exception as exc:
            raise ValueError(f"Failed to load question bank: {exc}") from exc
        logger.info("Loaded question bank %s (version %s, %d questions)", self._path, bank.version, len(bank))
        return bank


def load_default_bank() -> QuestionBank:
    """Load the configured question bank.

    Uses ``MINISTRY_PROFILE_QUESTION_BANK`` when set, otherwise the bank
    shipped with the package.
    """
    return QuestionBankRepository(load_settings().question_bank_path).load()
