"""Utilities for loading quiz questions from a plain text file.

File format (one question per line):

    What is the capital of France?|Paris
    How many legs does a spider have?|8

The text before the first ``|`` is the prompt and the text after it is the
answer. Anything after a second ``|`` is ignored. Blank lines and lines
without a delimiter are skipped rather than rejected, so a file can carry
headings or notes between questions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from timed_quiz.constants.quiz_constants import (
    DEFAULT_QUESTION_FILE_NAME,
    QUESTION_DELIMITER,
)
from timed_quiz.core.models import QuestionRecord
from timed_quiz.core.services.question_bank import QuestionBank

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class QuestionSourceUnavailable(Exception):
    """Raised when the question source cannot be read or holds no questions."""


def default_question_source() -> Path:
    """Return the path of the question file bundled with the application."""
    return _DATA_DIR / DEFAULT_QUESTION_FILE_NAME


def load_question_bank(file_path: Path) -> QuestionBank:
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise QuestionSourceUnavailable(
            f"Could not read question file '{file_path}': {exc}"
        ) from exc

    bank = QuestionBank(parse_question_text(text))
    if bank.is_empty():
        raise QuestionSourceUnavailable(
            f"Question file '{file_path}' did not contain any questions."
        )
    logger.info("Loaded %d questions from %s", len(bank), file_path)
    return bank


def parse_question_text(text: str) -> list[QuestionRecord]:
    records: list[QuestionRecord] = []
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        record = _parse_line(raw_line)
        if record is None:
            if raw_line.strip():
                logger.debug("Skipping malformed question line %d: %r", line_number, raw_line)
            continue
        records.append(record)
    return records


def _parse_line(raw_line: str) -> QuestionRecord | None:
    if not raw_line.strip():
        return None
    parts = raw_line.split(QUESTION_DELIMITER)
    if len(parts) < 2:
        return None
    prompt = parts[0].strip()
    answer = parts[1].strip()
    if not answer:
        return None
    return QuestionRecord(prompt=prompt, answer=answer)
