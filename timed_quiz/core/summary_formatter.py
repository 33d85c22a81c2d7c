"""Builds the end-of-quiz summary text."""

from __future__ import annotations

from collections.abc import Sequence

from timed_quiz.core.markdown_renderer import escape_markdown
from timed_quiz.core.models import QuestionRecord


def format_summary_markdown(score: int, missed: Sequence[QuestionRecord]) -> str:
    """Return the summary as markdown, missed questions in the order they were missed."""
    lines = [f"**Quiz Over! Final Score: {score}**"]
    if missed:
        lines.append("")
        lines.append("Missed Questions:")
        lines.append("")
        for question in missed:
            lines.append(
                f"- {escape_markdown(question.prompt)} (Answer: {escape_markdown(question.answer)})"
            )
    return "\n".join(lines)
