"""Markdown rendering for question prompts and the end-of-quiz summary.

Qt labels understand a subset of HTML, so the summary is written as
markdown and converted once per display, then shown as rich text. Question
text from the source file is plain text; :func:`escape_markdown` keeps it
literal when it is embedded in markdown. Raw HTML is escaped rather than
passed through.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from markdown_it import MarkdownIt

_MARKDOWN_SPECIAL_CHARS = ("\\", "`", "*", "_", "[", "]", "<", ">", "&", "#", "~")
_ORDERED_LIST_MARKER = re.compile(r"^(\d+)([.)])")


def escape_markdown(text: str) -> str:
    """Backslash-escape ``text`` so markdown renders it verbatim."""
    for char in _MARKDOWN_SPECIAL_CHARS:
        text = text.replace(char, f"\\{char}")
    if text.startswith(("-", "+")):
        text = "\\" + text
    return _ORDERED_LIST_MARKER.sub(r"\1\\\2", text)


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments suitable for ``QLabel``."""

    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": False})
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line without the surrounding paragraph."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.renderInline(sanitized)


renderer = MarkdownRenderer()
# Shared instance; only used from the Qt thread.
