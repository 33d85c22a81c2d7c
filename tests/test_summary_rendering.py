from timed_quiz.core.markdown_renderer import MarkdownRenderer, escape_markdown
from timed_quiz.core.models import QuestionRecord
from timed_quiz.core.summary_formatter import format_summary_markdown


def test_summary_without_missed_questions():
    text = format_summary_markdown(10, [])
    assert "Quiz Over! Final Score: 10" in text
    assert "Missed Questions" not in text


def test_summary_lists_missed_questions_in_given_order():
    missed = [
        QuestionRecord(prompt="Second?", answer="2"),
        QuestionRecord(prompt="First?", answer="1"),
    ]
    text = format_summary_markdown(1, missed)

    assert "Missed Questions:" in text
    assert text.index("Second? (Answer: 2)") < text.index("First? (Answer: 1)")


def test_rendered_summary_keeps_markdown_characters_literal():
    missed = [QuestionRecord(prompt="What is 2*3*4?", answer="24")]
    html = MarkdownRenderer().render_fragment(format_summary_markdown(0, missed))

    assert "<strong>Quiz Over! Final Score: 0</strong>" in html
    assert "<li>What is 2*3*4? (Answer: 24)</li>" in html


def test_renderer_escapes_raw_html():
    html = MarkdownRenderer().render_inline("<b>bold</b> and *em*")
    assert "&lt;b&gt;" in html
    assert "<em>em</em>" in html


def test_renderer_returns_empty_string_for_blank_input():
    renderer = MarkdownRenderer()
    assert renderer.render_fragment("   ") == ""
    assert renderer.render_inline("") == ""


def test_escaped_prompt_renders_verbatim():
    renderer = MarkdownRenderer()
    assert renderer.render_inline(escape_markdown("2*3*4 = _x_ [ok]")) == "2*3*4 = _x_ [ok]"
    assert renderer.render_inline(escape_markdown("Tom & Jerry <3")) == "Tom &amp; Jerry &lt;3"


def test_leading_list_markers_stay_literal_in_summary():
    missed = [QuestionRecord(prompt="1. First step?", answer="- dash")]
    html = MarkdownRenderer().render_fragment(format_summary_markdown(0, missed))
    assert "<li>1. First step? (Answer: - dash)</li>" in html
