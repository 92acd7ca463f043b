"""Question rendering utilities for displaying quiz prompts."""

from __future__ import annotations

from sciquest.core.markdown_math_renderer import renderer
from sciquest.core.models import Question


def render_question(question: Question, font_size: int = 14) -> str:
    """Render a question prompt (and its image, if any) as HTML.

    Options are not part of the document; the question panel shows them as
    buttons so they can be selected.

    Args:
        question: The question to render (prompt supports Markdown and LaTeX)
        font_size: Font size in points for the prompt text (default 14)

    Returns:
        HTML string ready for display in QWebEngineView
    """
    return renderer.render_full_document(
        question.prompt,
        title=f"Question {question.id}",
        font_size=font_size,
        image_ref=question.image_ref,
    )
