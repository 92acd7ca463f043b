"""Answer normalization and grading."""

from __future__ import annotations

import re

from sciquest.core.models import Question, QuestionKind

_NON_ALPHANUMERIC = re.compile(r"[^A-Z0-9]")


def normalize(text: str) -> str:
    """Trim, uppercase and drop every character outside ``A-Z0-9``."""
    return _NON_ALPHANUMERIC.sub("", text.strip().upper())


def grade(question: Question, submitted: str) -> bool:
    """Return whether ``submitted`` answers ``question`` correctly.

    Free-text answers are compared leniently after normalization. Choice
    answers must match the stored option text exactly.
    """
    if question.kind is QuestionKind.CHOICE:
        # NOTE: raw comparison differs from the free-text rule; kept until
        # authors confirm choice options should be normalized as well.
        return submitted == question.answer
    return normalize(submitted) == normalize(question.answer)
