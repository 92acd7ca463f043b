"""Qt UI components for the quiz player."""

from .dialog_helpers import show_error
from .qt_ticker import QtTickScheduler
from .question_renderer import render_question
from .quiz_window import QuizPlayerWindow

__all__ = [
    "QtTickScheduler",
    "QuizPlayerWindow",
    "render_question",
    "show_error",
]
