"""Status and end-of-quiz panels."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from sciquest.constants.ui_constants import (
    DONE_BUTTON,
    EMPTY_QUIZ_MESSAGE,
    QUIZ_COMPLETE_TITLE,
    QUIZ_SCORE_TEMPLATE,
)
from sciquest.core.models import QuestionResult
from sciquest.styling.styles import Styles


class StatusPanel(QWidget):
    """Single centered message, used while loading and on load failure."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        self.setLayout(layout)
        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.message_label)

    def set_message(self, message: str) -> None:
        self.message_label.setText(message)


class SummaryPanel(QWidget):
    """Final score and per-question outcome list."""

    def __init__(self, on_done: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_done = on_done

        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(QUIZ_COMPLETE_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_feedback_title_style(True))
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.details_label = QLabel("", self)
        self.details_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.details_label, stretch=1)

        self.done_button = QPushButton(DONE_BUTTON, self)
        self.done_button.clicked.connect(self.on_done)
        layout.addWidget(self.done_button)

    def show_results(self, results: list[QuestionResult]) -> None:
        if not results:
            self.score_label.setText(EMPTY_QUIZ_MESSAGE)
            self.details_label.setText("")
            return
        correct = sum(1 for result in results if result.was_correct)
        self.score_label.setText(QUIZ_SCORE_TEMPLATE.format(correct=correct, count=len(results)))
        lines = [
            f"{number}. {'✓' if result.was_correct else '✗'}"
            for number, result in enumerate(results, start=1)
        ]
        self.details_label.setText("\n".join(lines))
