"""Modal feedback shown after a question is graded."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QLabel, QPushButton, QVBoxLayout, QWidget

from sciquest.constants.ui_constants import (
    FEEDBACK_ANSWER_CAPTION,
    FEEDBACK_CORRECT_TITLE,
    FEEDBACK_INCORRECT_TITLE,
    NEXT_BUTTON,
)
from sciquest.core.models import Feedback
from sciquest.styling.styles import Styles


class FeedbackDialog(QDialog):
    """Stateless presenter: renders one ``Feedback`` and offers a single Next action."""

    def __init__(self, feedback: Feedback, on_next: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_next = on_next
        self.setModal(True)
        self.setWindowTitle(FEEDBACK_CORRECT_TITLE if feedback.is_correct else FEEDBACK_INCORRECT_TITLE)
        # Closing without Next would strand the session in feedback.
        self.setWindowFlag(Qt.WindowCloseButtonHint, False)
        self._build_ui(feedback)

    def _build_ui(self, feedback: Feedback) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(FEEDBACK_CORRECT_TITLE if feedback.is_correct else FEEDBACK_INCORRECT_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_feedback_title_style(feedback.is_correct))
        layout.addWidget(title)

        prompt = QLabel(feedback.prompt_text, self)
        prompt.setWordWrap(True)
        prompt.setAlignment(Qt.AlignCenter)
        layout.addWidget(prompt)

        caption = QLabel(FEEDBACK_ANSWER_CAPTION, self)
        caption.setAlignment(Qt.AlignCenter)
        layout.addWidget(caption)

        answer = QLabel(feedback.correct_answer_text, self)
        answer.setWordWrap(True)
        answer.setAlignment(Qt.AlignCenter)
        answer.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(answer)

        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.setDefault(True)
        self.next_button.clicked.connect(self._handle_next)
        layout.addWidget(self.next_button)

    def _handle_next(self) -> None:
        self.accept()
        self._on_next()

    def reject(self) -> None:
        # Escape maps to Next so the session always moves on.
        self._handle_next()
