"""Component for answering normal and card-game questions."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from sciquest.constants.quiz_constants import TIME_LIMIT_WARNING_WINDOW_SECONDS
from sciquest.constants.ui_constants import (
    FLIP_CARD_BUTTON,
    FREE_TEXT_PLACEHOLDER,
    PREVIOUS_BUTTON,
    PROGRESS_TEMPLATE,
    SUBMIT_BUTTON,
    TEAM_TURN_TEMPLATE,
    TIME_LEFT_TEMPLATE,
    TIME_UP_MESSAGE,
)
from sciquest.core.models import QuestionKind, QuizVariant
from sciquest.core.session_controller import SessionController, SessionState
from sciquest.styling.styles import Styles
from sciquest.ui.question_renderer import render_question


class SessionHeader(QWidget):
    """Progress, team turn and countdown row shared by the question and board panels."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        top_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        top_row.addWidget(self.progress_label)
        top_row.addStretch()
        self.timer_label = QLabel("", self)
        self.timer_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        top_row.addWidget(self.timer_label)
        layout.addLayout(top_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 1000)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.turn_label = QLabel("", self)
        self.turn_label.setAlignment(Qt.AlignCenter)
        self.turn_label.setStyleSheet(Styles.get_large_label_style())
        self.turn_label.setVisible(False)
        layout.addWidget(self.turn_label)

    def refresh(self, controller: SessionController) -> None:
        quiz = controller.quiz
        self.title_label.setText(quiz.display_title if quiz is not None else "")
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(number=controller.question_number, count=controller.question_count)
        )
        self.progress_bar.setValue(int(controller.progress * 1000))
        player = controller.current_player
        self.turn_label.setVisible(player is not None)
        if player is not None:
            self.turn_label.setText(TEAM_TURN_TEMPLATE.format(name=player))
        self.update_timer(controller.remaining_seconds)

    def update_timer(self, remaining: int | None) -> None:
        if remaining is None:
            self.timer_label.setText("")
            return
        if remaining <= 0:
            self.timer_label.setText(TIME_UP_MESSAGE)
        else:
            self.timer_label.setText(TIME_LEFT_TEMPLATE.format(seconds=remaining))
        warning = remaining <= TIME_LIMIT_WARNING_WINDOW_SECONDS
        self.timer_label.setStyleSheet(Styles.get_timer_style(warning, blink_state=remaining % 2 == 0))


class QuestionPanel(QWidget):
    """Shows one question with choice buttons or a free-text field.

    The panel holds no session state of its own: every refresh re-reads the
    controller, and every user action is forwarded to it.
    """

    def __init__(self, controller: SessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._option_buttons: list[QPushButton] = []
        self._shown_question_id: int | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.header = SessionHeader(self)
        layout.addWidget(self.header)

        self.card_label = QLabel("", self)
        self.card_label.setAlignment(Qt.AlignCenter)
        self.card_label.setWordWrap(True)
        self.card_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.card_label)

        self.prompt_view = QWebEngineView(self)
        layout.addWidget(self.prompt_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText(FREE_TEXT_PLACEHOLDER)
        self.answer_input.textEdited.connect(self._handle_text_edited)
        self.answer_input.returnPressed.connect(self._handle_submit)
        layout.addWidget(self.answer_input)

        button_row = QHBoxLayout()
        self.previous_button = QPushButton(PREVIOUS_BUTTON, self)
        self.previous_button.clicked.connect(self._handle_previous)
        button_row.addWidget(self.previous_button)

        self.flip_button = QPushButton(FLIP_CARD_BUTTON, self)
        self.flip_button.clicked.connect(self._handle_flip)
        button_row.addWidget(self.flip_button)

        button_row.addStretch()

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit)
        button_row.addWidget(self.submit_button)
        layout.addLayout(button_row)

    # --- Refresh from controller ---

    def refresh(self) -> None:
        """Re-render the current question from the controller."""
        question = self.controller.current_question
        if question is None:
            return

        self.header.refresh(self.controller)
        if question.id != self._shown_question_id:
            self._shown_question_id = question.id
            self.prompt_view.setHtml(render_question(question))
            self._rebuild_options(question.options if question.kind is QuestionKind.CHOICE else [])
            self.answer_input.setText(self.controller.draft)

        is_card = self.controller.quiz.variant is QuizVariant.CARD_GAME
        face_up = not is_card or self.controller.is_card_flipped
        self.flip_button.setVisible(is_card)
        self.card_label.setVisible(is_card and not face_up)
        if is_card and not face_up:
            self.card_label.setText(question.category or f"Card {self.controller.question_number}")

        self.prompt_view.setVisible(face_up)
        is_choice = question.kind is QuestionKind.CHOICE
        self.answer_input.setVisible(face_up and not is_choice)
        for button in self._option_buttons:
            button.setVisible(face_up)
        self._sync_option_selection()

        self.previous_button.setEnabled(self.controller.can_go_previous)
        self._update_submit_enabled()

    def update_timer(self, remaining: int) -> None:
        self.header.update_timer(remaining)

    def _rebuild_options(self, options: list[str]) -> None:
        for button in self._option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []
        for option in options:
            button = QPushButton(option, self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, value=option: self._handle_option(value))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

    def _sync_option_selection(self) -> None:
        draft = self.controller.draft
        for button in self._option_buttons:
            selected = button.text() == draft
            button.setChecked(selected)
            button.setStyleSheet(Styles.get_option_style(selected))

    def _update_submit_enabled(self) -> None:
        self.submit_button.setEnabled(self.controller.can_submit)

    # --- User actions ---

    def _handle_option(self, value: str) -> None:
        if self.controller.state is not SessionState.ANSWERING:
            return
        self.controller.set_draft(value)
        self._sync_option_selection()
        self._update_submit_enabled()

    def _handle_text_edited(self, text: str) -> None:
        if self.controller.state is not SessionState.ANSWERING:
            return
        self.controller.set_draft(text)
        self._update_submit_enabled()

    def _handle_flip(self) -> None:
        self.controller.flip_card()
        self.refresh()

    def _handle_previous(self) -> None:
        if self.controller.go_previous():
            self.refresh()

    def _handle_submit(self) -> None:
        if not self.submit_button.isEnabled():
            return
        # State listeners take over from here (feedback dialog).
        self.controller.submit_answer(self.controller.draft)
