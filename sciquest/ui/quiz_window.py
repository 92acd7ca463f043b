"""Qt main window hosting one quiz-taking session."""

from __future__ import annotations

import logging
import random

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from sciquest.constants.quiz_constants import DEFAULT_GRID_SIZE
from sciquest.constants.ui_constants import (
    LOAD_FAILED_TITLE,
    LOADING_MESSAGE,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from sciquest.core.models import QuestionResult
from sciquest.core.quiz_loader import QuizLoader
from sciquest.core.session_controller import CompletionCallback, SessionController, SessionState
from sciquest.styling.styles import Styles
from sciquest.ui.components.board_panel import BoardPanel
from sciquest.ui.components.feedback_dialog import FeedbackDialog
from sciquest.ui.components.question_panel import QuestionPanel
from sciquest.ui.components.summary_panel import StatusPanel, SummaryPanel
from sciquest.ui.dialog_helpers import show_error
from sciquest.ui.qt_ticker import QtTickScheduler

logger = logging.getLogger(__name__)


class QuizPlayerWindow(QMainWindow):
    """Main Qt window: switches panels as the session controller changes state."""

    def __init__(
        self,
        loader: QuizLoader,
        quiz_id: str | None,
        on_complete: CompletionCallback | None = None,
        *,
        rng: random.Random | None = None,
        grid_size: int = DEFAULT_GRID_SIZE,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.quiz_id = quiz_id
        self._on_complete = on_complete
        self._feedback_dialog: FeedbackDialog | None = None

        self.controller = SessionController(
            loader,
            self._handle_complete,
            QtTickScheduler(self),
            rng=rng,
            grid_size=grid_size,
            on_state_changed=self._handle_state_changed,
            on_tick=self._handle_tick,
        )

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        # Load after the window is shown so the loading message gets painted.
        QTimer.singleShot(0, self._start_loading)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.panel_stack = QStackedWidget(self)
        self.status_panel = StatusPanel(self)
        self.question_panel = QuestionPanel(self.controller, self)
        self.board_panel = BoardPanel(self.controller, self)
        self.summary_panel = SummaryPanel(on_done=self.close, parent=self)

        self.panel_stack.addWidget(self.status_panel)
        self.panel_stack.addWidget(self.question_panel)
        self.panel_stack.addWidget(self.board_panel)
        self.panel_stack.addWidget(self.summary_panel)
        root_layout.addWidget(self.panel_stack)

        self.status_panel.set_message(LOADING_MESSAGE)
        self.panel_stack.setCurrentWidget(self.status_panel)

    def _start_loading(self) -> None:
        if self.controller.state is SessionState.IDLE:
            self.controller.load(self.quiz_id)

    # --- Controller listeners ---

    def _handle_state_changed(self, state: SessionState) -> None:
        if state is SessionState.LOADING:
            self.status_panel.set_message(LOADING_MESSAGE)
            self.panel_stack.setCurrentWidget(self.status_panel)
        elif state is SessionState.READY:
            self.setWindowTitle(f"{WINDOW_TITLE} - {self.controller.quiz.display_title}")
        elif state is SessionState.ANSWERING:
            self._show_current_question()
        elif state is SessionState.FEEDBACK:
            self._show_feedback()
        elif state is SessionState.FINISHED:
            self.summary_panel.show_results(self.controller.final_results or [])
            self.panel_stack.setCurrentWidget(self.summary_panel)
        elif state is SessionState.ERROR:
            message = self.controller.error_message or LOAD_FAILED_TITLE
            self.status_panel.set_message(message)
            self.panel_stack.setCurrentWidget(self.status_panel)
            show_error(self, LOAD_FAILED_TITLE, message)

    def _handle_tick(self, remaining: int) -> None:
        panel = self.panel_stack.currentWidget()
        if panel in (self.question_panel, self.board_panel):
            panel.update_timer(remaining)

    def _handle_complete(
        self, quiz_id: str, results: list[QuestionResult], team_members: list[str] | None
    ) -> None:
        if self._on_complete is not None:
            self._on_complete(quiz_id, results, team_members)

    def _show_current_question(self) -> None:
        panel = self.board_panel if self.controller.board is not None else self.question_panel
        panel.refresh()
        self.panel_stack.setCurrentWidget(panel)

    def _show_feedback(self) -> None:
        feedback = self.controller.feedback
        if feedback is None:
            return
        self._feedback_dialog = FeedbackDialog(feedback, on_next=self._handle_next, parent=self)
        self._feedback_dialog.open()

    def _handle_next(self) -> None:
        self._feedback_dialog = None
        # The window may already be closing.
        if self.controller.state is SessionState.FEEDBACK:
            self.controller.advance()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.controller.teardown()
        if self._feedback_dialog is not None:
            self._feedback_dialog.close()
            self._feedback_dialog = None
        logger.info("Quiz window closed")
        super().closeEvent(event)
