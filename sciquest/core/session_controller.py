"""Session state machine driving a student through one quiz."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
import logging
import random

from sciquest.constants.quiz_constants import DEFAULT_GRID_SIZE
from sciquest.core.errors import QuizLoadError, SessionStateError
from sciquest.core.grading import grade
from sciquest.core.models import Feedback, Question, QuestionResult, Quiz, QuizVariant
from sciquest.core.puzzle_generator import WordGrid, generate_grid
from sciquest.core.quiz_loader import QuizLoader
from sciquest.core.selection_tracker import SelectionTracker
from sciquest.core.services.countdown import QuestionCountdown, TickScheduler, effective_time_limit

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[str, list[QuestionResult], list[str] | None], None]


class SessionState(Enum):
    """Lifecycle of a quiz-taking session."""

    IDLE = auto()
    LOADING = auto()
    READY = auto()
    ANSWERING = auto()
    GRADING = auto()
    FEEDBACK = auto()
    FINISHED = auto()
    ERROR = auto()
    CLOSED = auto()


@dataclass(slots=True)
class BoardState:
    """Board-game sub-state, rebuilt for every question."""

    grid: WordGrid
    tracker: SelectionTracker


@dataclass(slots=True)
class CardState:
    """Card-game sub-state, rebuilt for every question."""

    flipped: bool = False


@dataclass(slots=True)
class _QuizProgress:
    quiz: Quiz
    current_index: int = 0
    drafts: dict[int, str] = field(default_factory=dict)
    results: dict[int, bool] = field(default_factory=dict)


class SessionController:
    """Owns question sequencing, drafts, per-question results and the active countdown.

    All transitions are synchronous reactions to single events. The countdown
    for a question is created on entering ``ANSWERING`` and cancelled before
    any other work whenever the session leaves that state.
    """

    def __init__(
        self,
        loader: QuizLoader,
        on_complete: CompletionCallback,
        scheduler: TickScheduler,
        *,
        rng: random.Random | None = None,
        grid_size: int = DEFAULT_GRID_SIZE,
        on_state_changed: Callable[[SessionState], None] | None = None,
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        self._loader = loader
        self._on_complete = on_complete
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._grid_size = grid_size
        self._on_state_changed = on_state_changed
        self._on_tick = on_tick

        self._state = SessionState.IDLE
        self._quiz_id: str | None = None
        self._progress: _QuizProgress | None = None
        self._countdown: QuestionCountdown | None = None
        self._board: BoardState | None = None
        self._card: CardState | None = None
        self._feedback: Feedback | None = None
        self._error_message: str | None = None
        self._completed: bool = False
        self._final_results: list[QuestionResult] | None = None

    # --- Loading ---

    def load(self, quiz_id: str | None) -> None:
        """Fetch the quiz synchronously through the loader and start the session."""
        if not self.begin_load(quiz_id):
            return
        try:
            quiz = self._loader.load_quiz(str(quiz_id))
        except (OSError, QuizLoadError) as exc:
            self.fail_load(str(exc) or "Failed to load quiz.")
            return
        except Exception as exc:
            logger.exception("Quiz loader failed unexpectedly for %s", quiz_id)
            self.fail_load(f"Failed to load quiz: {exc}")
            return
        self.complete_load(quiz)

    def begin_load(self, quiz_id: str | None) -> bool:
        """Enter ``LOADING``; returns False (and enters ``ERROR``) for a missing id."""
        if self._state not in (SessionState.IDLE, SessionState.ERROR):
            raise SessionStateError(f"Cannot load a quiz while {self._state.name}.")
        self._quiz_id = None if quiz_id is None else str(quiz_id)
        self._error_message = None
        self._set_state(SessionState.LOADING)
        if not self._quiz_id or self._quiz_id == "undefined":
            self.fail_load("No quiz selected.")
            return False
        return True

    def complete_load(self, quiz: Quiz) -> None:
        if self._state is not SessionState.LOADING:
            logger.debug("Ignoring load result delivered while %s", self._state.name)
            return
        self._progress = _QuizProgress(quiz=quiz)
        self._set_state(SessionState.READY)
        if not quiz.questions:
            logger.info("Quiz %s has no questions; completing immediately", quiz.id)
            self._finish()
            return
        self._enter_question(0)

    def fail_load(self, message: str) -> None:
        if self._state is not SessionState.LOADING:
            logger.debug("Ignoring load failure delivered while %s", self._state.name)
            return
        logger.warning("Quiz %r failed to load: %s", self._quiz_id, message)
        self._error_message = message
        self._progress = None
        self._set_state(SessionState.ERROR)

    # --- Answering ---

    def set_draft(self, value: str) -> None:
        """Record user input for the current question without grading it."""
        progress = self._require_state(SessionState.ANSWERING)
        progress.drafts[self._question().id] = value

    def submit_answer(self, value: str) -> bool:
        """Grade ``value`` for the current question; returns correctness."""
        progress = self._require_state(SessionState.ANSWERING)
        self._stop_countdown()
        progress.drafts[self._question().id] = value
        return self._grade_current()

    def force_submit_on_timeout(self) -> None:
        """Grade whatever draft exists; does nothing outside ``ANSWERING``."""
        if self._state is not SessionState.ANSWERING or self._progress is None:
            return
        self._stop_countdown()
        self._grade_current()

    def go_previous(self) -> bool:
        """Step back one question without touching drafts or results."""
        if not self.can_go_previous:
            return False
        self._stop_countdown()
        self._enter_question(self._progress.current_index - 1)
        return True

    def advance(self) -> None:
        """Acknowledge feedback and move on, finishing after the last question."""
        progress = self._require_state(SessionState.FEEDBACK)
        self._clear_question_state()
        if progress.current_index >= len(progress.quiz.questions) - 1:
            self._finish()
            return
        self._enter_question(progress.current_index + 1)

    def flip_card(self) -> None:
        if self._state is SessionState.ANSWERING and self._card is not None:
            self._card.flipped = not self._card.flipped

    # --- Board selection ---

    def on_cell_down(self, index: int) -> None:
        if not self._board_active():
            return
        self._board.tracker.on_cell_down(index)
        self._progress.drafts[self._question().id] = ""

    def on_cell_enter(self, index: int) -> bool:
        if not self._board_active():
            return False
        return self._board.tracker.on_cell_enter(index)

    def on_drag_end(self) -> None:
        if not self._board_active():
            return
        candidate = self._board.tracker.on_drag_end()
        if candidate is not None:
            self._progress.drafts[self._question().id] = candidate

    # --- Teardown ---

    def teardown(self) -> None:
        """Release the countdown and stop reacting to events; emits no results."""
        self._stop_countdown()
        self._board = None
        self._card = None
        if self._state is not SessionState.CLOSED:
            self._set_state(SessionState.CLOSED)

    # --- Read-only views ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def quiz(self) -> Quiz | None:
        return self._progress.quiz if self._progress else None

    @property
    def current_index(self) -> int:
        return self._progress.current_index if self._progress else 0

    @property
    def current_question(self) -> Question | None:
        if self._progress is None or not self._progress.quiz.questions:
            return None
        return self._progress.quiz.questions[self._progress.current_index]

    @property
    def question_count(self) -> int:
        return len(self._progress.quiz.questions) if self._progress else 0

    @property
    def question_number(self) -> int:
        """One-based position of the current question."""
        return self.current_index + 1

    @property
    def progress(self) -> float:
        count = self.question_count
        return 0.0 if count == 0 else (self.current_index + 1) / count

    @property
    def draft(self) -> str:
        question = self.current_question
        if question is None:
            return ""
        return self._progress.drafts.get(question.id, "")

    @property
    def results(self) -> dict[int, bool]:
        return dict(self._progress.results) if self._progress else {}

    @property
    def final_results(self) -> list[QuestionResult] | None:
        return list(self._final_results) if self._final_results is not None else None

    @property
    def feedback(self) -> Feedback | None:
        return self._feedback

    @property
    def board(self) -> BoardState | None:
        return self._board

    @property
    def is_card_flipped(self) -> bool:
        return self._card is not None and self._card.flipped

    @property
    def remaining_seconds(self) -> int | None:
        return self._countdown.remaining if self._countdown is not None else None

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def current_player(self) -> str | None:
        quiz = self.quiz
        if quiz is None or not quiz.team_members:
            return None
        return quiz.team_members[self.current_index % len(quiz.team_members)]

    @property
    def can_submit(self) -> bool:
        """Whether the view should offer Submit: answering with a non-empty draft."""
        return self._state is SessionState.ANSWERING and bool(self.draft)

    @property
    def can_go_previous(self) -> bool:
        return (
            self._state is SessionState.ANSWERING
            and self._progress is not None
            and not self._progress.quiz.is_board_game
            and self._progress.current_index > 0
        )

    # --- Internals ---

    def _enter_question(self, index: int) -> None:
        progress = self._progress
        progress.current_index = index
        question = progress.quiz.questions[index]
        variant = progress.quiz.variant
        self._board = None
        self._card = None
        if variant is QuizVariant.BOARD_GAME:
            grid = generate_grid(question.answer, size=self._grid_size, rng=self._rng)
            self._board = BoardState(grid=grid, tracker=SelectionTracker(grid))
        elif variant is QuizVariant.CARD_GAME:
            self._card = CardState()

        countdown = QuestionCountdown(
            question_id=question.id,
            seconds=effective_time_limit(question.time_limit_seconds),
            scheduler=self._scheduler,
            on_expired=self._handle_countdown_expired,
            on_tick=self._on_tick,
        )
        self._countdown = countdown
        self._set_state(SessionState.ANSWERING)
        if self._countdown is countdown:
            countdown.start()
        logger.info("Question %d/%d (id=%s) started", index + 1, len(progress.quiz.questions), question.id)

    def _handle_countdown_expired(self, question_id: int) -> None:
        question = self.current_question
        if question is None or question.id != question_id:
            return
        self.force_submit_on_timeout()

    def _stop_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _grade_current(self) -> bool:
        progress = self._progress
        question = self._question()
        self._set_state(SessionState.GRADING)
        submitted = progress.drafts.get(question.id, "")
        is_correct = grade(question, submitted)
        progress.results[question.id] = is_correct
        self._feedback = Feedback(
            is_correct=is_correct,
            prompt_text=question.prompt,
            correct_answer_text=question.answer,
        )
        logger.info("Question id=%s graded %s", question.id, "correct" if is_correct else "incorrect")
        self._set_state(SessionState.FEEDBACK)
        return is_correct

    def _clear_question_state(self) -> None:
        self._feedback = None
        if self._board is not None:
            self._board.tracker.reset()
        self._board = None
        self._card = None

    def _finish(self) -> None:
        progress = self._progress
        self._stop_countdown()
        results = [
            QuestionResult(question_id=question.id, was_correct=progress.results.get(question.id, False))
            for question in progress.quiz.questions
        ]
        self._final_results = results
        self._set_state(SessionState.FINISHED)
        if self._completed:
            return
        self._completed = True
        correct = sum(1 for result in results if result.was_correct)
        logger.info("Quiz %s finished: %d/%d correct", progress.quiz.id, correct, len(results))
        self._on_complete(progress.quiz.id, list(results), progress.quiz.team_members)

    def _board_active(self) -> bool:
        return self._state is SessionState.ANSWERING and self._board is not None

    def _question(self) -> Question:
        question = self.current_question
        if question is None:
            raise SessionStateError("No current question.")
        return question

    def _require_state(self, expected: SessionState) -> _QuizProgress:
        if self._state is not expected or self._progress is None:
            raise SessionStateError(
                f"Operation requires {expected.name} but session is {self._state.name}."
            )
        return self._progress

    def _set_state(self, state: SessionState) -> None:
        if state is self._state:
            return
        logger.debug("Session state %s -> %s", self._state.name, state.name)
        self._state = state
        if self._on_state_changed is not None:
            self._on_state_changed(state)
