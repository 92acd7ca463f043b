"""Domain models for the quiz player."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class QuizVariant(Enum):
    """Presentation variant of a quiz."""

    NORMAL = "Normal"
    CARD_GAME = "Card Game"
    BOARD_GAME = "Board Game"


class QuestionKind(Enum):
    """How a question is answered and graded."""

    CHOICE = "choice"
    FREE_TEXT = "free_text"


@dataclass(slots=True, frozen=True)
class Question:
    """A single quiz question as delivered by the loader."""

    id: int
    kind: QuestionKind
    prompt: str
    answer: str
    options: list[str] = field(default_factory=list)
    points: int = 1
    time_limit_seconds: int | None = None
    category: str = ""
    image_ref: str | None = None


@dataclass(slots=True, frozen=True)
class Quiz:
    """Read-only quiz definition owned by a session for its lifetime."""

    id: str
    topic: str
    variant: QuizVariant
    questions: list[Question]
    team_members: list[str] | None = None

    @property
    def is_board_game(self) -> bool:
        return self.variant is QuizVariant.BOARD_GAME

    @property
    def display_title(self) -> str:
        """Topic and variant label, e.g. ``Earth and Space (Board Game)``."""
        if not self.topic:
            return self.variant.value
        return f"{self.topic} ({self.variant.value})"


@dataclass(slots=True, frozen=True)
class QuestionResult:
    """Final outcome for one question, emitted on completion."""

    question_id: int
    was_correct: bool


@dataclass(slots=True, frozen=True)
class Feedback:
    """Everything the feedback presenter needs to show a grading outcome."""

    is_correct: bool
    prompt_text: str
    correct_answer_text: str
