"""Quiz loader collaborators.

The session controller only needs an object with ``load_quiz(quiz_id)`` that
returns a ``Quiz`` or raises ``QuizLoadError``. ``QuizDirectoryLoader`` serves
quizzes from a folder holding either API-shaped ``<id>.json`` payloads or
plain-text ``<id>.txt`` files (see ``quiz_importer``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import re
from typing import Any, Protocol

from pydantic import BaseModel, Field, ValidationError, field_validator

from sciquest.constants.quiz_constants import DEFAULT_QUESTION_POINTS, DEFAULT_TIME_LIMIT_SECONDS
from sciquest.core.errors import QuizLoadError
from sciquest.core.models import Question, QuestionKind, Quiz, QuizVariant
from sciquest.core.quiz_importer import load_quiz_from_file

logger = logging.getLogger(__name__)

_QUIZ_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class QuizLoader(Protocol):
    """Fetches a quiz by id; failures should be raised as ``QuizLoadError``."""

    def load_quiz(self, quiz_id: str) -> Quiz: ...


class QuestionPayload(BaseModel):
    """Question entry as served by the quiz API."""

    id: int
    type: str = "identification"
    question: str
    options: list[str] = Field(default_factory=list)
    answer: str = ""
    points: int | None = None
    timeLimit: int | None = None
    category: str | None = None
    imageUrl: str | None = None

    @field_validator("points", "timeLimit", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        return None if value in ("", 0, "0") else value

    @field_validator("answer", "type", mode="before")
    @classmethod
    def _null_to_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("options", mode="before")
    @classmethod
    def _null_to_no_options(cls, value: Any) -> Any:
        return [] if value is None else value


class QuizPayload(BaseModel):
    """Quiz document as served by the quiz API."""

    id: str | int
    title: str = ""
    type: str = QuizVariant.NORMAL.value
    teamMembers: list[str] | None = None
    questions: list[QuestionPayload] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("type", mode="before")
    @classmethod
    def _null_type(cls, value: Any) -> Any:
        return QuizVariant.NORMAL.value if value is None else value

    @field_validator("questions", mode="before")
    @classmethod
    def _null_questions(cls, value: Any) -> Any:
        return [] if value is None else value


def map_quiz_payload(payload: dict[str, Any], team_members: list[str] | None = None) -> Quiz:
    """Validate an API payload and convert it to the play model."""
    try:
        parsed = QuizPayload.model_validate(payload)
    except ValidationError as exc:
        raise QuizLoadError(f"Quiz payload is malformed: {exc.error_count()} error(s).") from exc

    seen_ids: set[int] = set()
    for item in parsed.questions:
        if item.id in seen_ids:
            raise QuizLoadError(f"Quiz payload repeats question id {item.id}.")
        seen_ids.add(item.id)

    members = team_members if team_members is not None else parsed.teamMembers
    return Quiz(
        id=str(parsed.id),
        topic=parsed.title,
        variant=_map_variant(parsed.type),
        questions=[_map_question(item) for item in parsed.questions],
        team_members=members or None,
    )


def _map_variant(raw_type: str) -> QuizVariant:
    for variant in QuizVariant:
        if variant.value == raw_type:
            return variant
    logger.warning("Unknown quiz type %r; playing as %s", raw_type, QuizVariant.NORMAL.value)
    return QuizVariant.NORMAL


def _map_question(item: QuestionPayload) -> Question:
    kind = QuestionKind.CHOICE if item.type == "multiple-choice" else QuestionKind.FREE_TEXT
    return Question(
        id=item.id,
        kind=kind,
        prompt=item.question,
        answer=item.answer,
        options=list(item.options) if kind is QuestionKind.CHOICE else [],
        points=item.points or DEFAULT_QUESTION_POINTS,
        time_limit_seconds=item.timeLimit or DEFAULT_TIME_LIMIT_SECONDS,
        category=item.category or "",
        image_ref=item.imageUrl or None,
    )


class QuizDirectoryLoader:
    """Loads quizzes by id from ``<directory>/<id>.json`` or ``<directory>/<id>.txt``."""

    def __init__(self, directory: Path, team_members: list[str] | None = None) -> None:
        self._directory = directory
        self._team_members = team_members

    def load_quiz(self, quiz_id: str) -> Quiz:
        if quiz_id is None or not _QUIZ_ID_PATTERN.match(str(quiz_id)):
            raise QuizLoadError(f"No quiz selected (invalid quiz id {quiz_id!r}).")

        json_path = self._directory / f"{quiz_id}.json"
        text_path = self._directory / f"{quiz_id}.txt"
        if json_path.exists():
            quiz = self._load_json(json_path)
        elif text_path.exists():
            quiz = self._load_text(text_path, str(quiz_id))
        else:
            raise QuizLoadError(f"Quiz {quiz_id!r} was not found in {self._directory}.")

        logger.info("Loaded quiz %s (%s, %d questions)", quiz.id, quiz.variant.value, len(quiz.questions))
        return quiz

    def _load_json(self, path: Path) -> Quiz:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise QuizLoadError(f"Failed to read {path.name}: {exc}") from exc
        if not isinstance(payload, dict):
            raise QuizLoadError(f"{path.name} does not contain a quiz object.")
        return map_quiz_payload(payload, team_members=self._team_members)

    def _load_text(self, path: Path, quiz_id: str) -> Quiz:
        try:
            quiz = load_quiz_from_file(path, quiz_id=quiz_id)
        except (OSError, UnicodeDecodeError) as exc:
            raise QuizLoadError(f"Failed to read {path.name}: {exc}") from exc
        if self._team_members is None:
            return quiz
        return Quiz(
            id=quiz.id,
            topic=quiz.topic,
            variant=quiz.variant,
            questions=quiz.questions,
            team_members=self._team_members or None,
        )
