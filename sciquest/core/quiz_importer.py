"""Utilities for reading quizzes from a human-friendly text file.

File format: optional header lines, then question blocks separated by blank
lines or '---'.

    TOPIC: Earth and Space
    VARIANT: Normal | Card Game | Board Game
    TEAM: Ana, Ben, Carla          (optional)

    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option               (options A-F are optional; any option
    B: Second option               makes the question multiple choice)
    ANSWER: B                     (option letter, or the literal answer text)
    POINTS: 2                     (optional, default 1)
    TIMELIMIT: 30                 (optional seconds)
    CATEGORY: Matter              (optional)
    IMAGE: images/moon.png        (optional)

Example:

    TOPIC: Solar system
    VARIANT: Board Game

    Q: What causes the phases of the moon?
    ANSWER: Position of Moon/Earth/Sun
    TIMELIMIT: 45
"""

from __future__ import annotations

from pathlib import Path

from sciquest.constants.quiz_constants import DEFAULT_QUESTION_POINTS
from sciquest.core.errors import QuizImportError
from sciquest.core.models import Question, QuestionKind, Quiz, QuizVariant

_OPTION_ORDER = ["A", "B", "C", "D", "E", "F"]
_HEADER_KEYS = ("TOPIC:", "VARIANT:", "TEAM:")


def load_quiz_from_file(file_path: Path, quiz_id: str | None = None) -> Quiz:
    text = file_path.read_text(encoding="utf-8")
    return parse_quiz_text(text, quiz_id=quiz_id or file_path.stem)


def parse_quiz_text(text: str, quiz_id: str) -> Quiz:
    header: dict[str, str] = {}
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if not blocks and not current_block and stripped.upper().startswith(_HEADER_KEYS):
            key, value = stripped.split(":", 1)
            header[key.strip().upper()] = value.strip()
            continue
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    questions = [_parse_block(block, number) for number, block in enumerate(blocks, start=1)]
    return Quiz(
        id=quiz_id,
        topic=header.get("TOPIC", quiz_id),
        variant=_parse_variant(header.get("VARIANT")),
        questions=questions,
        team_members=_parse_team(header.get("TEAM")),
    )


def _parse_variant(raw_value: str | None) -> QuizVariant:
    if not raw_value:
        return QuizVariant.NORMAL
    for variant in QuizVariant:
        if variant.value.upper() == raw_value.strip().upper():
            return variant
    raise QuizImportError(f"Unknown VARIANT '{raw_value}'.")


def _parse_team(raw_value: str | None) -> list[str] | None:
    if raw_value is None:
        return None
    members = [name.strip() for name in raw_value.split(",") if name.strip()]
    return members or None


def _parse_block(block: str, number: int) -> Question:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    answer: str | None = None
    points = DEFAULT_QUESTION_POINTS
    time_limit_seconds: int | None = None
    category = ""
    image_ref: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("ANSWER:"):
            answer = line.split(":", 1)[1].strip()
            current_section = None
            continue

        if upper.startswith("POINTS:"):
            points = _parse_positive_int(line, "POINTS")
            current_section = None
            continue

        if upper.startswith("TIMELIMIT:"):
            time_limit_seconds = _parse_positive_int(line, "TIMELIMIT")
            current_section = None
            continue

        if upper.startswith("CATEGORY:"):
            category = line.split(":", 1)[1].strip()
            current_section = None
            continue

        if upper.startswith("IMAGE:"):
            image_ref = line.split(":", 1)[1].strip() or None
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    prompt = "\n".join(question_lines).strip()
    if not prompt:
        raise QuizImportError("Question text missing (Q: ...)")
    if not answer:
        raise QuizImportError(f"Question {number} has no ANSWER.")

    if not options:
        return Question(
            id=number,
            kind=QuestionKind.FREE_TEXT,
            prompt=prompt,
            answer=answer,
            points=points,
            time_limit_seconds=time_limit_seconds,
            category=category,
            image_ref=image_ref,
        )

    letters = _OPTION_ORDER[: len(options)]
    if sorted(options) != letters:
        raise QuizImportError("Options must be lettered consecutively starting at A.")
    if len(options) < 2:
        raise QuizImportError("A multiple-choice question needs at least two options.")
    option_list = [options[letter].strip() for letter in letters]
    if any(not option for option in option_list):
        raise QuizImportError("Option text cannot be empty.")

    if answer.upper() in letters:
        answer = option_list[letters.index(answer.upper())]
    elif answer not in option_list:
        raise QuizImportError(f"ANSWER of question {number} does not match any option.")

    return Question(
        id=number,
        kind=QuestionKind.CHOICE,
        prompt=prompt,
        answer=answer,
        options=option_list,
        points=points,
        time_limit_seconds=time_limit_seconds,
        category=category,
        image_ref=image_ref,
    )


def _parse_positive_int(line: str, key: str) -> int:
    raw_value = line.split(":", 1)[1].strip()
    try:
        parsed_value = int(raw_value)
    except ValueError as exc:
        raise QuizImportError(f"{key} must be an integer.") from exc
    if parsed_value <= 0:
        raise QuizImportError(f"{key} must be a positive integer.")
    return parsed_value
