"""Application entry point for the SciQuest quiz player."""

from __future__ import annotations

import argparse
from pathlib import Path
import random
import sys

from PySide6.QtWidgets import QApplication

from sciquest.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from sciquest.constants.quiz_constants import DEFAULT_GRID_SIZE
from sciquest.core.models import QuestionResult
from sciquest.core.quiz_loader import QuizDirectoryLoader
from sciquest.ui.quiz_window import QuizPlayerWindow
from sciquest.utils.logging_config import configure_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sciquest", description=APP_ABOUT_TEXT)
    parser.add_argument("quiz_id", nargs="?", help="Quiz to play (file name without extension)")
    parser.add_argument(
        "--quiz-dir",
        type=Path,
        default=Path("quizzes"),
        help="Folder holding <id>.json or <id>.txt quizzes (default: ./quizzes)",
    )
    parser.add_argument(
        "--team",
        default="",
        help="Comma-separated team members; turns rotate through them",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for board-game grids")
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE, help="Board-game grid size")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    args = parser.parse_args(argv)
    if args.grid_size <= 0:
        parser.error("--grid-size must be positive")
    return args


def main() -> None:
    """Initialize logging, build the quiz loader, and launch the Qt UI."""
    logger = configure_logging()
    args = _parse_args(sys.argv[1:])
    logger.info("Starting %s %s…", APP_NAME, APP_VERSION)

    team_members = [name.strip() for name in args.team.split(",") if name.strip()] or None
    loader = QuizDirectoryLoader(args.quiz_dir, team_members=team_members)

    def report_results(quiz_id: str, results: list[QuestionResult], team: list[str] | None) -> None:
        correct = sum(1 for result in results if result.was_correct)
        logger.info("Results for %s: %d/%d correct", quiz_id, correct, len(results))
        if team:
            logger.info("Team: %s", ", ".join(team))

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    window = QuizPlayerWindow(
        loader,
        args.quiz_id,
        on_complete=report_results,
        rng=random.Random(args.seed),
        grid_size=args.grid_size,
    )
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
