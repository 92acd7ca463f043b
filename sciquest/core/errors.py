"""Exceptions raised by the quiz player core."""

from __future__ import annotations


class QuizLoadError(Exception):
    """Raised when a quiz cannot be fetched or understood by the loader."""


class QuizImportError(QuizLoadError):
    """Raised when a plain-text quiz definition cannot be parsed."""


class SessionStateError(RuntimeError):
    """Raised when a session operation is called in a state that does not allow it."""
