import random

import pytest

from sciquest.core.session_controller import SessionController
from tests.fakes import CompletionRecorder, InMemoryLoader, ManualTickScheduler


@pytest.fixture
def scheduler():
    return ManualTickScheduler()


@pytest.fixture
def completion():
    return CompletionRecorder()


@pytest.fixture
def start_session(scheduler, completion):
    """Load ``quiz`` into a fresh controller and return it."""

    def _start(quiz, seed=7):
        loader = InMemoryLoader({quiz.id: quiz})
        controller = SessionController(
            loader,
            completion,
            scheduler,
            rng=random.Random(seed),
        )
        controller.load(quiz.id)
        return controller

    return _start
