from sciquest.core.models import Question, QuestionKind, Quiz, QuizVariant


def make_choice(question_id=1, answer="B", options=("A", "B"), time_limit=30):
    return Question(
        id=question_id,
        kind=QuestionKind.CHOICE,
        prompt=f"Choice question {question_id}",
        answer=answer,
        options=list(options),
        time_limit_seconds=time_limit,
    )


def make_free_text(question_id=1, answer="Photosynthesis", time_limit=30):
    return Question(
        id=question_id,
        kind=QuestionKind.FREE_TEXT,
        prompt=f"Free text question {question_id}",
        answer=answer,
        time_limit_seconds=time_limit,
    )


def make_quiz(questions, variant=QuizVariant.NORMAL, quiz_id="q1", team_members=None):
    return Quiz(
        id=quiz_id,
        topic="Science",
        variant=variant,
        questions=list(questions),
        team_members=team_members,
    )
