"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "SciQuest"
WINDOW_MIN_WIDTH: int = 420
WINDOW_MIN_HEIGHT: int = 720

LOADING_MESSAGE: str = "Loading…"
LOAD_FAILED_TITLE: str = "Quiz unavailable"
EMPTY_QUIZ_MESSAGE: str = "This quiz has no questions."

SUBMIT_BUTTON: str = "Submit Answer"
PREVIOUS_BUTTON: str = "Previous"
NEXT_BUTTON: str = "Next"
FLIP_CARD_BUTTON: str = "Flip Card"
DONE_BUTTON: str = "Done"
FREE_TEXT_PLACEHOLDER: str = "Type your answer here"

FEEDBACK_CORRECT_TITLE: str = "Correct!"
FEEDBACK_INCORRECT_TITLE: str = "Incorrect"
FEEDBACK_ANSWER_CAPTION: str = "The correct answer is:"

PROGRESS_TEMPLATE: str = "Question {number}/{count}"
TEAM_TURN_TEMPLATE: str = "{name}'s Turn!"
TIME_LEFT_TEMPLATE: str = "{seconds}s"
TIME_UP_MESSAGE: str = "Time is up"
QUIZ_COMPLETE_TITLE: str = "Quiz Complete!"
QUIZ_SCORE_TEMPLATE: str = "{correct}/{count} correct"

GRID_CELL_MIN_SIZE: int = 26
