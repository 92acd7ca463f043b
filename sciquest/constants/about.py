"""Static metadata describing SciQuest."""

APP_NAME = "SciQuest"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "SciQuest is a science quiz player. Answer multiple-choice and free-text questions "
    "against the clock, or trace hidden answers on the board-game letter grid."
)
