"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TIME_LIMIT_SECONDS: int = 30
TIME_LIMIT_WARNING_WINDOW_SECONDS: int = 9
TICK_INTERVAL_MS: int = 1000

DEFAULT_GRID_SIZE: int = 10
GRID_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_QUESTION_POINTS: int = 1
