from enum import Enum


ANSWER_LETTERS = ("A", "B", "C", "D")
DEFAULT_QUESTION_POINTS = 1
RECENT_SESSIONS_LIMIT = 5
TOPIC_PROGRESS_LIMIT = 10
STREAK_WINDOW_DAYS = 30
ACTIVE_SESSION_WINDOW_HOURS = 24
USER_GROWTH_WINDOW_DAYS = 7
ADMIN_RECENT_LIMIT = 10
MAX_TIME_SPENT_SECONDS = 2**31 - 1  # fits the INTEGER time_spent column

class RoleEnum(str, Enum):
    USER = "user"
    ADMIN = "admin"

class DifficultyEnum(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

class SubjectEnum(str, Enum):
    MATHEMATICS = "Mathematics"
    READING_AND_WRITING = "Reading and Writing"

class QuestionTypeEnum(str, Enum):
    MATH = "math"
    READING = "reading"
    WRITING = "writing"
