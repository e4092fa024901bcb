from __future__ import annotations

import os

APP_TITLE = "Math Quest – Practice API"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# "" means the built-in default (English)
DEFAULT_LANGUAGE = os.getenv("MATH_QUEST_LANGUAGE", "en")

try:
    DEFAULT_QUESTION_COUNT = int(os.getenv("MATH_QUEST_QUESTION_COUNT", "10"))
except ValueError:
    DEFAULT_QUESTION_COUNT = 10

MAX_QUESTION_COUNT = 50

# |correct - given| below this counts as correct
ANSWER_TOLERANCE = 1e-4

# raw answer input
ANSWER_LEN_LIMIT = 100

RECENT_ANSWERS_LIMIT = 100
