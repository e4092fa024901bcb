from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from config import DEFAULT_QUESTION_COUNT, MAX_QUESTION_COUNT


class QuizStartRequest(BaseModel):
    category: str
    count: int = Field(default=DEFAULT_QUESTION_COUNT, ge=1, le=MAX_QUESTION_COUNT)


class QuizOut(BaseModel):
    quiz_id: str
    category: str
    label: str
    index: int
    total: int
    correct: int
    points_earned: int
    # None once every question has been answered
    question: Optional[str] = None
    finished: bool
    difficulty: int
    streak: int
    points: int


class AnswerRequest(BaseModel):
    answer: str


class AnswerResponse(BaseModel):
    ok: bool
    correct: bool = False
    feedback: str = ""
    expected: Optional[float] = None
    expected_str: Optional[str] = None
    base_points: int = 0
    bonus: int = 0
    points_awarded: int = 0
    unlocked_avatars: List[str] = []
    difficulty: int
    streak: int
    points: int
    finished: bool = False
    # "You answered 8 / 10! ..." once the quiz is over
    summary: Optional[str] = None
