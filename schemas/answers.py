from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AnswerLogOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None
    category: str
    question: str
    correct_answer: float
    user_answer: float
    is_correct: bool
    difficulty: int
    streak_before: int
    points_awarded: int
