from pydantic import BaseModel, ConfigDict


class StatsSummaryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    sessions: int
    questions: int
    correct: int
    points: int
    accuracy: float


class StatsOut(BaseModel):
    total_lessons: int
    overall_accuracy: float
    overall: StatsSummaryOut
    today: StatsSummaryOut
    this_week: StatsSummaryOut
    this_month: StatsSummaryOut
