from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from player import SessionStat

WEEK = timedelta(days=7)
MONTH = timedelta(days=30)


@dataclass(frozen=True)
class StatsSummary:
    sessions: int
    questions: int
    correct: int
    points: int
    accuracy: float


def summarize(stats: Iterable[SessionStat]) -> StatsSummary:
    stats = list(stats)
    questions = sum(s.total_questions for s in stats)
    correct = sum(s.correct_answers for s in stats)
    return StatsSummary(
        sessions=len(stats),
        questions=questions,
        correct=correct,
        points=sum(s.points_earned for s in stats),
        accuracy=(correct / questions * 100) if questions else 0.0,
    )


def _now(now: Optional[datetime]) -> datetime:
    now = now or datetime.now().astimezone()
    return now if now.tzinfo else now.astimezone()


def _local(ts: datetime, now: datetime) -> datetime:
    # naive timestamps are taken as local time
    return ts.astimezone(now.tzinfo)


def completed_today(stats: Iterable[SessionStat], now: Optional[datetime] = None) -> List[SessionStat]:
    now = _now(now)
    return [s for s in stats if _local(s.completed_at, now).date() == now.date()]


def completed_since(stats: Iterable[SessionStat], window: timedelta, now: Optional[datetime] = None) -> List[SessionStat]:
    now = _now(now)
    start = now - window
    return [s for s in stats if _local(s.completed_at, now) >= start]


def today(stats: Iterable[SessionStat], now: Optional[datetime] = None) -> StatsSummary:
    return summarize(completed_today(stats, now))


def this_week(stats: Iterable[SessionStat], now: Optional[datetime] = None) -> StatsSummary:
    return summarize(completed_since(stats, WEEK, now))


def this_month(stats: Iterable[SessionStat], now: Optional[datetime] = None) -> StatsSummary:
    return summarize(completed_since(stats, MONTH, now))
