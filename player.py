from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Tuple

MIN_GRADE = 0
MAX_GRADE = 5

# Animal avatar image filenames shipped with the client
BASE_AVATARS: Tuple[str, ...] = (
    "avatar_cat.png",
    "avatar_dog.png",
    "avatar_fox.png",
    "avatar_panda.png",
    "avatar_lion.png",
    "avatar_tiger.png",
    "avatar_penguin.png",
    "avatar_frog.png",
    "avatar_monkey.png",
    "avatar_unicorn.png",
)

# (points needed, avatar) in ascending order of points
UNLOCKABLE_AVATARS: Tuple[Tuple[int, str], ...] = (
    (50, "avatar_dragon.png"),
    (100, "avatar_crown.png"),
    (150, "avatar_rocket.png"),
    (200, "avatar_star.png"),
)


def clamp_grade(grade: int) -> int:
    return max(MIN_GRADE, min(MAX_GRADE, int(grade)))


@dataclass(frozen=True)
class SessionStat:
    """Result of one finished quiz run."""

    completed_at: datetime
    category: str
    total_questions: int
    correct_answers: int
    points_earned: int

    @property
    def accuracy(self) -> float:
        if self.total_questions == 0:
            return 0.0
        return self.correct_answers / self.total_questions * 100


@dataclass
class Player:
    name: str = ""
    grade: int = 0
    points: int = 0
    avatar: str = BASE_AVATARS[0]
    unlocked_avatars: List[str] = field(default_factory=list)
    # culture tag like "en" or "sv-SE"; empty means the default language
    language: str = ""
    session_stats: List[SessionStat] = field(default_factory=list)

    def unlock(self, avatar: str) -> bool:
        """Add ``avatar`` to the unlocked list; False if it was already there."""
        if avatar in self.unlocked_avatars:
            return False
        self.unlocked_avatars.append(avatar)
        return True

    def add_session(self, stat: SessionStat) -> None:
        self.session_stats.append(stat)

    def total_lessons(self) -> int:
        return total_lessons(self.session_stats)

    def total_correct(self) -> int:
        return total_correct(self.session_stats)

    def overall_accuracy(self) -> float:
        return overall_accuracy(self.session_stats)


def total_lessons(stats: Iterable[SessionStat]) -> int:
    return sum(s.total_questions for s in stats)


def total_correct(stats: Iterable[SessionStat]) -> int:
    return sum(s.correct_answers for s in stats)


def overall_accuracy(stats: Iterable[SessionStat]) -> float:
    stats = list(stats)
    total = total_lessons(stats)
    if total == 0:
        return 0.0
    return total_correct(stats) / total * 100
