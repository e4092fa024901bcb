"""
Adaptive game engine.

One ``GameEngine`` is one player context: the profile, the difficulty level
and the streak counter. The host creates it and passes it to every call; there
is no module-level instance.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Tuple, Union

from localization import Localizer
from player import BASE_AVATARS, UNLOCKABLE_AVATARS, Player, clamp_grade
from questions import Category, Question, QuestionContext, generate

logger = logging.getLogger("math-quest.engine")

GRADE_CATEGORIES: Dict[int, Tuple[Category, ...]] = {
    0: (Category.SUBTRACTION, Category.ADDITION),
    1: (Category.SUBTRACTION, Category.ADDITION),
    2: (Category.SUBTRACTION, Category.ADDITION, Category.DIVISION, Category.MULTIPLICATION),
    3: (
        Category.SUBTRACTION,
        Category.DIVISION,
        Category.MULTIPLICATION,
        Category.ALGEBRA,
        Category.PROBLEM_SOLVING,
    ),
    4: (
        Category.DIVISION,
        Category.MULTIPLICATION,
        Category.ALGEBRA,
        Category.GRAPHS,
        Category.PROBLEM_SOLVING,
    ),
    5: (
        Category.DIVISION,
        Category.MULTIPLICATION,
        Category.ALGEBRA,
        Category.GRAPHS,
        Category.PROBLEM_SOLVING,
    ),
}

MIN_DIFFICULTY = 1
BASE_POINTS = 1


def streak_threshold(grade: int) -> int:
    """Correct answers in a row needed per difficulty step."""
    if grade <= 1:
        return 3
    if grade <= 3:
        return 2
    return 1


def max_difficulty(grade: int) -> int:
    # 6 for grades 0-1, 8 for 2-3, 10 for 4-5
    return 6 + (grade // 2) * 2


def difficulty_drop(grade: int) -> int:
    return 1 if grade >= 3 else 2


def bonus_points(streak: int) -> int:
    """Bonus for a correct answer, given the streak *after* that answer."""
    if streak >= 7:
        return 3
    if streak >= 5:
        return 2
    if streak >= 3:
        return 1
    return 0


class GameEngine:
    def __init__(self, localizer: Optional[Localizer] = None, rng: Optional[random.Random] = None):
        self.localizer = localizer or Localizer()
        self.rng = rng or random.Random()
        self.player = Player()
        self._difficulty = MIN_DIFFICULTY
        # consecutive correct answers; a difficulty step never resets it
        self._streak = 0

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @property
    def streak(self) -> int:
        return self._streak

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------
    def set_player(self, name: str, grade: int, avatar: Optional[str] = None) -> Player:
        p = self.player
        p.name = (name or "").strip()
        p.grade = clamp_grade(grade)
        if not p.unlocked_avatars:
            p.unlocked_avatars.extend(BASE_AVATARS)
        if avatar and avatar.strip() and avatar in p.unlocked_avatars:
            p.avatar = avatar
        else:
            p.avatar = p.unlocked_avatars[0]
        self._difficulty = MIN_DIFFICULTY
        self._streak = 0
        logger.debug("Player set: name=%r grade=%d avatar=%s", p.name, p.grade, p.avatar)
        return p

    def restore(self, stored: Player) -> List[str]:
        """Bring back a persisted profile; unlocks are recomputed from points."""
        self.set_player(stored.name, stored.grade, stored.avatar)
        unlocked = self.award_points(stored.points - self.player.points)
        if stored.avatar in self.player.unlocked_avatars:
            self.player.avatar = stored.avatar
        self.player.language = stored.language or ""
        self.player.session_stats = list(stored.session_stats)
        return unlocked

    def get_categories(self) -> List[Category]:
        return list(GRADE_CATEGORIES.get(self.player.grade, ()))

    def get_all_avatars(self) -> List[str]:
        if not self.player.unlocked_avatars:
            self.player.unlocked_avatars.extend(BASE_AVATARS)
        return list(self.player.unlocked_avatars)

    def award_points(self, points: int) -> List[str]:
        """Add points; returns the avatars unlocked by this award, in threshold order."""
        if points <= 0:
            return []
        self.player.points += points
        unlocked: List[str] = []
        for needed, avatar in UNLOCKABLE_AVATARS:
            if self.player.points >= needed and self.player.unlock(avatar):
                unlocked.append(avatar)
        if unlocked:
            logger.info("Unlocked %s at %d points", ", ".join(unlocked), self.player.points)
        return unlocked

    # ------------------------------------------------------------------
    # Difficulty
    # ------------------------------------------------------------------
    def adjust_difficulty(self, was_correct: bool) -> None:
        grade = self.player.grade
        before = self._difficulty
        if was_correct:
            self._streak += 1
            if self._streak % streak_threshold(grade) == 0:
                self._difficulty = min(self._difficulty + 1, max_difficulty(grade))
        else:
            self._streak = 0
            self._difficulty = max(MIN_DIFFICULTY, self._difficulty - difficulty_drop(grade))
        if self._difficulty != before:
            logger.debug("Difficulty %d -> %d (streak %d)", before, self._difficulty, self._streak)

    # ------------------------------------------------------------------
    # Questions
    # ------------------------------------------------------------------
    def _context(self) -> QuestionContext:
        return QuestionContext(
            grade=self.player.grade,
            difficulty=self._difficulty,
            rng=self.rng,
            templates=self.localizer,
        )

    def generate_question(self, category: Union[Category, str]) -> Question:
        return generate(category, self._context())

    def generate_questions(self, category: Union[Category, str], count: int = 10) -> List[Question]:
        category = Category.parse(category)
        return [self.generate_question(category) for _ in range(max(0, count))]
