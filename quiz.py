"""
One quiz run: show a question, judge the answer, move on.

The session only touches the engine; persisting what happened is left to the
caller, which gets an ``AnswerRecord`` per answer and a ``SessionStat`` at the
end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import List, Optional, Union

from answers import is_correct, num_to_clean_str
from config import ANSWER_TOLERANCE, DEFAULT_QUESTION_COUNT
from engine import BASE_POINTS, GameEngine, bonus_points
from player import SessionStat
from questions import Category, Question

logger = logging.getLogger("math-quest.quiz")


class MathQuestError(Exception):
    pass


class QuizFinishedError(MathQuestError):
    pass


@dataclass(frozen=True)
class AnswerRecord:
    category: str
    question: str
    correct_answer: float
    user_answer: float
    is_correct: bool
    difficulty: int
    streak_before: int
    points_awarded: int


@dataclass
class AnswerOutcome:
    correct: bool
    expected: float
    base_points: int
    bonus: int
    points_awarded: int
    feedback: str
    record: AnswerRecord
    unlocked_avatars: List[str] = field(default_factory=list)
    finished: bool = False
    session_stat: Optional[SessionStat] = None

    @property
    def expected_str(self) -> str:
        return num_to_clean_str(float(self.expected))


class QuizSession:
    def __init__(
        self,
        game: GameEngine,
        category: Union[Category, str],
        count: int = DEFAULT_QUESTION_COUNT,
    ):
        self.game = game
        self.category = Category.parse(category)
        self.count = count
        self.questions: List[Question] = []
        self.index = 0
        self.correct = 0
        self.points_earned = 0
        self.session_stat: Optional[SessionStat] = None
        self._new_round()

    def _new_round(self) -> None:
        self.questions = self.game.generate_questions(self.category, self.count)
        self.index = 0
        self.correct = 0
        self.points_earned = 0
        self.session_stat = None

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def finished(self) -> bool:
        return self.index >= self.total

    @property
    def current(self) -> Optional[Question]:
        if self.finished:
            return None
        return self.questions[self.index]

    def _cheer(self) -> str:
        cheers = self.game.localizer.cheer_messages() or ["Great!"]
        return self.game.rng.choice(cheers)

    def submit(self, user_answer: float) -> AnswerOutcome:
        q = self.current
        if q is None:
            raise QuizFinishedError("quiz already finished")

        correct = is_correct(q.answer, user_answer, ANSWER_TOLERANCE)
        streak_before = self.game.streak
        self.game.adjust_difficulty(correct)

        base = BASE_POINTS if correct else 0
        bonus = bonus_points(self.game.streak) if correct else 0
        total = base + bonus
        unlocked = self.game.award_points(total) if total > 0 else []

        if correct:
            self.correct += 1
            self.points_earned += total
            cheer = self._cheer()
            feedback = f"{cheer} +{base} (+{bonus})" if bonus > 0 else f"{cheer} +{base}"
        else:
            feedback = self.game.localizer.get("Quiz_Answer", num_to_clean_str(float(q.answer)))

        record = AnswerRecord(
            category=self.category.value,
            question=q.text,
            correct_answer=float(q.answer),
            user_answer=float(user_answer),
            is_correct=correct,
            difficulty=self.game.difficulty,
            streak_before=streak_before,
            points_awarded=total,
        )
        self.index += 1

        outcome = AnswerOutcome(
            correct=correct,
            expected=q.answer,
            base_points=base,
            bonus=bonus,
            points_awarded=total,
            feedback=feedback,
            record=record,
            unlocked_avatars=unlocked,
        )
        if self.finished:
            outcome.finished = True
            outcome.session_stat = self._complete()
        return outcome

    def _complete(self) -> SessionStat:
        stat = SessionStat(
            completed_at=datetime.now(UTC),
            category=self.category.value,
            total_questions=self.total,
            correct_answers=self.correct,
            points_earned=self.points_earned,
        )
        self.game.player.add_session(stat)
        self.session_stat = stat
        logger.info(
            "Quiz finished: %s %d/%d, +%d points",
            stat.category,
            stat.correct_answers,
            stat.total_questions,
            stat.points_earned,
        )
        return stat

    def finished_message(self) -> str:
        return self.game.localizer.get(
            "Quiz_Finished_Message", self.correct, self.total, self.game.player.points
        )

    def restart(self) -> None:
        """Another round in the same category; engine state carries over."""
        self._new_round()
