"""
Storage collaborator.

Nothing here raises into gameplay: failures are logged and reported as
``False`` / ``None``, and the in-memory player stays the source of truth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import List, Optional

from alembic.runtime.migration import MigrationContext
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from config import RECENT_ANSWERS_LIMIT
from db import ALEMBIC_INI, Base, SessionLocal, alembic_script, make_engine
from db import engine as default_engine
from models import AnswerLog, PlayerProfile, SessionStatRecord
from player import Player, SessionStat
from quiz import AnswerRecord

logger = logging.getLogger("math-quest.storage")

PROFILE_ID = 1


@dataclass(frozen=True)
class AnswerLogEntry:
    id: int
    created_at: datetime
    category: str
    question: str
    correct_answer: float
    user_answer: float
    is_correct: bool
    difficulty: int
    streak_before: int
    points_awarded: int


def _aware(ts: datetime) -> datetime:
    # SQLite hands timezone=True columns back naive; they were written as UTC
    return ts if ts.tzinfo else ts.replace(tzinfo=UTC)


class Storage:
    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None:
            engine = make_engine(database_url) if database_url else default_engine
        self.engine = engine
        if engine is default_engine:
            self.SessionLocal = SessionLocal
        else:
            self.SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
        self._initialized = False

    def initialize(self) -> bool:
        if self._initialized:
            return True
        try:
            Base.metadata.create_all(bind=self.engine)
            self._stamp_head()
        except SQLAlchemyError:
            logger.warning("Could not create tables", exc_info=True)
            return False
        self._initialized = True
        return True

    def _stamp_head(self) -> None:
        # create_all builds the newest schema; record it so migrations agree
        if not ALEMBIC_INI.exists():
            return
        with self.engine.begin() as conn:
            ctx = MigrationContext.configure(conn)
            if ctx.get_current_revision() is None:
                ctx.stamp(alembic_script(), "head")

    # ------------------------------------------------------------------
    # Player profile
    # ------------------------------------------------------------------
    def load_player(self) -> Optional[Player]:
        if not self.initialize():
            return None
        try:
            with self.SessionLocal() as db:
                row = db.get(PlayerProfile, PROFILE_ID)
                if row is None:
                    return None
                player = Player(
                    name=row.name,
                    grade=row.grade,
                    points=row.points,
                    avatar=row.avatar,
                    language=row.language or "",
                )
                stats = db.query(SessionStatRecord).order_by(SessionStatRecord.id).all()
                for s in stats:
                    player.add_session(
                        SessionStat(
                            completed_at=_aware(s.completed_at),
                            category=s.category,
                            total_questions=s.total_questions,
                            correct_answers=s.correct_answers,
                            points_earned=s.points_earned,
                        )
                    )
                return player
        except SQLAlchemyError:
            logger.warning("Could not load player profile", exc_info=True)
            return None

    def save_player(self, player: Player) -> bool:
        if not self.initialize():
            return False
        try:
            with self.SessionLocal() as db:
                row = db.get(PlayerProfile, PROFILE_ID)
                if row is None:
                    row = PlayerProfile(id=PROFILE_ID)
                    db.add(row)
                row.name = player.name
                row.grade = player.grade
                row.points = player.points
                row.avatar = player.avatar
                row.language = player.language or ""
                db.commit()
            return True
        except SQLAlchemyError:
            logger.warning("Could not save player profile", exc_info=True)
            return False

    # ------------------------------------------------------------------
    # Answer log / session stats
    # ------------------------------------------------------------------
    def log_answer(self, record: AnswerRecord) -> bool:
        if not self.initialize():
            return False
        try:
            with self.SessionLocal() as db:
                db.add(
                    AnswerLog(
                        created_at=datetime.now(UTC),
                        category=record.category,
                        question=record.question,
                        correct_answer=record.correct_answer,
                        user_answer=record.user_answer,
                        is_correct=record.is_correct,
                        difficulty=record.difficulty,
                        streak_before=record.streak_before,
                        points_awarded=record.points_awarded,
                    )
                )
                db.commit()
            return True
        except SQLAlchemyError:
            logger.warning("Could not log answer", exc_info=True)
            return False

    def recent_answers(self, take: int = RECENT_ANSWERS_LIMIT) -> List[AnswerLogEntry]:
        if not self.initialize():
            return []
        take = max(1, take)
        try:
            with self.SessionLocal() as db:
                rows = db.query(AnswerLog).order_by(AnswerLog.id.desc()).limit(take).all()
                return [
                    AnswerLogEntry(
                        id=r.id,
                        created_at=_aware(r.created_at),
                        category=r.category,
                        question=r.question,
                        correct_answer=r.correct_answer,
                        user_answer=r.user_answer,
                        is_correct=r.is_correct,
                        difficulty=r.difficulty,
                        streak_before=r.streak_before,
                        points_awarded=r.points_awarded,
                    )
                    for r in rows
                ]
        except SQLAlchemyError:
            logger.warning("Could not read answer log", exc_info=True)
            return []

    def save_session_stat(self, stat: SessionStat) -> bool:
        if not self.initialize():
            return False
        try:
            with self.SessionLocal() as db:
                db.add(
                    SessionStatRecord(
                        completed_at=stat.completed_at,
                        category=stat.category,
                        total_questions=stat.total_questions,
                        correct_answers=stat.correct_answers,
                        points_earned=stat.points_earned,
                    )
                )
                db.commit()
            return True
        except SQLAlchemyError:
            logger.warning("Could not save session stat", exc_info=True)
            return False
