from __future__ import annotations

from fastapi import APIRouter, Depends

import stats
from deps.context import get_game
from engine import GameEngine
from schemas.stats import StatsOut, StatsSummaryOut

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=StatsOut)
def get_stats(game: GameEngine = Depends(get_game)):
    sessions = game.player.session_stats

    def out(summary: stats.StatsSummary) -> StatsSummaryOut:
        return StatsSummaryOut.model_validate(summary)

    return StatsOut(
        total_lessons=game.player.total_lessons(),
        overall_accuracy=game.player.overall_accuracy(),
        overall=out(stats.summarize(sessions)),
        today=out(stats.today(sessions)),
        this_week=out(stats.this_week(sessions)),
        this_month=out(stats.this_month(sessions)),
    )
