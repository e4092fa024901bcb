from __future__ import annotations

from fastapi import APIRouter, Depends

from config import RECENT_ANSWERS_LIMIT
from deps.auth import require_client
from deps.context import get_storage
from schemas.answers import AnswerLogOut
from storage import Storage

router = APIRouter(prefix="/answers", tags=["answers"], dependencies=[Depends(require_client)])


@router.get("/recent-list")
def answers_recent(limit: int = 20, storage: Storage = Depends(get_storage)):
    limit = max(1, min(limit, RECENT_ANSWERS_LIMIT))
    rows = [AnswerLogOut.model_validate(a).model_dump(mode="json") for a in storage.recent_answers(limit)]
    return {"ok": True, "items": rows, "count": len(rows)}
