from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text

from db import alembic_script
from deps.context import get_storage
from storage import Storage

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/db")
def health_db(storage: Storage = Depends(get_storage)):
    try:
        with storage.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")


def _alembic_heads() -> list[str]:
    return list(alembic_script().get_heads())


@router.get("/migrations")
def health_migrations(storage: Storage = Depends(get_storage)):
    heads: list[str] = []
    try:
        heads = _alembic_heads()
    except Exception:
        heads = []

    db_ver = None
    try:
        with storage.engine.connect() as conn:
            try:
                db_ver = conn.execute(
                    text("SELECT version_num FROM alembic_version")
                ).scalar_one_or_none()
            except Exception:
                # tables created without Alembic have no version table
                db_ver = None
    except Exception as e:
        return {
            "ok": False,
            "error": f"db_connect_failed: {e}",
            "code_heads": heads,
            "db_version": db_ver,
        }

    synced = (db_ver in heads) if heads else False
    return {"ok": synced, "synced": synced, "db_version": db_ver, "code_heads": heads}
