from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class PlayerIn(BaseModel):
    name: str = ""
    # out-of-range grades are clamped, not rejected
    grade: int = 0
    avatar: Optional[str] = None
    # None keeps the current language, "" means device default
    language: Optional[str] = None


class PlayerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    name: str
    grade: int
    points: int
    avatar: str
    unlocked_avatars: List[str]
    language: str = ""


class PlayerSaveResponse(BaseModel):
    ok: bool
    feedback: str = ""
    player: Optional[PlayerOut] = None
    difficulty: int = 1
    streak: int = 0


class CategoryOut(BaseModel):
    key: str
    label: str
