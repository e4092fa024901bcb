from __future__ import annotations

from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from deps.context import get_game, get_storage
from engine import GameEngine
from schemas.player import CategoryOut, PlayerIn, PlayerOut, PlayerSaveResponse
from storage import Storage

router = APIRouter(prefix="/player", tags=["player"])


@router.get("", response_model=PlayerOut)
def get_player(game: GameEngine = Depends(get_game)):
    if not game.player.name:
        raise HTTPException(status_code=404, detail="No player profile yet")
    return PlayerOut.model_validate(game.player)


@router.post("", response_model=PlayerSaveResponse)
def save_player(
    req: PlayerIn,
    background: BackgroundTasks,
    game: GameEngine = Depends(get_game),
    storage: Storage = Depends(get_storage),
):
    # blank names never reach the engine
    if not req.name.strip():
        return {
            "ok": False,
            "feedback": game.localizer.get("Alert_NameRequired_Message"),
            "difficulty": game.difficulty,
            "streak": game.streak,
        }

    game.set_player(req.name, req.grade, req.avatar)
    if req.language is not None:
        game.player.language = req.language.strip()
        game.localizer.set_language(game.player.language)

    background.add_task(storage.save_player, game.player)
    return {
        "ok": True,
        "player": PlayerOut.model_validate(game.player),
        "difficulty": game.difficulty,
        "streak": game.streak,
    }


@router.get("/categories", response_model=List[CategoryOut])
def list_categories(game: GameEngine = Depends(get_game)):
    return [
        {"key": c.value, "label": game.localizer.get(c.value)} for c in game.get_categories()
    ]


@router.get("/avatars", response_model=List[str])
def list_avatars(game: GameEngine = Depends(get_game)):
    return game.get_all_avatars()
