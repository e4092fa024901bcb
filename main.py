import logging
import random
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import APP_TITLE, DEFAULT_LANGUAGE, LOG_LEVEL
from engine import GameEngine
from localization import Localizer

# Routers
from routers.answers import router as answers_router
from routers.health import router as health_router
from routers.player import router as player_router
from routers.quiz import router as quiz_router
from routers.stats import router as stats_router
from storage import Storage

logger = logging.getLogger("math-quest")
logging.basicConfig(level=LOG_LEVEL)


def create_app(
    database_url: Optional[str] = None,
    rng: Optional[random.Random] = None,
    storage: Optional[Storage] = None,
) -> FastAPI:
    app = FastAPI(title=APP_TITLE)

    # Allow calls from the web client dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*", "x-api-key", "x-admin-token"],
    )

    storage = storage or Storage(database_url)
    game = GameEngine(Localizer(DEFAULT_LANGUAGE), rng=rng)

    stored = storage.load_player()
    if stored is not None and stored.name.strip():
        game.restore(stored)
        if game.player.language:
            game.localizer.set_language(game.player.language)
        logger.info("Restored profile %r (grade %d)", game.player.name, game.player.grade)

    app.state.storage = storage
    app.state.game = game
    app.state.quizzes = {}

    @app.get("/")
    def health_root():
        return {"ok": True}

    app.include_router(player_router)  # /player, /player/categories, /player/avatars
    app.include_router(quiz_router)  # /quiz/...
    app.include_router(stats_router)  # /stats
    app.include_router(answers_router)  # /answers/...
    app.include_router(health_router)  # /health/...
    return app


app = create_app()
