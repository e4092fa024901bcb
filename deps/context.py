"""Per-app context objects, created in ``main.create_app`` and kept on ``app.state``."""

from typing import Dict

from fastapi import HTTPException, Request

from engine import GameEngine
from quiz import QuizSession
from storage import Storage


def get_game(request: Request) -> GameEngine:
    return request.app.state.game


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_quizzes(request: Request) -> Dict[str, QuizSession]:
    return request.app.state.quizzes


def get_quiz(quiz_id: str, request: Request) -> QuizSession:
    quiz = request.app.state.quizzes.get(quiz_id)
    if quiz is None:
        raise HTTPException(status_code=404, detail="Quiz not found")
    return quiz
