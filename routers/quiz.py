from __future__ import annotations

import uuid
from typing import Dict

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from answers import AnswerError, parse_answer
from deps.context import get_game, get_quiz, get_quizzes, get_storage
from engine import GameEngine
from quiz import QuizFinishedError, QuizSession
from schemas.quiz import AnswerRequest, AnswerResponse, QuizOut, QuizStartRequest
from storage import Storage

router = APIRouter(prefix="/quiz", tags=["quiz"])


def _quiz_out(quiz_id: str, quiz: QuizSession) -> Dict:
    game = quiz.game
    current = quiz.current
    return {
        "quiz_id": quiz_id,
        "category": quiz.category.value,
        "label": game.localizer.get(quiz.category.value),
        "index": quiz.index,
        "total": quiz.total,
        "correct": quiz.correct,
        "points_earned": quiz.points_earned,
        "question": current.text if current else None,
        "finished": quiz.finished,
        "difficulty": game.difficulty,
        "streak": game.streak,
        "points": game.player.points,
    }


@router.post("", response_model=QuizOut)
def start_quiz(
    req: QuizStartRequest,
    game: GameEngine = Depends(get_game),
    quizzes: Dict[str, QuizSession] = Depends(get_quizzes),
):
    # one player context, so only the newest quiz is kept
    quizzes.clear()
    quiz_id = uuid.uuid4().hex
    quizzes[quiz_id] = QuizSession(game, req.category, req.count)
    return _quiz_out(quiz_id, quizzes[quiz_id])


@router.get("/{quiz_id}", response_model=QuizOut)
def get_quiz_state(quiz_id: str, quiz: QuizSession = Depends(get_quiz)):
    return _quiz_out(quiz_id, quiz)


@router.post("/{quiz_id}/answer", response_model=AnswerResponse)
def submit_answer(
    req: AnswerRequest,
    background: BackgroundTasks,
    quiz: QuizSession = Depends(get_quiz),
    storage: Storage = Depends(get_storage),
):
    game = quiz.game
    state = {"difficulty": game.difficulty, "streak": game.streak, "points": game.player.points}

    if not req.answer.strip():
        return {"ok": False, "feedback": game.localizer.get("Quiz_EnterAnswer_Message"), **state}
    try:
        user_answer = parse_answer(req.answer)
    except AnswerError as e:
        return {"ok": False, "feedback": str(e), **state}

    try:
        outcome = quiz.submit(user_answer)
    except QuizFinishedError:
        raise HTTPException(status_code=409, detail="Quiz already finished")

    # persistence never holds up the next question
    background.add_task(storage.log_answer, outcome.record)
    background.add_task(storage.save_player, game.player)
    if outcome.session_stat is not None:
        background.add_task(storage.save_session_stat, outcome.session_stat)

    return {
        "ok": True,
        "correct": outcome.correct,
        "feedback": outcome.feedback,
        "expected": float(outcome.expected),
        "expected_str": outcome.expected_str,
        "base_points": outcome.base_points,
        "bonus": outcome.bonus,
        "points_awarded": outcome.points_awarded,
        "unlocked_avatars": outcome.unlocked_avatars,
        "difficulty": game.difficulty,
        "streak": game.streak,
        "points": game.player.points,
        "finished": outcome.finished,
        "summary": quiz.finished_message() if outcome.finished else None,
    }


@router.post("/{quiz_id}/restart", response_model=QuizOut)
def restart_quiz(quiz_id: str, quiz: QuizSession = Depends(get_quiz)):
    quiz.restart()
    return _quiz_out(quiz_id, quiz)
