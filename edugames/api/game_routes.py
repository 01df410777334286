# edugames/api/game_routes.py
from typing import Optional

from fastapi import APIRouter

from edugames.games import math_problem, physics_shot, tech_run
from edugames.question_bank import question_bank
from edugames.schemas import BankQuestion, MathProblem, RunRequest, RunResult, ShotRequest, ShotResult

router = APIRouter(prefix="/api", tags=["games"])


@router.get("/get_question", response_model=BankQuestion, response_model_exclude_none=True)
def get_bank_question(subject: Optional[str] = None):
    return question_bank.random_question(subject)


@router.get("/math/problem", response_model=MathProblem)
def get_math_problem():
    return math_problem()


@router.post("/physics/shot", response_model=ShotResult)
def play_shot(payload: ShotRequest):
    return physics_shot(payload.angle, payload.force)


@router.post("/tech/run", response_model=RunResult)
def run_robot(payload: RunRequest):
    return RunResult(status=tech_run(payload.commands))
