# edugames/api/quiz_routes.py
from fastapi import APIRouter

from edugames.quiz_generator import explain, generate_question
from edugames.schemas import ExplainRequest, ExplainResponse, QuizQuestion

DEFAULT_SUBJECT = "General Knowledge"
DEFAULT_DIFFICULTY = "Medium"

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.get("/get_question", response_model=QuizQuestion)
async def get_ai_question(subject: str = DEFAULT_SUBJECT, difficulty: str = DEFAULT_DIFFICULTY):
    # Always 200: generation failures degrade to the fallback question
    return await generate_question(subject or DEFAULT_SUBJECT, difficulty or DEFAULT_DIFFICULTY)


@router.post("/explain", response_model=ExplainResponse)
async def explain_answer(payload: ExplainRequest):
    text = await explain(payload.question, payload.wrong, payload.correct)
    return ExplainResponse(explanation=text)
