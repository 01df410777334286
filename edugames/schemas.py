# edugames/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class QuizQuestion(BaseModel):
    question: str
    # always exactly four slots, padded/truncated before construction
    options: List[str] = Field(..., min_length=4, max_length=4)
    # serialized as "answer" on the wire
    correct_index: int = Field(..., ge=0, le=3, serialization_alias="answer")


class GeneratedQuestion(BaseModel):
    """Inner payload the generation service encodes inside its envelope."""
    # numeric answers like 10 or [8, 12, 0] are kept as their text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    q: str
    correct: str
    wrong: List[str]


class GenerateRequest(BaseModel):
    """Outbound envelope for the generation service's /api/generate."""
    model: str
    prompt: str
    format: Optional[str] = "json"
    stream: bool = False
    options: Dict[str, float] = {}


class ExplainRequest(BaseModel):
    question: str
    wrong: str
    correct: str


class ExplainResponse(BaseModel):
    explanation: str


# --- Question table / mini-game payloads ---

class BankQuestion(BaseModel):
    subject: Optional[str] = None
    question: str
    options: Optional[List[str]] = None
    answer: Optional[int] = None


class MathProblem(BaseModel):
    item: str
    price_per_kg: int
    quantity: int
    correct_answer: int


class ShotRequest(BaseModel):
    angle: float
    force: float


class ShotResult(BaseModel):
    distance: float
    result: str


class RunRequest(BaseModel):
    commands: List[int] = []


class RunResult(BaseModel):
    status: str
