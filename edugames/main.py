# edugames/main.py

import logging
import os

import uvicorn
from fastapi import FastAPI

from edugames.api.game_routes import router as game_router
from edugames.api.quiz_routes import router as quiz_router
from edugames.question_bank import QUESTIONS_CSV, question_bank

# Configure basic logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# APP Initialization
app = FastAPI(title="Edu Games")
app.include_router(quiz_router)  # /api/ai/get_question, /api/ai/explain
app.include_router(game_router)  # /api/get_question, /api/math, /api/physics, /api/tech


@app.on_event("startup")
async def startup_event():
    # flat-file question table is read once per process
    question_bank.load(QUESTIONS_CSV)


@app.get("/")
async def health_root():
    return {"ok": True}


if __name__ == "__main__":
    uvicorn.run("edugames.main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8080)))
