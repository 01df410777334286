# edugames/quiz_generator.py
"""
Turns a (subject, difficulty) request into a four-option quiz question using
the generation service, with validation, repair, bounded retry and a fixed
fallback question. Also produces free-text explanations for wrong answers.
"""
import json
import logging
import os
import random
import re
import time
from typing import Optional

import httpx
from pydantic import ValidationError

from edugames.llm_client import TransportFailure, build_request, invoke
from edugames.prompts import build_explain_prompt, build_prompt
from edugames.schemas import GeneratedQuestion, QuizQuestion

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
OPTION_COUNT = 4
PLACEHOLDER_OPTION = "None"

FALLBACK_QUESTION = "AI is resting. What is 5 + 5?"
FALLBACK_OPTIONS = ("8", "10", "12", "0")
FALLBACK_ANSWER = 1

EXPLAIN_ERROR = "Error: could not get an explanation from the AI (connection problem)."

_FENCE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL)


class ValidationFailure(ValueError):
    """The generation service answered, but not with a usable question."""


def _fresh_rng() -> random.Random:
    # one generator per call; nanosecond clock mixed with OS entropy
    return random.Random(time.time_ns() ^ int.from_bytes(os.urandom(8), "big"))


def _unwrap_envelope(raw_text: str) -> str:
    """Return the string held in the envelope's ``response`` field."""
    try:
        envelope = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise ValidationFailure(f"Envelope is not valid JSON: {e}") from e
    if not isinstance(envelope, dict):
        raise ValidationFailure("Envelope is not a JSON object")
    inner = envelope.get("response")
    if not isinstance(inner, str):
        raise ValidationFailure("Envelope has no string 'response' field")
    return inner


def parse_and_repair(raw_text: str) -> QuizQuestion:
    """Decode both envelope layers and normalize to exactly four options.

    The correct answer always sits at index 0 of the result; shuffle it
    afterwards with :func:`shuffle_options`.
    """
    inner = _unwrap_envelope(raw_text)
    fenced = _FENCE.match(inner)
    if fenced:
        inner = fenced.group(1)

    try:
        data = json.loads(inner)
    except json.JSONDecodeError as e:
        raise ValidationFailure(f"Inner payload is not valid JSON: {e}") from e

    try:
        generated = GeneratedQuestion.model_validate(data)
    except ValidationError as e:
        raise ValidationFailure(f"Inner payload does not match the question schema: {e}") from e

    # correct answer first, so truncation can never drop it
    options = [generated.correct, *generated.wrong][:OPTION_COUNT]
    options += [PLACEHOLDER_OPTION] * (OPTION_COUNT - len(options))
    return QuizQuestion(question=generated.q, options=options, correct_index=0)


def shuffle_options(question: QuizQuestion, rng: Optional[random.Random] = None) -> QuizQuestion:
    """Randomly permute the options and re-point ``correct_index``.

    The new index is the first slot whose text equals the correct answer, so a
    wrong answer with identical text may be reported instead.
    """
    rng = rng or _fresh_rng()
    correct = question.options[question.correct_index]
    options = list(question.options)
    rng.shuffle(options)
    return QuizQuestion(
        question=question.question,
        options=options,
        correct_index=options.index(correct),
    )


def fallback_question() -> QuizQuestion:
    return QuizQuestion(
        question=FALLBACK_QUESTION,
        options=list(FALLBACK_OPTIONS),
        correct_index=FALLBACK_ANSWER,
    )


async def generate_question(
    subject: str,
    difficulty: str,
    client: Optional[httpx.AsyncClient] = None,
) -> QuizQuestion:
    """Generate a shuffled question, retrying up to MAX_ATTEMPTS times.

    Never raises for service or payload problems; returns the fallback
    question once every attempt has failed.
    """
    for attempt in range(1, MAX_ATTEMPTS + 1):
        rng = _fresh_rng()
        prompt, subtopic = build_prompt(subject, difficulty, rng)
        logger.info(
            "AI attempt %d/%d: subject=%s subtopic=%s difficulty=%s",
            attempt, MAX_ATTEMPTS, subject, subtopic, difficulty,
        )
        try:
            raw_text = await invoke(build_request(prompt), client=client)
            question = parse_and_repair(raw_text)
        except (TransportFailure, ValidationFailure):
            logger.warning("AI attempt %d/%d failed", attempt, MAX_ATTEMPTS, exc_info=True)
            continue

        logger.info("AI attempt %d succeeded: %.40s", attempt, question.question)
        return shuffle_options(question, rng)

    logger.warning("All %d AI attempts failed for subject %s. Using fallback question.", MAX_ATTEMPTS, subject)
    return fallback_question()


async def explain(
    question: str,
    wrong_choice: str,
    correct_choice: str,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Ask once for a rationale; return EXPLAIN_ERROR on any failure."""
    prompt = build_explain_prompt(question, wrong_choice, correct_choice)
    try:
        raw_text = await invoke(build_request(prompt, json_output=False), client=client)
        return _unwrap_envelope(raw_text)
    except (TransportFailure, ValidationFailure):
        logger.warning("Explanation request failed", exc_info=True)
        return EXPLAIN_ERROR
