# edugames/llm_client.py
import logging
import os
from typing import Optional

import httpx

from edugames.schemas import GenerateRequest

logger = logging.getLogger(__name__)

# Read variables from environment, defaults match a local Ollama install
OLLAMA_URL = os.environ.get("OLLAMA_URL", "http://localhost:11434")
OLLAMA_MODEL_NAME = os.environ.get("OLLAMA_MODEL_NAME", "llama3.2")
OLLAMA_TIMEOUT = float(os.environ.get("OLLAMA_TIMEOUT", "60"))
OLLAMA_TEMPERATURE = float(os.environ.get("OLLAMA_TEMPERATURE", "0.7"))


class TransportFailure(Exception):
    """The generation service could not be reached or returned nothing usable."""


def build_request(prompt: str, json_output: bool = True) -> GenerateRequest:
    """Wrap an instruction in the /api/generate envelope."""
    return GenerateRequest(
        model=OLLAMA_MODEL_NAME,
        prompt=prompt,
        format="json" if json_output else None,
        stream=False,
        options={"temperature": OLLAMA_TEMPERATURE},
    )


async def invoke(
    request: GenerateRequest,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = OLLAMA_TIMEOUT,
) -> str:
    """One request/response exchange with the generation service.

    Returns the raw response body. Connection errors, deadline expiry, error
    statuses and empty bodies all raise TransportFailure; the caller decides
    whether to retry.
    """
    url = f"{OLLAMA_URL}/api/generate"
    payload = request.model_dump(exclude_none=True)

    logger.info("Attempting LLM call to %s with model %s", url, request.model)
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                resp = await own_client.post(url, json=payload)
        else:
            resp = await client.post(url, json=payload, timeout=timeout)
        resp.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx responses
    except httpx.TimeoutException as e:
        raise TransportFailure(f"Generation service timed out after {timeout}s") from e
    except (httpx.RequestError, httpx.HTTPStatusError) as e:
        raise TransportFailure(f"Generation service call failed: {e}") from e

    text = resp.text
    if not text.strip():
        raise TransportFailure("Generation service returned an empty body")
    return text
