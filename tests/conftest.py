"""Shared fixtures for the edugames tests."""

import json

import pytest


@pytest.fixture
def make_envelope():
    """Build a generation-service reply that wraps ``payload`` as an encoded string."""

    def _make(payload):
        inner = payload if isinstance(payload, str) else json.dumps(payload)
        return json.dumps({"model": "llama3.2", "response": inner, "done": True})

    return _make


@pytest.fixture
def derivative_payload() -> dict:
    return {"q": "What is the derivative of x^2?", "correct": "2x", "wrong": ["x", "2", "x^2"]}
