"""Shared helpers for building fake Gemini traffic."""

import json

import httpx


def gemini_reply(text: str) -> httpx.Response:
    """A successful generateContent response carrying text."""
    return httpx.Response(
        200,
        json={"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}]},
    )


def prompt_of(request: httpx.Request) -> str:
    """The prompt text of a generateContent request."""
    body = json.loads(request.content)
    return body["contents"][0]["parts"][0]["text"]
