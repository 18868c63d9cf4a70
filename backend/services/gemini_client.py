"""Google Gemini API wrapper with error classification."""

import json
import logging

import httpx
from google import genai
from google.genai import errors, types

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiError(Exception):
    """Gemini call failed and retrying will not help."""


class GeminiTransientError(GeminiError):
    """Network failure, timeout, rate limit or server error. Safe to retry."""


class GeminiResponseError(GeminiError):
    """Gemini answered but the body is not a JSON object."""


def create_client(api_key: str, timeout_s: float) -> genai.Client:
    """Build a client whose every request is bounded by ``timeout_s``."""
    return genai.Client(
        api_key=api_key,
        http_options=types.HttpOptions(timeout=int(timeout_s * 1000)),
    )


def _strip_code_fences(text: str) -> str:
    """Strip markdown code fences if present."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def generate_json(client: genai.Client, prompt: str, model: str = DEFAULT_MODEL) -> dict:
    """Send a prompt to Gemini and parse the JSON object it returns."""
    try:
        response = client.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.2,
                max_output_tokens=1024,
                response_mime_type="application/json",
            ),
        )
    except errors.APIError as e:
        if e.code == 429 or (e.code or 0) >= 500:
            raise GeminiTransientError(f"Gemini API error {e.code}: {e.message}") from e
        raise GeminiError(f"Gemini API error {e.code}: {e.message}") from e
    except httpx.TransportError as e:
        raise GeminiTransientError(f"Gemini transport error: {e}") from e

    text = _strip_code_fences(response.text or "")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise GeminiResponseError("Gemini response is not valid JSON") from e

    if not isinstance(data, dict):
        raise GeminiResponseError(f"Expected a JSON object, got {type(data).__name__}")
    return data
