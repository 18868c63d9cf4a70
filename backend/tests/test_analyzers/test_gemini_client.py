"""Tests for the Gemini client wrapper using a stand-in client."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest

from services import gemini_client


def _client_returning(text):
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text=text)
    return client


def test_generate_json_plain():
    client = _client_returning('{"atsScore": 80}')
    assert gemini_client.generate_json(client, "prompt") == {"atsScore": 80}

    kwargs = client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == gemini_client.DEFAULT_MODEL
    assert kwargs["contents"] == "prompt"


def test_generate_json_strips_code_fences():
    client = _client_returning('```json\n{"atsScore": 55}\n```')
    assert gemini_client.generate_json(client, "prompt") == {"atsScore": 55}


def test_generate_json_invalid_json():
    client = _client_returning("not json at all")
    with pytest.raises(gemini_client.GeminiResponseError):
        gemini_client.generate_json(client, "prompt")


def test_generate_json_requires_object():
    client = _client_returning("[1, 2, 3]")
    with pytest.raises(gemini_client.GeminiResponseError):
        gemini_client.generate_json(client, "prompt")


def test_generate_json_empty_text():
    client = _client_returning(None)
    with pytest.raises(gemini_client.GeminiResponseError):
        gemini_client.generate_json(client, "prompt")


def test_transport_error_is_transient():
    client = MagicMock()
    client.models.generate_content.side_effect = httpx.ConnectError("connection refused")
    with pytest.raises(gemini_client.GeminiTransientError):
        gemini_client.generate_json(client, "prompt")


def test_timeout_is_transient():
    client = MagicMock()
    client.models.generate_content.side_effect = httpx.ReadTimeout("timed out")
    with pytest.raises(gemini_client.GeminiTransientError):
        gemini_client.generate_json(client, "prompt")
