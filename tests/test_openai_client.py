"""Tests for the OpenAI completion provider wrapper."""

from unittest.mock import MagicMock, patch

import httpx
from openai import APIError, APITimeoutError

from wpclife.integrations.openai_client import OpenAIClient, _timeout_from_env


def _response(content):
    response = MagicMock()
    choice = MagicMock()
    choice.message.content = content
    response.choices = [choice]
    return response


def _request():
    return httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class TestOpenAIClient:

    def test_no_api_key_is_not_configured(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        client = OpenAIClient()
        assert client.is_configured is False
        assert client.complete("system", "buy milk") is None

    @patch("wpclife.integrations.openai_client.OpenAI")
    def test_client_is_built_with_timeout_and_no_retries(self, mock_openai):
        OpenAIClient(api_key="test-key", timeout=7)
        mock_openai.assert_called_once_with(api_key="test-key", timeout=7, max_retries=0)

    @patch("wpclife.integrations.openai_client.OpenAI")
    def test_complete_returns_content(self, mock_openai):
        mock_openai.return_value.chat.completions.create.return_value = _response('[{"type": "grocery"}]')
        client = OpenAIClient(api_key="test-key")

        assert client.complete("system prompt", "buy milk") == '[{"type": "grocery"}]'

        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 2000
        assert kwargs["messages"] == [
            {"role": "system", "content": "system prompt"},
            {"role": "user", "content": "buy milk"},
        ]

    @patch("wpclife.integrations.openai_client.OpenAI")
    def test_empty_content_returns_none(self, mock_openai):
        mock_openai.return_value.chat.completions.create.return_value = _response("   ")
        assert OpenAIClient(api_key="test-key").complete("s", "t") is None

    @patch("wpclife.integrations.openai_client.OpenAI")
    def test_no_choices_returns_none(self, mock_openai):
        response = MagicMock()
        response.choices = []
        mock_openai.return_value.chat.completions.create.return_value = response
        assert OpenAIClient(api_key="test-key").complete("s", "t") is None

    @patch("wpclife.integrations.openai_client.OpenAI")
    def test_api_error_returns_none(self, mock_openai):
        mock_openai.return_value.chat.completions.create.side_effect = APIError(
            "quota", request=_request(), body=None
        )
        assert OpenAIClient(api_key="test-key").complete("s", "t") is None

    @patch("wpclife.integrations.openai_client.OpenAI")
    def test_timeout_returns_none(self, mock_openai):
        mock_openai.return_value.chat.completions.create.side_effect = APITimeoutError(request=_request())
        assert OpenAIClient(api_key="test-key").complete("s", "t") is None

    @patch("wpclife.integrations.openai_client.OpenAI")
    def test_unexpected_error_returns_none(self, mock_openai):
        mock_openai.return_value.chat.completions.create.side_effect = ConnectionError("boom")
        assert OpenAIClient(api_key="test-key").complete("s", "t") is None


class TestTimeoutFromEnv:

    def test_default(self, monkeypatch):
        monkeypatch.delenv("OPENAI_TIMEOUT_SEC", raising=False)
        assert _timeout_from_env() == 15.0

    def test_override(self, monkeypatch):
        monkeypatch.setenv("OPENAI_TIMEOUT_SEC", "4.5")
        assert _timeout_from_env() == 4.5

    def test_invalid_falls_back(self, monkeypatch):
        monkeypatch.setenv("OPENAI_TIMEOUT_SEC", "soon")
        assert _timeout_from_env() == 15.0
        monkeypatch.setenv("OPENAI_TIMEOUT_SEC", "-1")
        assert _timeout_from_env() == 15.0
