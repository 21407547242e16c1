"""Tests for the LiteLLM provider."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from novaroute.providers.litellm_provider import LiteLLMProvider


def fake_completion(content="CHAT", finish_reason="stop"):
    """Build an object shaped like a LiteLLM ModelResponse."""
    return SimpleNamespace(
        choices=[
            SimpleNamespace(
                message=SimpleNamespace(content=content),
                finish_reason=finish_reason,
            )
        ],
        usage=SimpleNamespace(prompt_tokens=40, completion_tokens=1, total_tokens=41),
    )


class TestLiteLLMProvider:
    """Test LiteLLMProvider."""

    def test_default_model(self):
        """Test the default model."""
        provider = LiteLLMProvider(default_model="gemini/gemini-1.5-flash")
        assert provider.get_default_model() == "gemini/gemini-1.5-flash"

    @pytest.mark.asyncio
    async def test_chat_parses_response(self):
        """Test that content, finish reason and usage are parsed."""
        provider = LiteLLMProvider(api_key="sk-test")
        with patch(
            "novaroute.providers.litellm_provider.acompletion",
            new=AsyncMock(return_value=fake_completion("METADATA")),
        ):
            response = await provider.chat(messages=[{"role": "user", "content": "hi"}])

        assert response.content == "METADATA"
        assert response.finish_reason == "stop"
        assert response.usage["total_tokens"] == 41

    @pytest.mark.asyncio
    async def test_chat_passes_credentials_and_endpoint(self):
        """Test that key, base and headers are passed to litellm."""
        provider = LiteLLMProvider(
            api_key="sk-test",
            api_base="http://localhost:4000",
            extra_headers={"X-App": "novaroute"},
        )
        mock = AsyncMock(return_value=fake_completion())
        with patch("novaroute.providers.litellm_provider.acompletion", new=mock):
            await provider.chat(
                messages=[{"role": "user", "content": "hi"}],
                model="gpt-4o-mini",
                max_tokens=10,
                temperature=0.1,
            )

        kwargs = mock.await_args.kwargs
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["api_base"] == "http://localhost:4000"
        assert kwargs["extra_headers"] == {"X-App": "novaroute"}
        assert kwargs["max_tokens"] == 10
        assert kwargs["temperature"] == 0.1
        assert kwargs["model"] == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_chat_omits_unset_credentials(self):
        """Test that unset credentials are not passed."""
        provider = LiteLLMProvider()
        mock = AsyncMock(return_value=fake_completion())
        with patch("novaroute.providers.litellm_provider.acompletion", new=mock):
            await provider.chat(messages=[{"role": "user", "content": "hi"}])

        kwargs = mock.await_args.kwargs
        assert "api_key" not in kwargs
        assert "api_base" not in kwargs
        assert "extra_headers" not in kwargs
        assert kwargs["model"] == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_chat_reports_errors_in_band(self):
        """Test that litellm exceptions come back as error responses."""
        provider = LiteLLMProvider(api_key="sk-bad")
        with patch(
            "novaroute.providers.litellm_provider.acompletion",
            new=AsyncMock(side_effect=RuntimeError("AuthenticationError")),
        ):
            response = await provider.chat(messages=[{"role": "user", "content": "hi"}])

        assert response.is_error
        assert "AuthenticationError" in response.content
