"""Tests for LLMClient (Claude API wrapper)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from meta_optimizer.clients.llm_client import LLMClient, LLMResponse


def _make_api_message(text: str, input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = [MagicMock(text=text)]
    return message


class TestLLMClientInit:
    def test_init_default_disables_sdk_retries(self):
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient()
            mock_cls.assert_called_once_with(max_retries=0)

    def test_init_with_api_key_passes_key(self):
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(api_key="test-key")
            mock_cls.assert_called_once_with(max_retries=0, api_key="test-key")

    def test_init_with_timeout_passes_timeout(self):
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(timeout=30.0)
            mock_cls.assert_called_once_with(max_retries=0, timeout=30.0)


class TestLLMClientGenerate:
    async def test_generate_returns_llm_response(self):
        """generate() wraps API response fields into an LLMResponse dataclass."""
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(
                return_value=_make_api_message("hello world", input_tokens=100, output_tokens=50)
            )
            mock_cls.return_value = mock_client

            llm = LLMClient()
            result = await llm.generate("say hello")

        assert isinstance(result, LLMResponse)
        assert result.text == "hello world"
        assert result.input_tokens == 100
        assert result.output_tokens == 50

    async def test_generate_sends_system_prompt_when_given(self):
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=_make_api_message("ok"))
            mock_cls.return_value = mock_client

            llm = LLMClient()
            await llm.generate("prompt", system="be brief", model="m", max_tokens=10)

        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["system"] == "be brief"
        assert kwargs["model"] == "m"
        assert kwargs["max_tokens"] == 10
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]

    async def test_generate_omits_empty_system(self):
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=_make_api_message("ok"))
            mock_cls.return_value = mock_client

            await LLMClient().generate("prompt")

        assert "system" not in mock_client.messages.create.call_args.kwargs

    async def test_generate_makes_single_attempt_on_failure(self):
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(side_effect=ConnectionError("down"))
            mock_cls.return_value = mock_client

            llm = LLMClient()
            with pytest.raises(ConnectionError):
                await llm.generate("prompt")

        assert mock_client.messages.create.await_count == 1


class TestLLMClientGenerateJson:
    async def test_generate_json_parses_valid_json_text(self):
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(
                return_value=_make_api_message('{"key": "value", "count": 3}')
            )
            mock_cls.return_value = mock_client

            llm = LLMClient()
            result = await llm.generate_json("give me json")

        assert result == {"key": "value", "count": 3}

    async def test_generate_json_raises_on_non_json_response(self):
        with patch("meta_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(
                return_value=_make_api_message("this is plain text, not json")
            )
            mock_cls.return_value = mock_client

            llm = LLMClient()
            with pytest.raises(ValueError):
                await llm.generate_json("give me json")
