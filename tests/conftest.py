"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from meta_optimizer.clients.llm_client import LLMClient, LLMResponse
from meta_optimizer.models.suggestion import SuggestionResult
from meta_optimizer.pipeline.meta_suggester import MetaSuggester


@pytest.fixture
def sample_reply() -> dict:
    return {
        "analysis": "The title is short and lacks a primary keyword.",
        "optimizedTitle": "Handmade Ceramic Mugs | Small-Batch Stoneware Shop",
        "optimizedDescription": (
            "Shop small-batch stoneware mugs, glazed by hand in our studio. "
            "Microwave and dishwasher safe, shipped free on orders over $50."
        ),
    }


@pytest.fixture
def sample_result(sample_reply) -> SuggestionResult:
    return SuggestionResult.model_validate(sample_reply)


@pytest.fixture
def mock_llm_client(sample_reply) -> LLMClient:
    """Create a mock LLM client that replies with a valid suggestion."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text=json.dumps(sample_reply), input_tokens=120, output_tokens=80)
    )
    return client


@pytest.fixture
def mock_suggester(sample_result) -> MetaSuggester:
    """Create a mock suggester returning sample_result."""
    suggester = AsyncMock(spec=MetaSuggester)
    suggester.request_suggestions = AsyncMock(return_value=sample_result)
    return suggester
