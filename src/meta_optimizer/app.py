"""Startup wiring: validate configuration and build the controller."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from meta_optimizer.clients.llm_client import LLMClient
from meta_optimizer.config import AppConfig, load_api_key, load_config
from meta_optimizer.controller import AppController
from meta_optimizer.pipeline.meta_suggester import MetaSuggester

logger = logging.getLogger(__name__)


def bootstrap(
    config: AppConfig | None = None,
    env: Mapping[str, str] | None = None,
) -> AppController:
    """Build a ready controller.

    Raises ConfigurationError when the API key is missing; nothing touches
    the network before this check passes.
    """
    config = config or load_config()
    api_key = load_api_key(env)

    llm = LLMClient(api_key=api_key, timeout=config.llm.timeout)
    suggester = MetaSuggester(
        llm,
        model=config.llm.model,
        timeout=config.llm.timeout,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )
    logger.info("Optimizer ready: model=%s timeout=%ds", config.llm.model, config.llm.timeout)
    return AppController(suggester)
