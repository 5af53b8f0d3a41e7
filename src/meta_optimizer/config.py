"""Application configuration loaded from config.yaml and the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from meta_optimizer.errors import ConfigurationError

API_KEY_ENV = "ANTHROPIC_API_KEY"


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    timeout: int = 30
    max_tokens: int = 1024
    temperature: float = 0.3

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"llm.timeout must be between 1 and 600, got {self.timeout}")
        if not 1 <= self.max_tokens <= 8192:
            raise ValueError(f"llm.max_tokens must be between 1 and 8192, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"llm.temperature must be between 0 and 1, got {self.temperature}")


@dataclass(frozen=True)
class UIConfig:
    preview_url: str = "https://www.yourwebsite.com/your-awesome-page"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"ui.log_level is not a logging level: {self.log_level}")


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        ui=UIConfig(**raw.get("ui", {})),
    )


def load_api_key(env: Mapping[str, str] | None = None) -> str:
    """Return the Anthropic API key or raise ConfigurationError when it is unset."""
    source = os.environ if env is None else env
    key = (source.get(API_KEY_ENV) or "").strip()
    if not key:
        raise ConfigurationError(f"{API_KEY_ENV} environment variable not set")
    return key
