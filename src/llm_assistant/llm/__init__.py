from __future__ import annotations

"""Factory helpers for the LLM client."""

import logging

from ..settings import AssistantConfig, is_valid
from .base import LLMRequest
from .openai_client import (
    OpenAIClient,
    fetch_available_models,
    filter_chat_models,
    generate,
)

__all__ = [
    "get_llm_client",
    "OpenAIClient",
    "LLMRequest",
    "generate",
    "fetch_available_models",
    "filter_chat_models",
]


def get_llm_client(config: AssistantConfig | None) -> OpenAIClient | None:
    """Return a client bound to `config`, or None when the config is unusable."""
    if not is_valid(config):
        logging.warning("LLM client not created: configuration is invalid (check OPENAI_API_KEY)")
        return None
    return OpenAIClient(config)
