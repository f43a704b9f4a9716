from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..settings import AssistantConfig, DEFAULT_SYSTEM_PROMPT, MIN_API_KEY_LENGTH, is_valid
from . import transport
from .base import (
    EmptyResultError,
    InvalidInputError,
    LLMError,
    LLMRequest,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://api.openai.com/v1"
CHAT_COMPLETIONS_URL = f"{BASE_URL}/chat/completions"
MODELS_URL = f"{BASE_URL}/models"

MAX_TOKENS = 500
TEMPERATURE = 0.7
COMPLETION_TIMEOUT = 30
MODELS_TIMEOUT = 10

CHAT_MODEL_PREFIXES = ("gpt-4", "gpt-3.5")
EXCLUDED_MODEL_SUFFIXES = ("-vision", "-instruct", "-audio-preview")
# Research preview family, not offered for replies
EXCLUDED_MODEL_PREFIXES = ("gpt-4.5",)


class OpenAIClient:
    """Chat Completion client bound to a single configuration.

    The client holds nothing but the read-only config, so one instance may be
    shared across threads. Build a new one whenever the settings change.
    """

    def __init__(self, config: AssistantConfig):
        if not is_valid(config):
            raise InvalidInputError("Refusing to build a client from an invalid configuration")
        self.config = config

    @property
    def model(self) -> str:
        return self.config.model

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        # The prompt goes out verbatim; context fields on the request are not sent.
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": self.config.system_prompt or DEFAULT_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
        }

    def complete(self, prompt: str) -> str:
        """Send one chat completion and return the trimmed reply text.

        Raises an `LLMError` subclass on any failure.
        """
        if not self.config.api_key:
            raise InvalidInputError("Client has no API key")
        if not prompt:
            raise InvalidInputError("Prompt missing")

        payload = self.build_payload(prompt)
        logger.debug("[chat] model=%s prompt_chars=%d payload=%s", self.model, len(prompt), payload)
        data = transport.post_json(CHAT_COMPLETIONS_URL, payload, self._headers(), COMPLETION_TIMEOUT)
        return extract_reply(data)

    def generate(self, request: LLMRequest | None) -> bool:
        """Fill `request.response` with the generated reply.

        Returns False on every failure and leaves `request.response` untouched.
        """
        if request is None or not request.prompt:
            logger.warning("[chat] rejected: request or prompt missing")
            return False
        try:
            reply = self.complete(request.prompt)
        except LLMError as exc:
            logger.error("[chat] generation failed (%s): %s", exc.kind, exc)
            return False
        request.response = reply
        logger.debug("[chat] reply_chars=%d", len(reply))
        return True


def extract_reply(data: Any) -> str:
    """Pull `choices[0].message.content` out of a completion body."""
    if not isinstance(data, dict) or not isinstance(data.get("choices"), list):
        raise MalformedResponseError("Response has no 'choices' array")
    choices = data["choices"]
    if not choices:
        raise EmptyResultError("Response contains zero choices")
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise MalformedResponseError("First choice has no message content")
    return content.strip()


def generate(client: OpenAIClient | None, request: LLMRequest | None) -> bool:
    if client is None:
        logger.warning("[chat] rejected: no client configured")
        return False
    return client.generate(request)


def is_chat_model(model_id: Any) -> bool:
    return (
        isinstance(model_id, str)
        and model_id.startswith(CHAT_MODEL_PREFIXES)
        and not model_id.startswith(EXCLUDED_MODEL_PREFIXES)
        and not model_id.endswith(EXCLUDED_MODEL_SUFFIXES)
    )


def filter_chat_models(model_ids: Iterable[Any]) -> List[str]:
    """Keep supported chat models, preserving listing order."""
    return [m for m in model_ids if is_chat_model(m)]


def fetch_available_models(api_key: str | None) -> Optional[List[str]]:
    """Return chat-capable model ids for `api_key`, or None if the call failed.

    An empty list means the listing worked but nothing matched.
    """
    if not api_key or len(api_key) <= MIN_API_KEY_LENGTH:
        logger.warning("[models] rejected: API key missing or too short")
        return None

    headers = {"Authorization": f"Bearer {api_key}"}
    try:
        data = transport.get_json(MODELS_URL, headers, MODELS_TIMEOUT)
        if not isinstance(data, dict) or not isinstance(data.get("data"), list):
            raise MalformedResponseError("Response has no 'data' array")
    except LLMError as exc:
        logger.error("[models] listing failed (%s): %s", exc.kind, exc)
        return None

    ids = [entry.get("id") for entry in data["data"] if isinstance(entry, dict)]
    models = filter_chat_models(ids)
    logger.info("[models] listed=%d supported=%d", len(ids), len(models))
    return models
