from __future__ import annotations

"""Shared request type and error kinds for the provider client.

The client never lets these exceptions escape its public methods: `generate`
reports a boolean and `fetch_available_models` returns ``None`` on failure.
The distinct kinds only exist so the logs say *why* a call failed.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LLMRequest:
    """Single-use value object consumed by exactly one `generate` call."""

    prompt: Optional[str] = None
    original_email: Optional[str] = None
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    response: Optional[str] = None


class LLMError(RuntimeError):
    """Base class for every failure raised inside the client."""

    kind = "error"


class InvalidInputError(LLMError):
    """Missing client, request, prompt or an unusable API key."""

    kind = "invalid_input"


class TransportError(LLMError):
    """DNS, connect, TLS, timeout or HTTP status failure."""

    kind = "transport"


class MalformedResponseError(LLMError):
    """Body is not JSON or lacks the expected members."""

    kind = "malformed_response"


class EmptyResultError(LLMError):
    """Well-formed JSON with nothing in it."""

    kind = "empty_result"
