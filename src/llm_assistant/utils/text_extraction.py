from __future__ import annotations

"""String heuristics for pulling a directive, quoted mail and sender out of
raw composer text. No I/O happens here."""

from typing import Optional, Tuple

from ..llm.base import LLMRequest

PROMPT_PREFIX = "/aw:"
UNKNOWN_SENDER = "Unknown"


def _rest_of_line(text: str, start: int) -> str:
    end = text.find("\n", start)
    return text[start:] if end == -1 else text[start:end]


def parse_prompt(text: str | None) -> Optional[str]:
    """Return the instruction following the first `/aw:` marker, or None."""
    if not text:
        return None
    idx = text.find(PROMPT_PREFIX)
    if idx == -1:
        return None
    prompt = _rest_of_line(text, idx + len(PROMPT_PREFIX)).strip()
    return prompt or None


def extract_original_email(compose_text: str | None) -> Optional[str]:
    """Return the quoted reply content, starting at "On " or else "> "."""
    if not compose_text:
        return None
    for marker in ("On ", "> "):
        idx = compose_text.find(marker)
        if idx != -1:
            return compose_text[idx:]
    return None


def extract_sender_info(headers: str | None) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(name, email)`` from the first From: line.

    ``Jane Doe <jane@example.com>`` gives both parts; a bare address gives
    name "Unknown". Anything else leaves both as None.
    """
    if not headers:
        return None, None
    idx = headers.find("From:")
    if idx == -1:
        return None, None

    value = _rest_of_line(headers, idx + len("From:")).strip()
    lt = value.find("<")
    if lt != -1:
        gt = value.find(">", lt)
        if gt == -1:
            return None, None
        return value[:lt].strip(), value[lt + 1:gt]
    if "@" in value:
        return UNKNOWN_SENDER, value
    return None, None


def build_request(text: str | None) -> Optional[LLMRequest]:
    """Turn composer text into a ready-to-send request.

    The selection goes out as the prompt exactly as given; the `/aw:`
    directive is left for callers that want it via `parse_prompt`.
    """
    if not text or not text.strip():
        return None
    name, email = extract_sender_info(text)
    return LLMRequest(
        prompt=text,
        original_email=extract_original_email(text),
        sender_name=name,
        sender_email=email,
    )
