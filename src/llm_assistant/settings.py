from __future__ import annotations

import os
from dataclasses import dataclass, asdict, replace

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_SYSTEM_PROMPT = "You are a helpful email writing assistant."
# Value written into freshly generated config files; never a usable key.
PLACEHOLDER_API_KEY = "your_openai_api_key_here"
MIN_API_KEY_LENGTH = 10


@dataclass(frozen=True)
class AssistantConfig:
    """Read-only settings bundle bound to a client for its whole lifetime."""

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    def __post_init__(self):
        # Absent or blank values fall back to the shipped defaults
        if not self.model:
            object.__setattr__(self, "model", DEFAULT_MODEL)
        if not self.system_prompt:
            object.__setattr__(self, "system_prompt", DEFAULT_SYSTEM_PROMPT)

    def with_changes(self, **changes) -> "AssistantConfig":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self, mask_key: bool = True):
        data = asdict(self)
        if mask_key:
            data["api_key"] = mask_api_key(self.api_key)
        return data


def is_valid(config: AssistantConfig | None) -> bool:
    if config is None:
        return False
    key = config.api_key
    return bool(key) and key != PLACEHOLDER_API_KEY and len(key) > MIN_API_KEY_LENGTH


def mask_api_key(api_key: str | None) -> str | None:
    if not api_key:
        return None
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:3]}...{api_key[-4:]}"


def load_config() -> AssistantConfig:
    """Build a configuration from the environment (call `load_dotenv` first)."""
    return AssistantConfig(
        api_key=os.getenv("OPENAI_API_KEY"),
        model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        system_prompt=os.getenv("LLM_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT),
    )
