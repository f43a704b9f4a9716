from llm_assistant.settings import (
    AssistantConfig,
    DEFAULT_MODEL,
    DEFAULT_SYSTEM_PROMPT,
    PLACEHOLDER_API_KEY,
    is_valid,
    load_config,
)


def test_defaults_fill_blank_values():
    cfg = AssistantConfig(api_key="sk-abcdefghijkl", model="", system_prompt=None)
    assert cfg.model == DEFAULT_MODEL
    assert cfg.system_prompt == DEFAULT_SYSTEM_PROMPT


def test_is_valid():
    assert is_valid(AssistantConfig(api_key="sk-abcdefghijkl"))
    assert not is_valid(None)
    assert not is_valid(AssistantConfig())
    assert not is_valid(AssistantConfig(api_key=""))
    assert not is_valid(AssistantConfig(api_key="0123456789"))
    assert not is_valid(AssistantConfig(api_key=PLACEHOLDER_API_KEY))


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-environment")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
    monkeypatch.delenv("LLM_SYSTEM_PROMPT", raising=False)
    cfg = load_config()
    assert cfg.api_key == "sk-from-environment"
    assert cfg.model == "gpt-4o"
    assert cfg.system_prompt == DEFAULT_SYSTEM_PROMPT


def test_with_changes_and_masking():
    cfg = AssistantConfig(api_key="sk-abcdefghijkl", model="gpt-4o")
    changed = cfg.with_changes(model="gpt-4-turbo", api_key=None)
    assert changed.api_key == cfg.api_key
    assert changed.model == "gpt-4-turbo"
    assert cfg.model == "gpt-4o"
    assert changed.to_dict()["api_key"] == "sk-...ijkl"
    assert changed.to_dict(mask_key=False)["api_key"] == "sk-abcdefghijkl"
