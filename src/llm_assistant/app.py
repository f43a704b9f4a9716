import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from dotenv import load_dotenv

# Load env first so the initial config sees the API key
load_dotenv(".env", override=False)

from .settings import AssistantConfig, is_valid, load_config
from .llm import get_llm_client, generate, fetch_available_models
from .utils.logger import setup_logger
from .utils.text_extraction import build_request

logger = setup_logger("llm_assistant")


app = FastAPI(title="Evolution LLM Assistant bridge", version="0.1.0")


class AssistantState:
    """Current configuration and the client bound to it.

    Both are held in one tuple and swapped in a single assignment, so a
    request never pairs a new config with the old client.
    """

    def __init__(self, config: AssistantConfig):
        self._lock = threading.Lock()
        self._current = (config, get_llm_client(config))

    @property
    def config(self) -> AssistantConfig:
        return self._current[0]

    @property
    def client(self):
        return self._current[1]

    def snapshot(self):
        return self._current

    def replace(self, config: AssistantConfig) -> None:
        # A client never outlives the configuration it was built from
        current = (config, get_llm_client(config))
        with self._lock:
            self._current = current

    def update(self, **changes) -> AssistantConfig:
        with self._lock:
            config = self._current[0].with_changes(**changes)
            self._current = (config, get_llm_client(config))
        return config


state = AssistantState(load_config())


class GenerateRequest(BaseModel):
    text: str


class GenerateResponse(BaseModel):
    response: str


class SettingsPatch(BaseModel):
    api_key: str | None = None
    model: str | None = None
    system_prompt: str | None = None


@app.get("/")
def root():
    return {"message": "LLM Assistant bridge is running. Use POST /generate."}


@app.post("/generate", response_model=GenerateResponse)
def generate_reply(req: GenerateRequest):
    request = build_request(req.text)
    if request is None:
        raise HTTPException(status_code=400, detail="Selected text missing")
    _, client = state.snapshot()
    if client is None:
        raise HTTPException(
            status_code=409,
            detail="LLM Assistant configuration is invalid. Set an API key via PATCH /settings.",
        )

    logger.debug("[generate] prompt=%s", request.prompt)
    if not generate(client, request):
        raise HTTPException(
            status_code=502,
            detail="Failed to generate response. Please check your internet connection and API key.",
        )
    logger.info("[generate] reply_chars=%d", len(request.response))
    return GenerateResponse(response=request.response)


@app.get("/models")
def list_models():
    models = fetch_available_models(state.config.api_key)
    if models is None:
        # An empty list would read as "no supported models" rather than a failed call
        raise HTTPException(
            status_code=502,
            detail="Could not list models. Please check your internet connection and API key.",
        )
    logger.info("[models] models_found=%d", len(models))
    return models


@app.get("/settings")
def get_settings():
    config = state.config
    return {**config.to_dict(), "valid": is_valid(config)}


@app.patch("/settings")
def patch_settings(s: SettingsPatch):
    config = state.update(**s.model_dump())
    logger.info("[settings] model=%s valid=%s", config.model, is_valid(config))
    return {**config.to_dict(), "valid": is_valid(config)}
