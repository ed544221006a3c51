from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Protocol

from configuquote.core.config import Settings, settings as default_settings


class JSONCompletionLLM(Protocol):
    def generate_json(self, prompt: str, schema: Dict[str, Any]) -> Any: ...


def build_llm(cfg: Settings = default_settings) -> JSONCompletionLLM:
    provider = (cfg.LLM_PROVIDER or "gemini").lower()

    if provider == "ollama":
        from configuquote.services.llm.ollama_llm import OllamaLLM
        return OllamaLLM(model=cfg.OLLAMA_MODEL, base_url=cfg.OLLAMA_BASE_URL, timeout=cfg.OLLAMA_TIMEOUT)
    if provider == "gemini":
        from configuquote.services.llm.gemini_chat import GeminiChatLLM
        return GeminiChatLLM(api_key=cfg.GEMINI_API_KEY, model=cfg.GEMINI_CHAT_MODEL)
    raise ValueError(f"Unknown LLM_PROVIDER: {cfg.LLM_PROVIDER!r}")


class LazyLLM:
    """
    Builds the provider on first use so a missing key or bad provider name
    fails inside the model call instead of while wiring the app.
    """

    def __init__(self, factory: Callable[[], JSONCompletionLLM]):
        self._factory = factory
        self._llm: Optional[JSONCompletionLLM] = None

    def generate_json(self, prompt: str, schema: Dict[str, Any]) -> Any:
        if self._llm is None:
            self._llm = self._factory()
        return self._llm.generate_json(prompt, schema)
