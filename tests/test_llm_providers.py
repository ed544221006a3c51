import json
from types import SimpleNamespace

import httpx
import pytest

from configuquote.core.config import Settings
from configuquote.schemas.quote import QUOTE_OUTPUT_SCHEMA
from configuquote.services.llm.factory import build_llm
from configuquote.services.llm.gemini_chat import GeminiChatLLM
from configuquote.services.llm.ollama_llm import OllamaLLM


def test_factory_builds_ollama():
    llm = build_llm(Settings(LLM_PROVIDER="ollama", OLLAMA_BASE_URL="http://ollama:11434", OLLAMA_MODEL="m"))
    assert isinstance(llm, OllamaLLM)
    assert llm.url == "http://ollama:11434/api/generate"
    assert llm.model == "m"


def test_factory_builds_gemini():
    llm = build_llm(Settings(LLM_PROVIDER="gemini", GEMINI_API_KEY="test-key", GEMINI_CHAT_MODEL="gemini-x"))
    assert isinstance(llm, GeminiChatLLM)
    assert llm.model == "gemini-x"


def test_factory_rejects_unknown_provider():
    with pytest.raises(ValueError):
        build_llm(Settings(LLM_PROVIDER="openai"))


def test_gemini_requires_key(monkeypatch):
    from configuquote.core import config

    monkeypatch.setattr(config.settings, "GEMINI_API_KEY", None)
    with pytest.raises(RuntimeError):
        GeminiChatLLM(api_key=None)


def test_gemini_decodes_json_reply():
    llm = GeminiChatLLM(api_key="test-key")
    calls = []

    def generate_content(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(text='{"quoteRequest": "RFQ"}')

    llm.client = SimpleNamespace(models=SimpleNamespace(generate_content=generate_content))
    assert llm.generate_json("prompt", QUOTE_OUTPUT_SCHEMA) == {"quoteRequest": "RFQ"}
    assert calls[0]["contents"] == "prompt"
    assert calls[0]["config"].response_mime_type == "application/json"


def test_ollama_posts_schema_and_decodes(monkeypatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"response": '{"quoteRequest": "RFQ"}'})

    real_client = httpx.Client
    monkeypatch.setattr(
        httpx, "Client", lambda **kw: real_client(transport=httpx.MockTransport(handler), **kw)
    )

    out = OllamaLLM(model="m", base_url="http://ollama:11434").generate_json("prompt", QUOTE_OUTPUT_SCHEMA)
    assert out == {"quoteRequest": "RFQ"}
    assert seen["url"] == "http://ollama:11434/api/generate"
    assert seen["body"]["format"] == QUOTE_OUTPUT_SCHEMA
    assert seen["body"]["stream"] is False


def test_ollama_http_error_propagates(monkeypatch):
    real_client = httpx.Client
    monkeypatch.setattr(
        httpx,
        "Client",
        lambda **kw: real_client(transport=httpx.MockTransport(lambda r: httpx.Response(500)), **kw),
    )
    with pytest.raises(httpx.HTTPStatusError):
        OllamaLLM().generate_json("prompt", QUOTE_OUTPUT_SCHEMA)


def test_lazy_llm_builds_once_on_first_call():
    from conftest import FakeLLM
    from configuquote.services.llm.factory import LazyLLM

    built = []

    def factory():
        built.append(1)
        return FakeLLM({"quoteRequest": "RFQ"})

    llm = LazyLLM(factory)
    assert built == []
    assert llm.generate_json("p", QUOTE_OUTPUT_SCHEMA) == {"quoteRequest": "RFQ"}
    assert llm.generate_json("p", QUOTE_OUTPUT_SCHEMA) == {"quoteRequest": "RFQ"}
    assert built == [1]


def test_lazy_llm_raises_construction_error_at_call_time():
    from configuquote.services.llm.factory import LazyLLM

    llm = LazyLLM(lambda: build_llm(Settings(LLM_PROVIDER="openai")))
    with pytest.raises(ValueError):
        llm.generate_json("p", QUOTE_OUTPUT_SCHEMA)
