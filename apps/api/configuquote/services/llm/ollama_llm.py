from __future__ import annotations
import json
from typing import Any, Dict
import httpx

class OllamaLLM:
    def __init__(
        self,
        model: str = "qwen2.5:7b-instruct",
        base_url: str = "http://localhost:11434",
        timeout: float = 120.0,
    ):
        self.model = model
        self.url = f"{base_url}/api/generate"
        self.timeout = timeout

    def generate_json(self, prompt: str, schema: Dict[str, Any]) -> Any:
        payload = {
            "model": self.model,
            "prompt": prompt,
            "format": schema,
            "stream": False,
        }

        with httpx.Client(timeout=self.timeout) as client:
            r = client.post(self.url, json=payload)
            r.raise_for_status()
            data = r.json()

        return json.loads(data.get("response") or "null")
