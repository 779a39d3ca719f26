"""Legacy PaLM ``generateText`` contract (text-bison models).

Request: ``{"prompt": {"text": ...}}`` with sampling fields at the top level.
Reply:   ``candidates[0].output``.
"""
from typing import Any, Dict

from config.schema import ProviderConfig
from providers.base import ProviderAdapter


class PalmAdapter(ProviderAdapter):
    name = "palm"
    default_auth = "bearer"
    api_key_header = "x-goog-api-key"
    reply_path = ("candidates", 0, "output")

    def build_request(self, message: str, config: ProviderConfig) -> Dict[str, Any]:
        return {
            "prompt": {"text": message},
            "temperature": config.temperature,
            "maxOutputTokens": config.max_output_tokens,
        }
