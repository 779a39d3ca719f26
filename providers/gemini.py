"""Gemini ``generateContent`` contract.

Request: ``contents[].parts[].text`` plus ``generationConfig``.
Reply:   ``candidates[0].content.parts[0].text``.
"""
from typing import Any, Dict

from config.schema import ProviderConfig
from providers.base import ProviderAdapter


class GeminiAdapter(ProviderAdapter):
    name = "gemini"
    default_auth = "query"
    api_key_header = "x-goog-api-key"
    reply_path = ("candidates", 0, "content", "parts", 0, "text")

    def build_request(self, message: str, config: ProviderConfig) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": message}]}],
            "generationConfig": {
                "temperature": config.temperature,
                "maxOutputTokens": config.max_output_tokens,
            },
        }
