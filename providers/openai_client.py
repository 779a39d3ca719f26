"""OpenAI-compatible chat completions contract.

Works against api.openai.com and the many gateways that mirror its schema.
Reply: ``choices[0].message.content``.
"""
from typing import Any, Dict

from config.schema import ProviderConfig
from providers.base import ProviderAdapter


class OpenAIAdapter(ProviderAdapter):
    name = "openai"
    default_auth = "bearer"
    api_key_header = "api-key"
    reply_path = ("choices", 0, "message", "content")

    def build_request(self, message: str, config: ProviderConfig) -> Dict[str, Any]:
        return {
            "model": config.model,
            "messages": [{"role": "user", "content": message}],
            "temperature": config.temperature,
            "max_tokens": config.max_output_tokens,
        }
