"""Provider dispatcher: turns one chat message into one normalized reply.

The adapter for the configured provider is picked once via ``get_adapter``;
``call_provider`` then runs the shared flow for every request:

  config check -> envelope -> single POST -> status check -> tolerant extraction
"""
from typing import Dict, Optional, Type

from loguru import logger

import provider_client
from config.schema import ProviderConfig
from errors import ConfigurationError, UpstreamError
from providers.base import ProviderAdapter
from providers.gemini import GeminiAdapter
from providers.openai_client import OpenAIAdapter
from providers.palm import PalmAdapter
from providers.schema import ChatReply

ADAPTERS: Dict[str, Type[ProviderAdapter]] = {
    GeminiAdapter.name: GeminiAdapter,
    PalmAdapter.name: PalmAdapter,
    OpenAIAdapter.name: OpenAIAdapter,
}


def get_adapter(provider: str) -> ProviderAdapter:
    """Return an adapter instance for the named provider."""
    try:
        return ADAPTERS[provider]()
    except KeyError:
        raise ConfigurationError(f"Unknown provider: {provider}", details={"available": sorted(ADAPTERS)})


def call_provider(message: str, config: ProviderConfig, adapter: Optional[ProviderAdapter] = None) -> ChatReply:
    """Send ``message`` to the configured provider and return its reply.

    Raises:
        ConfigurationError: credential, model or endpoint missing; raised
            before any request is built.
        UpstreamError: the provider answered with a non-2xx status.
        TransportError: the provider could not be reached.
    """
    adapter = adapter or get_adapter(config.name)

    missing = config.missing_fields()
    url = None
    if "model" not in missing:
        url = adapter.endpoint(config)
        if not url:
            missing.append("endpoint")
    if missing:
        logger.error("Provider call refused: configuration incomplete", provider=adapter.name, missing=missing)
        raise ConfigurationError(details={"missing": missing})

    envelope = adapter.build_request(message, config)
    headers, params = adapter.auth(config)

    logger.debug("Calling provider", provider=adapter.name, model=config.model)
    resp = provider_client.post_json(url, envelope, headers=headers, params=params, timeout=config.timeout)
    if not 200 <= resp.status_code < 300:
        logger.warning("Provider returned an error status", provider=adapter.name,
                       status=resp.status_code, body_length=len(resp.text or ""))
        raise UpstreamError(resp.status_code, resp.text, reason=resp.reason)

    text = adapter.extract_reply(provider_client.parse_json(resp))
    if text is None:
        logger.info("No reply text found in provider response; using fallback", provider=adapter.name)
        text = config.fallback_reply
    else:
        logger.info("Provider reply received", provider=adapter.name, status=resp.status_code, reply_length=len(text))
    return ChatReply(text=text)
