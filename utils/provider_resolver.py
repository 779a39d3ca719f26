"""Resolve provider endpoints from environment, config, or adapter defaults.

Provides helpers to resolve a provider endpoint and validate required providers.
"""
import os
from typing import Any, Dict, Iterable, Optional


DEFAULTS = {
    'gemini': 'https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent',
    'palm': 'https://generativelanguage.googleapis.com/v1beta2/models/{model}:generateText',
    'openai': 'https://api.openai.com/v1/chat/completions',
}


def resolve_provider_url(provider: str, config: Optional[Any] = None, model: Optional[str] = None) -> Optional[str]:
    """Return the resolved URL for provider.

    Precedence: ENV (<PROVIDER>_URL) > config endpoint > DEFAULT

    ``config`` is either a provider section (``name``, ``endpoint``, ``model``)
    or a full config holding one under ``provider``. Its endpoint only applies
    when it names the same provider. A ``{model}`` placeholder is filled from
    ``model`` or the config's model; without one the URL is unresolved.
    """
    env_key = f"{provider.upper()}_URL"
    url = os.getenv(env_key)

    if config is not None:
        section = getattr(config, 'provider', config)
        if not url and getattr(section, 'name', provider) == provider:
            url = getattr(section, 'endpoint', None)
        if model is None:
            model = getattr(section, 'model', None)

    # fallback default
    if not url:
        url = DEFAULTS.get(provider)

    if url and '{model}' in url:
        if not model:
            return None
        url = url.replace('{model}', model)
    return url


def validate_providers(config: Optional[Any], required: Optional[Iterable[str]] = None) -> Dict[str, bool]:
    """Validate presence of provider URLs for required providers.

    Args:
      config: optional config object used for resolution
      required: iterable of provider names to validate

    Returns:
      dict mapping provider->True/False indicating whether a URL was found
    """
    if not required:
        return {}
    result = {}
    for p in required:
        url = resolve_provider_url(p, config)
        result[p] = bool(url)
    return result
