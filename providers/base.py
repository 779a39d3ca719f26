"""Provider adapter capability.

An adapter knows one provider's wire contract: how to wrap a message into a
request envelope, how to carry the credential, and where the reply text lives
in the response. Everything else (config checks, transport, status handling,
fallback) is shared and lives in ``providers.call_provider``.
"""
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple

from config.schema import ProviderConfig
from utils.json_path import Step, dig
from utils.provider_resolver import resolve_provider_url


class ProviderAdapter:
    name: ClassVar[str] = ""
    default_auth: ClassVar[str] = "bearer"
    api_key_header: ClassVar[str] = "Authorization"
    api_key_param: ClassVar[str] = "key"
    reply_path: ClassVar[Sequence[Step]] = ()

    def endpoint(self, config: ProviderConfig) -> Optional[str]:
        return resolve_provider_url(self.name, config)

    def build_request(self, message: str, config: ProviderConfig) -> Dict[str, Any]:
        raise NotImplementedError

    def auth(self, config: ProviderConfig) -> Tuple[Dict[str, str], Dict[str, str]]:
        """Return (headers, query params) carrying the credential."""
        mode = config.auth or self.default_auth
        headers = {"Content-Type": "application/json"}
        params: Dict[str, str] = {}
        if mode == "query":
            params[self.api_key_param] = config.api_key
        elif mode == "header":
            headers[self.api_key_header] = config.api_key
        else:
            headers["Authorization"] = f"Bearer {config.api_key}"
        return headers, params

    def extract_reply(self, response: Any) -> Optional[str]:
        """Return the reply text at ``reply_path``, or None if absent or empty."""
        text = dig(response, self.reply_path)
        if isinstance(text, str) and text:
            return text
        return None
