"""Provider client: a single fire-once HTTP POST to the LLM provider.

No retry and no backoff. Network-level failures are mapped to TransportError;
HTTP error statuses are returned to the caller untouched so it can classify them.
"""
from typing import Any, Dict, Optional

import requests
from loguru import logger

from errors import TransportError


def post_json(url: str, json: Dict[str, Any], headers: Optional[Dict[str, str]] = None,
              params: Optional[Dict[str, str]] = None, timeout: Optional[float] = None) -> requests.Response:
    """POST ``json`` to ``url`` once and return the raw response.

    Raises:
        TransportError: on DNS, connection, TLS or timeout failures.
    """
    try:
        return requests.post(url, json=json, headers=headers, params=params, timeout=timeout)
    except requests.RequestException as exc:
        logger.error("Provider transport failure", error_type=type(exc).__name__)
        raise TransportError() from exc


def parse_json(resp: requests.Response) -> Any:
    """Return the decoded body, or None when it is not valid JSON."""
    try:
        return resp.json()
    except ValueError:
        logger.warning("Provider returned a non-JSON success body", status=resp.status_code)
        return None
