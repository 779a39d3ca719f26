"""Error taxonomy for the chatbot proxy.

Every failure the service surfaces is a ``ChatbotError`` subclass carrying the
HTTP status it maps to and a stable JSON body ``{"error": str, "details"?: any}``.
The soft "no reply extracted" case is not an error and has no class here.
"""
from typing import Any, Dict, Optional


class ChatbotError(Exception):
    """Base class for errors rendered as a JSON error response."""

    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, details: Any = None, status_code: Optional[int] = None):
        self.message = message or self.message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MethodNotAllowed(ChatbotError):
    status_code = 405
    message = "Method not allowed"


class BadRequest(ChatbotError):
    status_code = 400
    message = "Message is required"


class ConfigurationError(ChatbotError):
    """Raised when required configuration is missing or invalid."""

    status_code = 500
    message = "Chatbot provider is not configured"


class UpstreamError(ChatbotError):
    """Non-2xx answer from the provider; relays its status and raw body."""

    def __init__(self, upstream_status: int, body: str = "", reason: Optional[str] = None):
        self.upstream_status = upstream_status
        self.body = body
        message = body or reason or f"Upstream provider returned status {upstream_status}"
        super().__init__(message, details={"upstream_status": upstream_status}, status_code=upstream_status)


class TransportError(ChatbotError):
    """Network-level failure talking to the provider (DNS, refused, reset...)."""

    status_code = 502
    message = "Failed to reach AI provider"


class DocumentStoreError(ChatbotError):
    status_code = 500
    message = "Failed to fetch terminals"


class InternalError(ChatbotError):
    status_code = 500
    message = "Internal Server Error"
