"""
Configuration schema validation for the chatbot proxy.

This module defines dataclasses that provide type safety and validation
for configuration files. Used with Hydra and OmegaConf for robust
configuration management.
"""

from dataclasses import dataclass, field
from typing import List, Optional


AUTH_MODES = ("query", "bearer", "header")


@dataclass
class ProviderConfig:
    """Static connection info for the generative-AI provider.

    ``api_key``, ``model`` and ``endpoint`` may be left unset here; they are
    checked before every provider call rather than at load time.
    """
    name: str = "gemini"
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    model: Optional[str] = "gemini-1.5-flash"
    auth: Optional[str] = None
    temperature: float = 0.7
    max_output_tokens: int = 200
    timeout: Optional[float] = None
    fallback_reply: str = "No response from AI."

    def __post_init__(self):
        """Validate provider configuration values."""
        if self.auth is not None and self.auth not in AUTH_MODES:
            raise ValueError(f"Invalid auth mode. Must be one of: {list(AUTH_MODES)}")
        if not (0.0 <= self.temperature <= 2.0):
            raise ValueError("Provider temperature must be between 0.0 and 2.0")
        if self.max_output_tokens < 1 or self.max_output_tokens > 8192:
            raise ValueError("Provider max_output_tokens must be between 1 and 8192")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("Provider timeout must be positive when set")

    def missing_fields(self) -> List[str]:
        """Names of required settings that are unset or blank."""
        return [name for name in ("api_key", "model") if not (getattr(self, name) or "").strip()]


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    format: str = "detailed"  # simple, detailed, json
    file: Optional[str] = None
    rotation: str = "100 MB"
    retention: str = "30 days"
    colorize: bool = True

    def __post_init__(self):
        """Validate logging configuration values."""
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        self.level = self.level.upper()

        valid_formats = ["simple", "detailed", "json"]
        if self.format not in valid_formats:
            raise ValueError(f"Invalid log format. Must be one of: {valid_formats}")


@dataclass
class TerminalsConfig:
    """Document store settings for the terminal listing endpoint."""
    collection: str = "terminals"
    service_account: Optional[str] = None

    def __post_init__(self):
        if not self.collection:
            raise ValueError("Terminals collection name must not be empty")


@dataclass
class ChatbotConfig:
    """Complete configuration for the chatbot proxy."""
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    terminals: TerminalsConfig = field(default_factory=TerminalsConfig)
