#!/usr/bin/env python3
"""
Configuration Manager for the chatbot proxy

Provides centralized configuration management using Hydra and OmegaConf frameworks.
Handles configuration validation, environment-sourced credentials, and dynamic overrides.

Features:
- YAML-based hierarchical configuration with `oc.env` environment interpolation
- Type-safe configuration validation with dataclasses
- Command-line style parameter overrides with nested dot notation
- Startup detection of missing provider settings (reported, not fatal)

Dependencies:
- hydra-core: Configuration management framework by Facebook
- omegaconf: Configuration objects with validation
- dataclasses: Type-safe configuration schemas
"""

from pathlib import Path
from typing import List, Optional, Dict, Any

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from loguru import logger
from omegaconf import DictConfig, OmegaConf

import providers
from config.schema import ChatbotConfig, ProviderConfig, TerminalsConfig
from errors import ConfigurationError
from utils.provider_resolver import resolve_provider_url


class ConfigManager:
    """Centralized configuration management using Hydra and OmegaConf frameworks.

    Composes the YAML configuration, merges it onto the dataclass schema and
    instantiates the typed sections used by the server.

    Attributes:
        config_dir (Path): Directory containing configuration files
        config (DictConfig): Currently loaded configuration
        schema_class: Configuration schema class for validation

    Example:
        config_manager = ConfigManager()
        config = config_manager.load_config("default", ["provider.name=palm"])
        provider = config_manager.provider_config(config)
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the configuration manager.

        Args:
            config_dir (Path, optional): Directory containing config files.
                                       Defaults to ./config/
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = config_dir
        self.config: Optional[DictConfig] = None
        self.schema_class = ChatbotConfig

    def load_config(self,
                   config_name: str = "default",
                   overrides: Optional[List[str]] = None) -> DictConfig:
        """Load configuration from YAML files with optional overrides.

        Args:
            config_name (str): Name of the configuration file to load
            overrides (List[str], optional): Parameter overrides in dot notation
                                           (e.g., "provider.temperature=0.2")

        Returns:
            DictConfig: Loaded configuration merged onto the schema

        Raises:
            ConfigurationError: If configuration files are not found or invalid
        """
        if overrides is None:
            overrides = []

        # Clear any existing Hydra global state
        if GlobalHydra().is_initialized():
            GlobalHydra.instance().clear()

        config_dir_absolute = self.config_dir.resolve()

        try:
            with initialize_config_dir(
                config_dir=str(config_dir_absolute),
                version_base=None
            ):
                composed = compose(
                    config_name=config_name,
                    overrides=overrides
                )
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}")

        self.config = self.validate_config(composed)
        return self.config

    def validate_config(self, config: DictConfig) -> DictConfig:
        """Validate configuration against the schema.

        Merges onto the structured schema and instantiates it, which runs the
        dataclass ``__post_init__`` checks, and checks the provider name against
        the adapter registry.

        Returns:
            DictConfig: Schema-typed configuration

        Raises:
            ConfigurationError: If configuration validation fails
        """
        try:
            structured_config = OmegaConf.structured(self.schema_class)
            validated_config = OmegaConf.merge(structured_config, config)
            OmegaConf.to_object(validated_config)
            if validated_config.provider.name not in providers.ADAPTERS:
                raise ValueError(f"Invalid provider. Must be one of: {sorted(providers.ADAPTERS)}")
        except Exception as e:
            raise ConfigurationError(f"Configuration validation failed: {e}")

        self._report_missing_settings(validated_config)
        return validated_config

    def _report_missing_settings(self, config: DictConfig) -> None:
        """Warn about provider settings that will make every chat call fail."""
        provider = self.provider_config(config)
        missing = provider.missing_fields()
        if not resolve_provider_url(provider.name, provider):
            missing.append("endpoint")
        if missing:
            logger.warning("Provider configuration incomplete; chat requests will be rejected",
                           provider=provider.name, missing=missing)

    def provider_config(self, config: DictConfig) -> ProviderConfig:
        """Instantiate the typed provider section."""
        return OmegaConf.to_object(config.provider)

    def terminals_config(self, config: DictConfig) -> TerminalsConfig:
        """Instantiate the typed document store section."""
        return OmegaConf.to_object(config.terminals)

    def get_config_summary(self, config: DictConfig) -> Dict[str, Any]:
        """Get a summary of current configuration for logging/debugging.

        The credential is reported only as present or absent.
        """
        provider = self.provider_config(config)
        return {
            "provider": provider.name,
            "provider_model": provider.model,
            "provider_endpoint": resolve_provider_url(provider.name, provider),
            "provider_auth": provider.auth or "default",
            "provider_key_set": bool(provider.api_key),
            "logging_level": config.logging.level,
            "logging_format": config.logging.format,
            "terminals_collection": config.terminals.collection,
        }


# Global configuration manager instance
_config_manager = ConfigManager()

def load_config(config_name: str = "default",
               overrides: Optional[List[str]] = None) -> DictConfig:
    """Load configuration using global ConfigManager instance."""
    return _config_manager.load_config(config_name, overrides)

def provider_config(config: DictConfig) -> ProviderConfig:
    return _config_manager.provider_config(config)

def terminals_config(config: DictConfig) -> TerminalsConfig:
    return _config_manager.terminals_config(config)

def get_config_summary(config: DictConfig) -> Dict[str, Any]:
    return _config_manager.get_config_summary(config)
