"""Core CLI components - configuration, API clients, and request models."""

from clickupcom.core.api_client import APIResponse, ClickUpClient
from clickupcom.core.config import CLISettings, ConfigStore, get_settings
from clickupcom.core.generic_client import GenericAPIClient

__all__ = [
    "APIResponse",
    "CLISettings",
    "ClickUpClient",
    "ConfigStore",
    "GenericAPIClient",
    "get_settings",
]
