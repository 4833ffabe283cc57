"""Async SDK for the 9jaPay virtual account and transfer API"""

from ninejapay.client import NineJaPayClient, create_client, create_client_from_settings
from ninejapay.config import BASE_URLS, ClientConfig, Environment, Settings
from ninejapay.domain.exceptions import (
    ConfigurationError,
    NineJaPayError,
    ProviderError,
    TransportError,
    map_status_code,
)
from ninejapay.infrastructure.observability.logging import setup_logging, setup_logging_from_settings

__version__ = "0.1.0"

__all__ = [
    "BASE_URLS",
    "ClientConfig",
    "ConfigurationError",
    "Environment",
    "NineJaPayClient",
    "NineJaPayError",
    "ProviderError",
    "Settings",
    "TransportError",
    "create_client",
    "create_client_from_settings",
    "map_status_code",
    "setup_logging",
    "setup_logging_from_settings",
]
