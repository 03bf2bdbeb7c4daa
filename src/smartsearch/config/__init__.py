"""Config module exports."""

from smartsearch.config.loader import load_config
from smartsearch.config.models import (
    EncoderConfig,
    LoggingConfig,
    SearchConfig,
    SmartSearchConfig,
    VaultConfig,
)

__all__ = [
    "load_config",
    "SmartSearchConfig",
    "LoggingConfig",
    "VaultConfig",
    "SearchConfig",
    "EncoderConfig",
]
