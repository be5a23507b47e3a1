# Area: Shared
"""
Shared utilities used by the game session engine.

This package contains:
- The alert bus for user-visible notices
- The HTTP transport to the game server
- Configuration loading
- Logging configuration
"""

from .alert_bus import Alert, AlertBus, AlertSeverity
from .config import load_config, validate_config
from .http_client import HttpClient
from .logging_config import setup_logging, log_client_error

__all__ = [
    "Alert",
    "AlertBus",
    "AlertSeverity",
    "load_config",
    "validate_config",
    "HttpClient",
    "setup_logging",
    "log_client_error",
]
