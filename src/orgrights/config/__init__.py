"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http import RateLimit, TransportConfig
from .logging import configure_logging
from .session import SessionContext, get_session_context, parse_version
from .vcloud import VCloudConfig, get_vcloud_config, parse_rate_limit

__all__ = [
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "SessionContext",
    "TransportConfig",
    "VCloudConfig",
    "configure_logging",
    "get_session_context",
    "get_vcloud_config",
    "optional_env_var",
    "parse_rate_limit",
    "parse_version",
    "require_env_var",
    "require_env_vars",
]
