"""vCloud rights API configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import metadata

from .env import optional_env_var
from .errors import ConfigurationError
from .http import RateLimit, TransportConfig
from .session import parse_version

DEFAULT_API_VERSION = "27.0"
DEFAULT_MIN_SERVER_VERSION = "8.20"
DEFAULT_TIMEOUT_SECONDS = 30.0


def _user_agent() -> str:
    try:
        version = metadata.version("orgrights")
    except metadata.PackageNotFoundError:
        version = "0.0.0+local"
    return f"orgrights/{version}"


def _default_transport() -> TransportConfig:
    return TransportConfig(
        name="vcloud",
        timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        default_headers={"User-Agent": _user_agent()},
    )


@dataclass(frozen=True)
class VCloudConfig:
    """Holds API-level settings that do not belong to a session."""

    api_version: str = DEFAULT_API_VERSION
    min_server_version: str = DEFAULT_MIN_SERVER_VERSION
    transport: TransportConfig = field(default_factory=_default_transport)


def parse_rate_limit(value: str) -> RateLimit:
    """Parse ``"<calls>/<seconds>"``, e.g. ``"5/1"`` for five requests per second."""

    calls, sep, seconds = value.partition("/")
    if not sep:
        raise ValueError("expected <calls>/<seconds>")
    rate = RateLimit(max_calls=int(calls), per_seconds=float(seconds))
    if rate.max_calls <= 0 or rate.per_seconds <= 0:
        raise ValueError("calls and seconds must be positive")
    return rate


def get_vcloud_config() -> VCloudConfig:
    api_version = optional_env_var("VCD_API_VERSION", DEFAULT_API_VERSION)
    min_server_version = optional_env_var("VCD_MIN_SERVER_VERSION", DEFAULT_MIN_SERVER_VERSION)
    raw_timeout = optional_env_var("VCD_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
    raw_rate_limit = optional_env_var("VCD_RATE_LIMIT", "")

    try:
        parse_version(min_server_version)
    except ValueError as exc:
        raise ConfigurationError.invalid("VCD_MIN_SERVER_VERSION", min_server_version) from exc
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigurationError.invalid("VCD_TIMEOUT_SECONDS", raw_timeout) from exc
    if timeout <= 0:
        raise ConfigurationError.invalid("VCD_TIMEOUT_SECONDS", raw_timeout, "must be positive")

    ratelimit: RateLimit | None = None
    if raw_rate_limit:
        try:
            ratelimit = parse_rate_limit(raw_rate_limit)
        except ValueError as exc:
            raise ConfigurationError.invalid("VCD_RATE_LIMIT", raw_rate_limit, str(exc)) from exc

    return VCloudConfig(
        api_version=api_version,
        min_server_version=min_server_version,
        transport=TransportConfig(
            name="vcloud",
            timeout_seconds=timeout,
            ratelimit=ratelimit,
            default_headers={"User-Agent": _user_agent()},
        ),
    )
