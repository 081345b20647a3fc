from __future__ import annotations

import logging

import pytest

from orgrights.config import (
    ConfigurationError,
    MissingConfigurationError,
    RateLimit,
    SessionContext,
    VCloudConfig,
    configure_logging,
    get_session_context,
    get_vcloud_config,
    optional_env_var,
    parse_rate_limit,
    parse_version,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_lists_every_missing_name() -> None:
    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["VCD_SESSION_TOKEN", "VCD_SERVICE_URL"])

    assert "VCD_SERVICE_URL, VCD_SESSION_TOKEN" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_optional_env_var_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", " ")

    assert optional_env_var("EXAMPLE_VAR", "default") == "default"


def test_get_session_context_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VCD_SERVICE_URL", "https://vcd.example.com/api")
    monkeypatch.setenv("VCD_SESSION_TOKEN", "secret-token")
    monkeypatch.setenv("VCD_SERVER_VERSION", "9.5.0.1234")

    session = get_session_context()

    assert session.is_connected is True
    assert session.service_base_url == "https://vcd.example.com/api/"
    assert session.server_version == "9.5.0.1234"
    assert "secret-token" not in repr(session)


def test_get_session_context_requires_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VCD_SERVICE_URL", "https://vcd.example.com/api/")
    monkeypatch.setenv("VCD_SERVER_VERSION", "9.5")

    with pytest.raises(MissingConfigurationError, match="VCD_SESSION_TOKEN"):
        get_session_context()


def test_session_context_keeps_trailing_slash() -> None:
    session = SessionContext(
        is_connected=True,
        session_token="t",
        server_version="9.0",
        service_base_url="https://h/api/",
    )

    assert session.service_base_url == "https://h/api/"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("8.20", (8, 20)), ("9.1.0.1234", (9, 1, 0, 1234)), ("10.4.2-build", (10, 4, 2))],
)
def test_parse_version(value: str, expected: tuple[int, ...]) -> None:
    assert parse_version(value) == expected


def test_parse_version_orders_numerically() -> None:
    assert parse_version("8.20") > parse_version("8.10")
    assert parse_version("10.0") > parse_version("9.7")


def test_parse_version_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="Invalid version"):
        parse_version("latest")


def test_get_vcloud_config_defaults() -> None:
    config = get_vcloud_config()

    assert config.api_version == "27.0"
    assert config.min_server_version == "8.20"
    assert config.transport.timeout_seconds == 30.0
    assert config.transport.ratelimit is None


def test_get_vcloud_config_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VCD_API_VERSION", "36.0")
    monkeypatch.setenv("VCD_MIN_SERVER_VERSION", "10.0")
    monkeypatch.setenv("VCD_TIMEOUT_SECONDS", "12.5")

    config = get_vcloud_config()

    assert config.api_version == "36.0"
    assert config.min_server_version == "10.0"
    assert config.transport.timeout_seconds == 12.5


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("VCD_TIMEOUT_SECONDS", "soon"),
        ("VCD_TIMEOUT_SECONDS", "0"),
        ("VCD_MIN_SERVER_VERSION", "newest"),
    ],
)
def test_get_vcloud_config_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        get_vcloud_config()


def test_invalid_value_error_names_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VCD_TIMEOUT_SECONDS", "soon")

    with pytest.raises(ConfigurationError) as exc:
        get_vcloud_config()

    assert exc.value.variable == "VCD_TIMEOUT_SECONDS"
    assert "'soon'" in str(exc.value)


def test_missing_configuration_error_carries_names() -> None:
    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["VCD_SESSION_TOKEN", "VCD_SERVICE_URL"])

    assert exc.value.names == ("VCD_SERVICE_URL", "VCD_SESSION_TOKEN")
    assert exc.value.variable is None


def test_missing_single_variable_is_named() -> None:
    with pytest.raises(MissingConfigurationError) as exc:
        require_env_var("VCD_SESSION_TOKEN")

    assert exc.value.variable == "VCD_SESSION_TOKEN"


def test_get_vcloud_config_rate_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VCD_RATE_LIMIT", "5/2")

    config = get_vcloud_config()

    assert config.transport.ratelimit == RateLimit(max_calls=5, per_seconds=2.0)


@pytest.mark.parametrize("value", ["5", "five/1", "0/1", "5/0", "5/-1"])
def test_get_vcloud_config_rejects_bad_rate_limit(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    monkeypatch.setenv("VCD_RATE_LIMIT", value)

    with pytest.raises(ConfigurationError) as exc:
        get_vcloud_config()

    assert exc.value.variable == "VCD_RATE_LIMIT"


def test_parse_rate_limit() -> None:
    assert parse_rate_limit("10/1.5") == RateLimit(max_calls=10, per_seconds=1.5)


def test_get_vcloud_config_sets_user_agent() -> None:
    config = get_vcloud_config()

    headers = config.transport.default_headers
    assert headers is not None
    assert headers["User-Agent"].startswith("orgrights/")
    assert VCloudConfig().transport.default_headers == headers


@pytest.mark.parametrize(
    ("verbose", "http_level"),
    [(False, logging.WARNING), (True, logging.DEBUG)],
)
def test_configure_logging_quiets_http_clients(verbose: bool, http_level: int) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(verbose=verbose, force=True)

        assert root.level == (logging.DEBUG if verbose else logging.INFO)
        assert logging.getLogger("httpx").level == http_level
        assert logging.getLogger("httpcore").level == http_level
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.NOTSET)
