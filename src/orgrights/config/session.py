"""Session context handed to every rights operation.

The session itself is established elsewhere (a login tool, an SDK, a previous
``POST /api/sessions``). This module only carries the values the client needs
to talk to the API on that session's behalf and never modifies them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .env import require_env_vars

_VERSION_RE = re.compile(r"^\s*(\d+(?:\.\d+)*)")


@dataclass(frozen=True)
class SessionContext:
    """Connection state of an already authenticated API session."""

    is_connected: bool
    session_token: str
    server_version: str
    service_base_url: str

    def __post_init__(self) -> None:
        if self.service_base_url and not self.service_base_url.endswith("/"):
            object.__setattr__(self, "service_base_url", f"{self.service_base_url}/")

    def __repr__(self) -> str:
        return (
            f"SessionContext(is_connected={self.is_connected!r}, "
            f"server_version={self.server_version!r}, "
            f"service_base_url={self.service_base_url!r})"
        )


def parse_version(value: str) -> tuple[int, ...]:
    """Turn ``"9.1.0.1234"`` (or ``"10.4.2-build"``) into a comparable tuple."""

    match = _VERSION_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid version string: {value!r}")
    return tuple(int(part) for part in match.group(1).split("."))


def get_session_context() -> SessionContext:
    values = require_env_vars(("VCD_SERVICE_URL", "VCD_SESSION_TOKEN", "VCD_SERVER_VERSION"))
    return SessionContext(
        is_connected=True,
        session_token=values["VCD_SESSION_TOKEN"],
        server_version=values["VCD_SERVER_VERSION"],
        service_base_url=values["VCD_SERVICE_URL"],
    )
