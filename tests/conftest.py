from __future__ import annotations

import pytest

_VCD_VARS = (
    "VCD_SERVICE_URL",
    "VCD_SESSION_TOKEN",
    "VCD_SERVER_VERSION",
    "VCD_API_VERSION",
    "VCD_MIN_SERVER_VERSION",
    "VCD_TIMEOUT_SECONDS",
    "VCD_RATE_LIMIT",
)


@pytest.fixture(autouse=True)
def _isolate_vcd_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VCD_VARS:
        monkeypatch.delenv(name, raising=False)
