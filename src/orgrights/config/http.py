"""Configuration types for the HTTP transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class TransportConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    ratelimit: RateLimit | None = None
    default_headers: Mapping[str, str] | None = None
