"""Configuration error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when a configuration value is invalid.

    ``variable`` names the environment variable at fault when there is one.
    """

    def __init__(self, message: str, *, variable: str | None = None) -> None:
        super().__init__(message)
        self.variable = variable

    @classmethod
    def invalid(cls, variable: str, value: str, reason: str | None = None) -> ConfigurationError:
        detail = f": {reason}" if reason else ""
        return cls(f"Invalid {variable}={value!r}{detail}", variable=variable)


class MissingConfigurationError(ConfigurationError):
    """Raised when required environment variables are absent or blank."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(
            f"Missing configuration for: {', '.join(self.names)}",
            variable=self.names[0] if len(self.names) == 1 else None,
        )
