"""Errors raised by rights operations.

Every error is terminal for the operation that raised it; nothing here is
retried internally.
"""

from __future__ import annotations


class OrgRightsError(RuntimeError):
    """Base class for all rights operation failures."""


class PreconditionError(OrgRightsError):
    """Raised before any network call when the session cannot be used."""


class NotConnectedError(PreconditionError):
    """Raised when the session context has no active connection."""


class UnsupportedServerVersionError(PreconditionError):
    """Raised when the server is older than the rights endpoints require."""

    def __init__(self, message: str, *, server_version: str, minimum: str) -> None:
        super().__init__(message)
        self.server_version = server_version
        self.minimum = minimum


class NotFoundError(OrgRightsError):
    """Raised when a named object cannot be resolved."""


class OrgNotFoundError(NotFoundError):
    def __init__(self, org_name: str) -> None:
        super().__init__(f"Organization not found: {org_name}")
        self.org_name = org_name


class RightNotFoundError(NotFoundError):
    def __init__(self, right_name: str) -> None:
        super().__init__(f"Right not found in catalog: {right_name}")
        self.right_name = right_name


class TransportError(OrgRightsError):
    """Raised on network failures and non-success HTTP responses."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(OrgRightsError):
    """Raised when a response body is not the XML document we expect."""


class FormatError(OrgRightsError):
    """Raised when a CSV file lacks the required columns."""


class ConcurrentModificationError(OrgRightsError):
    """Raised when the org rights changed on the server during an edit."""

    def __init__(self, href: str) -> None:
        super().__init__(f"Org rights at {href} were modified by another writer")
        self.href = href
