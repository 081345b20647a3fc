"""Ports for reading and writing rights on the remote platform."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .model import OrgRightsDocument, Right


@runtime_checkable
class OrgResolver(Protocol):
    """Resolve an organization name to the URL of its admin representation."""

    def __call__(self, org_name: str) -> str: ...


@runtime_checkable
class RightsGateway(Protocol):
    """Remote rights endpoints used by the application operations."""

    def list_catalog_rights(self) -> list[Right]: ...

    def fetch_org_rights(self, org_name: str) -> OrgRightsDocument: ...

    def fetch_org_rights_at(self, href: str) -> OrgRightsDocument: ...

    def replace_org_rights(self, document: OrgRightsDocument) -> None: ...


__all__ = ["OrgResolver", "RightsGateway"]
