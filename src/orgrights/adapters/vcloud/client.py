"""HTTP client for the vCloud organization rights endpoints."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from orgrights.adapters.http_transport import ApiClient
from orgrights.config.session import parse_version
from orgrights.config.vcloud import VCloudConfig
from orgrights.domain.errors import (
    NotConnectedError,
    OrgNotFoundError,
    UnsupportedServerVersionError,
)

from .codec import parse_catalog, parse_org_list, parse_org_rights, serialize_org_rights
from .schema import ADMIN_ROOT_MEDIA_TYPE, ORG_LIST_MEDIA_TYPE, ORG_RIGHTS_MEDIA_TYPE

if TYPE_CHECKING:
    from collections.abc import Callable

    from orgrights.config.http import TransportConfig
    from orgrights.config.session import SessionContext
    from orgrights.domain.model import OrgRightsDocument, Right
    from orgrights.domain.ports import OrgResolver

log = getLogger(__name__)

AUTH_HEADER = "x-vcloud-authorization"


def admin_org_href(org_href: str) -> str:
    """Map a tenant org URL (``.../api/org/{id}``) to its admin URL."""

    if "/api/admin/org/" in org_href:
        return org_href
    return org_href.replace("/api/org/", "/api/admin/org/", 1)


def org_rights_href(admin_href: str) -> str:
    return f"{admin_href.rstrip('/')}/rights"


class VCloudRightsClient:
    """Read and replace org rights on behalf of an existing API session.

    The session is only read. Every public method checks that it is connected
    and that the server is recent enough before any request is made.
    """

    def __init__(
        self,
        *,
        session: SessionContext,
        config: VCloudConfig | None = None,
        client_factory: Callable[[TransportConfig], ApiClient] | None = None,
        org_resolver: OrgResolver | None = None,
    ) -> None:
        self._session = session
        self._config = config or VCloudConfig()
        self._client_factory = client_factory or ApiClient
        self._org_resolver = org_resolver

    @property
    def session(self) -> SessionContext:
        return self._session

    def list_catalog_rights(self) -> list[Right]:
        self._ensure_ready()
        return asyncio.run(self._list_catalog_rights_async())

    def resolve_org(self, org_name: str) -> str:
        self._ensure_ready()
        if self._org_resolver is not None:
            return self._org_resolver(org_name)
        return asyncio.run(self._resolve_org_async(org_name))

    def fetch_org_rights(self, org_name: str) -> OrgRightsDocument:
        admin_href = self.resolve_org(org_name)
        return self.fetch_org_rights_at(org_rights_href(admin_href))

    def fetch_org_rights_at(self, href: str) -> OrgRightsDocument:
        self._ensure_ready()
        return asyncio.run(self._fetch_org_rights_async(href))

    def replace_org_rights(self, document: OrgRightsDocument) -> None:
        """PUT ``document`` over the org's current rights.

        The API offers no concurrency token, so whoever writes last wins.
        """

        self._ensure_ready()
        asyncio.run(self._replace_org_rights_async(document))

    def _ensure_ready(self) -> None:
        session = self._session
        if not session.is_connected or not session.session_token.strip():
            raise NotConnectedError("No active session; connect to the server first")

        minimum = self._config.min_server_version
        try:
            supported = parse_version(session.server_version) >= parse_version(minimum)
        except ValueError:
            supported = False
        if not supported:
            raise UnsupportedServerVersionError(
                f"Server version {session.server_version!r} does not support rights "
                f"management (requires {minimum} or later)",
                server_version=session.server_version,
                minimum=minimum,
            )

    def _headers(self, content_type: str) -> dict[str, str]:
        return {
            AUTH_HEADER: self._session.session_token,
            "Accept": f"application/*+xml;version={self._config.api_version}",
            "Content-Type": content_type,
        }

    def _open(self) -> ApiClient:
        transport = replace(self._config.transport, base_url=self._session.service_base_url)
        return self._client_factory(transport)

    async def _list_catalog_rights_async(self) -> list[Right]:
        async with self._open() as client:
            log.debug("Fetching rights catalog from %sadmin", self._session.service_base_url)
            response = await client.get("admin", headers=self._headers(ADMIN_ROOT_MEDIA_TYPE))
        return parse_catalog(response.content)

    async def _resolve_org_async(self, org_name: str) -> str:
        async with self._open() as client:
            response = await client.get("org", headers=self._headers(ORG_LIST_MEDIA_TYPE))
        for org in parse_org_list(response.content):
            if org.name == org_name:
                return admin_org_href(org.href)
        raise OrgNotFoundError(org_name)

    async def _fetch_org_rights_async(self, href: str) -> OrgRightsDocument:
        async with self._open() as client:
            log.debug("Fetching org rights from %s", href)
            response = await client.get(href, headers=self._headers(ORG_RIGHTS_MEDIA_TYPE))
        return parse_org_rights(response.content, href=href)

    async def _replace_org_rights_async(self, document: OrgRightsDocument) -> None:
        body = serialize_org_rights(document)
        async with self._open() as client:
            await client.put(
                document.href,
                content=body,
                headers=self._headers(ORG_RIGHTS_MEDIA_TYPE),
            )
        log.info("Replaced org rights at %s (%d rights)", document.href, len(document.rights))
