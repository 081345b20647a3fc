"""Application entry points for org rights workflows.

Each operation fetches fresh state, edits it locally and, when something
changed, writes the whole org rights document back. Nothing is cached between
calls.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from orgrights.adapters.csv_bridge import read_view_csv, write_view_csv
from orgrights.adapters.vcloud import VCloudRightsClient
from orgrights.config import get_session_context, get_vcloud_config
from orgrights.domain.errors import ConcurrentModificationError, RightNotFoundError
from orgrights.domain.reconcile import (
    add_right,
    compute_enabled_view,
    find_catalog_right,
    remove_right,
    replace_assignment,
)

if TYPE_CHECKING:
    from pathlib import Path

    from orgrights.config import SessionContext
    from orgrights.domain.model import OrgRightAssignment, OrgRightsDocument, Right
    from orgrights.domain.ports import RightsGateway


log = getLogger(__name__)


def build_gateway(session: SessionContext | None = None) -> RightsGateway:
    return VCloudRightsClient(
        session=session or get_session_context(),
        config=get_vcloud_config(),
    )


def list_catalog_rights(
    *,
    session: SessionContext | None = None,
    gateway: RightsGateway | None = None,
) -> list[Right]:
    effective_gateway = gateway or build_gateway(session)
    return effective_gateway.list_catalog_rights()


def get_org_rights(
    org_name: str,
    *,
    session: SessionContext | None = None,
    gateway: RightsGateway | None = None,
) -> list[OrgRightAssignment]:
    """Return every catalog right marked enabled or disabled for ``org_name``."""

    effective_gateway = gateway or build_gateway(session)
    catalog = effective_gateway.list_catalog_rights()
    document = effective_gateway.fetch_org_rights(org_name)
    return compute_enabled_view(catalog, document.refs)


def add_org_right(
    org_name: str,
    right_name: str,
    *,
    session: SessionContext | None = None,
    gateway: RightsGateway | None = None,
    verify_unchanged: bool = False,
) -> bool:
    """Enable ``right_name`` for ``org_name``; return whether the org was updated."""

    effective_gateway = gateway or build_gateway(session)
    right = find_catalog_right(effective_gateway.list_catalog_rights(), right_name)
    if right is None:
        raise RightNotFoundError(right_name)

    document = effective_gateway.fetch_org_rights(org_name)
    updated = add_right(document, right.ref, right.name)
    if updated is document:
        return False

    _submit(effective_gateway, original=document, updated=updated, verify=verify_unchanged)
    log.info("Enabled right %r for org %s", right.name, org_name)
    return True


def remove_org_right(
    org_name: str,
    right_name: str,
    *,
    session: SessionContext | None = None,
    gateway: RightsGateway | None = None,
    verify_unchanged: bool = False,
) -> bool:
    """Disable ``right_name`` for ``org_name``; return whether the org was updated."""

    effective_gateway = gateway or build_gateway(session)
    document = effective_gateway.fetch_org_rights(org_name)
    updated = remove_right(document, right_name)
    if updated is document:
        return False

    _submit(effective_gateway, original=document, updated=updated, verify=verify_unchanged)
    log.info("Disabled right %r for org %s", right_name, org_name)
    return True


def export_org_rights(
    org_name: str,
    path: Path,
    *,
    session: SessionContext | None = None,
    gateway: RightsGateway | None = None,
) -> int:
    view = get_org_rights(org_name, session=session, gateway=gateway)
    rows = write_view_csv(view, path)
    log.info("Exported %d rights for org %s to %s", rows, org_name, path)
    return rows


def import_org_rights(
    org_name: str,
    path: Path,
    *,
    session: SessionContext | None = None,
    gateway: RightsGateway | None = None,
    verify_unchanged: bool = False,
) -> OrgRightsDocument:
    """Make the CSV at ``path`` the complete set of rights enabled for ``org_name``.

    This replaces rather than merges: rights not marked ``true`` in the file end
    up disabled. The CSV is read before any request is made.
    """

    target_names = read_view_csv(path)
    effective_gateway = gateway or build_gateway(session)
    catalog = effective_gateway.list_catalog_rights()
    document = effective_gateway.fetch_org_rights(org_name)
    updated = replace_assignment(document, catalog, target_names)

    _submit(effective_gateway, original=document, updated=updated, verify=verify_unchanged)
    log.info(
        "Imported rights for org %s: requested=%d, enabled=%d, previously=%d",
        org_name,
        len(target_names),
        len(updated.rights),
        len(document.rights),
    )
    return updated


def _submit(
    gateway: RightsGateway,
    *,
    original: OrgRightsDocument,
    updated: OrgRightsDocument,
    verify: bool,
) -> None:
    if verify:
        current = gateway.fetch_org_rights_at(original.href)
        if set(current.refs) != set(original.refs):
            raise ConcurrentModificationError(original.href)
    gateway.replace_org_rights(updated)
