"""Reconcile an org's assigned rights against the global catalog.

All functions here are pure: they never touch the network and never mutate
their inputs. Edits return a new :class:`OrgRightsDocument`; an edit that would
change nothing returns the input document itself so callers can skip the write.
"""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from .model import OrgRightAssignment, OrgRightsDocument, Right

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = getLogger(__name__)


def compute_enabled_view(
    catalog: Sequence[Right],
    assigned: Iterable[str],
) -> list[OrgRightAssignment]:
    """Mark every catalog right as enabled or disabled, keeping catalog order."""

    assigned_refs = set(assigned)
    return [OrgRightAssignment(right=right, enabled=right.ref in assigned_refs) for right in catalog]


def add_right(document: OrgRightsDocument, ref: str, name: str) -> OrgRightsDocument:
    if ref in document:
        log.warning("Right %r is already enabled for %s; nothing to add", name, document.href)
        return document
    return replace(document, rights=(*document.rights, Right(ref=ref, name=name)))


def remove_right(document: OrgRightsDocument, name: str) -> OrgRightsDocument:
    # Matches by name; names are expected to be unique within one org's rights.
    remaining = tuple(right for right in document.rights if right.name != name)
    if len(remaining) == len(document.rights):
        log.warning("Right %r is not enabled for %s; nothing to remove", name, document.href)
        return document
    return replace(document, rights=remaining)


def replace_assignment(
    document: OrgRightsDocument,
    catalog: Sequence[Right],
    target_names: Iterable[str],
) -> OrgRightsDocument:
    """Replace every assigned right with the catalog rights named in ``target_names``.

    Names with no catalog entry are dropped. References only ever come from the
    catalog, so the result never contains a right the server does not know.
    """

    wanted = set(target_names)
    rights = tuple(right for right in catalog if right.name in wanted)

    unknown = wanted.difference(right.name for right in catalog)
    if unknown:
        log.debug("Ignoring names absent from the catalog: %s", ", ".join(sorted(unknown)))

    return replace(document, rights=rights)


def find_catalog_right(catalog: Iterable[Right], name: str) -> Right | None:
    return next((right for right in catalog if right.name == name), None)
