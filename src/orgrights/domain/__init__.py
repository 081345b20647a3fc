"""Domain model and pure reconciliation logic for org rights."""

from __future__ import annotations

from .errors import (
    ConcurrentModificationError,
    FormatError,
    NotConnectedError,
    NotFoundError,
    OrgNotFoundError,
    OrgRightsError,
    ParseError,
    PreconditionError,
    RightNotFoundError,
    TransportError,
    UnsupportedServerVersionError,
)
from .model import OrgRightAssignment, OrgRightsDocument, Right
from .reconcile import (
    add_right,
    compute_enabled_view,
    find_catalog_right,
    remove_right,
    replace_assignment,
)

__all__ = [
    "ConcurrentModificationError",
    "FormatError",
    "NotConnectedError",
    "NotFoundError",
    "OrgNotFoundError",
    "OrgRightAssignment",
    "OrgRightsDocument",
    "OrgRightsError",
    "ParseError",
    "PreconditionError",
    "Right",
    "RightNotFoundError",
    "TransportError",
    "UnsupportedServerVersionError",
    "add_right",
    "compute_enabled_view",
    "find_catalog_right",
    "remove_right",
    "replace_assignment",
]
