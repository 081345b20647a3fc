"""Public interface for the vCloud rights adapter."""

from __future__ import annotations

from .client import VCloudRightsClient, admin_org_href, org_rights_href
from .codec import parse_catalog, parse_org_list, parse_org_rights, serialize_org_rights
from .schema import (
    ORG_RIGHTS_MEDIA_TYPE,
    VCLOUD_NAMESPACE,
    OrgReferencePayload,
    RightReferencePayload,
)

__all__ = [
    "ORG_RIGHTS_MEDIA_TYPE",
    "VCLOUD_NAMESPACE",
    "OrgReferencePayload",
    "RightReferencePayload",
    "VCloudRightsClient",
    "admin_org_href",
    "org_rights_href",
    "parse_catalog",
    "parse_org_list",
    "parse_org_rights",
    "serialize_org_rights",
]
