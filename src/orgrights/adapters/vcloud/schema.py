"""Pydantic models describing the XML elements we read from the vCloud API.

The API speaks XML, so these models validate the attribute mappings of parsed
elements rather than JSON bodies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

VCLOUD_NAMESPACE = "http://www.vmware.com/vcloud/v1.5"

RIGHT_MEDIA_TYPE = "application/vnd.vmware.admin.right+xml"
ADMIN_ROOT_MEDIA_TYPE = "application/vnd.vmware.admin.vcloud+xml"
ORG_LIST_MEDIA_TYPE = "application/vnd.vmware.vcloud.orgList+xml"
ORG_RIGHTS_MEDIA_TYPE = "application/vnd.vmware.admin.org.rights+xml"


def _require_text(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        raise ValueError("must not be blank")
    return value


class VCloudBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ReferencePayload(VCloudBaseModel):
    href: str
    name: str
    type: str | None = None

    _check_text = field_validator("href", "name", mode="before")(_require_text)


class RightReferencePayload(ReferencePayload):
    pass


class OrgReferencePayload(ReferencePayload):
    pass
