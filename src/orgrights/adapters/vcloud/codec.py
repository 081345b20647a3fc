"""Parse and serialize the XML documents exchanged with the rights endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar
from xml.etree import ElementTree as ET

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError as XMLParseError
from defusedxml.ElementTree import fromstring as xmlparse
from pydantic import ValidationError

from orgrights.domain.errors import ParseError
from orgrights.domain.model import OrgRightsDocument, Right

from .schema import (
    RIGHT_MEDIA_TYPE,
    VCLOUD_NAMESPACE,
    OrgReferencePayload,
    ReferencePayload,
    RightReferencePayload,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

P = TypeVar("P", bound=ReferencePayload)

def _tag(local_name: str) -> str:
    return f"{{{VCLOUD_NAMESPACE}}}{local_name}"


def _parse_root(body: bytes | str, expected: str) -> ET.Element:
    try:
        root = xmlparse(body)
    except (XMLParseError, DefusedXmlException) as exc:
        raise ParseError(f"Malformed XML response: {exc}") from exc
    if root.tag != _tag(expected):
        raise ParseError(f"Expected <{expected}> document, got <{root.tag}>")
    return root


def _iter_references(
    parent: ET.Element,
    local_name: str,
    model: type[P],
) -> Iterator[P]:
    for element in parent.iter(_tag(local_name)):
        try:
            yield model.model_validate(dict(element.attrib))
        except ValidationError as exc:
            raise ParseError(f"Invalid <{local_name}> element: {exc}") from exc


def parse_catalog(body: bytes | str) -> list[Right]:
    """Read the rights catalog from the admin root document."""

    root = _parse_root(body, "VCloud")
    container = root.find(_tag("RightReferences"))
    if container is None:
        raise ParseError("Admin document has no <RightReferences> element")
    return [
        Right(ref=payload.href, name=payload.name)
        for payload in _iter_references(container, "RightReference", RightReferencePayload)
    ]


def parse_org_list(body: bytes | str) -> list[OrgReferencePayload]:
    root = _parse_root(body, "OrgList")
    return list(_iter_references(root, "Org", OrgReferencePayload))


def parse_org_rights(body: bytes | str, *, href: str) -> OrgRightsDocument:
    root = _parse_root(body, "OrgRights")
    rights = tuple(
        Right(ref=payload.href, name=payload.name)
        for payload in _iter_references(root, "RightReference", RightReferencePayload)
    )
    return OrgRightsDocument(href=root.get("href") or href, rights=rights)


def serialize_org_rights(document: OrgRightsDocument) -> bytes:
    """Render the full ``OrgRights`` document as ASCII XML for a PUT."""

    # Unqualified tags under an explicit default xmlns.
    root = ET.Element("OrgRights", {"xmlns": VCLOUD_NAMESPACE, "href": document.href})
    for right in document.rights:
        ET.SubElement(
            root,
            "RightReference",
            {"href": right.ref, "name": right.name, "type": RIGHT_MEDIA_TYPE},
        )
    return ET.tostring(root, encoding="us-ascii", xml_declaration=True)
