"""CSV export/import of an org's rights view for editing by hand."""

from __future__ import annotations

import csv
from typing import TYPE_CHECKING

from orgrights.domain.errors import FormatError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path
    from typing import TextIO

    from orgrights.domain.model import OrgRightAssignment

FIELDNAMES = ("name", "enabled")


def export_view(view: Iterable[OrgRightAssignment], handle: TextIO) -> int:
    """Write one ``name,enabled`` row per assignment and return the row count."""

    writer = csv.DictWriter(handle, fieldnames=FIELDNAMES, lineterminator="\n")
    writer.writeheader()
    rows = 0
    for assignment in view:
        writer.writerow(
            {"name": assignment.name, "enabled": "true" if assignment.enabled else "false"}
        )
        rows += 1
    return rows


def import_view(handle: TextIO) -> list[str]:
    """Return the names of every row whose ``enabled`` column reads ``true``."""

    reader = csv.DictReader(handle)
    columns = {(name or "").strip().lower(): name for name in reader.fieldnames or ()}
    missing = [name for name in FIELDNAMES if name not in columns]
    if missing:
        raise FormatError(f"CSV is missing required columns: {', '.join(missing)}")

    name_column = columns["name"]
    enabled_column = columns["enabled"]
    names: list[str] = []
    for row in reader:
        name = row.get(name_column) or ""
        if not name.strip():
            continue
        if (row.get(enabled_column) or "").strip().lower() == "true":
            names.append(name)
    return names


def write_view_csv(view: Iterable[OrgRightAssignment], path: Path) -> int:
    with path.open("w", newline="", encoding="utf-8") as handle:
        return export_view(view, handle)


def read_view_csv(path: Path) -> list[str]:
    with path.open(newline="", encoding="utf-8-sig") as handle:
        return import_view(handle)
