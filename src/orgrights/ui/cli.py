# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from orgrights.app import (
    add_org_right,
    build_gateway,
    export_org_rights,
    get_org_rights,
    import_org_rights,
    list_catalog_rights,
    remove_org_right,
)
from orgrights.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from orgrights.domain.ports import RightsGateway

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage organization rights")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("catalog", help="List every right known to the server")

    show = subparsers.add_parser("show", help="Show enabled/disabled rights for an org")
    show.add_argument("org", help="Organization name")

    add = subparsers.add_parser("add", help="Enable a right for an org")
    add.add_argument("org", help="Organization name")
    add.add_argument("right", help="Right name as listed in the catalog")
    add.add_argument(
        "--verify",
        action="store_true",
        help="Abort if the org rights change on the server before the update is sent",
    )

    remove = subparsers.add_parser("remove", help="Disable a right for an org")
    remove.add_argument("org", help="Organization name")
    remove.add_argument("right", help="Right name to disable")
    remove.add_argument(
        "--verify",
        action="store_true",
        help="Abort if the org rights change on the server before the update is sent",
    )

    export = subparsers.add_parser("export", help="Write an org's rights to a CSV file")
    export.add_argument("org", help="Organization name")
    export.add_argument("file", type=Path, help="Destination CSV path")

    import_ = subparsers.add_parser(
        "import",
        help="Replace an org's rights with those enabled in a CSV file",
    )
    import_.add_argument("org", help="Organization name")
    import_.add_argument("file", type=Path, help="Source CSV path (columns: name,enabled)")
    import_.add_argument(
        "--verify",
        action="store_true",
        help="Abort if the org rights change on the server before the update is sent",
    )

    return parser.parse_args(list(argv))


def _run(args: argparse.Namespace, gateway: RightsGateway) -> None:
    if args.command == "catalog":
        for right in list_catalog_rights(gateway=gateway):
            print(right.name)
    elif args.command == "show":
        for assignment in get_org_rights(args.org, gateway=gateway):
            print(f"{assignment.name}\t{'true' if assignment.enabled else 'false'}")
    elif args.command == "add":
        add_org_right(args.org, args.right, gateway=gateway, verify_unchanged=args.verify)
    elif args.command == "remove":
        remove_org_right(args.org, args.right, gateway=gateway, verify_unchanged=args.verify)
    elif args.command == "export":
        export_org_rights(args.org, args.file, gateway=gateway)
    elif args.command == "import":
        import_org_rights(args.org, args.file, gateway=gateway, verify_unchanged=args.verify)
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        gateway = build_gateway()
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        _run(parsed_args, gateway)
    except Exception:
        log.exception("Rights operation failed")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
