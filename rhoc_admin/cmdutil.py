"""Common command-line flags and checks shared by the commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from rhoc_admin.options import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    ListDeploymentsOptions,
    ListOptions,
)
from rhoc_admin.output import EMPTY_FORMAT, OUTPUT_FORMATS

OUTPUT_FORMAT_WIDE = "wide"
OUTPUT_FORMAT_CSV = "csv"


def valid_outputs() -> list[str]:
    """Return every accepted value of the ``--output`` flag."""
    return [*OUTPUT_FORMATS, OUTPUT_FORMAT_WIDE, OUTPUT_FORMAT_CSV]


def validate_output(value: str) -> str:
    """Return ``value`` if it is an accepted output format; raise ValueError otherwise."""
    formats = valid_outputs()
    if value and value not in formats:
        raise ValueError(
            f"invalid value '{value}' for --output, valid options are: {', '.join(formats)}"
        )
    return value


def prompt_confirm(message: str, ask: Callable[[str], str] | None = None) -> bool:
    """Ask a yes/no question; an empty answer means no."""
    ask = ask or input
    while True:
        answer = ask(f"{message} (y/N) ").strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("", "n", "no"):
            return False


def _output_type(value: str) -> str:
    try:
        return validate_output(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def add_output(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument(
        "-o",
        "--output",
        type=_output_type,
        default=EMPTY_FORMAT,
        help="Specify the output format. Choose from: " + ", ".join(valid_outputs()),
    )


def add_page(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument("-p", "--page", type=int, default=DEFAULT_PAGE_NUMBER, help="Page index")


def add_limit(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument(
        "-l", "--limit", type=int, default=DEFAULT_PAGE_SIZE, help="Number of items in each page"
    )


def add_all_pages(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument("--all-pages", action="store_true", help="Grab all pages")


def add_order_by(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument("--order-by", default="", help="Specifies the order by criteria")


def add_search(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument("--search", default="", help="Search criteria")


def add_cluster_id(parser: argparse.ArgumentParser, required: bool = False) -> argparse.Action:
    return parser.add_argument("-c", "--cluster-id", default="", required=required, help="Cluster ID")


def add_namespace_id(parser: argparse.ArgumentParser, required: bool = False) -> argparse.Action:
    return parser.add_argument("-n", "--namespace-id", default="", required=required, help="Namespace ID")


def add_id(parser: argparse.ArgumentParser, required: bool = False) -> argparse.Action:
    return parser.add_argument("--id", default="", required=required, help="ID")


def add_tenant_kind(parser: argparse.ArgumentParser, required: bool = False) -> argparse.Action:
    return parser.add_argument("--tenant-kind", default="", required=required, help="Tenant Kind")


def add_tenant_id(parser: argparse.ArgumentParser, required: bool = False) -> argparse.Action:
    return parser.add_argument("--tenant-id", default="", required=required, help="Tenant ID")


def add_name(parser: argparse.ArgumentParser, required: bool = False) -> argparse.Action:
    return parser.add_argument("--name", default="", required=required, help="Name")


def add_force(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument("-f", "--force", action="store_true", help="Force")


def add_yes(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument(
        "-y", "--yes", action="store_true", help="Skip confirmation of this action"
    )


def add_channel_update(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument(
        "--channel-update",
        action="store_true",
        help="Filter deployment with channel updates available",
    )


def add_dangling_deployments(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument(
        "--dangling-deployments",
        action="store_true",
        help="Filter not deleted deployment referring to a deleted connector",
    )


def add_revision(parser: argparse.ArgumentParser, required: bool = False) -> argparse.Action:
    return parser.add_argument(
        "--revision", type=int, default=0, required=required, help="Revision to update to"
    )


def add_file(parser: argparse.ArgumentParser) -> argparse.Action:
    return parser.add_argument("--file", default="", help="file")


def list_options_from(args: argparse.Namespace) -> ListOptions:
    """Build list options from parsed flags, with deployment filters when present."""
    base = {
        "page": getattr(args, "page", DEFAULT_PAGE_NUMBER),
        "limit": getattr(args, "limit", DEFAULT_PAGE_SIZE),
        "all_pages": getattr(args, "all_pages", False),
        "order_by": getattr(args, "order_by", "") or "",
        "search": getattr(args, "search", "") or "",
    }
    if hasattr(args, "channel_update") or hasattr(args, "dangling_deployments"):
        return ListDeploymentsOptions(
            **base,
            channel_update=getattr(args, "channel_update", False),
            dangling_deployments=getattr(args, "dangling_deployments", False),
        )
    return ListOptions(**base)