"""Paging and filtering options for list requests."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 100


@dataclass
class ListOptions:
    """Options shared by every paged list request."""

    page: int = DEFAULT_PAGE_NUMBER
    limit: int = DEFAULT_PAGE_SIZE
    all_pages: bool = False
    order_by: str = ""
    search: str = ""


@dataclass
class ListDeploymentsOptions(ListOptions):
    """List options with the deployment-specific filters."""

    channel_update: bool = False
    dangling_deployments: bool = False


def optional_string(value: str) -> str | None:
    """Return ``value``, or None when it is empty."""
    return value or None


def optional_int(value: int) -> str:
    """Return the decimal text of ``value``."""
    return str(int(value))


def optional_bool(value: bool) -> str:
    """Return ``"true"`` or ``"false"``."""
    return str(bool(value)).lower()