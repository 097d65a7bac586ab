"""Table layouts for connector namespaces and connector types."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import IO, Any

from rhoc_admin.resource_tables import (
    _CLUSTER_STATE_COLORS,
    _age_row,
    _get,
    _integer,
    _items_of,
    _parse_time,
    _state_row,
    _text,
    _time_row,
)
from rhoc_admin.table import Color, Column, Row, TableConfig, TableStyle, dump_table

TENANT_KIND_USER = "user"
TENANT_KIND_ORGANISATION = "organisation"

_STABLE_CHANNEL = "stable"


def _expired(value: Any) -> bool:
    """Return True when ``value`` is a parseable timestamp in the past."""
    if not value:
        return False
    parsed = _parse_time(value)
    if parsed is None:
        return False
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc) > parsed


def _namespace_owner(namespace: Any) -> Row:
    owner = _text(namespace, "owner")
    if _text(namespace, "tenant", "kind") == TENANT_KIND_USER:
        return Row(owner, (Color.NORMAL, Color.FG_CYAN))
    return Row(owner)


def _namespace_expiration(namespace: Any) -> Row:
    expiration = _text(namespace, "expiration")
    if _expired(expiration):
        return Row(expiration, (Color.NORMAL, Color.FG_RED))
    return Row(expiration)


def _namespace_state(wide: bool):
    def getter(namespace: Any) -> Row:
        row = _state_row(_text(namespace, "status", "state"), _CLUSTER_STATE_COLORS)
        if wide and _expired(_get(namespace, "expiration")):
            return Row(row.value + " (*)", row.colors)
        return row

    return getter


def namespace_columns(wide: bool = False) -> list[Column[Any]]:
    """Columns shown for namespaces; in wide mode expired namespaces get a ``(*)`` mark."""
    return [
        Column("ID", lambda n: Row(_text(n, "id"))),
        Column("ClusterID", lambda n: Row(_text(n, "cluster_id"))),
        Column("Name", lambda n: Row(_text(n, "name")), wide=True),
        Column("Owner", _namespace_owner),
        Column("TenantKind", lambda n: Row(_text(n, "tenant", "kind")), wide=True),
        Column("TenantID", lambda n: Row(_text(n, "tenant", "id")), wide=True),
        Column("State", _namespace_state(wide)),
        Column("Version", lambda n: Row(str(_integer(n, "resource_version"))), wide=True),
        Column("Connectors", lambda n: Row(str(_integer(n, "status", "connectors_deployed")))),
        Column("Expiration", _namespace_expiration, wide=True),
        Column("Age", lambda n: _age_row(n, "created_at")),
        Column("CreatedAt", lambda n: _time_row(n, "created_at"), wide=True),
        Column("ModifiedAt", lambda n: _time_row(n, "modified_at"), wide=True),
    ]


def _stable_metadata(connector_type: Any) -> Mapping[str, Any]:
    metadata = _get(connector_type, "channels", _STABLE_CHANNEL, "shard_metadata", default={})
    return metadata if isinstance(metadata, Mapping) else {}


def _type_revision(connector_type: Any) -> Row:
    metadata = _stable_metadata(connector_type)
    if "connector_revision" not in metadata:
        return Row()
    revision = metadata["connector_revision"]
    if isinstance(revision, (int, float)) and not isinstance(revision, bool):
        return Row(str(int(revision)))
    return Row(str(revision))


def _type_image(connector_type: Any) -> Row:
    metadata = _stable_metadata(connector_type)
    for key in ("connector_image", "container_image"):
        if key in metadata:
            return Row(str(metadata[key]))
    return Row()


def _operator_field(name: str):
    def getter(connector_type: Any) -> Row:
        metadata = _stable_metadata(connector_type)
        if "operators" not in metadata:
            return Row()
        # a single operator per connector type is assumed
        return Row(str(metadata["operators"][0][name]))

    return getter


def connector_type_columns() -> list[Column[Any]]:
    """Columns shown for connector types, read from their stable channel."""
    return [
        Column("ID", lambda t: Row(_text(t, "id"))),
        Column("Name", lambda t: Row(_text(t, "name")), wide=True),
        Column("Revision", _type_revision),
        Column("Image", _type_image),
        Column("Operator Type", _operator_field("type")),
        Column("Operator Version Range", _operator_field("version")),
    ]


def dump_namespaces(
    out: IO[str], items: Any, wide: bool = False, style: TableStyle = TableStyle.DEFAULT
) -> None:
    """Write a namespace list (or its items) as a table."""
    dump_table(TableConfig(namespace_columns(wide), style, wide), out, _items_of(items))


def dump_connector_types(
    out: IO[str], items: Any, wide: bool = False, style: TableStyle = TableStyle.DEFAULT
) -> None:
    """Write a connector type list (or its items) as a table."""
    dump_table(TableConfig(connector_type_columns(), style, wide), out, _items_of(items))