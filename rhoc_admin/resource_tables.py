"""Table layouts for clusters, connectors and deployments."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta, timezone
from typing import IO, Any

from rhoc_admin.options import ListOptions
from rhoc_admin.resource import age
from rhoc_admin.table import Color, Column, Row, TableConfig, TableStyle, dump_table

_ZERO_TIME_TEXT = "0001-01-01T00:00:00Z"
_FRACTION = re.compile(r"\.(\d+)")

_READY = (Color.NORMAL, Color.FG_HI_GREEN)
_DISCONNECTED = (Color.NORMAL, Color.FG_HI_BLUE)
_FAILED = (Color.NORMAL, Color.FG_HI_RED)
_STOPPED = (Color.NORMAL, Color.FG_HI_YELLOW)

_CLUSTER_STATE_COLORS = {"ready": _READY, "disconnected": _DISCONNECTED}
_CONNECTOR_STATE_COLORS = {"ready": _READY, "failed": _FAILED, "stopped": _STOPPED}


def _get(item: Any, *path: str, default: Any = None) -> Any:
    """Follow ``path`` through nested mappings or attributes."""
    current = item
    for name in path:
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(name)
        else:
            current = getattr(current, name, None)
    return default if current is None else current


def _text(item: Any, *path: str) -> str:
    return str(_get(item, *path, default=""))


def _integer(item: Any, *path: str) -> int:
    return int(_get(item, *path, default=0))


def _parse_time(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp; unset, zero or malformed values give None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.year == 1 and parsed.replace(tzinfo=None) == datetime(1, 1, 1):
        return None
    return parsed


def _rfc3339(value: datetime | None) -> str:
    """Format a time with second precision and a ``Z`` or ``±hh:mm`` zone."""
    if value is None:
        return _ZERO_TIME_TEXT
    stamp = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    offset = value.utcoffset()
    if offset is None or offset == timedelta(0):
        return stamp + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    minutes = abs(minutes)
    return f"{stamp}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _age_row(item: Any, *path: str) -> Row:
    return Row(age(_parse_time(_get(item, *path))))


def _time_row(item: Any, *path: str) -> Row:
    return Row(_rfc3339(_parse_time(_get(item, *path))))


def _state_row(value: str, colors: Mapping[str, tuple[int, ...]]) -> Row:
    return Row(value, colors.get(value, ()))


def _items_of(items: Any) -> Iterable[Any]:
    if isinstance(items, Mapping):
        return items.get("items") or []
    return items or []


def cluster_columns() -> list[Column[Any]]:
    """Columns shown for connector clusters."""
    return [
        Column("ID", lambda c: Row(_text(c, "id"))),
        Column("Name", lambda c: Row(_text(c, "name")), wide=True),
        Column("Owner", lambda c: Row(_text(c, "owner"))),
        Column("State", lambda c: _state_row(_text(c, "status", "state"), _CLUSTER_STATE_COLORS)),
        Column("Age", lambda c: _age_row(c, "created_at")),
        Column("CreatedAt", lambda c: _time_row(c, "created_at"), wide=True),
        Column("ModifiedAt", lambda c: _time_row(c, "modified_at"), wide=True),
    ]


def connector_columns() -> list[Column[Any]]:
    """Columns shown for connectors."""
    return [
        Column("ID", lambda c: Row(_text(c, "id"))),
        Column("NamespaceId", lambda c: Row(_text(c, "namespace_id"))),
        Column("Name", lambda c: Row(_text(c, "name")), wide=True),
        Column("Owner", lambda c: Row(_text(c, "owner"))),
        Column("ConnectorTypeId", lambda c: Row(_text(c, "connector_type_id"))),
        Column("DesiredState", lambda c: Row(_text(c, "desired_state"))),
        Column("State", lambda c: _state_row(_text(c, "status", "state"), _CONNECTOR_STATE_COLORS)),
        Column("Reason", lambda c: Row(_text(c, "status", "error")), wide=True),
        Column("Version", lambda c: Row(str(_integer(c, "resource_version")))),
        Column("Age", lambda c: _age_row(c, "created_at")),
        Column("CreatedAt", lambda c: _time_row(c, "created_at"), wide=True),
        Column("ModifiedAt", lambda c: _time_row(c, "modified_at"), wide=True),
    ]


def _type_revision(deployment: Any) -> Row:
    metadata = _get(deployment, "spec", "shard_metadata", default={})
    if "connector_revision" not in metadata:
        return Row()
    revision = metadata["connector_revision"]
    if isinstance(revision, (int, float)) and not isinstance(revision, bool):
        return Row(str(int(revision)))
    return Row(str(revision))


def _updatable_type_revision(deployment: Any) -> Row:
    revision = _integer(deployment, "status", "shard_metadata", "available", "revision")
    return Row("-" if revision == 0 else str(revision))


def _type_image(deployment: Any) -> Row:
    metadata = _get(deployment, "spec", "shard_metadata", default={})
    for key in ("connector_image", "container_image"):
        if key in metadata:
            return Row(str(metadata[key]))
    return Row()


def _deployment_version(deployment: Any) -> Row:
    desired = _integer(deployment, "metadata", "resource_version")
    actual = _integer(deployment, "status", "resource_version")
    if desired > actual:
        colors = (Color.NORMAL, Color.FG_CYAN)
    elif desired < actual:
        colors = (Color.NORMAL, Color.FG_RED)
    else:
        colors = (Color.NORMAL, Color.FG_GREEN)
    return Row(str(actual), colors)


def deployment_columns(options: ListOptions | None = None) -> list[Column[Any]]:
    """Columns shown for deployments; revisions are narrow when filtering channel updates."""
    revisions_wide = not getattr(options, "channel_update", False)
    return [
        Column("ID", lambda d: Row(_text(d, "id"))),
        Column("ConnectorID", lambda d: Row(_text(d, "spec", "connector_id"))),
        Column("NamespaceID", lambda d: Row(_text(d, "spec", "namespace_id"))),
        Column("ClusterID", lambda d: Row(_text(d, "spec", "cluster_id"))),
        Column("Type", lambda d: Row(_text(d, "spec", "connector_type_id")), wide=True),
        Column("TypeRevision", _type_revision, wide=revisions_wide),
        Column("UpdatableTypeRevision", _updatable_type_revision, wide=revisions_wide),
        Column("TypeImage", _type_image, wide=True),
        Column("DesiredState", lambda d: Row(_text(d, "spec", "desired_state"))),
        Column("State", lambda d: _state_row(_text(d, "status", "phase"), _CONNECTOR_STATE_COLORS)),
        Column("Version", lambda d: Row(str(_integer(d, "metadata", "resource_version"))), wide=True),
        Column("DeploymentVersion", _deployment_version, wide=True),
        Column("Age", lambda d: _age_row(d, "metadata", "created_at")),
        Column("CreatedAt", lambda d: _time_row(d, "metadata", "created_at"), wide=True),
        Column("ModifiedAt", lambda d: _time_row(d, "metadata", "updated_at"), wide=True),
    ]


def dump_clusters(out: IO[str], items: Any, wide: bool = False, style: TableStyle = TableStyle.DEFAULT) -> None:
    """Write a cluster list (or its items) as a table."""
    dump_table(TableConfig(cluster_columns(), style, wide), out, _items_of(items))


def dump_connectors(out: IO[str], items: Any, wide: bool = False, style: TableStyle = TableStyle.DEFAULT) -> None:
    """Write a connector list (or its items) as a table."""
    dump_table(TableConfig(connector_columns(), style, wide), out, _items_of(items))


def dump_deployments(
    out: IO[str],
    items: Any,
    options: ListOptions | None = None,
    wide: bool = False,
    style: TableStyle = TableStyle.DEFAULT,
) -> None:
    """Write a deployment list (or its items) as a table."""
    dump_table(TableConfig(deployment_columns(options), style, wide), out, _items_of(items))


__all__ = [
    "cluster_columns",
    "connector_columns",
    "deployment_columns",
    "dump_clusters",
    "dump_connectors",
    "dump_deployments",
    "timezone",
]