"""Tree view of a cluster with its namespaces and their connectors."""

from __future__ import annotations

from typing import IO, Any

from rhoc_admin.catalog_tables import TENANT_KIND_USER
from rhoc_admin.resource_tables import (
    _CLUSTER_STATE_COLORS,
    _CONNECTOR_STATE_COLORS,
    _age_row,
    _state_row,
    _text,
)
from rhoc_admin.table import Color, Row, _render

FIRST_ELEM_PREFIX = "├─"
LAST_ELEM_PREFIX = "└─"
INDENT = "  "
PIPE = "│ "

HEADERS = ("ID", "OWNER", "AGE", "STATUS", "REASON")


class TreeTable:
    """Collects cluster, namespace and connector rows and renders them as a tree."""

    def __init__(self) -> None:
        self.rows: list[list[Row]] = []

    @staticmethod
    def _common(item: Any, label: str, owner: Row, state: Row) -> list[Row]:
        return [
            Row(label),
            owner,
            _age_row(item, "created_at"),
            state,
            Row(_text(item, "status", "error")),
        ]

    def add_cluster(self, cluster: Any) -> None:
        """Add the root row for ``cluster``."""
        self.rows.append(
            self._common(
                cluster,
                "cluster/" + _text(cluster, "id"),
                Row(_text(cluster, "owner")),
                _state_row(_text(cluster, "status", "state"), _CLUSTER_STATE_COLORS),
            )
        )

    def add_namespace(self, namespace: Any, last: bool = False) -> None:
        """Add a namespace row below the cluster."""
        prefix = LAST_ELEM_PREFIX if last else FIRST_ELEM_PREFIX
        owner = _text(namespace, "owner")
        if _text(namespace, "tenant", "kind") == TENANT_KIND_USER:
            owner_row = Row(owner, (Color.NORMAL, Color.FG_CYAN))
        else:
            owner_row = Row(owner)
        self.rows.append(
            self._common(
                namespace,
                prefix + "namespace/" + _text(namespace, "id"),
                owner_row,
                _state_row(_text(namespace, "status", "state"), _CLUSTER_STATE_COLORS),
            )
        )

    def add_connector(self, connector: Any, last: bool = False) -> None:
        """Add a connector row below the most recent namespace."""
        prefix = LAST_ELEM_PREFIX if last else FIRST_ELEM_PREFIX
        self.rows.append(
            self._common(
                connector,
                PIPE + INDENT + prefix + "connector/" + _text(connector, "id"),
                Row(_text(connector, "owner")),
                _state_row(_text(connector, "status", "state"), _CONNECTOR_STATE_COLORS),
            )
        )

    def render(self, out: IO[str]) -> None:
        """Write the header and every collected row to ``out``."""
        _render(out, list(HEADERS), self.rows)