import csv
import io

from rhoc_admin.catalog_tables import (
    connector_type_columns,
    dump_connector_types,
    dump_namespaces,
    namespace_columns,
)
from rhoc_admin.table import Color, TableStyle, header_name

PAST = "2001-02-03T04:05:06Z"
FUTURE = "2999-02-03T04:05:06Z"


def _column(columns, name):
    return next(column for column in columns if column.name == name)


def _namespace(**overrides):
    namespace = {
        "id": "ns1",
        "cluster_id": "cl1",
        "name": "first",
        "owner": "someone@example.com",
        "tenant": {"kind": "organisation", "id": "org1"},
        "status": {"state": "ready", "connectors_deployed": 3},
        "resource_version": 7,
        "expiration": "",
    }
    namespace.update(overrides)
    return namespace


def _connector_type(metadata=None, channels=None):
    if channels is None:
        channels = {"stable": {"shard_metadata": metadata or {}}}
    return {"id": "type1", "name": "Type One", "channels": channels}


def test_namespace_narrow_columns():
    names = [c.name for c in namespace_columns(False) if not c.wide]
    assert names == ["ID", "ClusterID", "Owner", "State", "Connectors", "Age"]


def test_namespace_state_marks_expired_only_when_wide():
    item = _namespace(expiration=PAST)
    wide_row = _column(namespace_columns(True), "State").getter(item)
    narrow_row = _column(namespace_columns(False), "State").getter(item)
    assert wide_row.value == "ready (*)"
    assert narrow_row.value == "ready"
    assert wide_row.colors == (Color.NORMAL, Color.FG_HI_GREEN)


def test_namespace_state_not_marked_for_future_expiration():
    item = _namespace(expiration=FUTURE)
    assert _column(namespace_columns(True), "State").getter(item).value == "ready"


def test_namespace_expiration_colored_red_when_past():
    getter = _column(namespace_columns(True), "Expiration").getter
    past = getter(_namespace(expiration=PAST))
    future = getter(_namespace(expiration=FUTURE))
    assert past.value == PAST
    assert Color.FG_RED in past.colors
    assert future.colors == ()


def test_namespace_owner_colored_for_user_tenant():
    getter = _column(namespace_columns(False), "Owner").getter
    user = getter(_namespace(tenant={"kind": "user", "id": "u1"}))
    org = getter(_namespace())
    assert user.colors == (Color.NORMAL, Color.FG_CYAN)
    assert org.colors == ()
    assert org.value == "someone@example.com"


def test_namespace_numbers_and_tenant():
    columns = namespace_columns(True)
    item = _namespace()
    assert _column(columns, "Connectors").getter(item).value == "3"
    assert _column(columns, "Version").getter(item).value == "7"
    assert _column(columns, "TenantID").getter(item).value == "org1"
    assert _column(columns, "Age").getter(item).value == ""


def test_dump_namespaces_empty_writes_nothing():
    out = io.StringIO()
    dump_namespaces(out, {"items": []})
    assert out.getvalue() == ""


def test_dump_namespaces_csv_round_trip():
    out = io.StringIO()
    items = [_namespace(), _namespace(id="ns2")]
    dump_namespaces(out, {"items": items}, wide=True, style=TableStyle.CSV)
    rows = list(csv.reader(io.StringIO(out.getvalue())))
    assert rows[0] == [header_name(c.name) for c in namespace_columns(True)]
    assert [row[0] for row in rows[1:]] == ["ns1", "ns2"]
    assert len(rows) == 3


def test_dump_namespaces_default_counts_items():
    out = io.StringIO()
    dump_namespaces(out, [_namespace(), _namespace(id="ns2")])
    first_line = out.getvalue().splitlines()[0]
    assert first_line.startswith("ID (2)")
    assert "ns2" in out.getvalue()


def test_connector_type_revision_variants():
    getter = _column(connector_type_columns(), "Revision").getter
    assert getter(_connector_type({"connector_revision": 5.0})).value == "5"
    assert getter(_connector_type({"connector_revision": "abc"})).value == "abc"
    assert getter(_connector_type({})).value == ""


def test_connector_type_image_prefers_connector_image():
    getter = _column(connector_type_columns(), "Image").getter
    both = _connector_type({"connector_image": "img-a", "container_image": "img-b"})
    fallback = _connector_type({"container_image": "img-b"})
    assert getter(both).value == "img-a"
    assert getter(fallback).value == "img-b"
    assert getter(_connector_type({})).value == ""


def test_connector_type_operator_fields():
    item = _connector_type({"operators": [{"type": "camel", "version": "[1.0,2.0)"}]})
    columns = connector_type_columns()
    assert _column(columns, "Operator Type").getter(item).value == "camel"
    assert _column(columns, "Operator Version Range").getter(item).value == "[1.0,2.0)"


def test_connector_type_without_stable_channel():
    item = _connector_type(channels={"beta": {"shard_metadata": {"connector_revision": 1}}})
    values = [c.getter(item).value for c in connector_type_columns()]
    assert values == ["type1", "Type One", "", "", "", ""]


def test_dump_connector_types_csv():
    out = io.StringIO()
    item = _connector_type({"connector_revision": 9, "connector_image": "img"})
    dump_connector_types(out, {"items": [item]}, wide=True, style=TableStyle.CSV)
    rows = list(csv.reader(io.StringIO(out.getvalue())))
    assert rows[0][4] == "OPERATOR_TYPE"
    assert rows[1][:4] == ["type1", "Type One", "9", "img"]