# rhoc-admin

`rhoc-admin` is a Python library for working with the admin REST API of a
managed connectors service. It sends authenticated requests, walks paginated
list endpoints, and renders connector clusters, namespaces, connectors,
connector types and deployments as aligned text tables, as CSV, or as
JSON/YAML documents.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

- `rhoc_admin.service`
  - `AdminClient(api_url, access_token, *, user_agent="", debug=False, transport=None, timeout=30.0)`
    sends requests with a bearer token. `get`, `delete`, `post`, `put` and
    `patch` return the reply body as text. `post` and `put` send
    `application/json`; `patch` sends `application/merge-patch+json`. A reply
    with a status above 400 raises `APIError`, or the error returned by
    `wrap_error` when the service gives a reason. The client is a context
    manager, and `close()` releases it.
  - `resolve_path(path)` places a path beneath
    `/api/connector_mgmt/v1/admin/` unless it already starts with that prefix.
  - `collect_pages(fetch_page, options, kind)` calls
    `fetch_page(page, options)` for the requested page, or for every page from
    it onwards when `options.all_pages` is set. It stops at the first empty
    page and returns a dict with `kind`, `items`, `total` and `size`.
- `rhoc_admin.options`: `ListOptions` (page, limit, all_pages, order_by,
  search) and `ListDeploymentsOptions`, which adds `channel_update` and
  `dangling_deployments`. Also holds the helpers `optional_string`,
  `optional_int` and `optional_bool`.
- `rhoc_admin.response`: `read_error` decodes a service error body into a
  `ServiceError`. `wrap_error` adds the service's reason to an error for
  400 and 500 replies.
- `rhoc_admin.output`
  - `dump_formatted(out, output_format, data)` writes JSON for `"json"` or
    `""`, and YAML for `"yaml"` or `"yml"`. Any other format raises
    `ValueError`.
  - `Formatted` either dumps a result or raises the error of the request
    that produced it.
  - `OutputWriter`, `new_output_writer` and `new_output_file_writer` give a
    buffered output target.
- `rhoc_admin.table`: `dump_table(config, out, items)` renders items through
  a `TableConfig` of `Column` definitions. It uses the default aligned style
  or CSV, chosen with `TableStyle`. Columns marked `wide` appear only when
  the config is wide. `header_name` turns `CreatedAt` into `CREATED_AT`.
- `rhoc_admin.resource_tables`: column sets and dump functions for clusters,
  connectors and deployments (`dump_clusters`, `dump_connectors`,
  `dump_deployments`).
- `rhoc_admin.catalog_tables`: column sets and dump functions for namespaces
  and connector types (`dump_namespaces`, `dump_connector_types`).
- `rhoc_admin.tree`: `TreeTable` renders a cluster with its namespaces and
  their connectors as a tree. Rows are added with `add_cluster`,
  `add_namespace` and `add_connector`, and written with `render(out)`.
- `rhoc_admin.cmdutil`: `argparse` helpers for the common flags (`add_output`,
  `add_page`, `add_limit`, `add_all_pages`, `add_id`, `add_cluster_id`, …).
  Also holds `validate_output`, `prompt_confirm`, and `list_options_from`,
  which builds list options from parsed arguments.
- `rhoc_admin.kube_resources`: `parse` reads `apiVersion:plural` strings into
  `GroupVersionResource` values.
- `rhoc_admin.resource`: `age` and `human_duration` give short
  human-readable ages such as `5m30s` or `3d4h`.
- `rhoc_admin.collections`: `contains` and `filter_items`.

## Example

```python
import sys

from rhoc_admin.table import Column, Row, TableConfig, TableStyle, dump_table

config = TableConfig(
    style=TableStyle.CSV,
    wide=True,
    columns=[Column(name="Key", getter=lambda item: Row(item[0]))],
)
dump_table(config, sys.stdout, [("alpha",), ("beta",)])
```

This prints:

```
KEY
alpha
beta
```

## What this package does not do

- It installs no command-line program. The building blocks are here: flags in
  `cmdutil`, requests in `service`, and rendering in the table modules. Wiring
  them into commands is left to the caller.
- It does not read configuration files or log in. The API URL and access
  token are passed to `AdminClient` by the caller.
- It does not talk to Kubernetes clusters directly. Gathering resources or
  pod logs from a cluster is not provided.