"""HTTP access to the connector admin API and paging over its list endpoints."""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Callable, Mapping
from typing import IO, Any, Union
from urllib.parse import urlsplit, urlunsplit

import httpx

from rhoc_admin.options import ListOptions
from rhoc_admin.response import wrap_error

ADMIN_PATH_PREFIX = "/api/connector_mgmt/v1/admin/"

JSON_CONTENT_TYPE = "application/json"
MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"

_log = logging.getLogger(__name__)

Body = Union[bytes, str, IO[bytes], IO[str]]


class APIError(Exception):
    """A reply whose status code reports a failure."""

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        super().__init__(message)
        self.response = response


def resolve_path(path: str) -> str:
    """Place ``path`` under the admin API prefix unless it is already there."""
    if path.startswith(ADMIN_PATH_PREFIX):
        return path
    joined = posixpath.normpath(ADMIN_PATH_PREFIX + "/" + path)
    # normpath keeps a leading double slash; the joined path never needs one
    if joined.startswith("//"):
        joined = "/" + joined.lstrip("/")
    return joined


def _read_body(body: Body) -> bytes:
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    data = body.read()
    return data.encode("utf-8") if isinstance(data, str) else data


class AdminClient:
    """Authenticated client for raw requests against the admin API."""

    def __init__(
        self,
        api_url: str,
        access_token: str,
        *,
        user_agent: str = "",
        debug: bool = False,
        transport: httpx.BaseTransport | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        self.api_url = api_url
        self.debug = debug
        headers = {"Authorization": f"Bearer {access_token}"}
        if user_agent:
            headers["User-Agent"] = user_agent
        hooks: dict[str, list[Callable[..., Any]]] = {}
        if debug:
            hooks = {"request": [self._log_request], "response": [self._log_response]}
        self._http = httpx.Client(
            headers=headers, transport=transport, timeout=timeout, event_hooks=hooks
        )

    @staticmethod
    def _log_request(request: httpx.Request) -> None:
        _log.debug("%s %s", request.method, request.url)

    @staticmethod
    def _log_response(response: httpx.Response) -> None:
        _log.debug("%s %s -> %s", response.request.method, response.request.url, response.status_code)

    def _url_for(self, path: str) -> str:
        target = urlsplit(resolve_path(path))
        base = urlsplit(self.api_url)
        return urlunsplit((base.scheme, base.netloc, target.path, target.query, ""))

    def get(self, path: str) -> str:
        return self.request("GET", path)

    def delete(self, path: str) -> str:
        return self.request("DELETE", path)

    def post(self, path: str, body: Body) -> str:
        return self.request("POST", path, JSON_CONTENT_TYPE, body)

    def put(self, path: str, body: Body) -> str:
        return self.request("PUT", path, JSON_CONTENT_TYPE, body)

    def patch(self, path: str, body: Body) -> str:
        return self.request("PATCH", path, MERGE_PATCH_CONTENT_TYPE, body)

    def request(
        self,
        method: str,
        path: str,
        content_type: str = "",
        body: Body | None = None,
    ) -> str:
        """Send a request and return the reply body as text.

        Replies with a status above 400 raise, enriched with the service's reason.
        """
        headers = {"Accept": JSON_CONTENT_TYPE}
        content = None
        if body is not None:
            content = _read_body(body)
            if content_type:
                headers["Content-Type"] = content_type
        response = self._http.request(method, self._url_for(path), headers=headers, content=content)
        if response.status_code > 400:
            status = f"{response.status_code} {response.reason_phrase}".strip()
            raise wrap_error(APIError(status, response), response)
        return response.text

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> AdminClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _field(result: Any, name: str, default: Any = None) -> Any:
    if result is None:
        return default
    if isinstance(result, Mapping):
        return result.get(name, default)
    return getattr(result, name, default)


def collect_pages(
    fetch_page: Callable[[int, ListOptions], Any],
    options: ListOptions,
    kind: str,
) -> dict[str, Any]:
    """Gather items from one page, or from every page when ``all_pages`` is set.

    ``fetch_page(page, options)`` returns a page holding ``items`` and ``total``;
    fetching stops at the first empty page. Errors from ``fetch_page`` propagate.
    """
    collected: dict[str, Any] = {"kind": kind, "items": [], "total": 0, "size": 0}
    page = options.page
    while page == options.page or options.all_pages:
        result = fetch_page(page, options)
        items = _field(result, "items") or []
        if not items:
            break
        collected["items"].extend(items)
        collected["size"] = len(collected["items"])
        collected["total"] = _field(result, "total", 0)
        page += 1
    return collected