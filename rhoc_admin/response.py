"""Decoding of service error bodies and enrichment of request errors."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

_ERROR_STATUSES = (400, 500)


@dataclass
class ServiceError:
    """Error document returned by the admin API."""

    id: str = ""
    kind: str = ""
    href: str = ""
    code: str = ""
    reason: str = ""
    operation_id: str = ""


class RequestError(Exception):
    """A request failure carrying the reason reported by the service."""

    def __init__(self, message: str, reason: str = "") -> None:
        super().__init__(message)
        self.reason = reason


def read_error(response: Any) -> ServiceError:
    """Decode the error document in the body of ``response``.

    Raises ValueError when the body is not a JSON object.
    """
    body = json.loads(response.content)
    if not isinstance(body, dict):
        raise ValueError("error body is not a JSON object")
    return ServiceError(
        **{
            name: str(body[name])
            for name in ("id", "kind", "href", "code", "reason", "operation_id")
            if body.get(name) is not None
        }
    )


def wrap_error(err: Exception, response: Any) -> Exception:
    """Return ``err``, extended with the service reason for 400 and 500 replies."""
    if response is None or response.status_code not in _ERROR_STATUSES:
        return err
    try:
        body = read_error(response)
    except ValueError:
        return err
    if not body.reason:
        return err
    wrapped = RequestError(f"{err}: [{body.reason}]", reason=body.reason)
    wrapped.__cause__ = err
    return wrapped