"""Buffered output targets and structured (JSON/YAML) dumps."""

from __future__ import annotations

import codecs
import dataclasses
import io
import json
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import IO, Any

import yaml

from rhoc_admin.response import wrap_error

JSON_FORMAT = "json"
YAML_FORMAT = "yaml"
YML_FORMAT = "yml"
EMPTY_FORMAT = ""
OUTPUT_FORMATS = (JSON_FORMAT, YAML_FORMAT, YML_FORMAT)

_BUFFER_SIZE = 4096


class OutputWriter:
    """A buffered writer over a stream; closes the stream only if it opened it."""

    def __init__(self, delegate: IO, *, must_close: bool = False, buffer_size: int = _BUFFER_SIZE) -> None:
        self._delegate = delegate
        self._must_close = must_close
        self._buffer_size = buffer_size
        self._buffer = bytearray()
        self._text = isinstance(delegate, io.TextIOBase)
        self._decoder = codecs.getincrementaldecoder("utf-8")()

    def write(self, data: bytes | str) -> int:
        """Buffer ``data`` and return the number of bytes accepted."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer.extend(data)
        if len(self._buffer) >= self._buffer_size:
            self._flush()
        return len(data)

    def _flush(self, final: bool = False) -> None:
        chunk = bytes(self._buffer)
        self._buffer.clear()
        if self._text:
            text = self._decoder.decode(chunk, final=final)
            if text:
                self._delegate.write(text)
        elif chunk:
            self._delegate.write(chunk)
        flush = getattr(self._delegate, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        """Flush buffered data and close the target when it is owned."""
        try:
            self._flush(final=True)
        finally:
            if self._must_close:
                self._delegate.close()

    def __enter__(self) -> OutputWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def new_output_writer(stream: IO) -> OutputWriter:
    """Return a writer over ``stream`` that leaves it open on close."""
    return OutputWriter(stream)


def new_output_file_writer(path: str) -> OutputWriter:
    """Create (or truncate) the file at ``path`` and return a writer owning it."""
    return OutputWriter(open(path, "wb"), must_close=True)


def _to_plain(data: Any) -> Any:
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return _to_plain(dataclasses.asdict(data))
    if isinstance(data, Mapping):
        return {str(key): _to_plain(value) for key, value in data.items()}
    if isinstance(data, (list, tuple, set, frozenset)):
        return [_to_plain(value) for value in data]
    if isinstance(data, (datetime, date)):
        return data.isoformat()
    if isinstance(data, Enum):
        return data.value
    return data


def dump_formatted(out: IO[str], output_format: str, data: Any) -> None:
    """Write ``data`` to ``out`` as JSON (the default) or YAML."""
    plain = _to_plain(data)
    if output_format in (JSON_FORMAT, EMPTY_FORMAT):
        out.write(json.dumps(plain, indent=2) + "\n")
    elif output_format in (YAML_FORMAT, YML_FORMAT):
        out.write(yaml.safe_dump(plain, sort_keys=False, allow_unicode=True))
    else:
        raise ValueError(f"unsupported output format: {output_format}")


@dataclasses.dataclass
class Formatted:
    """Dumps a result, or raises the error of the request that produced it."""

    output_format: str = EMPTY_FORMAT
    http_response: Any = None
    http_error: Exception | None = None

    def dump(self, out: IO[str], data: Any) -> None:
        if self.http_error is not None:
            raise wrap_error(self.http_error, self.http_response)
        dump_formatted(out, self.output_format, data)