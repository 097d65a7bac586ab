"""Column-based rendering of items as aligned text tables or CSV."""

from __future__ import annotations

import csv
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import IO, Any, Generic, TypeVar

T = TypeVar("T")

_SEPARATOR = "   "
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_DELIMITERS = re.compile(r"[\s_\-,.]+")


class TableStyle(Enum):
    DEFAULT = 0
    CSV = 1


class Color(IntEnum):
    """Terminal colour codes usable in a row's colours."""

    NORMAL = 0
    FG_RED = 31
    FG_GREEN = 32
    FG_CYAN = 36
    FG_HI_RED = 91
    FG_HI_GREEN = 92
    FG_HI_YELLOW = 93
    FG_HI_BLUE = 94


@dataclass
class Row:
    """A single cell value and the colours used to show it."""

    value: str = ""
    colors: tuple[int, ...] = ()


@dataclass
class Column(Generic[T]):
    name: str
    getter: Callable[[T], Row]
    wide: bool = False


@dataclass
class TableConfig(Generic[T]):
    columns: Sequence[Column[T]]
    style: TableStyle = TableStyle.DEFAULT
    wide: bool = False


def header_name(name: str) -> str:
    """Turn a column name such as ``CreatedAt`` into ``CREATED_AT``."""
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", name)
    words = [word for word in _DELIMITERS.split(spaced.strip()) if word]
    return "_".join(words).upper()


def _paint(value: str, colors: Sequence[int]) -> str:
    if not colors:
        return value
    codes = ";".join(str(int(c)) for c in colors)
    return f"\x1b[{codes}m{value}\x1b[0m"


def _render(out: IO[str], headers: list[str], rows: list[list[Row]]) -> None:
    widths = [len(h) for h in headers]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell.value))

    def line(cells: Iterable[str]) -> str:
        return _SEPARATOR.join(cells).rstrip() + "\n"

    out.write(line(h.ljust(w) for h, w in zip(headers, widths)))
    out.write(line("-" * w for w in widths))
    for row in rows:
        out.write(line(_paint(c.value, c.colors) + " " * (w - len(c.value)) for c, w in zip(row, widths)))


def dump_table(config: TableConfig[Any], out: IO[str], items: Iterable[Any]) -> None:
    """Write ``items`` as a table; nothing is written when there are no items."""
    items = list(items)
    if not items:
        return
    try:
        style = TableStyle(config.style)
    except ValueError:
        raise ValueError(f"unsupported table style {config.style}") from None

    visible = [column for column in config.columns if config.wide or not column.wide]
    headers = [header_name(column.name) for column in visible]

    if style is TableStyle.CSV:
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(headers)
        for item in items:
            writer.writerow(column.getter(item).value for column in visible)
        return

    headers[0] = f"{headers[0]} ({len(items)})"
    rows = [[column.getter(item) for column in visible] for item in items]
    _render(out, headers, rows)