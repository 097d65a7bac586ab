"""Small helpers over sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def contains(elems: Iterable[T], value: T) -> bool:
    """Return True when ``value`` equals one of ``elems``."""
    return any(elem == value for elem in elems)


def filter_items(elems: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the elements accepted by ``predicate``, in their original order."""
    return [elem for elem in elems if predicate(elem)]