"""Group/version/resource triples of cluster APIs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class GroupVersionResource:
    """A resource kind addressed by API group, version and plural name."""

    group: str
    version: str
    resource: str

    def group_version(self) -> str:
        """Return ``group/version``, or just the version for the core group."""
        return f"{self.group}/{self.version}" if self.group else self.version


def parse_group_version(value: str) -> tuple[str, str]:
    """Split an ``apiVersion`` string into its group and version."""
    if value in ("", "/"):
        return "", ""
    slashes = value.count("/")
    if slashes == 0:
        return "", value
    if slashes == 1:
        group, version = value.split("/")
        return group, version
    raise ValueError(f"unexpected GroupVersion string: {value}")


def parse(resources: Iterable[str]) -> list[GroupVersionResource]:
    """Parse ``apiVersion:plural`` entries; entries of another shape are skipped."""
    answer = []
    for entry in resources:
        parts = entry.split(":")
        if len(parts) != 2:
            continue
        group, version = parse_group_version(parts[0])
        answer.append(GroupVersionResource(group, version, parts[1]))
    return answer