"""Client library for a managed connectors admin API: requests, paging and table output."""

__version__ = "0.1.0"