"""Utils module."""

from typing import Any

from tabulate import tabulate


def get_table(rows: list[dict[str, Any]]) -> str:
    """Return a list of records as a nicely formatted table."""
    return tabulate(rows, headers="keys", tablefmt="github")


__all__ = [
    "get_table",
]
