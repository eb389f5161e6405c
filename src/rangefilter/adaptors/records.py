"""Adaptor for in-memory sequences of records."""

import operator
from collections.abc import Mapping, Sequence

from rangefilter.adaptors.base import QueryableAdaptor, compare_to_bound
from rangefilter.value import Number


class RecordsAdaptor(QueryableAdaptor):
    """Adaptor for a sequence of mappings, e.g. a list of dicts decoded from JSON."""

    @classmethod
    def supports(cls, queryable: object) -> bool:
        """Check if `queryable` is a sequence of mappings, judged by its first item."""
        if isinstance(queryable, (str, bytes)) or not isinstance(queryable, Sequence):
            return False
        return len(queryable) == 0 or isinstance(queryable[0], Mapping)

    @staticmethod
    def where_min(queryable: Sequence[Mapping], column: str, bound: Number) -> list[Mapping]:
        """Keep only rows where `column >= bound`."""
        return [row for row in queryable if compare_to_bound(row.get(column), bound, operator.ge)]

    @staticmethod
    def where_max(queryable: Sequence[Mapping], column: str, bound: Number) -> list[Mapping]:
        """Keep only rows where `column <= bound`."""
        return [row for row in queryable if compare_to_bound(row.get(column), bound, operator.le)]
